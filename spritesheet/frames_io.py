"""
Frame folder import and export: numbered PNG files plus a JSON sidecar.
"""

import numpy as np
from pathlib import Path
from typing import List, Tuple
from PIL import Image

from animation import Vec2, load_image_file
from data import DEFAULT_FRAME_DELAY, read_json_file, write_json_file
from .codec import DecodedFrame, SourceFrame
from .constants import FRAMES_CONFIG_FILE, FRAMES_INFO_FILE, FrameKey
from .descriptor import SheetInfo


def list_frame_images(folder: Path) -> List[Path]:
    """PNG files named by frame number, in numeric order."""
    image_files = [
        f for f in folder.glob("*.png") if f.is_file() and f.stem.isdigit()
    ]
    image_files.sort(key=lambda p: int(p.stem))
    return image_files


def import_frames_folder(folder: Path) -> List[SourceFrame]:
    """Read a folder of frame images into encoder input.

    An optional config.json may hold a "frames" list whose entries set
    delay, origin and root_motion for the frame at the same position.

    Raises:
        ValueError: If an image cannot be decoded or the config is malformed
    """
    image_files = list_frame_images(folder)
    if not image_files:
        raise ValueError(f"No numbered PNG frames found in: {folder}")

    config_path = folder / FRAMES_CONFIG_FILE
    config = read_json_file(config_path)
    if config is None:
        if config_path.exists():
            raise ValueError(f"Malformed or unreadable {FRAMES_CONFIG_FILE} in: {folder}")
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"{FRAMES_CONFIG_FILE} must hold an object")
    frame_configs = config.get("frames", [])
    if not isinstance(frame_configs, list):
        raise ValueError(f"{FRAMES_CONFIG_FILE}: 'frames' must be a list")

    frames = []
    for idx, img_file in enumerate(image_files):
        frame = SourceFrame(load_image_file(img_file))

        if idx < len(frame_configs):
            entry = frame_configs[idx]
            if not isinstance(entry, dict):
                raise ValueError(f"{FRAMES_CONFIG_FILE}: frames[{idx}] must be an object")
            delay = entry.get(FrameKey.DELAY, DEFAULT_FRAME_DELAY)
            if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
                raise ValueError(
                    f"{FRAMES_CONFIG_FILE}: frames[{idx}].delay must be a non-negative integer"
                )
            frame.delay = delay
            if FrameKey.ORIGIN in entry:
                frame.origin = Vec2.from_seq(entry[FrameKey.ORIGIN])
            if FrameKey.ROOT_MOTION in entry:
                frame.root_motion = Vec2.from_seq(entry[FrameKey.ROOT_MOTION])

        frames.append(frame)

    print(f"[OK] {len(frames)} frame image(s) read from: {folder}")
    return frames


def export_frames_folder(
    frames: List[DecodedFrame], info: SheetInfo, output_dir: Path
) -> None:
    """Write each decoded frame as <index>.png plus the descriptor as frames.json."""
    output_dir.mkdir(parents=True, exist_ok=True)

    for frame_idx, frame in enumerate(frames):
        if frame.pixels.size == 0:
            print(f"[WARNING] Frame {frame_idx} is empty, no image written")
            continue
        img = Image.fromarray(np.ascontiguousarray(frame.pixels))
        img.save(output_dir / f"{frame_idx}.png", "PNG")

    write_json_file(output_dir / FRAMES_INFO_FILE, info.to_dict())

    print(f"[OK] {len(frames)} frame image(s) saved to: {output_dir}")


def import_extracted_folder(folder: Path) -> Tuple[List[SourceFrame], SheetInfo]:
    """Re-import a folder written by export_frames_folder.

    Frames keep the stored delay, origin, root motion and hitboxes.
    """
    info_dict = read_json_file(folder / FRAMES_INFO_FILE)
    if info_dict is None:
        raise ValueError(f"Missing or unreadable {FRAMES_INFO_FILE} in: {folder}")
    info = SheetInfo.from_dict(info_dict)

    frames = []
    for frame_idx, data in enumerate(info.frame_data):
        img_file = folder / f"{frame_idx}.png"
        if img_file.exists():
            pixels = load_image_file(img_file)
        else:
            pixels = np.zeros((info.cell_height, info.cell_width, 4), dtype=np.uint8)
        frames.append(
            SourceFrame(
                pixels,
                origin=data.origin,
                root_motion=data.root_motion,
                delay=data.delay,
                hitboxes=data.hitboxes,
            )
        )

    return frames, info
