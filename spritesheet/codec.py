"""
Spritesheet encode/decode between per-frame bitmaps and one packed sheet.

Encoding crops every frame to its opaque pixels, pads all of them, centered,
to the largest cropped size, and lays the cells out row-major. Anchor offsets
are shifted along so they keep pointing at the same pixel.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from animation import Hitbox, HitboxInstance, Vec2, as_rgba_array
from data import DEBUG, DEFAULT_FRAME_DELAY
from .descriptor import FrameData, SheetInfo
from .packer import (
    opaque_bounds,
    crop_image,
    cell_size,
    pad_to_cell,
    choose_columns,
    build_sheet,
    slice_sheet,
)


@dataclass
class SourceFrame:
    """One frame handed to the encoder."""

    pixels: np.ndarray
    origin: Vec2 = Vec2.ZERO
    root_motion: Vec2 = Vec2.ZERO
    delay: int = DEFAULT_FRAME_DELAY
    hitboxes: Dict[int, HitboxInstance] = field(default_factory=dict)


@dataclass
class DecodedFrame:
    """One frame cut back out of a sheet."""

    pixels: np.ndarray
    data: FrameData


@dataclass
class EncodedSheet:
    """Packed sheet, its descriptor and the final per-frame cell bitmaps."""

    image: np.ndarray
    info: SheetInfo
    frames: List[np.ndarray]


def encode_spritesheet(
    frames: Sequence[SourceFrame], hitboxes: Dict[int, Hitbox] = None
) -> EncodedSheet:
    """Pack frames into one sheet.

    Args:
        frames: Frames in playback order
        hitboxes: Hitbox definitions stored alongside the frames

    Returns:
        EncodedSheet whose info.frame_data holds the post-crop, post-pad origins
    """
    # Crop every frame before the shared cell size is known
    cropped = []
    origins = []
    for idx, frame in enumerate(frames):
        pixels = as_rgba_array(frame.pixels)
        bounds = opaque_bounds(pixels)
        cropped.append(crop_image(pixels, bounds))
        origins.append(frame.origin - Vec2(bounds[0], bounds[1]))

        if DEBUG:
            print(
                f"[DEBUG] Frame {idx}: {pixels.shape[1]}x{pixels.shape[0]} "
                f"cropped to {bounds[2]}x{bounds[3]} at ({bounds[0]}, {bounds[1]})"
            )

    cell_width, cell_height = cell_size(cropped)

    cells = []
    frame_data = []
    for frame, image, origin in zip(frames, cropped, origins):
        padded, left, top = pad_to_cell(image, cell_width, cell_height)
        cells.append(padded)
        frame_data.append(
            FrameData(
                delay=frame.delay,
                origin=origin + Vec2(left, top),
                root_motion=frame.root_motion,
                hitboxes={
                    hitbox_id: HitboxInstance(
                        instance.id, instance.pos, instance.size, instance.enabled
                    )
                    for hitbox_id, instance in frame.hitboxes.items()
                },
            )
        )

    columns = choose_columns(len(cells), cell_width, cell_height)
    sheet = build_sheet(cells, cell_width, cell_height, columns)

    info = SheetInfo(
        cell_width=cell_width,
        cell_height=cell_height,
        columns=columns,
        frame_count=len(cells),
        frame_data=frame_data,
        hitboxes=dict(hitboxes) if hitboxes else {},
    )
    return EncodedSheet(sheet, info, cells)


def decode_spritesheet(sheet: np.ndarray, info: SheetInfo) -> List[DecodedFrame]:
    """Cut every frame described by info out of a sheet.

    Raises:
        ValueError: If the sheet does not match the descriptor
    """
    if len(info.frame_data) != info.frame_count:
        raise ValueError(
            f"Descriptor lists {len(info.frame_data)} frame(s) "
            f"but frame_count is {info.frame_count}"
        )

    cells = slice_sheet(
        as_rgba_array(sheet),
        info.cell_width,
        info.cell_height,
        info.columns,
        info.frame_count,
    )
    return [DecodedFrame(pixels, data) for pixels, data in zip(cells, info.frame_data)]
