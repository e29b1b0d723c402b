"""
Load and save an editor document through the spritesheet codec.
"""

from pathlib import Path
from typing import Optional

from animation import Animation, Frame, HitboxInstance, ImageStore, Timeline
from spritesheet import (
    EncodedSheet,
    SourceFrame,
    decode_spritesheet,
    encode_spritesheet,
    read_animation_file,
    write_animation_file,
)
from .state import EditorState


def save_document(
    editor: EditorState, path: Path, store: ImageStore, binary: Optional[bool] = None
) -> EncodedSheet:
    """Encode the editor's animation and write it to path.

    The dirty flag is cleared only once the file has been written.

    Returns:
        The EncodedSheet that was written
    """
    frames = [
        SourceFrame(
            store.get(frame.image),
            origin=frame.offset,
            root_motion=frame.root_motion,
            delay=frame.delay,
            hitboxes=frame.hitboxes,
        )
        for frame in editor.animation.timeline
    ]

    encoded = encode_spritesheet(frames, editor.animation.hitboxes)
    write_animation_file(path, encoded.image, encoded.info, binary=binary)
    editor.mark_saved()

    print(f"[OK] Saved {encoded.info.frame_count} frame(s) to: {path}")
    return encoded


def load_document(path: Path, store: ImageStore) -> Animation:
    """Read an animation file into a new Animation.

    Nothing is added to the store unless the whole file decodes. Frames missing
    an instance of a defined hitbox get a disabled zero-sized one.

    Raises:
        ValueError: If the file is not a valid animation
        OSError: If the file cannot be read
    """
    sheet, info = read_animation_file(path)
    decoded = decode_spritesheet(sheet, info)

    for frame_idx, frame in enumerate(decoded):
        undefined = sorted(set(frame.data.hitboxes) - set(info.hitboxes))
        if undefined:
            raise ValueError(
                f"Frame[{frame_idx}]: Instances of undefined hitbox(es) {undefined}"
            )

    timeline = Timeline()
    for frame in decoded:
        # Every defined hitbox needs an instance on every frame to be editable
        for hitbox_id in info.hitboxes:
            if hitbox_id not in frame.data.hitboxes:
                frame.data.hitboxes[hitbox_id] = HitboxInstance(hitbox_id)
        timeline.push_frame(
            Frame(
                store.add(frame.pixels),
                offset=frame.data.origin,
                root_motion=frame.data.root_motion,
                delay=frame.data.delay,
                hitboxes=frame.data.hitboxes,
            )
        )

    print(f"[OK] Loaded {info.frame_count} frame(s) from: {path}")
    return Animation(timeline, info.hitboxes)


def open_document(editor: EditorState, path: Path, store: ImageStore) -> None:
    """Load path and make it the editor's animation, replacing history."""
    editor.replace_animation(load_document(path, store))
