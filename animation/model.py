"""
Animation data model: frames, timeline, hitbox definitions and instances.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from data import DEFAULT_FRAME_DELAY
from .geometry import Vec2
from .images import ImageHandle


@dataclass
class Hitbox:
    """Hitbox definition shared by every frame of an animation."""

    id: int
    desc: str = ""
    is_hurtbox: bool = False


@dataclass
class HitboxInstance:
    """Per-frame geometry and visibility of a hitbox definition.

    Disabling keeps pos and size so re-enabling restores the old box.
    """

    id: int
    pos: Vec2 = Vec2.ZERO
    size: Vec2 = Vec2.ZERO
    enabled: bool = False

    def is_degenerate(self) -> bool:
        return self.size.x <= 0 or self.size.y <= 0


@dataclass
class Frame:
    """One animation still."""

    image: ImageHandle
    offset: Vec2 = Vec2.ZERO
    root_motion: Vec2 = Vec2.ZERO
    delay: int = DEFAULT_FRAME_DELAY
    hitboxes: Dict[int, HitboxInstance] = field(default_factory=dict)

    def get_hitbox(self, hitbox_id: int) -> Optional[HitboxInstance]:
        return self.hitboxes.get(hitbox_id)

    def hitbox_mut(self, hitbox_id: int) -> HitboxInstance:
        """Return the instance for hitbox_id, which must exist on this frame."""
        try:
            return self.hitboxes[hitbox_id]
        except KeyError:
            raise KeyError(f"Frame has no instance of hitbox {hitbox_id}") from None

    def is_hitbox_enabled(self, hitbox_id: int) -> bool:
        instance = self.hitboxes.get(hitbox_id)
        return instance is not None and instance.enabled


class Timeline:
    """Ordered sequence of frames in playback order.

    The edits here are pure sequence edits; keeping the current frame
    selection consistent is up to the caller.
    """

    def __init__(self, frames: Optional[List[Frame]] = None):
        self.frames: List[Frame] = list(frames) if frames else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return self.frames == other.frames

    def __repr__(self) -> str:
        return f"Timeline(frames={self.frames!r})"

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def frame_count(self) -> int:
        return len(self.frames)

    def get_frame(self, index: int) -> Optional[Frame]:
        if 0 <= index < len(self.frames):
            return self.frames[index]
        return None

    def frame(self, index: int) -> Frame:
        self._check_index(index)
        return self.frames[index]

    def insert_frame(self, index: int, frame: Frame) -> None:
        if not 0 <= index <= len(self.frames):
            raise IndexError(
                f"Insert index {index} out of range for {len(self.frames)} frame(s)"
            )
        self.frames.insert(index, frame)

    def remove_frame(self, index: int) -> Frame:
        self._check_index(index)
        return self.frames.pop(index)

    def swap_frames(self, a: int, b: int) -> None:
        self._check_index(a)
        self._check_index(b)
        self.frames[a], self.frames[b] = self.frames[b], self.frames[a]

    def push_frame(self, frame: Frame) -> int:
        self.frames.append(frame)
        return len(self.frames) - 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.frames):
            raise IndexError(
                f"Frame index {index} out of range for {len(self.frames)} frame(s)"
            )


class Animation:
    """A timeline plus the hitbox definitions its frames refer to."""

    def __init__(
        self,
        timeline: Optional[Timeline] = None,
        hitboxes: Optional[Dict[int, Hitbox]] = None,
    ):
        self.timeline = timeline if timeline is not None else Timeline()
        self.hitboxes: Dict[int, Hitbox] = dict(hitboxes) if hitboxes else {}

    @classmethod
    def new(cls) -> "Animation":
        return cls()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Animation):
            return NotImplemented
        return self.timeline == other.timeline and self.hitboxes == other.hitboxes

    def __repr__(self) -> str:
        return f"Animation(timeline={self.timeline!r}, hitboxes={self.hitboxes!r})"

    def frame_count(self) -> int:
        return self.timeline.frame_count()

    def get_frame(self, index: int) -> Optional[Frame]:
        return self.timeline.get_frame(index)

    def frame(self, index: int) -> Frame:
        return self.timeline.frame(index)

    def next_hitbox_id(self) -> int:
        return max(self.hitboxes, default=-1) + 1

    def add_hitbox(self, hitbox: Hitbox) -> None:
        if hitbox.id in self.hitboxes:
            raise ValueError(f"Hitbox {hitbox.id} is already defined")
        self.hitboxes[hitbox.id] = hitbox

    def remove_hitbox(self, hitbox_id: int) -> Hitbox:
        try:
            return self.hitboxes.pop(hitbox_id)
        except KeyError:
            raise KeyError(f"Hitbox {hitbox_id} is not defined") from None

    def validate(self) -> None:
        """Check that every frame only refers to defined hitboxes.

        Raises:
            ValueError: Listing each dangling hitbox reference
        """
        errors = []

        for hitbox_id, hitbox in self.hitboxes.items():
            if hitbox.id != hitbox_id:
                errors.append(f"Hitbox key {hitbox_id} holds definition {hitbox.id}")

        for frame_idx, frame in enumerate(self.timeline):
            if frame.delay < 0:
                errors.append(f"Frame[{frame_idx}]: Negative delay {frame.delay}")
            for hitbox_id, instance in frame.hitboxes.items():
                if hitbox_id not in self.hitboxes:
                    errors.append(
                        f"Frame[{frame_idx}]: Instance of undefined hitbox {hitbox_id}"
                    )
                if instance.id != hitbox_id:
                    errors.append(
                        f"Frame[{frame_idx}]: Hitbox key {hitbox_id} holds instance {instance.id}"
                    )

        if errors:
            raise ValueError("\n".join(f"  - {err}" for err in errors))
