"""
Reversible edits over an Animation.

Every action carries both endpoints of its edit so that reverse() never has to
recompute anything. apply() and reverse() must be called against the same
model state the action was built from; a mismatch is a programming error and
raises instead of being ignored.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from animation import Animation, Frame, Hitbox, HitboxInstance, ImageHandle, Vec2
from .selection import Selection


class ActionMismatchError(RuntimeError):
    """An action was applied to a model it was not generated from."""


class Action:
    """Base class of all recordable edits."""

    def warrants_recording(self) -> bool:
        return True

    def apply(self, animation: Animation, selection: Selection) -> None:
        raise NotImplementedError

    def reverse(self, animation: Animation, selection: Selection) -> None:
        raise NotImplementedError


def _remove_frame_at(animation: Animation, selection: Selection, index: int) -> Frame:
    frame = animation.timeline.remove_frame(index)
    if selection.current_frame > index:
        selection.current_frame -= 1
    selection.clamp_to(animation.frame_count())
    return frame


@dataclass
class RemoveFrame(Action):
    frame: Frame
    index: int
    # Pre-clamp selection, set when removing the last frame moved it down
    _clamped_from: Optional[int] = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def capture(cls, animation: Animation, index: int) -> "RemoveFrame":
        return cls(copy.deepcopy(animation.frame(index)), index)

    def apply(self, animation, selection):
        if animation.frame(self.index).image != self.frame.image:
            raise ActionMismatchError(
                f"Frame {self.index} does not hold the image this removal was built for"
            )
        before = selection.current_frame
        was_valid = before < animation.frame_count()
        _remove_frame_at(animation, selection, self.index)
        shifted = before - 1 if before > self.index else before
        clamped = selection.current_frame < shifted
        self._clamped_from = before if was_valid and clamped else None

    def reverse(self, animation, selection):
        animation.timeline.insert_frame(self.index, copy.deepcopy(self.frame))
        if selection.current_frame >= self.index and animation.frame_count() != 1:
            selection.current_frame += 1
        if self._clamped_from is not None:
            selection.current_frame = self._clamped_from
            self._clamped_from = None
        selection.clamp_to(animation.frame_count())


@dataclass
class AddFrame(Action):
    image: ImageHandle

    def apply(self, animation, selection):
        frame = Frame(
            self.image,
            hitboxes={
                hitbox_id: HitboxInstance(hitbox_id)
                for hitbox_id in animation.hitboxes
            },
        )
        animation.timeline.push_frame(frame)
        selection.clamp_to(animation.frame_count())

    def reverse(self, animation, selection):
        last = animation.frame_count() - 1
        if last < 0 or animation.frame(last).image != self.image:
            raise ActionMismatchError(
                f"Last frame does not hold image {self.image.id} added by this action"
            )
        _remove_frame_at(animation, selection, last)


@dataclass
class MoveSprite(Action):
    index: int
    from_: Vec2
    to: Vec2

    @classmethod
    def snap(cls, animation: Animation, index: int) -> "MoveSprite":
        """Round the frame offset to whole pixels, as done when a drag ends."""
        offset = animation.frame(index).offset
        return cls(index, offset, offset.rounded())

    def warrants_recording(self):
        return self.from_ != self.to

    def apply(self, animation, selection):
        animation.frame(self.index).offset = self.to

    def reverse(self, animation, selection):
        animation.frame(self.index).offset = self.from_


@dataclass
class SetMotionOffset(Action):
    index: int
    from_: Vec2
    to: Vec2

    def warrants_recording(self):
        return self.from_ != self.to

    def apply(self, animation, selection):
        animation.frame(self.index).root_motion = self.to

    def reverse(self, animation, selection):
        animation.frame(self.index).root_motion = self.from_


@dataclass
class ChangeDelay(Action):
    index: int
    from_: int
    to: int

    @classmethod
    def step(cls, animation: Animation, index: int, delta: int) -> "ChangeDelay":
        """Nudge a frame delay by delta ticks, saturating at zero."""
        current = animation.frame(index).delay
        return cls(index, current, max(current + delta, 0))

    def warrants_recording(self):
        return self.from_ != self.to

    def apply(self, animation, selection):
        self._write(animation, self.to)

    def reverse(self, animation, selection):
        self._write(animation, self.from_)

    def _write(self, animation: Animation, delay: int) -> None:
        if delay < 0:
            raise ValueError(f"Frame delay cannot be negative: {delay}")
        animation.frame(self.index).delay = delay


@dataclass
class SwapFrames(Action):
    a: int
    b: int

    def warrants_recording(self):
        return self.a != self.b

    def apply(self, animation, selection):
        animation.timeline.swap_frames(self.a, self.b)

    def reverse(self, animation, selection):
        animation.timeline.swap_frames(self.a, self.b)


@dataclass
class CreateHitbox(Action):
    id: int
    desc: str = ""
    is_hurtbox: bool = False
    _instanced_frames: List[int] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def apply(self, animation, selection):
        animation.add_hitbox(Hitbox(self.id, self.desc, self.is_hurtbox))
        self._instanced_frames = []
        for frame_idx, frame in enumerate(animation.timeline):
            if self.id not in frame.hitboxes:
                frame.hitboxes[self.id] = HitboxInstance(self.id)
                self._instanced_frames.append(frame_idx)

    def reverse(self, animation, selection):
        for frame_idx in self._instanced_frames:
            del animation.frame(frame_idx).hitboxes[self.id]
        self._instanced_frames = []
        animation.remove_hitbox(self.id)
        if selection.hitbox == self.id:
            selection.hitbox = None


@dataclass
class MoveHitbox(Action):
    index: int
    id: int
    from_: Vec2
    to: Vec2

    def warrants_recording(self):
        return self.from_ != self.to

    def apply(self, animation, selection):
        animation.frame(self.index).hitbox_mut(self.id).pos = self.to

    def reverse(self, animation, selection):
        animation.frame(self.index).hitbox_mut(self.id).pos = self.from_


@dataclass
class ResizeHitbox(Action):
    index: int
    id: int
    from_: Vec2
    to: Vec2

    def warrants_recording(self):
        return self.from_ != self.to

    def apply(self, animation, selection):
        animation.frame(self.index).hitbox_mut(self.id).size = self.to

    def reverse(self, animation, selection):
        animation.frame(self.index).hitbox_mut(self.id).size = self.from_


@dataclass
class ToggleHitboxEnabled(Action):
    index: int
    id: int

    def apply(self, animation, selection):
        instance = animation.frame(self.index).hitbox_mut(self.id)
        instance.enabled = not instance.enabled

    def reverse(self, animation, selection):
        self.apply(animation, selection)
