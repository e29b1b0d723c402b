"""
Ephemeral selection state. Never persisted with the animation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from animation import Vec2


class Tool(Enum):
    SPRITE = "sprite"
    ROOT_MOTION = "root_motion"
    HITBOX = "hitbox"


@dataclass
class Selection:
    """Current frame, tool, hitbox and drag anchor of the editing session.

    current_frame may point past the end of the timeline between edits;
    actions that change the frame count clamp it.
    """

    current_frame: int = 0
    tool: Tool = Tool.SPRITE
    hitbox: Optional[int] = None
    drag_anchor: Optional[Vec2] = None

    def clamp_to(self, frame_count: int) -> None:
        if frame_count == 0:
            self.current_frame = 0
        elif self.current_frame > frame_count - 1:
            self.current_frame = frame_count - 1

    def select_frame(self, index: int, frame_count: int) -> int:
        if frame_count == 0:
            self.current_frame = 0
        else:
            self.current_frame = min(max(index, 0), frame_count - 1)
        return self.current_frame

    def next_frame(self, frame_count: int) -> int:
        return self.select_frame(self.current_frame + 1, frame_count)

    def previous_frame(self, frame_count: int) -> int:
        return self.select_frame(max(self.current_frame - 1, 0), frame_count)

    def reset(self) -> None:
        self.current_frame = 0
        self.tool = Tool.SPRITE
        self.hitbox = None
        self.drag_anchor = None
