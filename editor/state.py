"""
Linear undo/redo history over an Animation.
"""

from typing import List, Optional

from animation import Animation, Frame
from .actions import Action
from .selection import Selection


class EditorState:
    """Owns the animation being edited, the selection and the action history.

    history holds applied actions oldest first. undo_depth counts how many
    trailing entries are currently undone (0 means fully forward). Recording a
    new action drops those undone entries; there is no redo tree.
    """

    def __init__(self, animation: Optional[Animation] = None):
        self.animation = animation if animation is not None else Animation.new()
        self.selection = Selection()
        self.history: List[Action] = []
        self.undo_depth = 0
        self.dirty = False

    def do_action(self, action: Action) -> bool:
        """Apply and record an action.

        Returns:
            False if the action changes nothing and was discarded
        """
        if not action.warrants_recording():
            return False

        action.apply(self.animation, self.selection)

        if self.undo_depth:
            del self.history[-self.undo_depth :]
            self.undo_depth = 0
        self.history.append(action)
        self.dirty = True
        return True

    def undo(self) -> bool:
        if self.undo_depth == len(self.history):
            return False

        self.undo_depth += 1
        action = self.history[len(self.history) - self.undo_depth]
        action.reverse(self.animation, self.selection)
        self.dirty = True
        return True

    def redo(self) -> bool:
        if self.undo_depth == 0:
            return False

        action = self.history[len(self.history) - self.undo_depth]
        action.apply(self.animation, self.selection)
        self.undo_depth -= 1
        self.dirty = True
        return True

    def can_undo(self) -> bool:
        return self.undo_depth < len(self.history)

    def can_redo(self) -> bool:
        return self.undo_depth > 0

    def frame_count(self) -> int:
        return self.animation.frame_count()

    def get_frame(self, index: int) -> Optional[Frame]:
        return self.animation.get_frame(index)

    def frame(self, index: int) -> Frame:
        return self.animation.frame(index)

    def current_frame(self) -> Optional[Frame]:
        return self.animation.get_frame(self.selection.current_frame)

    def new_animation(self) -> None:
        self.replace_animation(Animation.new())

    def replace_animation(self, animation: Animation) -> None:
        """Swap in a freshly loaded or created animation with a clean history."""
        self.animation = animation
        self.selection.reset()
        self.history = []
        self.undo_depth = 0
        self.dirty = False

    def mark_saved(self) -> None:
        self.dirty = False
