"""
Action engine: reversible edits, selection state, undo/redo history and
document load/save.
"""

from .actions import (
    Action,
    ActionMismatchError,
    RemoveFrame,
    AddFrame,
    MoveSprite,
    SetMotionOffset,
    ChangeDelay,
    SwapFrames,
    CreateHitbox,
    MoveHitbox,
    ResizeHitbox,
    ToggleHitboxEnabled,
)
from .selection import Selection, Tool
from .state import EditorState
from .document import save_document, load_document, open_document

__all__ = [
    # Actions
    "Action",
    "ActionMismatchError",
    "RemoveFrame",
    "AddFrame",
    "MoveSprite",
    "SetMotionOffset",
    "ChangeDelay",
    "SwapFrames",
    "CreateHitbox",
    "MoveHitbox",
    "ResizeHitbox",
    "ToggleHitboxEnabled",
    # Selection
    "Selection",
    "Tool",
    # History
    "EditorState",
    # Documents
    "save_document",
    "load_document",
    "open_document",
]
