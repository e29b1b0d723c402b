#!/usr/bin/env python3
"""
Tests for the action engine: apply/reverse of every action, undo/redo
history, branch truncation, no-op filtering and selection side effects.

Usage:
    python tests/test_actions.py
"""

import copy
import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from utils import main_for

from animation import Animation, Frame, ImageHandle, Vec2
from editor import (
    ActionMismatchError,
    AddFrame,
    ChangeDelay,
    CreateHitbox,
    EditorState,
    MoveHitbox,
    MoveSprite,
    RemoveFrame,
    ResizeHitbox,
    SetMotionOffset,
    SwapFrames,
    ToggleHitboxEnabled,
)


def make_editor(frame_count=3):
    editor = EditorState()
    for i in range(frame_count):
        editor.do_action(AddFrame(ImageHandle(i)))
    editor.history.clear()
    editor.dirty = False
    return editor


def make_editor_with_hitbox(frame_count=3):
    editor = make_editor(frame_count)
    editor.do_action(CreateHitbox(0, "fist"))
    editor.history.clear()
    editor.dirty = False
    return editor


def random_action(editor, rng, next_image):
    """Build a random valid action against the editor's current model."""
    animation = editor.animation
    count = animation.frame_count()
    kinds = ["add", "create_hitbox"]
    if count:
        kinds += ["remove", "move", "motion", "delay", "swap"]
        if animation.hitboxes:
            kinds += ["move_hitbox", "resize_hitbox", "toggle"]

    kind = rng.choice(kinds)
    index = rng.randrange(count) if count else 0
    point = Vec2(rng.randint(-5, 5), rng.randint(-5, 5))

    if kind == "add":
        return AddFrame(ImageHandle(next_image))
    if kind == "create_hitbox":
        return CreateHitbox(
            animation.next_hitbox_id(), f"box {next_image}", rng.random() < 0.5
        )
    if kind == "remove":
        return RemoveFrame.capture(animation, index)
    if kind == "move":
        return MoveSprite(index, animation.frame(index).offset, point)
    if kind == "motion":
        return SetMotionOffset(index, animation.frame(index).root_motion, point)
    if kind == "delay":
        return ChangeDelay.step(animation, index, rng.choice([-2, -1, 1, 3]))
    if kind == "swap":
        return SwapFrames(index, rng.randrange(count))

    hitbox_id = rng.choice(sorted(animation.hitboxes))
    instance = animation.frame(index).hitbox_mut(hitbox_id)
    if kind == "move_hitbox":
        return MoveHitbox(index, hitbox_id, instance.pos, point)
    if kind == "resize_hitbox":
        size = Vec2(abs(point.x), abs(point.y))
        return ResizeHitbox(index, hitbox_id, instance.size, size)
    return ToggleHitboxEnabled(index, hitbox_id)


def run_random_actions(editor, seed, steps):
    rng = random.Random(seed)
    snapshots = [copy.deepcopy(editor.animation)]
    for step in range(steps):
        if editor.do_action(random_action(editor, rng, 100 + step)):
            snapshots.append(copy.deepcopy(editor.animation))
    return snapshots


def test_undo_everything_restores_initial_state():
    for seed in range(20):
        editor = make_editor_with_hitbox()
        snapshots = run_random_actions(editor, seed, 30)

        while editor.undo():
            pass

        assert editor.animation == snapshots[0]
        assert not editor.can_undo()


def test_undo_then_redo_restores_final_state():
    for seed in range(20):
        editor = make_editor_with_hitbox()
        snapshots = run_random_actions(editor, seed, 30)
        n = len(editor.history)
        k = random.Random(seed).randint(0, n)

        for step in range(k):
            assert editor.undo()
            assert editor.animation == snapshots[n - step - 1]
        for _ in range(k):
            assert editor.redo()

        assert editor.animation == snapshots[-1]
        assert not editor.can_redo()


def test_new_action_after_undo_drops_redo_branch():
    editor = make_editor()
    editor.do_action(MoveSprite(0, Vec2.ZERO, Vec2(1, 1)))
    editor.do_action(MoveSprite(1, Vec2.ZERO, Vec2(2, 2)))
    editor.do_action(MoveSprite(2, Vec2.ZERO, Vec2(3, 3)))

    editor.undo()
    editor.undo()
    assert editor.undo_depth == 2

    editor.do_action(ChangeDelay(0, 1, 5))
    assert editor.undo_depth == 0
    assert len(editor.history) == 2
    assert not editor.redo()
    assert editor.frame(1).offset == Vec2.ZERO
    assert editor.frame(2).offset == Vec2.ZERO


def test_no_change_actions_are_discarded():
    editor = make_editor_with_hitbox()
    noops = [
        MoveSprite(0, Vec2(0, 0), Vec2(0, 0)),
        SetMotionOffset(1, Vec2.ZERO, Vec2.ZERO),
        ChangeDelay(0, 1, 1),
        SwapFrames(2, 2),
        MoveHitbox(0, 0, Vec2(1, 1), Vec2(1, 1)),
        ResizeHitbox(0, 0, Vec2.ZERO, Vec2.ZERO),
    ]
    before = copy.deepcopy(editor.animation)

    for action in noops:
        assert not action.warrants_recording()
        assert not editor.do_action(action)

    assert editor.history == []
    assert not editor.dirty
    assert editor.animation == before


def test_structural_actions_always_record():
    assert AddFrame(ImageHandle(0)).warrants_recording()
    assert CreateHitbox(0).warrants_recording()
    assert RemoveFrame(Frame(ImageHandle(0)), 0).warrants_recording()
    assert ToggleHitboxEnabled(0, 0).warrants_recording()


def test_undo_and_redo_at_the_edges_are_noops():
    editor = EditorState()
    assert not editor.undo()
    assert not editor.redo()
    assert not editor.dirty

    editor.do_action(AddFrame(ImageHandle(0)))
    assert not editor.redo()
    assert editor.undo()
    assert not editor.undo()


def test_dirty_flag_follows_history_and_save():
    editor = make_editor()
    assert not editor.dirty

    editor.do_action(ChangeDelay(0, 1, 2))
    assert editor.dirty
    editor.mark_saved()
    assert not editor.dirty

    editor.undo()
    assert editor.dirty
    editor.mark_saved()
    editor.redo()
    assert editor.dirty


def test_remove_current_last_frame_and_undo():
    editor = make_editor(3)
    editor.selection.current_frame = 2

    editor.do_action(RemoveFrame.capture(editor.animation, 2))
    assert editor.frame_count() == 2
    assert editor.selection.current_frame == 1

    editor.undo()
    assert editor.frame_count() == 3
    assert editor.selection.current_frame == 2

    editor.redo()
    assert editor.selection.current_frame == 1


def test_undo_remove_keeps_stale_selection_in_range():
    editor = make_editor(5)
    editor.selection.current_frame = 10

    editor.do_action(RemoveFrame.capture(editor.animation, 2))
    assert editor.selection.current_frame == 3

    editor.undo()
    assert editor.frame_count() == 5
    assert editor.selection.current_frame == 4

    editor.redo()
    assert editor.selection.current_frame == 3


def test_remove_only_frame_leaves_selection_at_zero():
    editor = make_editor(1)
    editor.do_action(RemoveFrame.capture(editor.animation, 0))
    assert editor.frame_count() == 0
    assert editor.selection.current_frame == 0

    editor.undo()
    assert editor.frame_count() == 1
    assert editor.selection.current_frame == 0


def test_remove_before_current_shifts_selection():
    editor = make_editor(4)
    editor.selection.current_frame = 3

    editor.do_action(RemoveFrame.capture(editor.animation, 1))
    assert editor.selection.current_frame == 2
    assert editor.current_frame().image == ImageHandle(3)

    editor.undo()
    assert editor.selection.current_frame == 3
    assert editor.current_frame().image == ImageHandle(3)


def test_remove_after_current_keeps_selection():
    editor = make_editor(4)
    editor.selection.current_frame = 1

    editor.do_action(RemoveFrame.capture(editor.animation, 2))
    assert editor.selection.current_frame == 1
    editor.undo()
    assert editor.selection.current_frame == 1


def test_reinserting_at_current_index_moves_selection_forward():
    editor = make_editor(3)
    editor.selection.current_frame = 0

    editor.do_action(RemoveFrame.capture(editor.animation, 0))
    assert editor.selection.current_frame == 0

    editor.undo()
    assert editor.selection.current_frame == 1


def test_removed_frame_snapshot_is_restored_exactly():
    editor = make_editor_with_hitbox(2)
    editor.do_action(MoveSprite(1, Vec2.ZERO, Vec2(4, -3)))
    editor.do_action(ToggleHitboxEnabled(1, 0))
    editor.do_action(MoveHitbox(1, 0, Vec2.ZERO, Vec2(7, 7)))
    original = copy.deepcopy(editor.frame(1))

    editor.do_action(RemoveFrame.capture(editor.animation, 1))
    editor.undo()
    assert editor.frame(1) == original


def test_add_frame_clamps_out_of_range_selection():
    editor = make_editor(2)
    editor.selection.current_frame = 7
    editor.do_action(AddFrame(ImageHandle(50)))
    assert editor.selection.current_frame == 2

    editor.selection.current_frame = 1
    editor.do_action(AddFrame(ImageHandle(51)))
    assert editor.selection.current_frame == 1


def test_add_frame_gets_instances_for_defined_hitboxes():
    editor = make_editor_with_hitbox(1)
    editor.do_action(AddFrame(ImageHandle(9)))
    frame = editor.frame(1)
    assert set(frame.hitboxes) == {0}
    assert not frame.is_hitbox_enabled(0)


def test_add_frame_reverse_checks_image():
    animation = Animation.new()
    editor = EditorState(animation)
    action = AddFrame(ImageHandle(1))
    editor.do_action(action)
    animation.frame(0).image = ImageHandle(2)

    with pytest.raises(ActionMismatchError):
        editor.undo()


def test_remove_frame_checks_image():
    editor = make_editor(2)
    action = RemoveFrame(Frame(ImageHandle(1)), 0)
    with pytest.raises(ActionMismatchError):
        editor.do_action(action)
    assert editor.history == []
    assert editor.frame_count() == 2


def test_out_of_range_action_is_fatal():
    editor = make_editor(2)
    with pytest.raises(IndexError):
        editor.do_action(MoveSprite(5, Vec2.ZERO, Vec2(1, 1)))
    with pytest.raises(KeyError):
        editor.do_action(ToggleHitboxEnabled(0, 42))
    assert editor.history == []
    assert not editor.dirty


def test_change_delay_step_saturates_at_zero():
    editor = make_editor(1)
    editor.do_action(ChangeDelay.step(editor.animation, 0, -1))
    assert editor.frame(0).delay == 0
    assert not editor.do_action(ChangeDelay.step(editor.animation, 0, -1))
    editor.do_action(ChangeDelay.step(editor.animation, 0, 2))
    assert editor.frame(0).delay == 2
    editor.undo()
    assert editor.frame(0).delay == 0


def test_swap_frames_is_self_inverse():
    editor = make_editor(3)
    editor.do_action(SwapFrames(0, 2))
    assert [f.image.id for f in editor.animation.timeline] == [2, 1, 0]
    editor.undo()
    assert [f.image.id for f in editor.animation.timeline] == [0, 1, 2]


def test_move_sprite_snap_rounds_offset():
    editor = make_editor(1)
    editor.do_action(MoveSprite(0, Vec2.ZERO, Vec2(1.4, 2.6)))
    editor.do_action(MoveSprite.snap(editor.animation, 0))
    assert editor.frame(0).offset == Vec2(1.0, 3.0)
    assert not editor.do_action(MoveSprite.snap(editor.animation, 0))


def test_set_motion_offset_is_independent_of_anchor():
    editor = make_editor(1)
    editor.do_action(SetMotionOffset(0, Vec2.ZERO, Vec2(3, 0)))
    assert editor.frame(0).root_motion == Vec2(3, 0)
    assert editor.frame(0).offset == Vec2.ZERO
    editor.undo()
    assert editor.frame(0).root_motion == Vec2.ZERO


def test_create_hitbox_adds_and_removes_instances():
    editor = make_editor(2)
    editor.selection.hitbox = 5
    editor.do_action(CreateHitbox(5, "sword", is_hurtbox=False))

    assert editor.animation.hitboxes[5].desc == "sword"
    assert all(5 in frame.hitboxes for frame in editor.animation.timeline)

    editor.undo()
    assert 5 not in editor.animation.hitboxes
    assert all(5 not in frame.hitboxes for frame in editor.animation.timeline)
    assert editor.selection.hitbox is None

    editor.redo()
    assert 5 in editor.animation.hitboxes


def test_toggle_preserves_geometry():
    editor = make_editor_with_hitbox(2)
    editor.do_action(ToggleHitboxEnabled(0, 0))
    editor.do_action(MoveHitbox(0, 0, Vec2.ZERO, Vec2(3, 4)))
    editor.do_action(ResizeHitbox(0, 0, Vec2.ZERO, Vec2(10, 6)))
    instance = editor.frame(0).get_hitbox(0)

    editor.do_action(ToggleHitboxEnabled(0, 0))
    assert not editor.frame(0).is_hitbox_enabled(0)
    editor.do_action(ToggleHitboxEnabled(0, 0))

    assert editor.frame(0).is_hitbox_enabled(0)
    assert editor.frame(0).get_hitbox(0).pos == Vec2(3, 4)
    assert editor.frame(0).get_hitbox(0).size == Vec2(10, 6)
    assert instance is editor.frame(0).get_hitbox(0)
    assert not editor.frame(1).is_hitbox_enabled(0)


def test_degenerate_hitbox_size_is_kept():
    editor = make_editor_with_hitbox(1)
    editor.do_action(ResizeHitbox(0, 0, Vec2.ZERO, Vec2(-2, 5)))
    assert editor.frame(0).get_hitbox(0).size == Vec2(-2, 5)
    assert editor.frame(0).get_hitbox(0).is_degenerate()


def test_new_and_replace_animation_reset_history():
    editor = make_editor(2)
    editor.do_action(ChangeDelay(0, 1, 4))
    editor.selection.current_frame = 1

    editor.new_animation()
    assert editor.frame_count() == 0
    assert editor.history == []
    assert not editor.dirty
    assert editor.selection.current_frame == 0
    assert not editor.undo()


if __name__ == "__main__":
    main_for(globals(), "Action engine tests")
