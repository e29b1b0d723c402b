"""
Sheet descriptor: grid layout plus per-frame metadata, and its conversion
to and from the plain dict stored in the artifact.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from animation import Hitbox, HitboxInstance, Vec2
from .constants import FrameKey, HitboxKey, InfoKey


@dataclass
class FrameData:
    """Metadata stored for one packed frame."""

    delay: int = 1
    origin: Vec2 = Vec2.ZERO
    root_motion: Vec2 = Vec2.ZERO
    hitboxes: Dict[int, HitboxInstance] = field(default_factory=dict)


@dataclass
class SheetInfo:
    """Grid layout of a packed sheet and the metadata of every frame in it."""

    cell_width: int = 0
    cell_height: int = 0
    columns: int = 1
    frame_count: int = 0
    frame_data: List[FrameData] = field(default_factory=list)
    hitboxes: Dict[int, Hitbox] = field(default_factory=dict)

    @property
    def rows(self) -> int:
        return math.ceil(self.frame_count / self.columns)

    @property
    def sheet_size(self):
        """Sheet (width, height) in pixels."""
        if self.frame_count == 0:
            return 0, 0
        return self.columns * self.cell_width, self.rows * self.cell_height

    def to_dict(self) -> Dict[str, Any]:
        return {
            InfoKey.CELL_WIDTH: self.cell_width,
            InfoKey.CELL_HEIGHT: self.cell_height,
            InfoKey.COLUMNS: self.columns,
            InfoKey.FRAME_COUNT: self.frame_count,
            InfoKey.FRAME_DATA: [_frame_to_dict(fd) for fd in self.frame_data],
            InfoKey.HITBOXES: {
                str(hitbox_id): {
                    HitboxKey.ID: hitbox.id,
                    HitboxKey.DESC: hitbox.desc,
                    HitboxKey.IS_HURTBOX: hitbox.is_hurtbox,
                }
                for hitbox_id, hitbox in self.hitboxes.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Any) -> "SheetInfo":
        """Parse and validate a descriptor dict.

        Raises:
            ValueError: If any field is missing, mistyped or inconsistent
        """
        _require_mapping(data, "info")

        info = cls(
            cell_width=_read_int(data, InfoKey.CELL_WIDTH, "info"),
            cell_height=_read_int(data, InfoKey.CELL_HEIGHT, "info"),
            columns=_read_int(data, InfoKey.COLUMNS, "info", minimum=1),
            frame_count=_read_int(data, InfoKey.FRAME_COUNT, "info"),
        )

        frame_data = _read_field(data, InfoKey.FRAME_DATA, "info")
        if not isinstance(frame_data, list):
            raise ValueError("info.frame_data must be a list")
        if len(frame_data) != info.frame_count:
            raise ValueError(
                f"info.frame_data has {len(frame_data)} entries "
                f"but frame_count is {info.frame_count}"
            )
        info.frame_data = [
            _frame_from_dict(entry, f"frame_data[{idx}]")
            for idx, entry in enumerate(frame_data)
        ]

        hitboxes = _read_field(data, InfoKey.HITBOXES, "info")
        _require_mapping(hitboxes, "info.hitboxes")
        for key, entry in hitboxes.items():
            where = f"info.hitboxes[{key}]"
            _require_mapping(entry, where)
            hitbox_id = _read_keyed_id(key, entry, where)
            desc = _read_field(entry, HitboxKey.DESC, where)
            if not isinstance(desc, str):
                raise ValueError(f"{where}.desc must be a string")
            info.hitboxes[hitbox_id] = Hitbox(
                hitbox_id, desc, _read_bool(entry, HitboxKey.IS_HURTBOX, where)
            )

        return info


def _frame_to_dict(frame_data: FrameData) -> Dict[str, Any]:
    return {
        FrameKey.DELAY: frame_data.delay,
        FrameKey.ORIGIN: frame_data.origin.to_list(),
        FrameKey.ROOT_MOTION: frame_data.root_motion.to_list(),
        FrameKey.HITBOXES: {
            str(hitbox_id): {
                HitboxKey.ID: instance.id,
                HitboxKey.POS: instance.pos.to_list(),
                HitboxKey.SIZE: instance.size.to_list(),
                HitboxKey.ENABLED: instance.enabled,
            }
            for hitbox_id, instance in frame_data.hitboxes.items()
        },
    }


def _frame_from_dict(data: Any, where: str) -> FrameData:
    _require_mapping(data, where)

    hitboxes = _read_field(data, FrameKey.HITBOXES, where)
    _require_mapping(hitboxes, f"{where}.hitboxes")

    instances = {}
    for key, entry in hitboxes.items():
        entry_where = f"{where}.hitboxes[{key}]"
        _require_mapping(entry, entry_where)
        hitbox_id = _read_keyed_id(key, entry, entry_where)
        instances[hitbox_id] = HitboxInstance(
            hitbox_id,
            pos=_read_vec2(entry, HitboxKey.POS, entry_where),
            size=_read_vec2(entry, HitboxKey.SIZE, entry_where),
            enabled=_read_bool(entry, HitboxKey.ENABLED, entry_where),
        )

    return FrameData(
        delay=_read_int(data, FrameKey.DELAY, where),
        origin=_read_vec2(data, FrameKey.ORIGIN, where),
        root_motion=_read_vec2(data, FrameKey.ROOT_MOTION, where),
        hitboxes=instances,
    )


def _require_mapping(value: Any, where: str) -> None:
    if not isinstance(value, dict):
        raise ValueError(f"{where} must be an object")


def _read_field(data: Dict[str, Any], key: str, where: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{where} is missing '{key}'") from None


def _read_int(data: Dict[str, Any], key: str, where: str, minimum: int = 0) -> int:
    value = _read_field(data, key, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}.{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{where}.{key} must be >= {minimum}, got {value}")
    return value


def _read_bool(data: Dict[str, Any], key: str, where: str) -> bool:
    value = _read_field(data, key, where)
    if not isinstance(value, bool):
        raise ValueError(f"{where}.{key} must be a boolean, got {value!r}")
    return value


def _read_vec2(data: Dict[str, Any], key: str, where: str) -> Vec2:
    value = _read_field(data, key, where)
    try:
        return Vec2.from_seq(value)
    except ValueError as e:
        raise ValueError(f"{where}.{key}: {e}") from e


def _read_keyed_id(key: str, entry: Dict[str, Any], where: str) -> int:
    try:
        key_id = int(key)
    except ValueError:
        raise ValueError(f"{where}: hitbox key is not an integer") from None
    entry_id = _read_int(entry, HitboxKey.ID, where)
    if entry_id != key_id:
        raise ValueError(f"{where}: key {key_id} does not match id {entry_id}")
    return key_id
