"""
Spritesheet artifact format constants.
"""

FORMAT_VERSION = 1

BINARY_MAGIC = b"SPSHEET\x00"

TEXT_EXTENSION = ".json"
BINARY_EXTENSION = ".sheet"

FRAMES_INFO_FILE = "frames.json"
FRAMES_CONFIG_FILE = "config.json"


class SheetKey:
    SPRITESHEET = "spritesheet"
    INFO = "info"


class InfoKey:
    CELL_WIDTH = "cell_width"
    CELL_HEIGHT = "cell_height"
    COLUMNS = "columns"
    FRAME_COUNT = "frame_count"
    FRAME_DATA = "frame_data"
    HITBOXES = "hitboxes"


class FrameKey:
    DELAY = "delay"
    ORIGIN = "origin"
    ROOT_MOTION = "root_motion"
    HITBOXES = "hitboxes"


class HitboxKey:
    ID = "id"
    POS = "pos"
    SIZE = "size"
    ENABLED = "enabled"
    DESC = "desc"
    IS_HURTBOX = "is_hurtbox"
