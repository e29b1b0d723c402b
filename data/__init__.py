"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
)

from .utils import (
    read_uint32,
    read_uint16,
    write_uint32,
    write_uint16,
    read_length_prefixed,
    write_length_prefixed,
    read_file_to_bytes,
    write_bytes_to_file,
    encode_base64_unpadded,
    decode_base64_unpadded,
    read_json_file,
    write_json_file,
    validate_path_exists_and_is_dir,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
    DEFAULT_FRAME_DELAY,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    # Utils
    "read_uint32",
    "read_uint16",
    "write_uint32",
    "write_uint16",
    "read_length_prefixed",
    "write_length_prefixed",
    "read_file_to_bytes",
    "write_bytes_to_file",
    "encode_base64_unpadded",
    "decode_base64_unpadded",
    "read_json_file",
    "write_json_file",
    "validate_path_exists_and_is_dir",
    # Constants
    "SEPARATOR_LINE_LENGTH",
    "DEFAULT_FRAME_DELAY",
]
