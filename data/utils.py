import base64
import json
import struct
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


def read_uint32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<I" if little_endian else ">I"
    return struct.unpack_from(fmt, data, offset)[0]


def read_uint16(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<H" if little_endian else ">H"
    return struct.unpack_from(fmt, data, offset)[0]


def write_uint32(value: int, little_endian: bool = True) -> bytes:
    fmt = "<I" if little_endian else ">I"
    return struct.pack(fmt, value)


def write_uint16(value: int, little_endian: bool = True) -> bytes:
    fmt = "<H" if little_endian else ">H"
    return struct.pack(fmt, value)


def read_length_prefixed(data: bytes, offset: int) -> Tuple[bytes, int]:
    """Read a uint32 length followed by that many bytes.

    Returns:
        Tuple of (payload, offset just past the payload)
    """
    if offset + 4 > len(data):
        raise ValueError(f"Unexpected end of data at 0x{offset:04X}")
    length = read_uint32(data, offset)
    start = offset + 4
    end = start + length
    if end > len(data):
        raise ValueError(
            f"Block of {length} bytes at 0x{start:04X} runs past end of data"
        )
    return data[start:end], end


def write_length_prefixed(payload: bytes) -> bytes:
    return write_uint32(len(payload)) + payload


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_bytes_to_file(filepath: Path, data: bytes) -> None:
    with open(filepath, "wb") as f:
        f.write(data)


def encode_base64_unpadded(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def decode_base64_unpadded(text: str) -> bytes:
    padding = -len(text) % 4
    try:
        return base64.b64decode(text + "=" * padding, validate=True)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid base64 data: {e}") from e


def read_json_file(filepath: Path) -> Optional[Dict[str, Any]]:
    if not filepath.exists():
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError, OSError):
        return None


def write_json_file(filepath: Path, data: Dict[str, Any], indent: int = 4) -> None:
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def validate_path_exists_and_is_dir(path: Path, path_description: str = "Path") -> bool:
    if not path.exists():
        print(f"[ERROR] {path_description} does not exist: {path}\n")
        return False

    if not path.is_dir():
        print(f"[ERROR] Path is not a directory: {path}\n")
        return False

    return True
