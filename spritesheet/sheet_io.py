"""
Animation artifact serialization.

Text mode is a JSON document whose "spritesheet" field holds the PNG bytes as
unpadded base64. Binary mode stores the same two fields in a small container:

    magic (8 bytes) | version (uint16) | reserved (uint16)
    png length (uint32) | png bytes | info length (uint32) | info JSON (utf-8)
"""

import io
import json
import numpy as np
from pathlib import Path
from typing import Optional, Tuple
from PIL import Image, UnidentifiedImageError

from data import (
    DEBUG,
    read_uint16,
    write_uint16,
    read_length_prefixed,
    write_length_prefixed,
    read_file_to_bytes,
    write_bytes_to_file,
    encode_base64_unpadded,
    decode_base64_unpadded,
)
from .constants import BINARY_EXTENSION, BINARY_MAGIC, FORMAT_VERSION, SheetKey
from .descriptor import SheetInfo

HEADER_LEN = len(BINARY_MAGIC) + 4


def encode_png(pixels: np.ndarray) -> bytes:
    """Encode an RGBA sheet as PNG. Zero-area sheets encode to no bytes."""
    if pixels.size == 0:
        return b""
    buffer = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(buffer, "PNG")
    return buffer.getvalue()


def decode_png(raw: bytes, info: SheetInfo) -> np.ndarray:
    """Decode sheet image bytes into an RGBA array.

    Raises:
        ValueError: If the bytes are not a decodable image
    """
    width, height = info.sheet_size
    if not raw:
        if width * height != 0:
            raise ValueError(
                f"Spritesheet image is empty but the descriptor needs {width}x{height}"
            )
        return np.zeros((height, width, 4), dtype=np.uint8)

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.load()
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            return np.array(img, dtype=np.uint8)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        SyntaxError,
        OSError,
    ) as e:
        raise ValueError(f"Could not decode spritesheet image: {e}") from e


def serialize_animation(image: np.ndarray, info: SheetInfo, binary: bool = False) -> bytes:
    """Serialize a packed sheet and its descriptor into artifact bytes."""
    png = encode_png(image)
    info_dict = info.to_dict()

    if binary:
        result = bytearray()
        result.extend(BINARY_MAGIC)
        result.extend(write_uint16(FORMAT_VERSION))
        result.extend(write_uint16(0))
        result.extend(write_length_prefixed(png))
        result.extend(write_length_prefixed(json.dumps(info_dict).encode("utf-8")))
        return bytes(result)

    document = {
        SheetKey.SPRITESHEET: encode_base64_unpadded(png),
        SheetKey.INFO: info_dict,
    }
    return json.dumps(document, indent=4).encode("utf-8")


def deserialize_animation(raw: bytes) -> Tuple[np.ndarray, SheetInfo]:
    """Parse artifact bytes in either mode.

    Returns:
        Tuple of (sheet_pixels, info)

    Raises:
        ValueError: If the artifact, its descriptor or its image is malformed
    """
    if raw.startswith(BINARY_MAGIC):
        png, info_dict = _read_binary(raw)
    else:
        png, info_dict = _read_text(raw)

    info = SheetInfo.from_dict(info_dict)
    sheet = decode_png(png, info)

    if DEBUG:
        print(
            f"[DEBUG] Read sheet {sheet.shape[1]}x{sheet.shape[0]}, "
            f"{info.frame_count} frame(s) of {info.cell_width}x{info.cell_height}"
        )

    return sheet, info


def _read_binary(raw: bytes):
    if len(raw) < HEADER_LEN:
        raise ValueError("Binary animation header is truncated")

    version = read_uint16(raw, len(BINARY_MAGIC))
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported animation format version {version}")

    png, offset = read_length_prefixed(raw, HEADER_LEN)
    info_bytes, offset = read_length_prefixed(raw, offset)
    if offset != len(raw):
        raise ValueError(f"{len(raw) - offset} trailing byte(s) after animation data")

    try:
        return png, json.loads(info_bytes.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid animation info: {e}") from e


def _read_text(raw: bytes):
    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid animation document: {e}") from e

    if not isinstance(document, dict):
        raise ValueError("Animation document must be an object")
    for key in (SheetKey.SPRITESHEET, SheetKey.INFO):
        if key not in document:
            raise ValueError(f"Animation document is missing '{key}'")

    encoded = document[SheetKey.SPRITESHEET]
    if not isinstance(encoded, str):
        raise ValueError("'spritesheet' must be a base64 string")
    return decode_base64_unpadded(encoded), document[SheetKey.INFO]


def is_binary_path(path: Path) -> bool:
    return path.suffix.lower() == BINARY_EXTENSION


def write_animation_file(
    path: Path, image: np.ndarray, info: SheetInfo, binary: Optional[bool] = None
) -> None:
    """Write an artifact. Binary mode defaults to the file suffix."""
    if binary is None:
        binary = is_binary_path(path)
    data = serialize_animation(image, info, binary=binary)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_bytes_to_file(path, data)


def read_animation_file(path: Path) -> Tuple[np.ndarray, SheetInfo]:
    return deserialize_animation(read_file_to_bytes(path))
