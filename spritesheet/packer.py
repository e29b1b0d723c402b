"""
Pixel-level helpers for packing frames into a uniformly tiled sheet and
slicing them back out. Images are (H, W, 4) uint8 RGBA arrays.
"""

import math
import numpy as np
from typing import List, Sequence, Tuple

from data import DEBUG


def opaque_bounds(pixels: np.ndarray) -> Tuple[int, int, int, int]:
    """Find the tight box around every pixel with non-zero alpha.

    Returns:
        Tuple of (x, y, width, height); (0, 0, 0, 0) when nothing is opaque
    """
    alpha = pixels[:, :, 3]
    rows = np.flatnonzero(alpha.any(axis=1))
    if rows.size == 0:
        return 0, 0, 0, 0
    cols = np.flatnonzero(alpha.any(axis=0))

    top, bottom = int(rows[0]), int(rows[-1])
    left, right = int(cols[0]), int(cols[-1])
    return left, top, right - left + 1, bottom - top + 1


def crop_image(pixels: np.ndarray, bounds: Tuple[int, int, int, int]) -> np.ndarray:
    x, y, width, height = bounds
    return pixels[y : y + height, x : x + width].copy()


def cell_size(images: Sequence[np.ndarray]) -> Tuple[int, int]:
    """Largest width and height over all images.

    Returns:
        Tuple of (cell_width, cell_height)
    """
    cell_width = max((img.shape[1] for img in images), default=0)
    cell_height = max((img.shape[0] for img in images), default=0)
    return cell_width, cell_height


def pad_to_cell(
    pixels: np.ndarray, cell_width: int, cell_height: int
) -> Tuple[np.ndarray, int, int]:
    """Center an image on a transparent cell.

    The left/top padding is half the deficit rounded down; right/bottom get
    the remainder.

    Returns:
        Tuple of (padded_pixels, left_padding, top_padding)
    """
    height, width = pixels.shape[:2]
    if width > cell_width or height > cell_height:
        raise ValueError(
            f"Image {width}x{height} does not fit in a {cell_width}x{cell_height} cell"
        )

    left = (cell_width - width) // 2
    top = (cell_height - height) // 2

    padded = np.zeros((cell_height, cell_width, 4), dtype=np.uint8)
    padded[top : top + height, left : left + width] = pixels
    return padded, left, top


def choose_columns(frame_count: int, cell_width: int, cell_height: int) -> int:
    """Pick the sheet column count.

    Scans from frame_count columns down to one and keeps the first count whose
    grid is no taller than it is wide. Falls back to a single column.
    """
    for columns in range(frame_count, 0, -1):
        rows = math.ceil(frame_count / columns)
        if rows * cell_height <= columns * cell_width:
            return columns
    return 1


def grid_position(index: int, columns: int) -> Tuple[int, int]:
    """Cell (column, row) of a frame, filled row-major."""
    return index % columns, index // columns


def build_sheet(
    cells: List[np.ndarray], cell_width: int, cell_height: int, columns: int
) -> np.ndarray:
    rows = math.ceil(len(cells) / columns)
    sheet = np.zeros((rows * cell_height, columns * cell_width, 4), dtype=np.uint8)

    for idx, cell in enumerate(cells):
        col, row = grid_position(idx, columns)
        y = row * cell_height
        x = col * cell_width
        sheet[y : y + cell_height, x : x + cell_width] = cell

    if DEBUG:
        print(
            f"[DEBUG] Packed {len(cells)} frame(s) into {columns}x{rows} grid "
            f"({sheet.shape[1]}x{sheet.shape[0]} px)"
        )

    return sheet


def slice_sheet(
    sheet: np.ndarray,
    cell_width: int,
    cell_height: int,
    columns: int,
    frame_count: int,
) -> List[np.ndarray]:
    """Cut frame_count cells back out of a sheet.

    Raises:
        ValueError: If the sheet is too small for the described grid
    """
    rows = math.ceil(frame_count / columns) if frame_count else 0
    required_width = columns * cell_width if frame_count else 0
    required_height = rows * cell_height
    sheet_height, sheet_width = sheet.shape[:2]

    if sheet_width < required_width or sheet_height < required_height:
        raise ValueError(
            f"Sheet is {sheet_width}x{sheet_height} but the descriptor needs "
            f"at least {required_width}x{required_height}"
        )

    frames = []
    for idx in range(frame_count):
        col, row = grid_position(idx, columns)
        y = row * cell_height
        x = col * cell_width
        frames.append(sheet[y : y + cell_height, x : x + cell_width].copy())

    return frames
