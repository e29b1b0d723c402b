"""
External image store. The data model only holds ImageHandle values; pixel
buffers live here as RGBA numpy arrays.
"""

import itertools
import numpy as np
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Union
from PIL import Image, UnidentifiedImageError


@dataclass(frozen=True)
class ImageHandle:
    """Opaque reference to a bitmap held by an ImageStore."""

    id: int


def as_rgba_array(image: Union[np.ndarray, Image.Image]) -> np.ndarray:
    """Normalize a PIL image or pixel array to an (H, W, 4) uint8 array.

    Raises:
        ValueError: If the array is not RGBA shaped
    """
    if isinstance(image, Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return np.array(image, dtype=np.uint8)

    pixels = np.asarray(image)
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(
            f"Expected an RGBA pixel array of shape (H, W, 4), got {pixels.shape}"
        )
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
    return pixels


def load_image_file(path: Path) -> np.ndarray:
    """Decode an image file into an RGBA array.

    Raises:
        ValueError: If the file is not a decodable image
    """
    try:
        with Image.open(path) as img:
            img.load()
            return as_rgba_array(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, SyntaxError) as e:
        raise ValueError(f"Could not decode image {path}: {e}") from e


class ImageStore:
    """Holds decoded bitmaps keyed by handle.

    Handles are never reused within a store, so two frames refer to the same
    bitmap exactly when their handles compare equal.
    """

    def __init__(self):
        self._images: Dict[ImageHandle, np.ndarray] = {}
        self._ids = itertools.count()

    def add(self, image: Union[np.ndarray, Image.Image]) -> ImageHandle:
        pixels = as_rgba_array(image).copy()
        pixels.setflags(write=False)
        handle = ImageHandle(next(self._ids))
        self._images[handle] = pixels
        return handle

    def load_file(self, path: Path) -> ImageHandle:
        return self.add(load_image_file(path))

    def get(self, handle: ImageHandle) -> np.ndarray:
        """Return the pixels behind a handle. Unknown handles raise KeyError."""
        return self._images[handle]

    def remove(self, handle: ImageHandle) -> None:
        del self._images[handle]

    def __contains__(self, handle) -> bool:
        return handle in self._images

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[ImageHandle]:
        return iter(self._images)
