"""
Animation data model: geometry, frames, timeline, hitboxes and image store.
"""

from .geometry import Vec2
from .images import ImageHandle, ImageStore, as_rgba_array, load_image_file
from .model import (
    Hitbox,
    HitboxInstance,
    Frame,
    Timeline,
    Animation,
)

__all__ = [
    # Geometry
    "Vec2",
    # Images
    "ImageHandle",
    "ImageStore",
    "as_rgba_array",
    "load_image_file",
    # Model
    "Hitbox",
    "HitboxInstance",
    "Frame",
    "Timeline",
    "Animation",
]
