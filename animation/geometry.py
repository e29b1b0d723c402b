"""
2D vector primitive used for positions, sizes and offsets.
"""

from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D float vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Vec2":
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def rounded(self) -> "Vec2":
        """Snap both components to the nearest whole pixel."""
        return Vec2(float(round(self.x)), float(round(self.y)))

    def to_list(self) -> List[float]:
        return [float(self.x), float(self.y)]

    @classmethod
    def from_seq(cls, values: Sequence) -> "Vec2":
        """Build a vector from a two element sequence such as a JSON array.

        Raises:
            ValueError: If the sequence does not hold exactly two numbers
        """
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise ValueError(f"Expected a [x, y] pair, got {values!r}")
        if len(values) != 2:
            raise ValueError(f"Expected a [x, y] pair, got {len(values)} values")
        for value in values:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"Vector component is not a number: {value!r}")
        return cls(float(values[0]), float(values[1]))


Vec2.ZERO = Vec2(0.0, 0.0)
