from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from growing_maze.config import DIMENSION_NAMES, PRECOMPUTED_DIMENSIONS


class Sign(Enum):
    POSITIVE = 1
    NEGATIVE = -1

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE

    def to_int(self) -> int:
        return self.value

    def invert(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def __str__(self):
        return "+" if self is Sign.POSITIVE else "-"


@dataclass(frozen=True)
class Direction:
    """
    A unit step along one axis. Axis 0 runs left to right, axis 1 front to
    back and axis 2 bottom to top; higher axes have no conventional name.
    """
    dimension: int
    sign: Sign

    def __post_init__(self):
        if self.dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {self.dimension}")
        if not isinstance(self.sign, Sign):
            raise TypeError(f"sign must be a Sign, got {self.sign!r}")

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        """Inverse of to_index."""
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        return cls(index // 2, Sign.NEGATIVE if index % 2 == 0 else Sign.POSITIVE)

    def to_index(self) -> int:
        # Position of this direction in get_all_directions(dimension + 1)
        return self.dimension * 2 + (1 if self.sign.is_positive() else 0)

    def is_positive(self) -> bool:
        return self.sign.is_positive()

    def is_negative(self) -> bool:
        return self.sign.is_negative()

    @property
    def sign_int(self) -> int:
        return self.sign.to_int()

    def invert(self) -> "Direction":
        return Direction(self.dimension, self.sign.invert())

    def __str__(self):
        if self.dimension < len(DIMENSION_NAMES):
            return f"{self.sign}{DIMENSION_NAMES[self.dimension]}"
        return f"{self.sign}{self.dimension}"


LEFT = Direction(0, Sign.NEGATIVE)
RIGHT = Direction(0, Sign.POSITIVE)
FRONT = Direction(1, Sign.NEGATIVE)
BACK = Direction(1, Sign.POSITIVE)
DOWN = Direction(2, Sign.NEGATIVE)
UP = Direction(2, Sign.POSITIVE)

_DIRECTION_CACHE: Dict[int, Tuple[Direction, ...]] = {}


def _compute_all_directions(dimensions: int) -> Tuple[Direction, ...]:
    directions = []
    for dimension in range(dimensions):
        directions.append(Direction(dimension, Sign.NEGATIVE))
        directions.append(Direction(dimension, Sign.POSITIVE))
    return tuple(directions)


def get_all_directions(dimensions: int) -> Tuple[Direction, ...]:
    """
    Returns the 2 * dimensions directions in canonical order:
    (-0, +0, -1, +1, ...). Small dimension counts are built once and reused,
    since this is called for every cell touched during generation.
    """
    if dimensions < 1:
        raise ValueError(f"dimensions must be positive, got {dimensions}")
    cached = _DIRECTION_CACHE.get(dimensions)
    if cached is not None:
        return cached
    directions = _compute_all_directions(dimensions)
    if dimensions <= PRECOMPUTED_DIMENSIONS:
        _DIRECTION_CACHE[dimensions] = directions
    return directions
