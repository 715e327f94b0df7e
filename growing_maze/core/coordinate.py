from dataclasses import dataclass
from typing import Iterable

from growing_maze.core.direction import Direction


class Coordinate(tuple):
    """
    An integer point in N dimensions. Behaves like a plain tuple for equality,
    hashing and indexing, so it can key dicts and index numpy arrays directly.
    Offsetting never checks bounds; points outside the maze are legal values.
    """
    __slots__ = ()

    def __new__(cls, values: Iterable[int]):
        coordinate = super().__new__(cls, (int(v) for v in values))
        if len(coordinate) == 0:
            raise ValueError("coordinates cannot be empty")
        return coordinate

    @classmethod
    def origin(cls, dimensions: int) -> "Coordinate":
        return cls([0] * dimensions)

    @property
    def dimension_count(self) -> int:
        return len(self)

    def offset(self, direction: Direction) -> "Coordinate":
        values = list(self)
        values[direction.dimension] += direction.sign_int
        return Coordinate(values)

    def __repr__(self):
        return f"Coordinate({tuple(self)!r})"

    def __str__(self):
        return "(" + ", ".join(str(v) for v in self) + ")"


@dataclass(frozen=True)
class Face:
    """
    One wall position of one cell: the side of `coordinate` that `side` points
    at. A face and its mirror on the neighbouring cell are the same wall.
    """
    coordinate: Coordinate
    side: Direction

    def mirror(self) -> "Face":
        return Face(self.coordinate.offset(self.side), self.side.invert())

    def __str__(self):
        return f"{self.coordinate}{self.side}"
