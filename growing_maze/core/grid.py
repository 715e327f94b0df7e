from typing import Sequence, Tuple

import numpy as np

from growing_maze.config import DIMENSION_NAMES
from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import Direction, Sign
from growing_maze.core.errors import BoundsError, ConstructionError


class Cell:
    """
    Wall flags for one cell, one per dimension. Only the walls on the cell's
    negative sides are stored; a positive-side wall belongs to the neighbour
    that sits one step further along that axis.
    """
    __slots__ = ('walls',)

    def __init__(self, walls: np.ndarray):
        # May be a view into WallGrid storage, so writes go straight through.
        self.walls = walls

    @classmethod
    def create(cls, dimension_count: int, is_wall: bool = False) -> "Cell":
        if dimension_count <= 0:
            raise ConstructionError(f"dimension_count must be positive, got {dimension_count}")
        return cls(np.full(dimension_count, is_wall, dtype=bool))

    def has_wall(self, dimension: int) -> bool:
        return bool(self.walls[dimension])

    def set_wall(self, dimension: int, is_wall: bool):
        self.walls[dimension] = is_wall

    def add_wall(self, dimension: int):
        self.set_wall(dimension, True)

    def remove_wall(self, dimension: int):
        self.set_wall(dimension, False)

    def is_clear(self) -> bool:
        return not self.walls.any()

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return np.array_equal(self.walls, other.walls)

    __hash__ = None

    def __str__(self):
        walled = [d for d in range(len(self.walls)) if self.walls[d]]
        if len(self.walls) <= len(DIMENSION_NAMES):
            return "{" + "".join(DIMENSION_NAMES[d] for d in walled) + "}"
        return "{" + ", ".join(str(d) for d in walled) + "}"


class WallGrid:
    """
    Dense N-dimensional wall storage.

    Each cell keeps only its negative-facing walls, so the backing array is one
    cell longer than the maze along every axis: the extra layer on the far
    positive side holds the maze's positive boundary walls. Checking a negative
    face reads the cell at the same coordinate; checking a positive face reads
    the neighbour one step along that axis.

    Padding cells that sit on two or more far edges at once lie outside the
    bounding box entirely. Their faces are not writable. Reads that fall off
    the padded array altogether report "no wall" (open space outside).
    """
    __slots__ = ('_shape', 'internal_shape', 'walls')

    def __init__(self, shape: Sequence[int], all_walls: bool = False):
        shape = tuple(shape)
        if not shape:
            raise ConstructionError("shape cannot be empty")
        for side in shape:
            if int(side) != side or side <= 0:
                raise ConstructionError(f"side lengths must be positive integers, got {shape}")
        self._shape = tuple(int(side) for side in shape)
        self.internal_shape = tuple(side + 1 for side in self._shape)
        # walls[indices + (d,)] -> wall on the negative side of cell `indices` along d
        self.walls = np.zeros(self.internal_shape + (len(self._shape),), dtype=bool)
        self.reset_walls(all_walls)

    def reset_walls(self, all_walls: bool):
        """
        Walls the bounding box and clears everything outside it. With
        all_walls, every face inside the box is walled as well; otherwise the
        inside is left open.
        """
        d = len(self._shape)
        index_grid = np.indices(self.internal_shape)
        far = np.stack([index_grid[k] == self.internal_shape[k] - 1 for k in range(d)])
        far_count = far.sum(axis=0)

        for k in range(d):
            if all_walls:
                # A padding cell on exactly one far edge holds the boundary
                # wall parallel to that edge and nothing else.
                self.walls[..., k] = (far_count == 0) | ((far_count == 1) & far[k])
            else:
                other_far = (far_count - far[k].astype(int)) > 0
                self.walls[..., k] = ((index_grid[k] == 0) | far[k]) & ~other_far

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def dimension_count(self) -> int:
        return len(self._shape)

    def side_length(self, dimension: int) -> int:
        return self._shape[dimension]

    @property
    def size(self) -> int:
        size = 1
        for side in self._shape:
            size *= side
        return size

    def _check_dimensions(self, coordinate: Sequence[int]):
        if len(coordinate) != len(self._shape):
            raise BoundsError(
                f"Coordinate {tuple(coordinate)} has {len(coordinate)} dimensions, "
                f"maze has {len(self._shape)}")

    def contains(self, coordinate: Sequence[int]) -> bool:
        self._check_dimensions(coordinate)
        for value, side in zip(coordinate, self._shape):
            if not 0 <= value < side:
                return False
        return True

    def _to_indices(self, face: Face) -> Tuple[int, ...]:
        coordinate, side = face.coordinate, face.side
        self._check_dimensions(coordinate)
        if side.dimension >= len(self._shape):
            raise BoundsError(f"Direction {side} is outside a {len(self._shape)}-dimensional maze")
        if side.is_negative():
            return tuple(coordinate)
        indices = list(coordinate)
        indices[side.dimension] += 1
        return tuple(indices)

    def _in_array(self, indices: Tuple[int, ...]) -> bool:
        for index, side in zip(indices, self.internal_shape):
            if not 0 <= index < side:
                return False
        return True

    def _on_multiple_far_edges(self, indices: Tuple[int, ...]) -> bool:
        edges = 0
        for index, side in zip(indices, self.internal_shape):
            if index == side - 1:
                edges += 1
        return edges > 1

    def is_writable(self, face: Face) -> bool:
        indices = self._to_indices(face)
        return self._in_array(indices) and not self._on_multiple_far_edges(indices)

    def has_wall(self, face: Face) -> bool:
        indices = self._to_indices(face)
        if not self._in_array(indices):
            return False
        return bool(self.walls[indices + (face.side.dimension,)])

    def set_wall(self, face: Face, is_wall: bool):
        """
        Only the generation engine writes walls; arbitrary edits would break
        the spanning tree it maintains.
        """
        indices = self._to_indices(face)
        if not self._in_array(indices) or self._on_multiple_far_edges(indices):
            raise BoundsError(f"Face {face} is not writable")
        self.walls[indices + (face.side.dimension,)] = is_wall

    def add_wall(self, face: Face):
        self.set_wall(face, True)

    def remove_wall(self, face: Face):
        self.set_wall(face, False)

    def cell(self, indices: Sequence[int]) -> Cell:
        """Returns a live view of the internal cell at `indices`."""
        indices = tuple(indices)
        if len(indices) != len(self._shape) or not self._in_array(indices):
            raise BoundsError(f"Internal indices {indices} out of bounds")
        return Cell(self.walls[indices])

    def is_edge_cell(self, coordinate: Sequence[int]) -> bool:
        if not self.contains(coordinate):
            return False
        for value, side in zip(coordinate, self._shape):
            if value == 0 or value == side - 1:
                return True
        return False

    def external_face(self, edge_cell: Sequence[int]) -> Face:
        """
        The face of an edge cell that looks out of the bounding box. When the
        cell touches several boundaries, the lowest axis wins, negative side
        before positive.
        """
        if not self.contains(edge_cell):
            raise BoundsError(f"Cell {tuple(edge_cell)} is not inside the maze")
        for d, (value, side) in enumerate(zip(edge_cell, self._shape)):
            if value == 0:
                return Face(Coordinate(edge_cell), Direction(d, Sign.NEGATIVE))
            if value == side - 1:
                return Face(Coordinate(edge_cell), Direction(d, Sign.POSITIVE))
        raise BoundsError(f"Cell {tuple(edge_cell)} is not on an edge of the maze")

    def copy(self) -> "WallGrid":
        clone = WallGrid.__new__(WallGrid)
        clone._shape = self._shape
        clone.internal_shape = self.internal_shape
        clone.walls = self.walls.copy()
        return clone

    def __eq__(self, other):
        if not isinstance(other, WallGrid):
            return NotImplemented
        return self._shape == other._shape and np.array_equal(self.walls, other.walls)

    __hash__ = None

    def __repr__(self):
        return f"WallGrid(shape={self._shape})"
