from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, List, Optional

import numpy as np

from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import get_all_directions
from growing_maze.core.grid import WallGrid


class Solver(ABC):
    def __init__(self, grid: WallGrid):
        self.grid = grid
        self.path: List[Coordinate] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Coordinate, end: Coordinate) -> Iterator[str]:
        pass

    def run_all(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        for _ in self.run(start, end):
            pass
        return self.path


class FarthestEdgeSearch:
    """
    Breadth-first sweep over carved passages that reports the edge cell
    farthest from the start. Ties go to the cell discovered first, which
    makes the result a pure function of the walls.
    """
    def __init__(self, grid: WallGrid):
        self.grid = grid
        self.distance: Optional[np.ndarray] = None

    def run(self, start: Coordinate) -> Optional[Coordinate]:
        grid = self.grid
        directions = get_all_directions(grid.dimension_count)
        # Dense distance array, -1 = not reached
        self.distance = np.full(grid.shape, -1, dtype=np.int32)
        self.distance[tuple(start)] = 0

        queue = deque([start])
        farthest = None
        greatest = 0
        while queue:
            cell = queue.popleft()
            dist = int(self.distance[tuple(cell)])
            if dist > greatest and grid.is_edge_cell(cell):
                farthest = cell
                greatest = dist
            for direction in directions:
                if grid.has_wall(Face(cell, direction)):
                    continue
                neighbor = cell.offset(direction)
                # open faces on the boundary lead outside
                if not grid.contains(neighbor):
                    continue
                if self.distance[tuple(neighbor)] == -1:
                    self.distance[tuple(neighbor)] = dist + 1
                    queue.append(neighbor)
        return farthest


class TreeWalker(Solver):
    """
    Depth-first walk between two cells of a perfect maze. At each cell the
    directions are tried in canonical order, skipping the way we came and
    any walled face; dead ends are popped. Since the passages form a tree,
    the walk never revisits a cell and the path it leaves behind is the
    unique route.

    Start and end may lie one step outside the bounding box (in front of an
    opening); apart from those two, the walk never leaves the maze.
    """
    def run(self, start: Coordinate, end: Coordinate) -> Iterator[str]:
        grid = self.grid
        directions = get_all_directions(grid.dimension_count)

        self.path = [start]
        # For each cell on the path: index of the direction we arrived from,
        # and the next direction index to try.
        from_indices: List[Optional[int]] = [None]
        to_indices: List[int] = [0]
        self.visited_count = 1

        while self.path:
            cell = self.path[-1]
            if cell == end:
                yield "Solved"
                return

            inside = grid.contains(cell)
            to_index = to_indices[-1]
            from_index = from_indices[-1]
            while to_index < len(directions):
                direction = directions[to_index]
                if to_index != from_index and not grid.has_wall(Face(cell, direction)):
                    neighbor = cell.offset(direction)
                    # the end is only entered from inside, never around the outside
                    if grid.contains(neighbor) or (inside and neighbor == end):
                        break
                to_index += 1

            if to_index < len(directions):
                direction = directions[to_index]
                to_indices[-1] = to_index + 1
                self.path.append(cell.offset(direction))
                from_indices.append(direction.invert().to_index())
                to_indices.append(0)
                self.visited_count += 1
                if self.visited_count % 100 == 0:
                    yield f"Visited: {self.visited_count}"
            else:
                # dead end, or every branch from here was a dead end
                self.path.pop()
                from_indices.pop()
                to_indices.pop()

        yield "No path"
