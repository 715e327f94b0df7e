from collections import deque

import numpy as np

from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import get_all_directions


def _in_shape(coordinate, shape) -> bool:
    for value, side in zip(coordinate, shape):
        if not 0 <= value < side:
            return False
    return True


class MazeAnalyzer:
    """
    Read-only measurements of a maze. Works on anything exposing `shape` and
    `has_wall(face)`: a WallGrid or a GrowingTreeGenerator.
    """

    @staticmethod
    def open_faces(maze, coordinate: Coordinate) -> int:
        """Open faces of a cell that lead to another cell of the maze."""
        count = 0
        for direction in get_all_directions(len(maze.shape)):
            neighbor = coordinate.offset(direction)
            if _in_shape(neighbor, maze.shape) and not maze.has_wall(Face(coordinate, direction)):
                count += 1
        return count

    @staticmethod
    def count_passages(maze) -> int:
        """
        Number of removed internal walls. Each wall is counted once, from the
        cell on its negative side.
        """
        directions = [d for d in get_all_directions(len(maze.shape)) if d.is_positive()]
        passages = 0
        for indices in np.ndindex(*maze.shape):
            cell = Coordinate(indices)
            for direction in directions:
                if _in_shape(cell.offset(direction), maze.shape) and not maze.has_wall(Face(cell, direction)):
                    passages += 1
        return passages

    @staticmethod
    def reachable_count(maze, start: Coordinate = None) -> int:
        shape = tuple(maze.shape)
        if start is None:
            start = Coordinate.origin(len(shape))
        seen = np.zeros(shape, dtype=bool)
        seen[tuple(start)] = True
        queue = deque([start])
        count = 1
        directions = get_all_directions(len(shape))
        while queue:
            cell = queue.popleft()
            for direction in directions:
                neighbor = cell.offset(direction)
                if not _in_shape(neighbor, shape) or seen[tuple(neighbor)]:
                    continue
                if maze.has_wall(Face(cell, direction)):
                    continue
                seen[tuple(neighbor)] = True
                count += 1
                queue.append(neighbor)
        return count

    @staticmethod
    def is_perfect(maze) -> bool:
        """Connected and acyclic: n - 1 passages joining all n cells."""
        size = int(np.prod(maze.shape))
        return (MazeAnalyzer.count_passages(maze) == size - 1
                and MazeAnalyzer.reachable_count(maze) == size)

    @staticmethod
    def calculate_stats(maze):
        dead_ends = 0
        corridors = 0
        junctions = 0

        for indices in np.ndindex(*maze.shape):
            exits = MazeAnalyzer.open_faces(maze, Coordinate(indices))
            if exits == 1:
                dead_ends += 1
            elif exits == 2:
                corridors += 1
            elif exits >= 3:
                junctions += 1

        total = int(np.prod(maze.shape))
        return {
            "cells": total,
            "passages": MazeAnalyzer.count_passages(maze),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
