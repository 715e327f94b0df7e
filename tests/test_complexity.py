import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze.algo.growing_tree import GrowingTreeGenerator
from growing_maze.algo.selectors import prim_algorithm, recursive_backtracker
from growing_maze.core.complexity import MazeAnalyzer
from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import RIGHT
from growing_maze.core.grid import WallGrid


class TestComplexity(unittest.TestCase):
    def test_open_grid_is_not_perfect(self):
        grid = WallGrid([3, 3])
        # 2 * 3 * 2 internal faces, all open
        self.assertEqual(MazeAnalyzer.count_passages(grid), 12)
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_walled_grid_is_disconnected(self):
        grid = WallGrid([3, 3], all_walls=True)
        self.assertEqual(MazeAnalyzer.count_passages(grid), 0)
        self.assertEqual(MazeAnalyzer.reachable_count(grid), 1)
        grid.remove_wall(Face(Coordinate((0, 0)), RIGHT))
        self.assertEqual(MazeAnalyzer.reachable_count(grid), 2)

    def test_stats(self):
        maze = GrowingTreeGenerator([20, 20], selector=recursive_backtracker(), seed=42)
        maze.finish()
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["cells"], 400)
        self.assertEqual(stats["passages"], 399)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], 400)

    def test_prim_has_more_dead_ends_than_backtracker(self):
        backtracker = GrowingTreeGenerator([30, 30], selector=recursive_backtracker(), seed=99)
        prim = GrowingTreeGenerator([30, 30], selector=prim_algorithm(), seed=99)
        backtracker.finish()
        prim.finish()
        self.assertLess(MazeAnalyzer.calculate_stats(backtracker)["dead_ends"],
                        MazeAnalyzer.calculate_stats(prim)["dead_ends"])


if __name__ == '__main__':
    unittest.main()
