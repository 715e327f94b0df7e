import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze.algo.selectors import (
    ByPosition, Mixture, SelectionMode, default_algorithm, from_name, mixture,
    prim_algorithm, recursive_backtracker, select,
)
from growing_maze.core.errors import ConstructionError
from growing_maze.core.rng import ReversibleRandom


class TestSelectors(unittest.TestCase):
    def test_positional(self):
        rng = ReversibleRandom(1)
        self.assertEqual(select(ByPosition(SelectionMode.FIRST), 5, rng), 0)
        self.assertEqual(select(ByPosition(SelectionMode.LAST), 5, rng), 4)
        self.assertEqual(select(ByPosition(SelectionMode.MIDDLE), 5, rng), 2)
        self.assertEqual(ByPosition(SelectionMode.MIDDLE).select(4, rng), 2)
        # deterministic modes draw nothing
        self.assertTrue(rng.on_record)

    def test_random_in_range(self):
        rng = ReversibleRandom(8)
        for size in (1, 2, 9):
            for _ in range(50):
                self.assertTrue(0 <= select(prim_algorithm(), size, rng) < size)

    def test_presets(self):
        self.assertEqual(recursive_backtracker(), ByPosition(SelectionMode.LAST))
        self.assertEqual(prim_algorithm(), ByPosition(SelectionMode.RANDOM))
        self.assertIsInstance(default_algorithm(), Mixture)
        self.assertEqual(from_name("middle"), ByPosition(SelectionMode.MIDDLE))
        with self.assertRaises(ValueError):
            from_name("spiral")

    def test_replay_gives_same_index(self):
        selector = default_algorithm()
        rng = ReversibleRandom(77)
        rng.advance_generator()
        first = [select(selector, 10, rng) for _ in range(5)]
        rng.reset_generator()
        self.assertEqual([select(selector, 10, rng) for _ in range(5)], first)

    def test_mixture_extremes(self):
        rng = ReversibleRandom(13)
        always_first = mixture([ByPosition(SelectionMode.FIRST), ByPosition(SelectionMode.LAST)], [1.0, 0.0])
        always_last = default_algorithm(prim_chance=0.0)
        for _ in range(50):
            self.assertEqual(select(always_first, 6, rng), 0)
            self.assertEqual(select(always_last, 6, rng), 5)

    def test_mixture_uses_both(self):
        rng = ReversibleRandom(21)
        selector = mixture([ByPosition(SelectionMode.FIRST), ByPosition(SelectionMode.LAST)], [0.5, 0.5])
        picks = {select(selector, 6, rng) for _ in range(200)}
        self.assertEqual(picks, {0, 5})

    def test_nested_mixture(self):
        rng = ReversibleRandom(4)
        inner = mixture([ByPosition(SelectionMode.FIRST), ByPosition(SelectionMode.MIDDLE)], [1, 1])
        outer = mixture([inner, ByPosition(SelectionMode.LAST)], [2, 1])
        for _ in range(100):
            self.assertIn(select(outer, 7, rng), (0, 3, 6))

    def test_invalid_mixtures(self):
        with self.assertRaises(ConstructionError):
            Mixture(())
        with self.assertRaises(ConstructionError):
            mixture([ByPosition(SelectionMode.FIRST)], [-1.0])
        with self.assertRaises(ConstructionError):
            mixture([ByPosition(SelectionMode.FIRST)], [0.0])
        with self.assertRaises(ConstructionError):
            mixture([ByPosition(SelectionMode.FIRST)], [1.0, 2.0])
        with self.assertRaises(ConstructionError):
            default_algorithm(1.5)

    def test_invalid_position_mode(self):
        with self.assertRaises(ConstructionError):
            ByPosition("last")

    def test_empty_frontier(self):
        with self.assertRaises(ValueError):
            select(recursive_backtracker(), 0, ReversibleRandom(1))


if __name__ == '__main__':
    unittest.main()
