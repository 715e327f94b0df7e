import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze.core.errors import BoundsError, ConstructionError, StateError
from growing_maze.core.rng import MASK_64, ReversibleRandom


def xorshift(seed):
    seed ^= (seed << 21) & MASK_64
    seed ^= seed >> 35
    seed ^= (seed << 4) & MASK_64
    return seed


class TestReversibleRandom(unittest.TestCase):
    def test_zero_seed_rejected(self):
        with self.assertRaises(ConstructionError):
            ReversibleRandom(0)
        with self.assertRaises(ConstructionError):
            ReversibleRandom(1 << 64)

    def test_clock_seed_is_non_zero(self):
        rng = ReversibleRandom()
        self.assertNotEqual(rng.seed, 0)
        self.assertEqual(rng.history, (rng.seed,))

    def test_xorshift_core(self):
        rng = ReversibleRandom(12345)
        expected = xorshift(12345)
        self.assertEqual(rng.next_u64(), expected)
        self.assertEqual(rng.next_u64(), xorshift(expected))

    def test_never_yields_zero(self):
        rng = ReversibleRandom(1)
        for _ in range(5000):
            self.assertNotEqual(rng.next_u64(), 0)
            self.assertNotEqual(rng.seed, 0)

    def test_bounded_draws(self):
        rng = ReversibleRandom(99)
        seen = set()
        for _ in range(2000):
            value = rng.next_i32(7)
            self.assertTrue(0 <= value < 7)
            seen.add(value)
        self.assertEqual(seen, set(range(7)))
        for _ in range(200):
            self.assertTrue(0 <= rng.next_u64(1 << 40) < (1 << 40))
        with self.assertRaises(ValueError):
            rng.next_i32(0)

    def test_float_draws(self):
        rng = ReversibleRandom(7)
        for _ in range(500):
            self.assertTrue(0.0 <= rng.next_f64() < 1.0)
            self.assertTrue(0.0 <= rng.next_f64(3.0) < 3.0)
            self.assertTrue(-2.0 <= rng.next_f64(-2.0, 5.0) < 5.0)

    def test_on_record(self):
        rng = ReversibleRandom(5)
        self.assertTrue(rng.on_record)
        rng.next_i32(10)
        self.assertFalse(rng.on_record)
        rng.advance_generator()
        self.assertTrue(rng.on_record)

    def test_history_trace(self):
        rng = ReversibleRandom(42)
        a = rng.seed
        rng.next_u64()
        rng.advance_generator()
        b = rng.seed
        self.assertEqual(rng.history, (a, b))
        self.assertEqual(rng.index, 1)

        s1 = rng.next_u64()
        rng.next_u64()
        rng.advance_generator()
        d = rng.seed
        self.assertEqual(rng.history, (a, b, d))

        u = rng.next_u64()
        rng.reset_generator()
        self.assertEqual(rng.seed, d)
        self.assertEqual(rng.next_u64(), u)

        rng.reverse_generator()
        self.assertEqual(rng.index, 1)
        self.assertEqual(rng.seed, b)
        self.assertEqual(rng.next_u64(), s1)

        # replay, history untouched
        rng.advance_generator()
        self.assertEqual(rng.seed, d)
        self.assertEqual(rng.history, (a, b, d))
        self.assertTrue(rng.in_latest_state)

        rng.reset_generator(0)
        self.assertEqual(rng.seed, a)
        self.assertTrue(rng.in_initial_state)
        self.assertEqual(rng.initial_seed, a)
        self.assertEqual(rng.get_seed(2), d)

    def test_history_errors(self):
        rng = ReversibleRandom(3)
        with self.assertRaises(StateError):
            rng.reverse_generator()
        with self.assertRaises(BoundsError):
            rng.reset_generator(1)
        with self.assertRaises(BoundsError):
            rng.reset_generator(-1)

    def test_choose(self):
        rng = ReversibleRandom(11)
        items = ["a", "b", "c"]
        for _ in range(50):
            self.assertIn(rng.choose(items), items)
        with self.assertRaises(IndexError):
            rng.choose([])

    def test_determinism_and_equality(self):
        r1 = ReversibleRandom(2024)
        r2 = ReversibleRandom(2024)
        self.assertEqual([r1.next_i32(100) for _ in range(20)],
                         [r2.next_i32(100) for _ in range(20)])
        self.assertEqual(r1, r2)
        r1.advance_generator()
        self.assertNotEqual(r1, r2)


if __name__ == '__main__':
    unittest.main()
