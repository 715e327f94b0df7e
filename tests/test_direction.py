import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import (
    BACK, FRONT, LEFT, RIGHT, UP, Direction, Sign, get_all_directions,
)


class TestSign(unittest.TestCase):
    def test_invert_and_int(self):
        self.assertEqual(Sign.POSITIVE.invert(), Sign.NEGATIVE)
        self.assertEqual(Sign.NEGATIVE.invert(), Sign.POSITIVE)
        self.assertEqual(Sign.POSITIVE.to_int(), 1)
        self.assertEqual(Sign.NEGATIVE.to_int(), -1)
        self.assertEqual(str(Sign.NEGATIVE), "-")


class TestDirection(unittest.TestCase):
    def test_canonical_order(self):
        dirs = get_all_directions(3)
        self.assertEqual(len(dirs), 6)
        self.assertEqual(dirs[0], LEFT)
        self.assertEqual(dirs[1], RIGHT)
        self.assertEqual(dirs[2], FRONT)
        self.assertEqual(dirs[3], BACK)
        self.assertEqual(dirs[5], UP)

    def test_index_bijection(self):
        for d in (1, 2, 5):
            for i, direction in enumerate(get_all_directions(d)):
                self.assertEqual(direction.to_index(), i)
                self.assertEqual(Direction.from_index(i), direction)

    def test_cached_tables_are_reused(self):
        self.assertIs(get_all_directions(2), get_all_directions(2))
        self.assertEqual(len(get_all_directions(6)), 12)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            get_all_directions(0)
        with self.assertRaises(ValueError):
            Direction(-1, Sign.POSITIVE)

    def test_invert(self):
        self.assertEqual(RIGHT.invert(), LEFT)
        self.assertEqual(LEFT.invert().invert(), LEFT)

    def test_str(self):
        self.assertEqual(str(LEFT), "-x")
        self.assertEqual(str(BACK), "+y")
        self.assertEqual(str(Direction(5, Sign.POSITIVE)), "+5")


class TestCoordinate(unittest.TestCase):
    def test_offset_is_unbounded(self):
        c = Coordinate((0, 0))
        self.assertEqual(c.offset(LEFT), (-1, 0))
        self.assertEqual(c.offset(BACK), (0, 1))
        # original untouched
        self.assertEqual(c, (0, 0))

    def test_value_semantics(self):
        a = Coordinate([1, 2, 3])
        b = Coordinate((1, 2, 3))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertIn(b, [a])
        self.assertIn(b, {a})

    def test_origin_and_empty(self):
        self.assertEqual(Coordinate.origin(3), (0, 0, 0))
        with self.assertRaises(ValueError):
            Coordinate(())

    def test_face_mirror(self):
        face = Face(Coordinate((1, 1)), RIGHT)
        self.assertEqual(face.mirror(), Face(Coordinate((2, 1)), LEFT))
        self.assertEqual(face.mirror().mirror(), face)


if __name__ == '__main__':
    unittest.main()
