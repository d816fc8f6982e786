from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from engine.position import BOARD_SIZE, Coordinate  # noqa: E402


ALL_SQUARES = [Coordinate(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


class CoordinateAdjacencyTests(unittest.TestCase):
    def test_catty_corner_neighbours(self) -> None:
        origin = Coordinate(1, 1)
        for other in (Coordinate(0, 0), Coordinate(2, 2), Coordinate(0, 2), Coordinate(2, 0)):
            self.assertTrue(origin.is_diagonally_adjacent(other), other)
        self.assertFalse(origin.is_diagonally_adjacent(Coordinate(0, 1)))
        self.assertFalse(origin.is_diagonally_adjacent(Coordinate(1, 1)))
        self.assertFalse(origin.is_diagonally_adjacent(Coordinate(3, 3)))

    def test_never_adjacent_to_itself(self) -> None:
        for square in ALL_SQUARES:
            self.assertFalse(square.is_diagonally_adjacent(Coordinate(square.row, square.column)))

    def test_adjacency_is_symmetric(self) -> None:
        for a, b in itertools.product(ALL_SQUARES, repeat=2):
            self.assertEqual(a.is_diagonally_adjacent(b), b.is_diagonally_adjacent(a), (a, b))

    def test_board_edges_do_not_wrap(self) -> None:
        corner = Coordinate(0, 0)
        self.assertFalse(corner.is_diagonally_adjacent(Coordinate(7, 7)))
        self.assertFalse(corner.is_diagonally_adjacent(Coordinate(0, 7)))
        self.assertTrue(corner.is_catty_corner(Coordinate(1, 1)))
        self.assertTrue(Coordinate(7, 0).is_diagonally_adjacent(Coordinate(6, 1)))


class CoordinateJumpTests(unittest.TestCase):
    def test_midpoint_of_double_catty_corner(self) -> None:
        self.assertEqual(Coordinate(5, 3).midpoint(Coordinate(3, 1)), Coordinate(4, 2))
        self.assertEqual(Coordinate(0, 0).midpoint(Coordinate(2, 2)), Coordinate(1, 1))

    def test_midpoint_requires_two_diagonal_steps(self) -> None:
        self.assertIsNone(Coordinate(1, 1).midpoint(Coordinate(3, 2)))
        self.assertIsNone(Coordinate(1, 1).midpoint(Coordinate(2, 2)))
        self.assertIsNone(Coordinate(1, 1).midpoint(Coordinate(1, 3)))


class CoordinateConstructionTests(unittest.TestCase):
    def test_rejects_off_board_values(self) -> None:
        with self.assertRaises(ValueError):
            Coordinate(-1, 0)
        with self.assertRaises(ValueError):
            Coordinate(0, BOARD_SIZE)

    def test_value_equality_and_hashing(self) -> None:
        self.assertEqual(Coordinate(2, 3), Coordinate(2, 3))
        self.assertEqual(len({Coordinate(2, 3), Coordinate(2, 3)}), 1)

    def test_parse(self) -> None:
        self.assertEqual(Coordinate.parse(" 2,3 "), Coordinate(2, 3))
        self.assertEqual(str(Coordinate(4, 5)), "4,5")
        with self.assertRaises(ValueError):
            Coordinate.parse("2;3")
        with self.assertRaises(ValueError):
            Coordinate.parse("a,b")


if __name__ == "__main__":
    unittest.main()
