import copy
import unittest
from itertools import permutations

from circumtri import Point, Edge, Triangle
from circumtri.helpers import random_triangles


class TestTriangle(unittest.TestCase):

    def setUp(self):
        self.p1 = Point(0, 0)
        self.p2 = Point(4, 0)
        self.p3 = Point(0, 4)
        self.t = Triangle(self.p1, self.p2, self.p3)

    def test_points_in_given_order(self):
        self.assertEqual(self.t.points(), (self.p1, self.p2, self.p3))
        self.assertEqual(self.t.point_at(0), self.p1)
        self.assertEqual(self.t.point_at(1), self.p2)
        self.assertEqual(self.t.point_at(2), self.p3)

    def test_edges_cyclic(self):
        self.assertEqual(self.t.edges(),
                         (Edge(self.p1, self.p2),
                          Edge(self.p2, self.p3),
                          Edge(self.p3, self.p1)))
        for i in range(3):
            self.assertEqual(self.t.edge_at(i).start, self.t.point_at(i))
            self.assertEqual(self.t.edge_at(i).end,
                             self.t.point_at((i + 1) % 3))

    def test_index_out_of_range(self):
        for i in (-1, 3):
            with self.assertRaises(AssertionError):
                self.t.point_at(i)
            with self.assertRaises(AssertionError):
                self.t.edge_at(i)

    def test_tuples_accepted(self):
        self.assertEqual(Triangle((0, 0), (4, 0), (0, 4)), self.t)

    def test_degenerate_construction(self):
        # no check at construction time
        t = Triangle((0, 0), (1, 0), (2, 0))
        self.assertEqual(len(t.points()), 3)
        t = Triangle((1, 1), (1, 1), (1, 1))
        self.assertEqual(len(t.edges()), 3)

    def test_negative_tolerance(self):
        with self.assertRaises(ValueError):
            Triangle((0, 0), (1, 0), (0, 1), tolerance=-1.)

    def test_equality_permutations(self):
        for pts in permutations((self.p1, self.p2, self.p3)):
            other = Triangle(*pts)
            self.assertEqual(self.t, other)
            self.assertEqual(other, self.t)
            self.assertEqual(hash(self.t), hash(other))

    def test_inequality(self):
        self.assertNotEqual(self.t, Triangle(self.p1, self.p2, Point(0, 5)))
        self.assertNotEqual(self.t, Triangle(Point(0, 5), self.p2, self.p3))
        self.assertNotEqual(self.t, (self.p1, self.p2, self.p3))

    def test_equality_symmetric_with_duplicates(self):
        a = Triangle((0, 0), (0, 0), (0, 0))
        b = Triangle((0, 0), (1, 0), (0, 1))
        self.assertNotEqual(a, b)
        self.assertNotEqual(b, a)

    def test_equality_does_not_compute_circumcircle(self):
        other = Triangle(self.p3, self.p1, self.p2)
        self.assertEqual(self.t, other)
        self.assertIsNone(self.t._circumcircle)
        self.assertIsNone(other._circumcircle)

    def test_set_of_triangles(self):
        triangles = random_triangles(20)
        again = [Triangle(t.point_at(2), t.point_at(0), t.point_at(1))
                 for t in triangles]
        self.assertEqual(set(triangles), set(again))

    def test_str(self):
        self.assertEqual(str(self.t), "[(0, 0) (4, 0) (0, 4) ]")
        self.assertEqual(repr(self.t), "Triangle((0, 0), (4, 0), (0, 4))")

    def test_bad_flag(self):
        self.assertFalse(self.t.is_bad)
        self.t.set_bad(True)
        self.assertTrue(self.t.is_bad)
        self.t.is_bad = False
        self.assertFalse(self.t.is_bad)
        self.t.set_bad(1)
        self.assertIs(self.t.is_bad, True)

    def test_bad_flag_not_part_of_equality(self):
        other = Triangle(self.p2, self.p3, self.p1)
        other.set_bad(True)
        self.assertEqual(self.t, other)

    def test_is_ccw(self):
        self.assertTrue(self.t.is_ccw)
        self.assertFalse(Triangle(self.p1, self.p3, self.p2).is_ccw)

    def test_copy(self):
        self.t.set_bad(True)
        center, radius = self.t.circumcircle()
        other = self.t.copy()
        self.assertIsNot(other, self.t)
        self.assertEqual(other, self.t)
        self.assertEqual(other.points(), self.t.points())
        self.assertTrue(other.is_bad)
        self.assertEqual(other.circumcircle(), (center, radius))
        self.assertEqual(other.tolerance, self.t.tolerance)
        # flags are independent afterwards
        other.set_bad(False)
        self.assertTrue(self.t.is_bad)

    def test_copy_module(self):
        other = copy.copy(self.t)
        self.assertIsInstance(other, Triangle)
        self.assertEqual(other.points(), self.t.points())


if __name__ == "__main__":
    unittest.main()
