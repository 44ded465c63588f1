'''
Created on Oct 12, 2026

@author: martijn
'''
import logging
import sys
from math import sqrt, isfinite

from circumtri.geometry import Point, Edge, as_point, distance, rotate
from circumtri.preds import orient2d

DEFAULT_TOLERANCE = 1e-6
EPSILON = sys.float_info.epsilon


class DegenerateTriangleError(ValueError):
    """Raised when a triangle has no (finite) circumscribed circle,
    i.e. its points are (nearly) collinear or coincide.
    """

    def __init__(self, points):
        super(DegenerateTriangleError, self).__init__(
            "Degenerate triangle, no circumcircle: [{}]".format(
                "".join("{} ".format(pt) for pt in points)))
        self.points = tuple(points)


# ------------------------------------------------------------------------------
# Circumscribed circle
#

def _distances(center, points):
    return [distance(center, pt) for pt in points]


def _variance(values):
    mean = sum(values) / len(values)
    return sum((v - mean) * (v - mean) for v in values) / len(values)


def min_relative_height(tolerance=DEFAULT_TOLERANCE):
    """Smallest ratio of height to longest side for which a circumcircle is
    given.

    The edge lengths of flatter triangles carry too little of their height
    in floating point: the radius then has a relative error of about
    EPSILON / (2 * ratio ** 2). The ratio returned keeps this error below
    half the tolerance (a tolerance smaller than DEFAULT_TOLERANCE is
    treated as DEFAULT_TOLERANCE).
    """
    return sqrt(EPSILON / max(tolerance, DEFAULT_TOLERANCE))


def calculate_circumcircle(points, edges, tolerance=DEFAULT_TOLERANCE):
    """Calculate center and radius of the circle through the 3 points.

    The edges are expected in the order (p1, p2), (p2, p3), (p3, p1).

    The radius follows from the edge lengths and the area (Heron's formula).
    The center lies on the perpendicular bisector of the first edge, at
    distance sqrt(|d^2 - r^2|) from its midpoint, either side. Of
    the two, the one with the least variance of its distances to the 3
    points is the center; the spread of these distances should be within
    tolerance (relative to the radius, at least DEFAULT_TOLERANCE).

    Everything is computed in floating point, regardless the type of the
    coordinates.

    Returns (center, radius), raises DegenerateTriangleError for collinear
    or coinciding points, for triangles flatter than
    min_relative_height(tolerance) and when no equidistant center is found.
    """
    p1, p2, p3 = points
    e1, e2, e3 = edges
    det = orient2d(p1, p2, p3)
    if det == 0:
        logging.warning("collinear points, no circumcircle for "
                        "{} {} {}".format(p1, p2, p3))
        raise DegenerateTriangleError(points)

    midpoint_ab = e1.midpoint()
    length_a = float(e1.length())
    length_b = float(e2.length())
    length_c = float(e3.length())
    d = distance(p1, midpoint_ab)

    la, lb, lc = sorted((length_a, length_b, length_c), reverse=True)
    # twice the area over the longest side squared: height / longest side
    if abs(det) < min_relative_height(tolerance) * la * la:
        logging.warning("nearly collinear points, no circumcircle for "
                        "{} {} {}".format(p1, p2, p3))
        raise DegenerateTriangleError(points)

    # area using Heron's formula, with the sides sorted (la >= lb >= lc)
    # and the terms arranged so that needle-like triangles keep precision
    radicand = (la + (lb + lc)) * (lc - (la - lb)) * \
        (lc + (la - lb)) * (la + (lb - lc))
    if not radicand > 0.0:
        logging.warning("zero area, no circumcircle for "
                        "{} {} {}".format(p1, p2, p3))
        raise DegenerateTriangleError(points)
    k = 0.25 * sqrt(radicand)
    radius = (length_a * length_b * length_c) / (4.0 * k)
    if not isfinite(radius):
        logging.warning("infinite radius, no circumcircle for "
                        "{} {} {}".format(p1, p2, p3))
        raise DegenerateTriangleError(points)

    # distance from midpoint of first edge to the center
    length_om = sqrt(abs(d * d - radius * radius))
    # perpendicular bisector direction (-90 degrees, cw)
    rotated_ab = rotate(e1, -90.0)
    scaling = length_om / rotated_ab.length()
    mo = rotated_ab.direction() * scaling

    candidates = (midpoint_ab + mo, midpoint_ab - mo)
    center = min(candidates, key=lambda c: _variance(_distances(c, points)))
    dists = _distances(center, points)
    if max(dists) - min(dists) > max(tolerance, DEFAULT_TOLERANCE) * radius:
        logging.warning("no equidistant center, no circumcircle for "
                        "{} {} {}".format(p1, p2, p3))
        raise DegenerateTriangleError(points)
    center = Point(float(center.x), float(center.y))
    logging.debug(" circumcircle center {} radius {}".format(center, radius))
    return center, radius


# ------------------------------------------------------------------------------
# Triangle
#

class Triangle(object):
    """Triangle with 3 points, in the order they were given (no orientation
    is enforced), and the 3 edges (p1, p2), (p2, p3), (p3, p1).

    The circumscribed circle is calculated when first asked for and kept
    afterwards. The *is_bad* flag is not used by the triangle itself, it is
    there for an inserting algorithm to mark the triangle for removal.
    """

    __slots__ = ('_points', '_edges', '_circumcircle', '_tolerance', 'is_bad')

    def __init__(self, p1, p2, p3, tolerance=DEFAULT_TOLERANCE):
        if tolerance < 0:
            raise ValueError("tolerance should be non-negative, "
                             "got: {}".format(tolerance))
        p1, p2, p3 = as_point(p1), as_point(p2), as_point(p3)
        self._points = (p1, p2, p3)
        self._edges = (Edge(p1, p2), Edge(p2, p3), Edge(p3, p1))
        self._circumcircle = None
        self._tolerance = float(tolerance)
        self.is_bad = False

    def __str__(self):
        return "[{}]".format("".join("{} ".format(pt) for pt in self._points))

    def __repr__(self):
        return "Triangle({0}, {1}, {2})".format(*self._points)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return set(self._points) == set(other._points)

    def __hash__(self):
        return hash(frozenset(self._points))

    def copy(self):
        """Independent copy, with circumcircle (if known) and bad flag"""
        other = Triangle(*self._points, tolerance=self._tolerance)
        other._circumcircle = self._circumcircle
        other.is_bad = self.is_bad
        return other

    __copy__ = copy

    @property
    def tolerance(self):
        return self._tolerance

    @property
    def is_ccw(self):
        return orient2d(self._points[0],
                        self._points[1],
                        self._points[2]) > 0.

    def points(self):
        return self._points

    def edges(self):
        return self._edges

    def point_at(self, index):
        assert 0 <= index < 3, "No such point: {}".format(index)
        return self._points[index]

    def edge_at(self, index):
        assert 0 <= index < 3, "No such edge: {}".format(index)
        return self._edges[index]

    def set_bad(self, is_bad):
        self.is_bad = bool(is_bad)

    def circumcircle(self):
        """Returns (center, radius) of the circumscribed circle"""
        if self._circumcircle is None:
            self._circumcircle = calculate_circumcircle(self._points,
                                                        self._edges,
                                                        self._tolerance)
        return self._circumcircle

    def circumcircle_contains(self, point):
        """Whether point lies inside or on the circumscribed circle.

        The boundary is widened by the tolerance, relative to the radius:
        a point counts as contained when its distance to the center is at
        most radius * (1 + tolerance), so that the triangle's own vertices
        are contained despite rounding. Construct the triangle with
        tolerance=0 for the exact test distance <= radius.
        """
        center, radius = self.circumcircle()
        return distance(as_point(point), center) <= \
            radius + self._tolerance * radius


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    t = Triangle((0, 0), (4, 0), (0, 4))
    logging.debug(t)
    logging.debug(t.circumcircle())
    logging.debug(t.circumcircle_contains((1, 1)))
