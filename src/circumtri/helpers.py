'''
Created on Oct 12, 2026

@author: martijn
'''
from math import sqrt, pi, cos, sin
from random import randint, random, uniform

from circumtri.geometry import Point
from circumtri.preds import orient2d
from circumtri.triangle import Triangle, DEFAULT_TOLERANCE
# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#


def random_sorted_points(n=10):
    """Returns a list with at most n random points on a grid in [0, 1]^2,
    without duplicates, sorted on x, y
    """
    W = float(n)
    vertices = set()
    for _ in range(n):
        x = randint(0, n)
        y = randint(0, n)
        vertices.add((x / W, y / W))
    return [Point(x, y) for (x, y) in sorted(vertices)]


def random_circle_points(n=10, cx=0, cy=0):
    """Returns a list with n random points, uniformly distributed over the
    disk with radius 1 around (cx, cy)
    """
    # polar coordinates; the square root of the radius keeps the density
    # uniform over the area
    polar = [(sqrt(random()), uniform(0., 2. * pi)) for _ in range(n)]
    return [Point(cx + r * cos(angle), cy + r * sin(angle))
            for (r, angle) in polar]


def random_triangles(n=10, cx=0, cy=0, min_area=1e-3,
                     tolerance=DEFAULT_TOLERANCE):
    """Returns a list with n triangles, with points taken randomly from a
    unit circle around (cx, cy).

    Triangles of which the area is less than min_area are rejected (so that
    no degenerate triangle is returned).
    """
    triangles = []
    while len(triangles) < n:
        p1, p2, p3 = random_circle_points(3, cx, cy)
        if abs(orient2d(p1, p2, p3)) * 0.5 < min_area:
            continue
        triangles.append(Triangle(p1, p2, p3, tolerance))
    return triangles
