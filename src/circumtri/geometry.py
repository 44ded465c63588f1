'''
Created on Oct 12, 2026

@author: martijn
'''
from math import hypot, radians, cos, sin

# ------------------------------------------------------------------------------
# Points
#


class Point(object):
    """A point in the plane.

    The coordinates can be of any numeric type; the point does not convert
    them. Points are immutable and compare by exact equality of both
    ordinates.
    """
    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __str__(self):
        return "({0}, {1})".format(self._x, self._y)

    def __repr__(self):
        return "Point({0!r}, {1!r})".format(self._x, self._y)

    def __getitem__(self, i):
        if i == 0:
            return self._x
        elif i == 1:
            return self._y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __add__(self, other):
        return Point(self._x + other.x, self._y + other.y)

    def __sub__(self, other):
        return Point(self._x - other.x, self._y - other.y)

    def __mul__(self, factor):
        return Point(self._x * factor, self._y * factor)

    __rmul__ = __mul__


def as_point(obj):
    """Returns obj as Point (2-tuples and other sequences are converted)"""
    if isinstance(obj, Point):
        return obj
    x, y = obj
    return Point(x, y)


def distance(p1, p2):
    """Cartesian distance between two points (as float)"""
    return hypot(float(p1[0]) - float(p2[0]), float(p1[1]) - float(p2[1]))


# ------------------------------------------------------------------------------
# Edges
#


class Edge(object):
    """A directed segment, from start to end"""
    __slots__ = ('_start', '_end')

    def __init__(self, start, end):
        self._start = as_point(start)
        self._end = as_point(end)

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    def __str__(self):
        return "LINESTRING({0[0]} {0[1]}, {1[0]} {1[1]})".format(
            self._start, self._end)

    def __repr__(self):
        return "Edge({0!r}, {1!r})".format(self._start, self._end)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((self._start, self._end))

    def midpoint(self):
        """Point halfway the edge (float ordinates)"""
        return Point((float(self._start.x) + float(self._end.x)) * .5,
                     (float(self._start.y) + float(self._end.y)) * .5)

    def length(self):
        return distance(self._start, self._end)

    def direction(self):
        """Vector from start to end (as Point)"""
        return self._end - self._start


def rotate(edge, degrees):
    """Rotate an edge about its start point.

    Positive angles turn counter-clockwise. The returned edge has the same
    start and the same length as the input edge; its ordinates are floats.
    """
    angle = radians(degrees)
    c, s = cos(angle), sin(angle)
    dx, dy = edge.direction()
    dx, dy = float(dx), float(dy)
    start = Point(float(edge.start.x), float(edge.start.y))
    return Edge(start,
                Point(start.x + dx * c - dy * s,
                      start.y + dx * s + dy * c))
