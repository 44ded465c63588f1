"""circumtri - Triangles with their circumscribed circle, for incremental
Delaunay triangulation (pure Python)
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from circumtri.geometry import Point, Edge, distance, rotate
from circumtri.triangle import Triangle, DegenerateTriangleError

__all__ = ("Point", "Edge", "distance", "rotate",
           "Triangle", "DegenerateTriangleError")
