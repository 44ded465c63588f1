'''
Created on Oct 12, 2026

@author: martijn
'''
from geompreds import orient2d as _orient2d, incircle as _incircle


def _xy(pt):
    return (float(pt[0]), float(pt[1]))


def orient2d(pa, pb, pc):
    """Direction from pa to pc, via pb, where returned value is as follows:

    left:     + [ = ccw ]
    straight: 0.
    right:    - [ = cw ]

    returns twice signed area under triangle pa, pb, pc
    """
    return _orient2d(_xy(pa), _xy(pb), _xy(pc))


def incircle(pa, pb, pc, pd):
    """Tests whether pd is in circle defined by the 3 points pa, pb and pc
    (positive when inside, for pa, pb, pc in ccw order)
    """
    return _incircle(_xy(pa), _xy(pb), _xy(pc), _xy(pd))
