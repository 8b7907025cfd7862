"""
Shared fixtures for the cell grid tests.
"""

from cellgrid.types import Edge, edges_from_coords


# 4 verticals at x=0,100,200,300 spanning y=0..500 and 6 horizontals
GRID_SEGMENTS = [
    [  0, 500, 300, 500],
    [300,   0, 300, 500],
    [  0,   0, 300,   0],
    [  0,   0,   0, 500],
    [100,   0, 100, 500],
    [200,   0, 200, 500],
    [200, 400, 300, 400],
    [100, 300, 300, 300],
    [200, 200, 300, 200],
    [200, 100, 300, 100],
]

GRID_FRAGMENTS = [
    [  0,   0,   0, 500], [  0, 500, 100, 500],
    [200,   0, 300,   0], [300, 400, 300, 500],
    [100, 300, 100, 500], [300,   0, 300, 100],
    [  0,   0, 100,   0], [100,   0, 200,   0],
    [100,   0, 100, 300], [100, 500, 200, 500],
    [200, 500, 300, 500], [200,   0, 200, 100],
    [200, 100, 200, 200], [200, 100, 300, 100],
    [300, 300, 300, 400], [200, 400, 300, 400],
    [200, 400, 200, 500], [200, 200, 300, 200],
    [300, 100, 300, 200], [300, 200, 300, 300],
    [100, 300, 200, 300], [200, 300, 300, 300],
    [200, 200, 200, 300], [200, 300, 200, 400],
]

GRID_CELLS = [
    (  0,   0, 100, 500),
    (100,   0, 200, 300),
    (100, 300, 200, 500),
    (200,   0, 300, 100),
    (200, 100, 300, 200),
    (200, 200, 300, 300),
    (200, 300, 300, 400),
    (200, 400, 300, 500),
]


def grid_edges():
    return edges_from_coords(GRID_SEGMENTS)


def rounded(edge: Edge, ndigits: int = 6):
    """Edge as a tuple of rounded coordinates"""
    return tuple(round(v, ndigits) + 0.0 for v in edge.as_tuple())


def rounded_set(edges, ndigits: int = 6):
    return {rounded(e, ndigits) for e in edges}


def rect_tuple(rect, ndigits: int = 6):
    """(left, bottom, right, top) rounded"""
    return tuple(round(v, ndigits) + 0.0 for v in (rect.left, rect.bottom, rect.right, rect.top))
