"""Neighbourhood of cells on the staggered hexagonal grid.

Odd rows are shifted half a cell to the right of even rows.
"""

from __future__ import annotations

from aigames.core.point2d import Point2D


def _odd_row(p: Point2D) -> bool:
    return p.y % 2 != 0


def east(p: Point2D) -> Point2D:
    return Point2D(p.x + 1, p.y)


def west(p: Point2D) -> Point2D:
    return Point2D(p.x - 1, p.y)


def north_east(p: Point2D) -> Point2D:
    if _odd_row(p):
        return Point2D(p.x + 1, p.y - 1)
    return Point2D(p.x, p.y - 1)


def north_west(p: Point2D) -> Point2D:
    if _odd_row(p):
        return Point2D(p.x, p.y - 1)
    return Point2D(p.x - 1, p.y - 1)


def south_east(p: Point2D) -> Point2D:
    if _odd_row(p):
        return Point2D(p.x, p.y + 1)
    return Point2D(p.x - 1, p.y + 1)


def south_west(p: Point2D) -> Point2D:
    if _odd_row(p):
        return Point2D(p.x + 1, p.y + 1)
    return Point2D(p.x, p.y + 1)


def neighbors(p: Point2D) -> list[Point2D]:
    """The six cells around ``p``: NE, NW, E, W, SW, SE."""
    return [
        north_east(p),
        north_west(p),
        east(p),
        west(p),
        south_west(p),
        south_east(p),
    ]


def is_neighbor(p1: Point2D, p2: Point2D) -> bool:
    return p2 in neighbors(p1)