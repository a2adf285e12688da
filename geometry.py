import numpy as np

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float


class Orientation(Enum):
    RIGHT_TURN = 'right_turn'
    STRAIGHT_BACK = 'straight_back'
    STRAIGHT_FORWARD = 'straight_forward'
    LEFT_TURN = 'left_turn'

    @property
    def right_turn(self) -> bool:
        # going straight through the middle point counts as a right turn
        return self in (Orientation.RIGHT_TURN, Orientation.STRAIGHT_BACK)

    @property
    def collinear(self) -> bool:
        return self in (Orientation.STRAIGHT_BACK, Orientation.STRAIGHT_FORWARD)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def dot(o: Point, a: Point, b: Point) -> float:
    """
    Dot product of segments oa and ob.
    """
    return (a.x - o.x) * (b.x - o.x) + (a.y - o.y) * (b.y - o.y)


def classify(p1: Point, p2: Point, p3: Point) -> Orientation:
    """
    Classify the turn made when travelling p1 -> p2 -> p3.

    With a = p1 - p2 and b = p3 - p2, a positive determinant of (a, b)
    is a right turn and a negative one is a left turn. For a zero
    determinant the dot product tells apart passing straight through p2
    (p1 and p3 on opposite sides, treated as a right turn) from doubling
    back on the same ray (treated as a left turn). Zero-length segments
    have a zero dot product and fall into the second case.
    """
    determinant = cross(p2, p1, p3)
    if determinant > 0:
        return Orientation.RIGHT_TURN
    if determinant < 0:
        return Orientation.LEFT_TURN
    if dot(p2, p1, p3) < 0:
        return Orientation.STRAIGHT_BACK
    return Orientation.STRAIGHT_FORWARD


def to_points(xs, ys) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def to_array(points: list[Point]) -> np.ndarray:
    """
    Pack points into a float array of shape (n, 2).
    """
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def convex_hull_andrew(points: list[Point]) -> list[Point]:
        """
        Andrew's monotone chain algorithm for convex hull.
        Collinear points on hull edges are kept. Points are returned
        in clockwise order starting from the smallest one.
        Time complexity: O(n*log(n)).
        """
        points = sorted(set(points))
        if len(points) <= 2:
            return points

        lower = []  # lower hull
        for p in points:
            while len(lower) >= 2 and cross(lower[-2], lower[-1], p) < 0:
                lower.pop()
            lower.append(p)

        upper = []  # upper hull
        for p in reversed(points):
            while len(upper) >= 2 and cross(upper[-2], upper[-1], p) < 0:
                upper.pop()
            upper.append(p)

        # all points on one line: both chains hold the whole segment
        if len(lower) == len(points) and len(upper) == len(points):
            return [points[0], points[-1]]

        # counterclockwise chain, reversed to match the gift-wrapping order
        ccw = lower[:-1] + upper[:-1]
        return [ccw[0]] + ccw[:0:-1]
