import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        ax = plt.gca()
    ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the hull as a closed polygon through its points in traversal order,
    marking the starting point.
    """
    if ax is None:
        ax = plt.gca()
    if len(hull) == 0:
        return

    closed = hull + [hull[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color)
    ax.scatter([p.x for p in hull], [p.y for p in hull], c=color, s=12)
    ax.scatter([hull[0].x], [hull[0].y], c=color, marker='s', s=36)


def plot_result(points: list[Point], hull: list[Point], title: str | None = None):
    plt.clf()
    ax = plt.gca()
    plot_points(points, ax=ax, s=4, c='b')
    plot_hull(hull, ax=ax)
    if title:
        ax.set_title(title)
    ax.set_aspect('equal', adjustable='datalim')
    plt.grid()
