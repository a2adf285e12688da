"""
Gift-wrapping (Jarvis march) convex hull of a planar point set.

The walk starts at the leftmost point and repeatedly sweeps all points
to find the next hull vertex, keeping the candidate that every other point
lies clockwise of. Hull points come out clockwise (y axis pointing up),
with collinear points on hull edges kept in walking order. Input made of
points on a single line is reduced to the two ends of the segment.
"""

import logging

import numpy as np

from geometry import Point, classify, to_array, to_points

logger = logging.getLogger(__name__)

# seed of the initial candidate draw, reset on every call
DEFAULT_SEED = 10


class InvalidInputError(ValueError):
    pass


class AlgorithmInvariantViolated(RuntimeError):
    pass


def find_leftmost_point(points: list[Point], indices=None) -> int:
    """
    Index of the point with the smallest x, the lowest one among equal x.
    For coincident points the first one met wins.
    """
    if indices is None:
        indices = range(len(points))

    leftmost = None
    for i in indices:
        p = points[i]
        if leftmost is None:
            leftmost = i
            continue
        best = points[leftmost]
        if p.x < best.x or p.x == best.x and p.y < best.y:
            leftmost = i

    if leftmost is None:
        raise InvalidInputError('Cannot find the leftmost point of an empty point set')
    return leftmost


def draw_candidate(rng: np.random.Generator, indices: list[int], exceptions) -> int:
    """
    Draw an index uniformly from `indices`, redrawing until it is not in `exceptions`.
    """
    if all(i in exceptions for i in indices):
        raise InvalidInputError('No points left to draw a candidate from')

    while True:
        candidate = indices[int(rng.integers(len(indices)))]
        if candidate not in exceptions:
            return candidate


def distinct_indices(points: list[Point]) -> list[int]:
    """
    Indices of the first occurrence of every distinct point, in input order.
    """
    first_seen = {}
    for i, p in enumerate(points):
        first_seen.setdefault(p, i)
    return list(first_seen.values())


def resolve_collinear(hull: list[int]) -> list[int]:
    """
    Rebuild the hull of points lying on one line from the raw walk.

    The walk goes out from the anchor to the far end of the segment and
    then starts coming back, possibly skipping points on the way. Only the
    outward part is kept, and of it only the two ends: the interior points
    of a segment are not hull vertices.
    """
    outward = []
    seen = set()
    for index in hull:
        if index in seen:
            break
        seen.add(index)
        outward.append(index)

    if len(outward) == 1:
        return outward
    return [outward[0], outward[-1]]


class JarvisMarch:
    def __init__(self, seed: int | None = DEFAULT_SEED, max_steps: int | None = None):
        self.seed = seed
        self.max_steps = max_steps

    def extend(
        self,
        points: list[Point],
        indices: list[int],
        end: int,
        anchor: int,
        visited: np.ndarray,
        rng: np.random.Generator,
    ) -> tuple[int, bool]:
        """
        Find the hull vertex following `end`.

        Every point is tested against the current candidate and replaces it
        when the candidate turns right on the way end -> point -> candidate.
        Among collinear points, one not yet on the hull is preferred over a
        visited candidate; the anchor counts as not visited so that the walk
        can close.

        Returns the next vertex and whether all examined triplets were collinear.
        """
        candidate = draw_candidate(rng, indices, {end})
        all_collinear = True

        for t in indices:
            if t == candidate or t == end:
                continue

            orientation = classify(points[end], points[t], points[candidate])
            if orientation.right_turn:
                candidate = t
            elif orientation.collinear and visited[candidate] and (t == anchor or not visited[t]):
                candidate = t

            if not orientation.collinear:
                all_collinear = False

        return candidate, all_collinear

    def walk(
        self,
        points: list[Point],
        indices: list[int],
        rng: np.random.Generator,
    ) -> tuple[list[int], bool]:
        """
        Walk around the hull from the leftmost point until a vertex repeats.
        The repeated vertex closing the loop is dropped, so every index
        appears once. Rounding on nearly collinear points can close the
        walk on a vertex other than the anchor; the walk is then kept as is.
        """
        anchor = find_leftmost_point(points, indices)
        logger.debug('Anchoring hull at %s (index %d)', points[anchor], anchor)

        hull = [anchor]
        visited = np.zeros(len(points), dtype=bool)
        visited[anchor] = True
        all_collinear = True

        max_steps = self.max_steps if self.max_steps is not None else len(indices) + 1
        for _ in range(max_steps):
            candidate, step_collinear = self.extend(points, indices, hull[-1], anchor, visited, rng)
            all_collinear = all_collinear and step_collinear
            hull.append(candidate)

            if visited[candidate]:
                logger.debug('Hull closed at index %d after %d vertices', candidate, len(hull) - 1)
                hull.pop()
                if candidate != anchor and not all_collinear:
                    logger.warning(
                        'Hull walk closed on %s instead of the anchor %s, points are nearly collinear',
                        points[candidate], points[anchor],
                    )
                return hull, all_collinear

            visited[candidate] = True

        raise AlgorithmInvariantViolated(
            f'Hull walk did not close after {max_steps} steps'
        )

    def build(self, points: list[Point]) -> list[int]:
        """
        Indices of the hull points of `points`, in clockwise order.
        Time complexity: O(n*h), where h is the number of hull points.
        """
        indices = distinct_indices(points)

        if len(indices) == 0:
            logger.info('No data points to analyse')
            return []
        if len(indices) == 1:
            logger.info('Only one data point to analyse')
            return indices
        if len(indices) == 2:
            logger.info('Only two data points to analyse')
            leftmost = find_leftmost_point(points, indices)
            other = indices[1] if leftmost == indices[0] else indices[0]
            return [leftmost, other]

        rng = np.random.default_rng(self.seed)
        hull, all_collinear = self.walk(points, indices, rng)

        if all_collinear:
            logger.debug('All points are collinear, keeping the segment ends only')
            return resolve_collinear(hull)
        return hull

    def compute_hull(self, points: list[Point]) -> list[Point]:
        return [points[i] for i in self.build(points)]


def _read_coordinates(x, y) -> tuple[np.ndarray, np.ndarray]:
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)

    if xs.ndim != 1 or ys.ndim != 1:
        raise InvalidInputError(
            f'Coordinates must be one-dimensional, got shapes {xs.shape} and {ys.shape}'
        )
    if len(xs) != len(ys):
        raise InvalidInputError(
            f'x and y must have the same length, got {len(xs)} and {len(ys)}'
        )
    if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
        raise InvalidInputError('Coordinates must be finite')
    return xs, ys


def convex_hull(x, y, seed: int | None = DEFAULT_SEED) -> np.ndarray:
    """
    Convex hull of points (x[i], y[i]) as an array of shape (h, 2),
    rows in clockwise traversal order.

    The traversal starts at the leftmost point; among points sharing the
    smallest x it starts at the lowest one, not the first one given.
    """
    xs, ys = _read_coordinates(x, y)
    hull = JarvisMarch(seed=seed).compute_hull(to_points(xs, ys))
    return to_array(hull)


def jarvis_march(x, y, seed: int | None = DEFAULT_SEED) -> np.ndarray:
    """
    x-coordinates of the convex hull of points (x[i], y[i]), in clockwise
    traversal order starting from the lowest of the leftmost points.
    With several points at the smallest x, the first value returned is
    therefore that x, but its point is the lowest one, whatever its
    position in the input.
    """
    return convex_hull(x, y, seed=seed)[:, 0]
