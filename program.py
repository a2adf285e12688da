import argparse
import logging
import os
import sys
import time

import matplotlib.pyplot as plt
import numpy as np

from geometry import Point, to_points
from jarvis_march import DEFAULT_SEED, InvalidInputError, JarvisMarch, jarvis_march
from visualization import plot_result

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ('uniform', 'circle', 'gaussian', 'clusters')


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file.

    Either the point count on the first line followed by one `x y` pair
    per line, or plain two-column rows separated by whitespace or commas.
    """
    with open(filename, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f if line.strip()]

    if not lines:
        return []

    header = lines[0].replace(',', ' ').split()
    if len(header) == 1:
        try:
            n = int(header[0])
        except ValueError as e:
            raise InvalidInputError(f'{filename}: bad point count {header[0]!r}') from e
        rows = lines[1:n + 1]
        if len(rows) < n:
            raise InvalidInputError(f'{filename}: expected {n} points, found {len(rows)}')
    else:
        rows = lines

    if not rows:
        return []

    try:
        data = np.loadtxt(
            [row.replace(',', ' ') for row in rows],
            dtype=float,
            ndmin=2,
        )
    except ValueError as e:
        raise InvalidInputError(f'{filename}: {e}') from e

    if data.shape[1] != 2:
        raise InvalidInputError(f'{filename}: expected 2 columns, found {data.shape[1]}')
    return to_points(data[:, 0], data[:, 1])


def generate_random_points(n: int, distribution: str, seed: int = 42) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == 'uniform':
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == 'circle':
        angle = rng.uniform(0, 2 * np.pi, n)
        r = rng.uniform(0, 500, n) ** 0.5
        xs = 500 + r * np.cos(angle)
        ys = 500 + r * np.sin(angle)
    elif distribution == 'gaussian':
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == 'clusters':
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = np.arange(n) % n_clusters
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)
    else:
        raise InvalidInputError(f'Unknown distribution: {distribution}')

    return to_points(xs, ys)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Convex hull of a planar point set by gift wrapping (Jarvis march).'
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('filename', nargs='?', help='point file: "n" header and "x y" rows, or plain x,y rows')
    source.add_argument('--generate', type=int, metavar='N', help='generate N random points instead of reading a file')
    parser.add_argument('--distribution', choices=DISTRIBUTIONS, default='uniform')
    parser.add_argument('--points-seed', type=int, default=42, help='seed for generated points')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='seed for the initial candidate draw')
    parser.add_argument('--x-only', action='store_true', help='print only the x-coordinates of the hull')
    parser.add_argument('--plot', action='store_true', help='show the points and their hull')
    parser.add_argument('--output', help='save the plot to this file instead of showing it')
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)
    if args.x_only and (args.plot or args.output):
        parser.error('--x-only cannot be combined with --plot or --output')
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        if args.generate is not None:
            points = generate_random_points(args.generate, args.distribution, seed=args.points_seed)
            source = f'generated_{args.distribution}_{args.generate}'
        else:
            points = load_points(args.filename)
            source = os.path.basename(args.filename)
        logger.info('Loaded %d points from %s', len(points), source)

        start_time = time.time()
        if args.x_only:
            hull_x = jarvis_march([p.x for p in points], [p.y for p in points], seed=args.seed)
            hull = None
        else:
            hull = JarvisMarch(seed=args.seed).compute_hull(points)
        logger.info('Hull computed in %.4f s', time.time() - start_time)
    except (InvalidInputError, OSError) as e:
        logger.error('%s', e)
        return 1

    if hull is None:
        for x in hull_x:
            print(f'{x:g}')
        return 0

    for p in hull:
        print(f'{p.x:g} {p.y:g}')

    if args.plot or args.output:
        plot_result(points, hull, title=f'{source}: {len(hull)} of {len(points)} points on hull')
        if args.output:
            plt.savefig(args.output)
        else:
            plt.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
