"""
Basic example: nearest neighbor search with expanding shells.
"""

import logging

import numpy as np
from space_divisor import SpaceDivisor, compute_occupancy


def nearest(grid, points, i):
    """
    Index of the point closest to ``points[i]``.

    Shells are searched outward until a candidate is found. One more shell
    is then checked, since a point in the next ring of cells can still be
    closer in Euclidean distance. Points further out are not considered, so
    the answer is approximate in rare cases.
    """
    best, best_dist = None, np.inf
    found_at = None
    for radius in range(grid.cells_per_axis):
        for j in grid.expanded_near(i, radius):
            if j == i:
                continue
            dist = np.linalg.norm(points[j] - points[i])
            if dist < best_dist:
                best, best_dist = j, dist
        if best is not None and found_at is None:
            found_at = radius
        if found_at is not None and radius > found_at:
            break
    return best, best_dist


def main():
    logging.basicConfig(level=logging.DEBUG)

    rng = np.random.default_rng(42)
    points = rng.uniform(-1.5, 0.5, size=(5000, 2))

    with SpaceDivisor(range(len(points)), lambda i: points[i]) as grid:
        print(grid)
        print("occupancy:", compute_occupancy(grid).to_dict())

        for i in (0, 1, 2):
            j, dist = nearest(grid, points, i)
            brute = np.linalg.norm(points - points[i], axis=1)
            brute[i] = np.inf
            print(f"point {i}: nearest {j} at {dist:.5f} (brute force {int(np.argmin(brute))})")


if __name__ == "__main__":
    main()
