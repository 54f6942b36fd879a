"""
Enumeration of integer lattice points inside and on the surface of a
hypercube.

Both generators yield coordinates as tuples, lazily, so a consumer that
stops early does not pay for the rest of the enumeration.
"""

from typing import Iterator, Tuple

Coordinate = Tuple[int, ...]


def enumerate_n_dimensional_space(dim: int, k: int) -> Iterator[Coordinate]:
    """
    Enumerate every point of ``[0, k)^dim``.

    Counts like an odometer in base ``k`` with dimension 0 as the fastest
    digit, so for ``dim=2, k=10`` the output is ``(0, 0), (1, 0), ...,
    (9, 0), (0, 1), ..., (9, 9)``. This is the same order as the flat
    mixed-radix cell index ``sum(c[i] * k**i)``.

    Parameters
    ----------
    dim : int
        Number of axes
    k : int
        Number of values per axis

    Yields
    ------
    coordinate : tuple of int
        Points in increasing flat-index order
    """
    if k <= 0:
        return
    index = [0] * dim
    yield tuple(index)
    while dim > 0:
        i = 0
        index[0] += 1
        while index[i] >= k:
            if i + 1 >= dim:
                return
            index[i] = 0
            i += 1
            index[i] += 1
        yield tuple(index)


def hypercube_shell(dim: int, k: int) -> Iterator[Coordinate]:
    """
    Enumerate the surface cells of a ``dim``-dimensional cube of side ``k``.

    A cell ``c`` in ``[0, k)^dim`` is on the surface when at least one
    component equals ``0`` or ``k - 1``. Every surface cell is yielded
    exactly once, and interior cells are never visited, so the cost is
    proportional to the shell size rather than ``k**dim``.

    Example for ``dim=2, k=4``::

        # # # #
        # . . #
        # . . #
        # # # #

    Parameters
    ----------
    dim : int
        Number of axes (>= 1)
    k : int
        Side length of the cube in cells

    Yields
    ------
    coordinate : tuple of int
        Surface cells: the ``last = 0`` cap, then the band
        ``1 <= last <= k - 2``, then the ``last = k - 1`` cap
    """
    if k <= 0:
        return
    if k == 1:
        yield (0,) * dim
        return

    if dim == 1:
        yield (0,)
        yield (k - 1,)
        return

    for c in enumerate_n_dimensional_space(dim - 1, k):
        yield c + (0,)

    for c in hypercube_shell(dim - 1, k):
        for last in range(1, k - 1):
            yield c + (last,)

    for c in enumerate_n_dimensional_space(dim - 1, k):
        yield c + (k - 1,)
