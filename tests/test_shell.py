"""
Tests for lattice and hypercube shell enumeration.
"""

import itertools
import pytest
from space_divisor.spatial.shell import enumerate_n_dimensional_space, hypercube_shell


def brute_force_shell(dim, k):
    return {
        c for c in itertools.product(range(k), repeat=dim)
        if any(x == 0 or x == k - 1 for x in c)
    }


def test_enumerate_order_dimension_zero_fastest():
    """Odometer counts with dimension 0 as the fastest digit."""
    result = list(enumerate_n_dimensional_space(2, 3))
    assert result == [
        (0, 0), (1, 0), (2, 0),
        (0, 1), (1, 1), (2, 1),
        (0, 2), (1, 2), (2, 2),
    ]


@pytest.mark.parametrize("dim,k", [(1, 5), (2, 4), (3, 3), (4, 2), (3, 1)])
def test_enumerate_covers_whole_space(dim, k):
    result = list(enumerate_n_dimensional_space(dim, k))
    assert len(result) == k ** dim
    assert set(result) == set(itertools.product(range(k), repeat=dim))


def test_enumerate_degenerate():
    assert list(enumerate_n_dimensional_space(0, 5)) == [()]
    assert list(enumerate_n_dimensional_space(3, 0)) == []


def test_shell_1d():
    """One-dimensional shell is the two endpoints."""
    assert list(hypercube_shell(1, 5)) == [(0,), (4,)]


def test_shell_2d_square():
    """Side 4 square has 12 border cells and no interior ones."""
    result = list(hypercube_shell(2, 4))
    assert len(result) == 12
    assert (1, 1) not in result
    assert (2, 2) not in result
    assert set(result) == brute_force_shell(2, 4)


@pytest.mark.parametrize("dim", [1, 2, 3, 4])
@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_shell_matches_brute_force(dim, k):
    """Shell has exactly the surface cells, each once."""
    result = list(hypercube_shell(dim, k))
    assert len(result) == len(set(result))
    assert set(result) == brute_force_shell(dim, k)


def test_shell_caps_come_first_and_last():
    """Output is the last=0 cap, the band, then the last=k-1 cap."""
    k = 5
    result = list(hypercube_shell(3, k))
    cap = k ** 2
    assert all(c[-1] == 0 for c in result[:cap])
    assert all(c[-1] == k - 1 for c in result[-cap:])
    assert all(1 <= c[-1] <= k - 2 for c in result[cap:-cap])


def test_shell_is_lazy():
    """Taking the first cell does not enumerate the rest."""
    shell = hypercube_shell(6, 101)
    assert next(shell) == (0, 0, 0, 0, 0, 0)


def test_shell_empty_for_nonpositive_side():
    assert list(hypercube_shell(3, 0)) == []
    assert list(hypercube_shell(2, -1)) == []
