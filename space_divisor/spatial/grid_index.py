"""
Uniform N-dimensional grid index for fast neighbor queries.
"""

import logging
import operator
import threading
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ..core.errors import (
    CellIndexOutOfRangeError,
    DimensionMismatchError,
    EmptyInputError,
    GridClosedError,
    NonFiniteValueError,
)
from ..core.types import Normalizer
from ..params.config import GridParams
from ..params.validation import validate_params
from ..utils.timing import timed_stage
from .shell import enumerate_n_dimensional_space, hypercube_shell

logger = logging.getLogger(__name__)

T = TypeVar("T")
CellIndex = Tuple[int, ...]


def compute_cells_per_axis(size: int, dimensions: int) -> int:
    """
    Smallest ``r >= 1`` with ``r ** dimensions >= size``, i.e.
    ``ceil(size ** (1 / dimensions))`` computed without rounding error.
    """
    r = max(1, int(round(size ** (1.0 / dimensions))))
    while r ** dimensions < size:
        r += 1
    while r > 1 and (r - 1) ** dimensions >= size:
        r -= 1
    return r


class SpaceDivisor(Generic[T]):
    """
    Divides the bounding box of a fixed set of elements into a regular
    lattice of cells so that elements near a point can be found without
    scanning the whole set.

    The number of cells per axis is ``ceil(N ** (1/D))`` so the total cell
    count stays close to the number of elements. Works well when the number
    of dimensions is small and the data is roughly uniformly distributed.

    The grid is built once and is read-only afterwards; concurrent queries
    are safe. Storage is released by :meth:`close` (also called on context
    manager exit and when the object is garbage collected).

    Queries include the query element itself if it is stored in one of the
    visited cells; callers that want to exclude it filter it out.

    Example
    -------
    >>> points = np.random.default_rng(0).uniform(size=(1000, 2))
    >>> with SpaceDivisor(range(1000), lambda i: points[i]) as grid:
    ...     candidates = list(grid.near(42))
    """

    def __init__(
        self,
        data: Iterable[T],
        get_position: Callable[[T], Sequence[float]],
        params: Optional[GridParams] = None,
    ):
        """
        Build the grid. Takes O(N) time.

        Parameters
        ----------
        data : iterable
            Elements to index. A snapshot is taken; later changes to the
            source collection are not seen.
        get_position : callable
            Maps an element to its D-dimensional position
        params : GridParams, optional
            Build parameters

        Raises
        ------
        EmptyInputError
            If ``data`` is empty
        DimensionMismatchError
            If positions have inconsistent or zero length
        NonFiniteValueError
            If a position contains NaN or infinity, or the extent overflows
        ValueError
            If ``params`` fail validation
        """
        self._lock = threading.Lock()
        self._storage: Optional[List[Optional[List[T]]]] = None

        self.params = params if params is not None else GridParams()
        is_valid, problems = validate_params(self.params)
        if not is_valid:
            raise ValueError("Invalid grid parameters: " + "; ".join(problems))
        self._dtype = np.dtype(self.params.dtype)

        self.data: Tuple[T, ...] = tuple(data)
        self.get_position = get_position
        if not self.data:
            raise EmptyInputError(
                "Cannot build a grid from empty data: dimensionality is unknown"
            )

        with timed_stage("extent", logger):
            positions = self._collect_positions()
            self.normalizer = Normalizer.from_positions(
                positions, self.params.resolved_tolerance()
            )
            if not np.all(np.isfinite(self.normalizer.scale)):
                raise NonFiniteValueError(
                    f"Extent of the data overflows: {self.normalizer.scale.tolist()}"
                )

        self.size = len(self.data)
        self.dimensions = int(positions.shape[1])
        self.cells_per_axis = compute_cells_per_axis(self.size, self.dimensions)
        self.cell_count = self.cells_per_axis ** self.dimensions
        self._strides = [self.cells_per_axis ** i for i in range(self.dimensions)]

        with timed_stage("populate", logger):
            self._storage = [None] * self.cell_count
            self._fill_storage(positions)

        logger.debug(
            "Built grid: %d elements, %d dimensions, %d cells per axis",
            self.size, self.dimensions, self.cells_per_axis,
        )

    def _collect_positions(self) -> np.ndarray:
        """Evaluate ``get_position`` once per element into an (N, D) array."""
        rows = []
        dims = None
        for element in self.data:
            p = np.asarray(self.get_position(element), dtype=self._dtype)
            if p.ndim != 1:
                raise DimensionMismatchError(
                    f"Position must be a 1-D vector, got shape {p.shape}"
                )
            if dims is None:
                dims = p.shape[0]
                if dims == 0:
                    raise DimensionMismatchError("Positions must have at least one dimension")
            elif p.shape[0] != dims:
                raise DimensionMismatchError(
                    f"Inconsistent position length: expected {dims}, got {p.shape[0]}"
                )
            if not np.all(np.isfinite(p)):
                raise NonFiniteValueError(
                    f"Position of element {element!r} is not finite: {p.tolist()}"
                )
            rows.append(p)
        return np.stack(rows)

    def _fill_storage(self, positions: np.ndarray) -> None:
        flat = self._coordinates(positions) @ np.asarray(self._strides, dtype=np.int64)
        storage = self._storage
        for element, idx in zip(self.data, flat.tolist()):
            bucket = storage[idx]
            if bucket is None:
                bucket = []
                storage[idx] = bucket
            bucket.append(element)

    def _coordinates(self, v: np.ndarray) -> np.ndarray:
        """Cell coordinates of a vector or (N, D) array, clamped to the grid."""
        scaled = self.normalizer.normalize(v) * self.cells_per_axis
        return np.clip(np.trunc(scaled), 0, self.cells_per_axis - 1).astype(np.int64)

    def _as_vector(self, v: Sequence[float]) -> np.ndarray:
        arr = np.asarray(v, dtype=self._dtype)
        if arr.shape != (self.dimensions,):
            raise DimensionMismatchError(
                f"Vector has shape {arr.shape}, grid has {self.dimensions} dimensions"
            )
        if not np.all(np.isfinite(arr)):
            raise NonFiniteValueError(f"Vector is not finite: {arr.tolist()}")
        return arr

    def _require_storage(self) -> List[Optional[List[T]]]:
        storage = self._storage
        if storage is None:
            raise GridClosedError("Grid storage was released by close()")
        return storage

    def get_normalized(self, v: Sequence[float]) -> np.ndarray:
        """
        Normalize ``v`` with respect to the indexed data.

        Every position used at construction maps into ``[0, 1]^D``. Other
        vectors may fall outside that range.
        """
        return self.normalizer.normalize(self._as_vector(v))

    def get_index(self, v: Sequence[float]) -> CellIndex:
        """Coordinate of the cell that contains ``v``, clamped to the grid."""
        return tuple(int(c) for c in self._coordinates(self._as_vector(v)))

    def _flat_index(self, index: Sequence[int]) -> int:
        """Validating coordinate to flat index conversion."""
        if len(index) != self.dimensions:
            raise DimensionMismatchError(
                f"Index has {len(index)} dimensions, grid has {self.dimensions}"
            )
        flat = 0
        for c, stride in zip(index, self._strides):
            c = operator.index(c)
            if c < 0 or c >= self.cells_per_axis:
                raise CellIndexOutOfRangeError(
                    f"Index component {c} outside [0, {self.cells_per_axis})"
                )
            flat += c * stride
        return flat

    def _fast_read(self, index: Sequence[int]) -> Optional[List[T]]:
        """Bucket at ``index``, or None when empty or off the grid."""
        flat = 0
        for c, stride in zip(index, self._strides):
            if c < 0 or c >= self.cells_per_axis:
                return None
            flat += c * stride
        return self._require_storage()[flat]

    def cell(self, index: Sequence[int]) -> Tuple[T, ...]:
        """
        Elements stored in the cell at ``index``.

        Raises
        ------
        DimensionMismatchError
            If ``len(index)`` differs from the grid dimensions
        CellIndexOutOfRangeError
            If a component is outside ``[0, cells_per_axis)``
        """
        storage = self._require_storage()
        bucket = storage[self._flat_index(index)]
        return tuple(bucket) if bucket is not None else ()

    def __getitem__(self, index) -> Tuple[T, ...]:
        if isinstance(index, (int, np.integer)):
            index = (index,)
        return self.cell(index)

    def cell_of(self, element: T) -> Tuple[T, ...]:
        """Elements stored in the same cell as ``element``."""
        return self.cell_at(self.get_position(element))

    def cell_at(self, v: Sequence[float]) -> Tuple[T, ...]:
        """Elements stored in the cell containing ``v``."""
        return self.cell(self.get_index(v))

    def near(self, element: T) -> Iterator[T]:
        """Cross neighborhood of ``element``, see :meth:`near_position`."""
        return self.near_position(self.get_position(element))

    def near_position(self, v: Sequence[float]) -> Iterator[T]:
        """
        Elements from the cell containing ``v`` and from the cells that
        differ from it by one along exactly one axis.

        In 2-D, for center ``[2, 2]`` this visits ``[2, 2], [3, 2], [1, 2],
        [2, 3], [2, 1]`` (a cross). Off-grid neighbors are skipped. The
        result is lazy and unordered.
        """
        self._require_storage()
        return self._iter_cross(list(self.get_index(v)))

    def _iter_cross(self, index: List[int]) -> Iterator[T]:
        yield from self._fast_read(index) or ()
        for axis in range(self.dimensions):
            original = index[axis]
            for step in (1, -1):
                index[axis] = original + step
                yield from self._fast_read(index) or ()
            index[axis] = original

    def expanded_near(self, element: T, radius: int = 1) -> Iterator[T]:
        """Shell neighborhood of ``element``, see :meth:`expanded_near_position`."""
        return self.expanded_near_position(self.get_position(element), radius)

    def expanded_near_position(self, v: Sequence[float], radius: int = 1) -> Iterator[T]:
        """
        Elements from the cells at exactly Chebyshev distance ``radius``
        from the cell containing ``v``.

        ``radius=0`` gives the cell itself. Each larger radius gives the
        hollow shell around the previous ones, so searching outward with
        ``radius = 0, 1, 2, ...`` never revisits a cell, and every element
        returned for a radius lies in a farther cell than any element
        returned for a smaller one. Negative radii give nothing.

        Parameters
        ----------
        v : sequence of float
            Query position
        radius : int
            Chebyshev distance in cells

        Returns
        -------
        elements : iterator
            Lazy, unordered elements; cells off the grid are skipped
        """
        radius = operator.index(radius)
        self._require_storage()
        return self._iter_shell(self.get_index(v), radius)

    def _iter_shell(self, center: CellIndex, radius: int) -> Iterator[T]:
        if radius < 0:
            return
        if radius == 0:
            yield from self._fast_read(center) or ()
            return
        for offset in hypercube_shell(self.dimensions, 2 * radius + 1):
            index = [c + o - radius for c, o in zip(center, offset)]
            yield from self._fast_read(index) or ()

    def occupied_cells(self) -> Iterator[Tuple[CellIndex, Tuple[T, ...]]]:
        """Yield ``(index, elements)`` for every non-empty cell in flat-index order."""
        storage = self._require_storage()
        cells = enumerate_n_dimensional_space(self.dimensions, self.cells_per_axis)
        return (
            (index, tuple(bucket))
            for index, bucket in zip(cells, storage)
            if bucket is not None
        )

    @property
    def closed(self) -> bool:
        return self._storage is None

    def close(self) -> None:
        """Release the cell storage. Safe to call more than once."""
        with self._lock:
            if self._storage is None:
                return
            self._storage = None
        logger.debug("Released grid storage")

    def __enter__(self) -> "SpaceDivisor[T]":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __del__(self):
        if getattr(self, "_lock", None) is not None:
            self.close()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return (
            f"SpaceDivisor(size={self.size}, dimensions={self.dimensions}, "
            f"cells_per_axis={self.cells_per_axis}, {state})"
        )
