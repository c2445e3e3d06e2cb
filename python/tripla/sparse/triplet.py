import operator
from typing import NamedTuple, Union

import numpy as np

from ..errors import InvalidDimension, InvalidTriplet
from .base import SparseMatrix

_NUMERIC_KINDS = "biufc"


class Triplet(NamedTuple):
    """One non-zero cell: ``(row, col, value)``."""

    row: int
    col: int
    value: Union[int, float, complex]


def _same_value(a, b):
    # NaN never equals itself; two NaNs count as the same stored value
    return a == b or (a != a and b != b)


def _index_array(values, name):
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise InvalidTriplet(f"{name} must be one-dimensional")
    if arr.size and arr.dtype.kind not in "iu":
        raise InvalidTriplet(f"{name} indices must be integers, got dtype {arr.dtype}")
    return np.array(arr, dtype=np.int64)


class TripletList(SparseMatrix):
    """Immutable coordinate list of non-zero ``(row, col, value)`` triplets.

    Parameters
    ----------
    row : array_like of int
        Row indices, length ``nnz``.
    col : array_like of int
        Column indices, length ``nnz``.
    data : array_like
        Non-zero values, length ``nnz``.
    shape : tuple of int, optional
        Dimensions ``(nrows, ncols)`` of the matrix the triplets describe.
        Informational: it never affects ordering, equality or transposition.
    dtype : numpy.dtype, optional
        Value dtype. Inferred from ``data`` when omitted.
    check : bool, optional
        If True, validate invariants (lengths, index bounds, no stored zeros).

    Attributes
    ----------
    row, col, data : numpy.ndarray
        Read-only storage arrays, private copies of the inputs.
    shape : tuple[int, int] or None
        Matrix dimensions, if known.
    nnz : int
        Number of stored triplets.

    Notes
    -----
    Order is significant. Two lists are equal only when they hold the same
    triplets in the same positions.

    Examples
    --------
    >>> from tripla.sparse import TripletList
    >>> t = TripletList([0, 1], [1, 0], [5, 3], shape=(2, 2))
    >>> t[0]
    Triplet(row=0, col=1, value=5)
    >>> list(t.T)
    [Triplet(row=1, col=0, value=5), Triplet(row=0, col=1, value=3)]
    """

    def __init__(self, row, col, data, shape=None, dtype=None, check=True):
        if check:
            row = _index_array(row, "row")
            col = _index_array(col, "col")
            data = np.array(data, dtype=dtype)
            if data.ndim != 1:
                raise InvalidTriplet("data must be one-dimensional")
            if data.size and data.dtype.kind not in _NUMERIC_KINDS:
                raise InvalidTriplet(f"values must be numeric, got dtype {data.dtype}")
        else:
            row = np.array(row, dtype=np.int64)
            col = np.array(col, dtype=np.int64)
            data = np.array(data, dtype=dtype)
        super().__init__(shape=shape, dtype=data.dtype)
        self.row = row
        self.col = col
        self.data = data
        if check:
            self._validate()
        for arr in (self.row, self.col, self.data):
            arr.flags.writeable = False

    def _validate(self):
        n = self.data.size
        if self.row.size != n or self.col.size != n:
            raise InvalidTriplet(
                f"row, col and data must have equal length, got "
                f"{self.row.size}, {self.col.size}, {n}"
            )
        if n == 0:
            return
        if self.row.min() < 0 or self.col.min() < 0:
            raise InvalidTriplet("indices must be non-negative")
        if self.shape is not None:
            nrows, ncols = self.shape
            if self.row.max() >= nrows or self.col.max() >= ncols:
                raise InvalidTriplet(f"index out of bounds for shape {self.shape}")
        if np.any(self.data == 0):
            raise InvalidTriplet("triplet lists never store zero values")

    @classmethod
    def from_triplets(cls, triplets, shape=None, dtype=None):
        """Construct from an iterable of ``(row, col, value)`` triples.

        Parameters
        ----------
        triplets : iterable
            Triples (or :class:`Triplet` records) in the desired order.
        shape : tuple[int, int], optional
            Matrix dimensions.
        dtype : numpy.dtype, optional
            Value dtype.
        """
        if isinstance(triplets, TripletList):
            return cls(triplets.row, triplets.col, triplets.data,
                       shape=triplets.shape if shape is None else shape, dtype=dtype)
        items = [tuple(t) for t in triplets]
        for t in items:
            if len(t) != 3:
                raise InvalidTriplet(f"expected (row, col, value), got {t!r}")
        if not items:
            return cls([], [], [], shape=shape, dtype=dtype)
        row, col, data = zip(*items)
        return cls(row, col, data, shape=shape, dtype=dtype)

    @property
    def nnz(self):
        """Number of stored triplets."""
        return int(self.data.size)

    def __len__(self):
        return self.nnz

    def __getitem__(self, key):
        """Positional access.

        An integer returns a :class:`Triplet`; a slice returns a new
        :class:`TripletList` with the same shape.
        """
        if isinstance(key, slice):
            return TripletList(self.row[key], self.col[key], self.data[key],
                               shape=self.shape, dtype=self.data.dtype, check=False)
        k = operator.index(key)
        return Triplet(int(self.row[k]), int(self.col[k]), self.data[k].item())

    def __iter__(self):
        for r, c, v in zip(self.row.tolist(), self.col.tolist(), self.data.tolist()):
            yield Triplet(r, c, v)

    def __eq__(self, other):
        if isinstance(other, TripletList):
            equal_nan = self.data.dtype.kind in "fc" and other.data.dtype.kind in "fc"
            return (
                self.nnz == other.nnz
                and np.array_equal(self.row, other.row)
                and np.array_equal(self.col, other.col)
                and np.array_equal(self.data, other.data, equal_nan=equal_nan)
            )
        if isinstance(other, (list, tuple)):
            if len(other) != self.nnz:
                return False
            for mine, theirs in zip(self, other):
                try:
                    r, c, v = theirs
                except (TypeError, ValueError):
                    return False
                if mine.row != r or mine.col != c or not _same_value(mine.value, v):
                    return False
            return True
        return NotImplemented

    __hash__ = None

    @property
    def T(self):
        """Positional transpose, see :func:`tripla.transpose`."""
        return self.transpose()

    def transpose(self, sort=False):
        """Swap row and column of every triplet.

        Parameters
        ----------
        sort : bool, optional
            Re-sort the result into row-major order of the transposed matrix.
        """
        from ..manipulation import transpose

        return transpose(self, sort=sort)

    def is_row_major(self):
        """True if triplets are strictly ascending by row, then column."""
        if self.nnz < 2:
            return True
        dr = np.diff(self.row)
        dc = np.diff(self.col)
        return bool(np.all((dr > 0) | ((dr == 0) & (dc > 0))))

    def toarray(self, shape=None):
        """Materialize as a dense NumPy ``ndarray``.

        The shape is ``shape`` if given, else the stored shape, else the
        smallest shape that holds every index. Duplicate coordinates are
        accumulated.
        """
        if shape is None:
            shape = self.shape
        if shape is None:
            if self.nnz == 0:
                shape = (0, 0)
            else:
                shape = (int(self.row.max()) + 1, int(self.col.max()) + 1)
        out = super().toarray(shape)
        if self.nnz == 0:
            return out
        if self.row.max() >= out.shape[0] or self.col.max() >= out.shape[1]:
            raise InvalidDimension(f"triplets do not fit in shape {out.shape}")
        np.add.at(out, (self.row, self.col), self.data)
        return out

    def __repr__(self):
        return f"TripletList(shape={self.shape}, nnz={self.nnz}, dtype={self.data.dtype.name})"

    def __str__(self):
        return self.__repr__()
