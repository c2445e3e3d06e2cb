import logging
import numbers

import numpy as np

from .errors import AllocationFailure, InvalidDimension, InvalidMatrix
from .sparse.base import check_dimensions
from .sparse.triplet import TripletList

logger = logging.getLogger(__name__)

_NUMERIC_KINDS = "biufc"


def _as_dense(matrix, cols):
    if isinstance(matrix, np.ndarray):
        arr = matrix
    else:
        try:
            arr = np.asarray(matrix)
        except ValueError:
            # numpy refuses ragged nested sequences
            raise InvalidDimension("matrix rows have different lengths") from None
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, cols or 0)
    if arr.ndim != 2:
        raise InvalidDimension(f"matrix must be two-dimensional, got {arr.ndim} dimension(s)")
    if arr.size and arr.dtype.kind == "O":
        # boxed Python numbers: let numpy pick a concrete numeric dtype
        if not all(isinstance(v, numbers.Number) for v in arr.flat):
            raise InvalidMatrix("matrix cells must be numeric, got dtype object")
        arr = np.array(arr.tolist())
    if arr.size and arr.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidMatrix(f"matrix cells must be numeric, got dtype {arr.dtype}")
    return arr


def encode(matrix, rows=None, cols=None):
    """Encode a dense matrix as a row-major list of non-zero triplets.

    Parameters
    ----------
    matrix : array_like
        Dense 2D matrix, a NumPy array or a nested sequence. Object arrays
        are accepted when every cell is a number. Never modified.
    rows, cols : int, optional
        Declared dimensions. Taken from ``matrix`` when omitted.

    Returns
    -------
    TripletList
        One triplet per cell not exactly equal to zero, ascending by row and
        then by column. ``shape`` is set to the matrix shape.

    Raises
    ------
    InvalidDimension
        If ``rows`` or ``cols`` is negative, the matrix is not 2D or ragged,
        or its shape differs from the declared one.
    InvalidMatrix
        If the matrix cells are not numeric.

    Examples
    --------
    >>> from tripla import encode
    >>> list(encode([[0, 5], [3, 0]]))
    [Triplet(row=0, col=1, value=5), Triplet(row=1, col=0, value=3)]
    """
    if rows is not None or cols is not None:
        check_dimensions(0 if rows is None else rows, 0 if cols is None else cols)
    arr = _as_dense(matrix, cols)
    nrows, ncols = arr.shape
    if rows is not None and nrows != rows:
        raise InvalidDimension(f"declared {rows} rows but matrix has {nrows}")
    if cols is not None and ncols != cols:
        raise InvalidDimension(f"declared {cols} columns but matrix has {ncols}")
    try:
        # nonzero counts first, then fills exactly-sized index arrays in C order
        r, c = np.nonzero(arr)
        data = arr[r, c]
    except MemoryError as e:
        raise AllocationFailure(f"cannot allocate triplets for a {nrows}x{ncols} matrix") from e
    logger.debug("encoded %dx%d matrix into %d triplets", nrows, ncols, data.size)
    return TripletList(r, c, data, shape=(nrows, ncols), dtype=arr.dtype, check=False)


def random_matrix(rows, cols, zero_fraction=0.6, low=1, high=100, rng=None):
    """Generate a dense integer matrix with a given share of zero cells.

    Each cell is zero with probability ``zero_fraction`` and otherwise an
    integer drawn uniformly from ``[low, high]``.

    Parameters
    ----------
    rows, cols : int
        Matrix dimensions.
    zero_fraction : float, optional
        Probability that a cell is zero, in ``[0, 1]``.
    low, high : int, optional
        Inclusive bounds for non-zero cells.
    rng : int or numpy.random.Generator, optional
        Seed or generator. A fresh unseeded generator is used when omitted;
        the global NumPy random state is never touched.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(rows, cols)`` and dtype ``int64``.
    """
    rows, cols = check_dimensions(rows, cols)
    if not 0.0 <= zero_fraction <= 1.0:
        raise ValueError("zero_fraction must be within [0, 1]")
    if low > high:
        raise ValueError("low must not exceed high")
    rng = np.random.default_rng(rng)
    values = rng.integers(low, high, size=(rows, cols), dtype=np.int64, endpoint=True)
    values[rng.random((rows, cols)) < zero_fraction] = 0
    return values
