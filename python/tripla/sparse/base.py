"""Base classes for sparse matrices.

These classes define the minimal interface shared by concrete sparse types in
`tripla.sparse`: shape/dtype bookkeeping and basic materialization.
"""
import operator

from ..errors import InvalidDimension


def check_dimensions(rows, cols):
    """Validate a ``(rows, cols)`` pair and return it as Python ints.

    Raises
    ------
    InvalidDimension
        If either value is not an integer or is negative.
    """
    try:
        rows = operator.index(rows)
        cols = operator.index(cols)
    except TypeError:
        raise InvalidDimension(f"dimensions must be integers, got ({rows!r}, {cols!r})") from None
    if rows < 0 or cols < 0:
        raise InvalidDimension(f"dimensions must be non-negative, got ({rows}, {cols})")
    return rows, cols


class SparseMatrix:
    """Abstract base class for 2D sparse matrices.

    Parameters
    ----------
    shape : tuple[int, int] or None
        Matrix shape. ``None`` when the dimensions are unknown, e.g. for a
        coordinate list built from bare triplets.
    dtype : Any, optional
        Element dtype metadata.

    Attributes
    ----------
    shape : tuple[int, int] or None
        Matrix dimensions.
    dtype : Any
        Element type metadata.

    Raises
    ------
    InvalidDimension
        If ``shape`` is not 2D or holds negative extents.
    """

    def __init__(self, shape=None, dtype=None):
        if shape is not None:
            shape = tuple(shape)
            if len(shape) != 2:
                raise InvalidDimension("SparseMatrix requires 2D shape")
            shape = check_dimensions(*shape)
        self.shape = shape
        self.dtype = dtype

    @property
    def ndim(self):
        return 2

    def toarray(self, shape=None):
        """Return a dense numpy.ndarray with the same shape and dtype.

        Notes
        -----
        The base implementation returns an all-zeros array. Concrete sparse
        matrix types should override this to materialize actual data.
        """
        import numpy as np

        shape = self.shape if shape is None else shape
        if shape is None:
            raise InvalidDimension("shape is unknown")
        return np.zeros(shape, dtype=self.dtype)
