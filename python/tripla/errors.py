"""Exception types raised by :mod:`tripla`.

All errors derive from :class:`TriplaError` and from the builtin exception
that best describes them, so callers may catch either.
"""


class TriplaError(Exception):
    """Base class for all tripla errors."""


class InvalidDimension(TriplaError, ValueError):
    """Row/column counts are negative or do not match the supplied matrix."""


class InvalidMatrix(TriplaError, TypeError):
    """A dense matrix holds non-numeric cells."""


class InvalidTriplet(TriplaError, ValueError):
    """A triplet sequence breaks the coordinate-list invariants.

    Raised for mismatched array lengths, negative or out-of-shape indices,
    non-integer indices and explicitly stored zeros.
    """


class AllocationFailure(TriplaError, MemoryError):
    """Output storage could not be allocated. Not recoverable."""
