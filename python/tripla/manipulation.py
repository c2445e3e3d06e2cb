import logging

import numpy as np

from .errors import AllocationFailure
from .sparse.triplet import TripletList

logger = logging.getLogger(__name__)


def transpose(triplets, sort=False):
    """Transpose a triplet list by swapping row and column of each entry.

    Parameters
    ----------
    triplets : TripletList or iterable of (row, col, value)
        Input triplets, in any order. Not modified.
    sort : bool, optional
        If True, re-sort the swapped triplets by ``(row, col)`` ascending so
        the result is in row-major order for the transposed matrix. The
        default keeps positions: ``out[i]`` is ``triplets[i]`` with row and
        column exchanged.

    Returns
    -------
    TripletList
        Same length and values as the input. ``shape`` is the reversed input
        shape when known.

    Raises
    ------
    AllocationFailure
        If the output arrays cannot be allocated.

    Examples
    --------
    >>> from tripla import encode, transpose
    >>> list(transpose(encode([[0, 5], [3, 0]])))
    [Triplet(row=1, col=0, value=5), Triplet(row=0, col=1, value=3)]
    """
    if not isinstance(triplets, TripletList):
        triplets = TripletList.from_triplets(triplets)
    shape = None if triplets.shape is None else triplets.shape[::-1]
    row, col, data = triplets.col, triplets.row, triplets.data
    try:
        if sort and data.size:
            # lexsort orders by the last key first and is stable
            order = np.lexsort((col, row))
            row, col, data = row[order], col[order], data[order]
        out = TripletList(row, col, data, shape=shape, dtype=data.dtype, check=False)
    except MemoryError as e:
        raise AllocationFailure(f"cannot allocate {triplets.nnz} transposed triplets") from e
    logger.debug("transposed %d triplets (sort=%s)", out.nnz, sort)
    return out
