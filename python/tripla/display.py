"""Plain-text rendering of dense matrices and triplet lists.

Renderers only read their input.
"""
import numbers

import numpy as np

from ._runtime import get_value_format
from .sparse.triplet import TripletList

HEADER = "Row\tCol\tValue"


def format_value(value, value_format=None):
    """Integers verbatim, anything else through ``value_format``."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, numbers.Integral):
        return str(int(value))
    fmt = get_value_format() if value_format is None else value_format
    return format(value, fmt)


def format_dense(matrix, value_format=None):
    """One line per row, every cell followed by a tab."""
    arr = np.asarray(matrix)
    return "\n".join(
        "".join(format_value(v, value_format) + "\t" for v in row.tolist()) for row in arr
    )


def format_triplets(triplets, value_format=None):
    """Tab-separated table: a ``Row Col Value`` header, then one line per triplet."""
    if not isinstance(triplets, TripletList):
        triplets = TripletList.from_triplets(triplets)
    lines = [HEADER]
    for t in triplets:
        lines.append(f"{t.row}\t{t.col}\t{format_value(t.value, value_format)}")
    return "\n".join(lines)
