import logging

from ._runtime import get_log_level, get_value_format, set_log_level, set_value_format
from .creation import encode, random_matrix
from .errors import (
    AllocationFailure,
    InvalidDimension,
    InvalidMatrix,
    InvalidTriplet,
    TriplaError,
)
from .manipulation import transpose
from .sparse import Triplet, TripletList

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "encode",
    "transpose",
    "random_matrix",
    "Triplet",
    "TripletList",
    "TriplaError",
    "InvalidDimension",
    "InvalidMatrix",
    "InvalidTriplet",
    "AllocationFailure",
    "set_value_format",
    "get_value_format",
    "set_log_level",
    "get_log_level",
]
