from .base import SparseMatrix
from .triplet import Triplet, TripletList

__all__ = [
    "SparseMatrix",
    "Triplet",
    "TripletList",
]
