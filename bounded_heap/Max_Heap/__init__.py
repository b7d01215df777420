from .max_heap import MaxHeap, DEFAULT_CAPACITY
from .records import (
    Record,
    make_records,
    priorities_of
)
from .errors import HeapCapacityError, EMPTY

__all__ = [
    "MaxHeap",
    "DEFAULT_CAPACITY",
    "Record",
    "make_records",
    "priorities_of",
    "HeapCapacityError",
    "EMPTY"
]
