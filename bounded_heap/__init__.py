from .Max_Heap import (
    MaxHeap,
    Record,
    HeapCapacityError,
    EMPTY
)

__all__ = [
    "MaxHeap",
    "Record",
    "HeapCapacityError",
    "EMPTY"
]
