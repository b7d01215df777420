"""
Outcomes of MaxHeap operations that are not a plain element.

- HeapCapacityError: raised by insert() on a full heap. The caller sized the
  heap too small or did not check count() first.
- EMPTY: returned by remove_max() on an empty heap. Draining a queue is a
  normal condition, so it is a value and not an exception.
"""


class HeapCapacityError(OverflowError):
    """
    Raised when inserting into a heap that already holds `capacity` records.
    """
    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Heap is full! (capacity = {capacity})")


class _Empty:
    """
    Singleton returned by remove_max() when there is nothing to remove.
    Kept distinct from None, since None is a legal element.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "EMPTY"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Empty, ())


EMPTY = _Empty()
