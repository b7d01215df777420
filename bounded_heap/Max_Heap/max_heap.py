"""
Bounded-capacity priority queue on an array-backed binary max-heap.

Storage is a 1-indexed Python list: slot 0 is an unused sentinel, so the
parent/child arithmetic needs no offsets.

    left(i)   = 2 * i
    right(i)  = 2 * i + 1
    parent(i) = i // 2

Usage:

heap = MaxHeap(4)                       # empty heap with room for 4 records
heap.insert(5, "five")                  # add a record, O(log n)
element = heap.remove_max()             # highest-priority element, or EMPTY
heap = MaxHeap(from_array=records)      # adopt a 1-indexed record list, O(n)
MaxHeap.heapsort(records)               # sort a 1-indexed record list in place
"""

from typing import (
    Any,
    Optional,
    Sequence
)

from bounded_heap.Max_Heap.errors import HeapCapacityError, EMPTY
from bounded_heap.Max_Heap.records import (
    Record,
    RecordArray,
    Priorities,
    make_records
)


DEFAULT_CAPACITY = 1023


class MaxHeap:
    """
    Fixed-capacity max-heap of (priority, element) records.

    The caller is responsible for:
    - a non-negative capacity,
    - a well-formed `from_array`: a list whose slot 0 is an unused sentinel
      and whose slots 1..n are Record objects.
    Neither is checked.

    Not safe for concurrent mutation; share an instance only behind a lock.
    """
    DEFAULT_CAPACITY = DEFAULT_CAPACITY

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        from_array: Optional[RecordArray] = None,
    ):
        """
        Create an empty heap of a given capacity, or build one from an existing array.

        Parameters:
        - capacity (int): Maximum number of records. Ignored when `from_array` is given.
        - from_array (Optional[RecordArray]): 1-indexed record list to adopt as storage.
          The list is not copied; heapify reorders it in place, and its full
          length (minus the sentinel) becomes both capacity and count.
        """
        if from_array is not None:
            self._storage = from_array
            self.capacity = len(from_array) - 1
            self._count = self.capacity
            self._buildheap()
        else:
            self.capacity = capacity
            # slot 0 is the sentinel, slots 1..capacity are filled by insert
            self._storage = [None] * (capacity + 1)
            self._count = 0


    @classmethod
    def from_priorities(
        cls,
        priorities: Priorities,
        elements: Optional[Sequence[Any]] = None,
    ) -> "MaxHeap":
        """
        Heapify a sequence (or 1-D numpy array) of priorities with optional
        parallel elements. See records.make_records for the element default.
        """
        return cls(from_array=make_records(priorities, elements))


    @staticmethod
    def heapsort(array: RecordArray) -> None:
        """
        Sort a 1-indexed record array in place by ascending priority, O(n log n).
        No new array is allocated; the caller's list is the one that ends up sorted.
        """
        heap = MaxHeap(from_array=array)
        heap.sort()


    # --- index arithmetic ---

    @staticmethod
    def _left(i: int) -> int:
        return 2 * i

    @staticmethod
    def _right(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _parent(i: int) -> int:
        return i // 2


    def _swap(self, i: int, j: int) -> None:
        # records are references, so the pair moves as one handle
        storage = self._storage
        storage[i], storage[j] = storage[j], storage[i]


    def _float(self, i: int) -> None:
        """
        Sift-up: move the record at i past lower-priority ancestors.
        """
        storage = self._storage
        p = self._parent(i)
        while p >= 1 and storage[p].priority < storage[i].priority:
            self._swap(i, p)
            i = p
            p = self._parent(i)


    def _sink(self, i: int) -> None:
        """
        Sift-down: move the record at i past higher-priority descendants,
        looking only at live slots 1..count.
        """
        storage = self._storage
        count = self._count
        while True:
            l = self._left(i)
            r = self._right(i)

            largest = i
            if l <= count and storage[largest].priority < storage[l].priority:
                largest = l
            if r <= count and storage[largest].priority < storage[r].priority:
                largest = r

            if largest == i:
                return
            self._swap(i, largest)
            i = largest


    def _buildheap(self) -> None:
        # every subtree below i is already a heap when i is sunk
        for i in range(self._count // 2, 0, -1):
            self._sink(i)


    # --- public API ---

    def insert(self, priority: float, element: Any = None) -> None:
        """
        Add a record with the given priority.

        Parameters:
        - priority (float): Priority of the record; larger comes out first.
        - element (Any): Data stored in the record, never inspected.

        Raises:
        - HeapCapacityError: the heap already holds `capacity` records.
          Neither count nor storage is modified.
        """
        i = self._count + 1
        if i > self.capacity:
            raise HeapCapacityError(self.capacity)

        # the slot may still hold a record of a sorted tail; replace it
        self._storage[i] = Record(priority, element)
        self._float(i)
        self._count += 1


    def try_insert(self, priority: float, element: Any = None) -> bool:
        """
        Like insert(), but reports a full heap by returning False.
        """
        if self.is_full():
            return False
        self.insert(priority, element)
        return True


    def remove_max(self) -> Any:
        """
        Remove and return the element with the highest priority.

        Returns:
        - The element of the highest-priority record, or EMPTY if the heap is empty.
          The removed record stays at the old last index, just past the live region.
        """
        if self._count == 0:
            return EMPTY

        root = 1
        last = self._count
        self._swap(root, last)
        self._count -= 1
        self._sink(root)
        return self._storage[last].element


    def count(self) -> int:
        """
        Number of records currently in the queue.
        """
        return self._count


    def sort(self) -> RecordArray:
        """
        Drain the heap, leaving storage sorted by ascending priority.

        Each remove_max() parks the current maximum just past the shrinking live
        region, so after n calls slots 1..n hold the records smallest-first.
        The heap is empty afterwards; inserting again overwrites the sorted
        result from index 1 upward.

        Returns:
        - The storage list. It is 1-indexed, slot 0 is the sentinel.
        """
        while self._count > 0:
            self.remove_max()
        return self._storage


    @property
    def storage(self) -> RecordArray:
        return self._storage

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self):
        return self._count

    def __repr__(self):
        return f"MaxHeap(capacity={self.capacity}, count={self._count})"
