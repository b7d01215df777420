import numpy as np
from jaxtyping import Num
from typing import (
    Any,
    List,
    Optional,
    Sequence,
    Union
)


class Record:
    """
    A (priority, element) pair stored in one heap slot.

    The heap only compares `priority` and moves records around as a unit;
    `element` is never inspected or copied.
    """
    __slots__ = ("priority", "element")

    def __init__(self, priority: Optional[float] = None, element: Any = None):
        self.priority = priority
        self.element = element

    def __repr__(self):
        return f"Record(priority={self.priority!r}, element={self.element!r})"

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return self.priority == other.priority and self.element == other.element

    __hash__ = None # mutable


# 1-indexed list of records, slot 0 is an unused sentinel
RecordArray = List[Optional[Record]]
Priorities = Union[Sequence[float], Num[np.ndarray, "n"]]


def make_records(
    priorities: Priorities,
    elements: Optional[Sequence[Any]] = None,
) -> RecordArray:
    """
    Build a 1-indexed record array suitable for MaxHeap(from_array=...).

    Parameters:
    - priorities: 1-D sequence or numpy array of numeric priorities.
    - elements: optional elements, parallel to `priorities`. When omitted each
      record carries its 0-based input position, so a sorted record array
      doubles as an argsort.

    Returns:
    - [None, Record(p_0, e_0), Record(p_1, e_1), ...]
    """
    priorities = np.asarray(priorities)
    if priorities.ndim != 1:
        raise ValueError(f"priorities must be 1-D, got shape {priorities.shape}")

    n = priorities.shape[0]
    if elements is None:
        elements = range(n)
    elif len(elements) != n:
        raise ValueError(
            f"elements has length {len(elements)}, expected {n} to match priorities"
        )

    # .tolist() turns numpy scalars into plain Python numbers
    records: RecordArray = [None]
    records.extend(Record(p, e) for p, e in zip(priorities.tolist(), elements))
    return records


def priorities_of(records: RecordArray) -> np.ndarray:
    """
    Priorities at indices 1..n of a 1-indexed record array.
    The dtype is inferred from the priorities, so integer keys stay exact
    instead of being rounded through float64. An empty array is float64.
    """
    return np.asarray([r.priority for r in records[1:]])
