from typing import Any, List, Optional


class TeeStdout:
    """
    Helper class to tee stdout to multiple streams, e.g. stdout and a test log file
    """
    # Initialize with multiple streams
    def __init__(self, *streams):
        self.streams = streams

    # Write data to all streams
    def write(self, data):
        for s in self.streams:
            s.write(data)
            s.flush()

    # Flush all streams
    def flush(self):
        for s in self.streams:
            s.flush()


def is_max_heap(storage: List[Optional[Any]], count: int) -> bool:
    """
    Check the max-heap property on slots 1..count of a 1-indexed record list:
    every live parent has priority >= each of its live children.
    """
    for i in range(1, count // 2 + 1):
        for child in (2 * i, 2 * i + 1):
            if child <= count and storage[i].priority < storage[child].priority:
                return False
    return True
