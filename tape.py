from collections import namedtuple

from errors import AllocationFailure

LEFT = -1
RIGHT = 1

DEFAULT_CAPACITY = 512

Snapshot = namedtuple("Snapshot", ["cells", "high_water"])


class Tape:
    """
    Fixed-size byte tape with a wrapping data pointer.

    Cells hold unsigned 8-bit values: 255 + 1 wraps to 0 and 0 - 1 to 255.
    Moving left of cell 0 lands on the last cell and moving right of the
    last cell lands on cell 0. The high-water mark remembers the largest
    pointer value seen so a dump knows where to stop.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise AllocationFailure(capacity, "size must be a positive integer")
        try:
            self.cells = bytearray(capacity)
        except (MemoryError, OverflowError) as e:
            raise AllocationFailure(capacity, type(e).__name__) from e
        self.ptr = 0
        self.max_ptr = 0

    @property
    def capacity(self):
        return len(self.cells)

    @property
    def pointer(self):
        return self.ptr

    @property
    def high_water(self):
        return self.max_ptr

    def move(self, direction):
        self.ptr = (self.ptr + direction) % len(self.cells)
        if self.ptr > self.max_ptr:
            self.max_ptr = self.ptr

    def increment(self):
        self.cells[self.ptr] = (self.cells[self.ptr] + 1) & 0xFF

    def decrement(self):
        self.cells[self.ptr] = (self.cells[self.ptr] - 1) & 0xFF

    def current(self):
        return self.cells[self.ptr]

    def snapshot(self):
        return Snapshot(bytes(self.cells), self.max_ptr)
