class BFError(Exception):
    """Base class for every fault the interpreter reports."""


class SourceUnreadable(BFError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class AllocationFailure(BFError):
    def __init__(self, capacity, reason="invalid tape size"):
        self.capacity = capacity
        super().__init__(f"cannot allocate tape of {capacity!r} cells: {reason}")


class LoopStackUnderflow(BFError):
    def __init__(self, offset):
        self.offset = offset
        super().__init__(f"stack underflow: unmatched ']' at offset {offset}")


class LoopStackOverflow(BFError):
    def __init__(self, offset, limit):
        self.offset = offset
        self.limit = limit
        super().__init__(f"stack overflow: loop at offset {offset} nests deeper than {limit}")


class UnterminatedLoopScan(BFError):
    def __init__(self, offset, message=None):
        self.offset = offset
        super().__init__(message or f"unterminated loop: no matching ']' for '[' at offset {offset}")


class UnterminatedLoop(UnterminatedLoopScan):
    """Source ended while loops were still open."""

    def __init__(self, open_offsets):
        self.open_offsets = list(open_offsets)
        innermost = self.open_offsets[-1]
        super().__init__(
            innermost,
            f"unterminated loop: source ended with {len(self.open_offsets)} open loop(s), "
            f"innermost '[' at offset {innermost}",
        )
