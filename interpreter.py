"""
Streaming interpreter for the eight-instruction byte-tape language.

    <   move the data pointer left (wrapping)
    >   move the data pointer right (wrapping)
    +   increment the current cell
    -   decrement the current cell
    .   write the current cell as one output byte
    [   enter the loop if the current cell is non-zero, else skip past the matching ]
    ]   jump back to the matching [ so its test runs again

Everything else is a comment. The source is never pre-scanned: loop bodies
are found lazily. Entering a loop pushes the offset just after its '[' and
every ']' pops that offset and rewinds the cursor onto the '[' so the
entry test is re-read. A '[' over a zero cell scans forward counting
bracket depth until its matching ']' has been consumed.
"""
import io
import logging

from errors import (
    LoopStackOverflow,
    LoopStackUnderflow,
    SourceUnreadable,
    UnterminatedLoop,
    UnterminatedLoopScan,
)
from tape import DEFAULT_CAPACITY, LEFT, RIGHT, Tape

logger = logging.getLogger("bf.interpreter")

INSTRUCTIONS = "<>+-.[]"


class Source:
    """Seekable cursor over program text, one byte per character."""

    def __init__(self, code, name="<string>"):
        if isinstance(code, (bytes, bytearray)):
            code = bytes(code).decode("latin-1")
        self.code = code
        self.name = name
        self.pos = 0

    @classmethod
    def from_path(cls, path):
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SourceUnreadable(path, e.strerror or str(e)) from e
        return cls(data, name=str(path))

    def __len__(self):
        return len(self.code)

    def read(self):
        if self.pos >= len(self.code):
            return None
        c = self.code[self.pos]
        self.pos += 1
        return c

    def tell(self):
        return self.pos

    def seek(self, pos):
        self.pos = max(0, min(pos, len(self.code)))


class Interpreter:
    def __init__(self, source, memory_size=DEFAULT_CAPACITY, output=None, stack_limit=None):
        self.source = source if isinstance(source, Source) else Source(source)
        self.tape = Tape(memory_size)
        self.output = output if output is not None else io.BytesIO()
        self.stack_limit = stack_limit
        self.loop_stack = []
        self.step_count = 0

    @property
    def position(self):
        return self.source.tell()

    @property
    def loop_depth(self):
        return len(self.loop_stack)

    @property
    def steps(self):
        return self.step_count

    def output_bytes(self):
        return self.output.getvalue()

    def snapshot(self):
        return self.tape.snapshot()

    def step(self):
        """
        Execute the next instruction, skipping comment characters.

        Returns False once the source is exhausted. Raises UnterminatedLoop
        if that happens while loops are still open.
        """
        while True:
            c = self.source.read()
            if c is None:
                if self.loop_stack:
                    raise UnterminatedLoop([pos - 1 for pos in self.loop_stack])
                return False
            if c in INSTRUCTIONS:
                break

        self.step_count += 1
        tape = self.tape

        if c == '<':
            tape.move(LEFT)
        elif c == '>':
            tape.move(RIGHT)
        elif c == '+':
            tape.increment()
        elif c == '-':
            tape.decrement()
        elif c == '.':
            self.output.write(bytes((tape.current(),)))
        elif c == '[':
            if tape.current():
                self._enter_loop()
            else:
                self._skip_loop()
        elif c == ']':
            if not self.loop_stack:
                raise LoopStackUnderflow(self.source.tell() - 1)
            # land on the '[' so its test runs again
            self.source.seek(self.loop_stack.pop() - 1)
        return True

    def _enter_loop(self):
        resume = self.source.tell()
        if self.stack_limit is not None and len(self.loop_stack) >= self.stack_limit:
            raise LoopStackOverflow(resume - 1, self.stack_limit)
        self.loop_stack.append(resume)

    def _skip_loop(self):
        start = self.source.tell() - 1
        nest = 1
        while nest:
            c = self.source.read()
            if c is None:
                raise UnterminatedLoopScan(start)
            if c == '[':
                nest += 1
            elif c == ']':
                nest -= 1
        logger.debug("skipped loop %d..%d", start, self.source.tell() - 1)

    def run(self):
        logger.debug("running %s (%d bytes, %d cells)", self.source.name, len(self.source), self.tape.capacity)
        try:
            while self.step():
                pass
        finally:
            self.output.flush()
        logger.debug(
            "finished after %d instructions, ptr=%d, high-water=%d",
            self.step_count, self.tape.pointer, self.tape.high_water,
        )
        return self
