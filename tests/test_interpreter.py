import io

import pytest

from errors import (
    LoopStackOverflow,
    LoopStackUnderflow,
    SourceUnreadable,
    UnterminatedLoop,
    UnterminatedLoopScan,
)
from interpreter import Interpreter, Source


def run(code, **kwargs):
    return Interpreter(code, **kwargs).run()


def test_skip_zero_loop():
    interp = Interpreter("[+]")
    assert interp.step()
    assert interp.position == 3
    assert interp.snapshot().cells[0] == 0
    assert interp.loop_depth == 0
    assert not interp.step()


def test_skip_nested_zero_loop():
    interp = Interpreter("[[+]+]>+")
    interp.step()
    assert interp.position == 6
    interp.run()
    cells = interp.snapshot().cells
    assert cells[0] == 0
    assert cells[1] == 1


def test_copy_loop():
    interp = run("+++[>+<-]")
    cells = interp.snapshot().cells
    assert cells[0] == 0
    assert cells[1] == 3
    assert interp.loop_depth == 0


def test_nested_loops_multiply():
    interp = run("++++[>+++[>++<-]<-]")
    assert interp.snapshot().cells[:3] == bytes([0, 0, 24])


def test_output_order():
    assert run("+++.>+.").output_bytes() == bytes([3, 1])


def test_output_is_raw_bytes():
    assert run("-.").output_bytes() == b"\xff"


def test_hello_world(hello_world):
    assert run(hello_world).output_bytes() == b"Hello World!\n"


def test_comments_are_ignored():
    interp = run("add three: +++ then print it. (done)")
    assert interp.output_bytes() == bytes([3])
    assert interp.steps == 4


def test_output_goes_to_given_stream():
    out = io.BytesIO()
    Interpreter("++.", output=out).run()
    assert out.getvalue() == b"\x02"


def test_pointer_wraps_on_small_tape():
    interp = run("<+>>+", memory_size=3)
    assert interp.snapshot().cells == bytes([0, 1, 1])


def test_lone_close_bracket_underflows():
    interp = Interpreter("]+")
    with pytest.raises(LoopStackUnderflow) as exc:
        interp.run()
    assert exc.value.offset == 0
    assert interp.snapshot().cells[0] == 0


def test_underflow_after_output_keeps_output():
    interp = Interpreter("+.]")
    with pytest.raises(LoopStackUnderflow) as exc:
        interp.run()
    assert exc.value.offset == 2
    assert interp.output_bytes() == b"\x01"


def test_unterminated_skip_scan():
    with pytest.raises(UnterminatedLoopScan) as exc:
        run("[+")
    assert exc.value.offset == 0
    assert not isinstance(exc.value, UnterminatedLoop)


def test_unterminated_entered_loop():
    with pytest.raises(UnterminatedLoop) as exc:
        run("+[+")
    assert exc.value.open_offsets == [1]
    assert exc.value.offset == 1


def test_unterminated_entered_loop_is_a_scan_error():
    with pytest.raises(UnterminatedLoopScan):
        run("+[[-]")


def test_stack_limit_overflow():
    with pytest.raises(LoopStackOverflow) as exc:
        run("+[[[-]]]", stack_limit=2)
    assert exc.value.offset == 3
    assert exc.value.limit == 2


def test_stack_limit_allows_exact_depth():
    interp = run("+[[-]]", stack_limit=2)
    assert interp.snapshot().cells[0] == 0


def test_unbounded_nesting():
    depth = 600
    interp = run("+" + "[" * depth + "-" + "]" * depth)
    assert interp.snapshot().cells[0] == 0


def test_bytes_source_offsets_are_bytes():
    interp = run("\xe9+.".encode("latin-1"))
    assert interp.output_bytes() == b"\x01"


def test_source_seek_is_clamped():
    src = Source("abc")
    src.seek(10)
    assert src.tell() == 3
    assert src.read() is None
    src.seek(-4)
    assert src.read() == "a"


def test_source_from_path(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_bytes(b"+++.")
    src = Source.from_path(path)
    assert len(src) == 4
    assert src.name == str(path)
    assert Interpreter(src).run().output_bytes() == b"\x03"


def test_missing_source_is_unreadable(tmp_path):
    path = tmp_path / "missing.bf"
    with pytest.raises(SourceUnreadable) as exc:
        Source.from_path(path)
    assert exc.value.path == path
    assert str(path) in str(exc.value)


def test_step_counts_instructions_only():
    interp = Interpreter("x+y")
    assert interp.step()
    assert interp.steps == 1
    assert interp.position == 2
    assert not interp.step()
    assert interp.steps == 1
