import logging
import sys

logger = logging.getLogger("bf.memdump")

DUMP_FORMATS = ("none", "hex", "ascii")


def _ascii_cell(value):
    if value == 0x0A:
        return "\\n "
    if 0x20 <= value < 0x7F:
        return f" {chr(value)} "
    return " . "


def format_dump(snapshot, fmt, width=16):
    """
    Render the used part of the tape, `width` cells per row.

    Rows cover cells 0 through the high-water mark. `hex` prints each cell
    as a space padded hex byte followed by an ascii gutter, `ascii` prints
    only the gutter.
    """
    if fmt not in DUMP_FORMATS:
        raise ValueError(f"unknown dump format {fmt!r}, expected one of {', '.join(DUMP_FORMATS)}")
    if fmt == "none":
        return []

    cells, high_water = snapshot
    end = min(len(cells), high_water + 1)
    lines = []
    for row in range(0, end, width):
        chunk = cells[row:min(row + width, end)]
        gutter = "".join(_ascii_cell(v) for v in chunk)
        if fmt == "hex":
            body = "".join(f"{v:2X} " for v in chunk) + "\t" + gutter
        else:
            body = gutter
        lines.append(f"{row:04X}: {body}")
    return lines


def dump(snapshot, fmt, stream=None):
    stream = stream if stream is not None else sys.stdout
    logger.info("printing memory dump")
    for line in format_dump(snapshot, fmt):
        print(line, file=stream)
