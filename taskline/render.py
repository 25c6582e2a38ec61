"""Escape-sequence builders for the task display.

Each function returns the exact text to write for one event; nothing here
touches the terminal or the stack. Columns are 1-based, as the terminal's
absolute column command expects. Depth d (1 = root) keeps its spinner at
column ``(d - 1) * indent + 1``.
"""

from taskline.stack import Pop, Push

SAVE = "\x1b[s"
RESTORE = "\x1b[u"
CLEAR_EOL = "\x1b[K"
RESET = "\x1b[0m"
ATTENTION = "\x1b[33;1m"  # bold yellow

BRANCH = "┣"
THROUGH = "┃"
CONNECTOR = "┗━ "
PENDING = "-"


def up(rows: int) -> str:
    return f"\x1b[{rows}A"


def column(col: int) -> str:
    return f"\x1b[{col}G"


def spinner_column(depth: int, indent: int = 5) -> int:
    return (depth - 1) * indent + 1


def connector_column(depth: int, indent: int = 5) -> int:
    """Column of the ``┗`` drawn for a task at ``depth`` (>= 2)."""
    return spinner_column(depth, indent) - len(CONNECTOR)


def begin(push: Push, message: str, indent: int = 5) -> str:
    """Text for a newly pushed task.

    When there was already a task, a newline first makes room for the new
    bottom line. If the predecessor already had children below it, the
    branch column between them and the new line is rethreaded: the row
    just under the predecessor becomes ``┣`` and the rows down to the new
    line become ``┃``.
    """
    out = []
    if push.prior_count:
        out.append("\n")

    last = push.prior_last_offset
    if last is not None:
        out.append(SAVE)
        if last > 1:
            out.append(up(last - 1))
            out.append(column(connector_column(push.depth, indent)))
            out.append(BRANCH)
        for _ in range(1, last):
            # back over the glyph just drawn, then one row down
            out.append("\x1b[1D\x1b[1B" + THROUGH)
        out.append(RESTORE)

    if push.depth > 1:
        out.append(" " * (connector_column(push.depth, indent) - 1) + CONNECTOR)
    out.append(f"{ATTENTION}{PENDING}{RESET} {message}")
    return "".join(out)


def end(pop: Pop, glyph: str, message: str, indent: int = 5) -> str:
    """Text that resolves a popped task's spinner into ``glyph``.

    The cursor is put back afterwards unless the task owned the bottom
    line. A newline follows once the last task is gone.
    """
    out = [SAVE]
    if pop.row_offset > 0:
        out.append(up(pop.row_offset))
    out.append(column(spinner_column(pop.remaining + 1, indent)))
    out.append(f"{glyph} {CLEAR_EOL}{message}")
    if pop.row_offset != 0:
        out.append(RESTORE)
    if pop.remaining == 0:
        out.append("\n")
    return "".join(out)


def orphan_end(glyph: str, message: str) -> str:
    """Plain line for an end with no task open."""
    return f"{glyph} {message}\n"


def tick(offsets: list[int], frame: str, indent: int = 5) -> str:
    """Repaint every spinner, outermost first, with ``frame``."""
    out = []
    for depth, offset in enumerate(offsets, start=1):
        out.append(SAVE)
        if offset > 0:
            out.append(up(offset))
        out.append(column(spinner_column(depth, indent)))
        out.append(f"{ATTENTION}{frame}{RESET}{RESTORE}")
    return "".join(out)
