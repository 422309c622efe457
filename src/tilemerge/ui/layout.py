from typing import List, Optional, Sequence, Tuple

from tilemerge.constants import INNER_CELL_HEIGHT, INNER_CELL_WIDTH

# (text, tile value) pieces of a terminal line; value None means border/padding.
Segment = Tuple[str, Optional[int]]
Line = List[Segment]


def content_row(cell_height: int = INNER_CELL_HEIGHT) -> int:
    """Index of the line inside a cell that carries the number."""
    return cell_height // 2


def cell_text(value: int, width: int, *, content: bool = True) -> str:
    """Text of one colored cell block: the number centered, blank when empty."""
    if not content or value == 0:
        return " " * width
    return str(value).center(width)


def _border(size: int, width: int, left: str, inner: str, right: str) -> Line:
    return [(left + inner.join("─" * width for _ in range(size)) + right, None)]


def board_lines(
    snapshot: Sequence[Sequence[int]],
    cell_width: int = INNER_CELL_WIDTH,
    cell_height: int = INNER_CELL_HEIGHT,
) -> List[Line]:
    """Lay the board out as box-drawing lines.

    Each cell is cell_width characters wide: one blank on each side of a
    colored block holding the centered value.
    """
    size = len(snapshot)
    block_width = max(1, cell_width - 2)
    lines: List[Line] = [_border(size, cell_width, "┌", "┬", "┐")]
    for row_index, row in enumerate(snapshot):
        for i in range(cell_height):
            is_content = i == content_row(cell_height)
            line: Line = [("│", None)]
            for value in row:
                line.append((" ", None))
                line.append((cell_text(value, block_width, content=is_content), value))
                line.append((" │", None))
            lines.append(line)
        if row_index < size - 1:
            lines.append(_border(size, cell_width, "├", "┼", "┤"))
    lines.append(_border(size, cell_width, "└", "┴", "┘"))
    return lines


def line_text(line: Line) -> str:
    return "".join(text for text, _ in line)


def render_text(snapshot: Sequence[Sequence[int]], **kwargs) -> str:
    return "\n".join(line_text(line) for line in board_lines(snapshot, **kwargs))
