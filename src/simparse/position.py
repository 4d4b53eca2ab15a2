"""Position utilities for error reporting.

Converts character offsets into line/column pairs and renders a short
source excerpt pointing at an offset. Only used on the failure path, so
everything here is O(n) in the offset and allocation-light.
"""


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Example:
        >>> column_offset("hello\\nworld", 2)
        2
        >>> column_offset("hello\\nworld", 6)
        0
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def line_col(source: str, pos: int) -> tuple[int, int]:
    """Return 1-based (line, column) for an offset, like text editors.

    Example:
        >>> line_col("ab\\ncd", 4)
        (2, 2)
    """
    return (line_offset(source, pos) + 1, column_offset(source, pos) + 1)


def get_error_context(source: str, pos: int, context_lines: int = 1, marker: str = "^") -> str:
    """Get formatted error context showing position in source.

    Args:
        source: Complete source text
        pos: Character offset of the error
        context_lines: Number of lines to show before/after the error line
        marker: Character used to point at the error column

    Example:
        >>> print(get_error_context("line1\\nline2\\nerror here", 12, context_lines=1))
        line2
        error here
        ^
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)

    lines = source.split("\n")

    start_line = max(0, line_num - context_lines)
    end_line = min(len(lines), line_num + context_lines + 1)

    context = []
    for i in range(start_line, end_line):
        context.append(lines[i])
        if i == line_num:
            context.append(" " * col_num + marker)

    return "\n".join(context)
