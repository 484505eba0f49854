"""
Line/column cursor arithmetic.

Lines are separated by '\\n' only. After a newline the column restarts
at 1, so a '\\r' before the newline is counted on the line it ends.
"""


def advance_position(line: int, column: int, consumed: str) -> tuple[int, int]:
    """
    Move a (line, column) cursor past a consumed span.

    Args:
        line: Current line (1-indexed)
        column: Current column (1-indexed)
        consumed: The text just matched at the cursor

    Returns:
        The (line, column) of the first character after the span

    Example:
        >>> advance_position(1, 1, "foo ")
        (1, 5)
        >>> advance_position(1, 4, "\\n\\n  ")
        (3, 3)
    """
    newlines = consumed.count("\n")
    if newlines == 0:
        return line, column + len(consumed)

    # Characters following the last newline land on the new line
    tail = len(consumed) - consumed.rfind("\n") - 1
    return line + newlines, 1 + tail
