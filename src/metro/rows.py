"""Row rendering for the metro diagram.

Every function here is pure: it takes the column count and the columns that
are drawn differently, and returns the literal text rows. Track ids never
reach this module.

Glyphs::

    |    rail                  *    station
    "    stopped rail          |\\   split, new rail peels off right
    \\    rail pushed right     |/   merge into this rail
    /    rail pulled left      |_   rail sliding left underneath
"""

RAIL = "|"
STATION = "*"
STOP = '"'
SPLIT = "|\\"
PUSH = "\\"
MERGE = "|/"
PULL = "/"
SLIDE = "|_"

# Fixed-width cells used by the two-row merge, which is drawn without separators
RAIL_CELL = "| "
PULL_CELL = " /"


def rails_row(width: int) -> str:
    """A row of ``width`` plain rails."""
    return " ".join([RAIL] * width)


def _labeled(row: str, text: str) -> str:
    return f"{row} {text}"


def station_rows(width: int, column: int | None, text: str) -> list[str]:
    """Rows for a station.

    The first row marks ``column`` (if any) and carries the first line of
    ``text``; every further line gets a plain rails row of its own.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    marked = " ".join(STATION if i == column else RAIL for i in range(width))
    rows = [_labeled(marked, lines[0])]

    plain = rails_row(width)
    rows.extend(_labeled(plain, line) for line in lines[1:])
    return rows


def split_row(width: int, column: int) -> str:
    """A new rail branching right from ``column``."""
    tokens = []
    for i in range(width):
        if i < column:
            tokens.append(RAIL)
        elif i == column:
            tokens.append(SPLIT)
        else:
            tokens.append(PUSH)
    return " ".join(tokens)


def stop_rows(width: int, column: int) -> list[str]:
    """Terminate the rail at ``column``.

    Rails right of it are pulled one column left in a second row, which is
    omitted when ``column`` is the rightmost.
    """
    rows = [" ".join(STOP if i == column else RAIL for i in range(width))]

    if column != width - 1:
        tokens = []
        for i in range(width):
            if i < column:
                tokens.append(RAIL)
            elif i == column:
                tokens.append("")
            else:
                tokens.append(PULL)
        rows.append(" ".join(tokens))

    return rows


def join_rows(width: int, left: int, right: int) -> list[str]:
    """Merge the rails at ``left`` and ``right`` into ``left``.

    ``right`` disappears. Adjacent rails merge in one row; otherwise the
    rail slides under the ones in between first and merges in a second row
    that is one column narrower.
    """
    if not 0 <= left < right < width:
        raise ValueError(f"invalid merge columns {left}, {right} for width {width}")

    if right - left == 1:
        tokens = []
        for i in range(width):
            if i > right:
                tokens.append(PULL)
            elif i == left:
                tokens.append(MERGE)
            elif i != right:
                tokens.append(RAIL)
        return [" ".join(tokens)]

    slide = []
    for i in range(width):
        if i > right:
            slide.append(PULL_CELL)
        elif i == right:
            continue
        elif i == right - 1:
            slide.append(MERGE)
        elif i > left:
            slide.append(SLIDE)
        else:
            slide.append(RAIL_CELL)

    narrowed = width - 1
    merge = []
    for i in range(narrowed):
        if i == left:
            merge.append(MERGE)
        elif i == narrowed - 1:
            merge.append(RAIL)
        else:
            merge.append(RAIL_CELL)

    return ["".join(slide), "".join(merge)]
