from .types import Position


def position(text: str, offset: int) -> Position:
    # 1-based line/col, rescanned from the start on every call
    line = 1
    column = 1
    for ch in text[:offset]:
        if ch == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return Position(line, column)
