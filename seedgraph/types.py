from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    start: int
    end: int


@dataclass(frozen=True)
class Position:
    line: int = 1
    column: int = 1

    def __str__(self):
        return f"{self.line}:{self.column}"
