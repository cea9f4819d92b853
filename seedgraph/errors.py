from typing import Optional
from .types import Position


class SeedError(Exception):
    """
    A fatal error. There is no recovery: the first one raised ends the run,
    the driver prints `error: <str(err)>` and exits with status 1.
    """

    description: str
    pos: Optional[Position]

    def __init__(self, description: str, pos: Optional[Position] = None):
        super().__init__(description)
        self.description = description
        self.pos = pos

    def __str__(self):
        if self.pos is None:
            return f"{self.description}."
        return f"{self.pos}: {self.description}."


class SourceError(SeedError):
    pass


class LexError(SeedError):
    pass


class ParseError(SeedError):
    pass
