from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Star:
    """Equatorial position in radians.

    ra is in [0, 2pi) and dec is shifted to [0, pi] (south pole at 0).
    """

    ra: float
    dec: float


class ParseError(ValueError):
    """Raised on malformed input text (numbers, catalog rows, record lines)."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class MissingStarError(KeyError):
    """A constellation line references a star the catalog does not know."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Star HD {self.identifier} not found!"


class Phase(Enum):
    BEFORE_SECTION = "before_section"
    IN_SECTION = "in_section"
    DONE = "done"


class LastAction(Enum):
    """What the previous line of the section emitted."""

    NONE = "none"  # section start, separator or any other non-record line
    MOVE = "move"
    DRAW = "draw"


@dataclass
class ParserState:
    """Scan state carried from one clines.dat line to the next."""

    constellation_stars: List[str] = field(default_factory=list)
    star_count: int = 0
    constellation_offset: int = 0
    prev_char: str = ""
    prev_index: int = 0
    last_action: LastAction = LastAction.NONE
    phase: Phase = Phase.BEFORE_SECTION


@dataclass
class ConstellationData:
    """Unique stars in first-seen order and the flat list of segment endpoints."""

    stars: List[Star]
    points: List[int]

    @property
    def lines(self) -> List[Tuple[int, int]]:
        if len(self.points) % 2:
            raise ValueError(f"odd number of segment endpoints: {len(self.points)}")
        return list(zip(self.points[0::2], self.points[1::2]))
