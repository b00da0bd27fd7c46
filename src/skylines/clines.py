"""Parser for KStars ``clines.dat`` constellation line descriptions.

Only the Western constellation section is read. It starts at the first line
beginning with ``C`` and ends at the next one. Inside it:

- two consecutive lines starting with ``#`` open a new constellation,
- ``M <id>`` moves the pen to star ``<id>`` (start of a disconnected line),
- ``D <id>`` draws a line from the previous point to star ``<id>``.

Stars are collected once per constellation in first-seen order, and every
segment is stored as a pair of indices into that star list.
"""
from typing import Iterable, List

from .catalog import StarCatalog
from .paths import DRAW, MOVE, SECTION_MARKER, SEPARATOR
from .types import ConstellationData, LastAction, MissingStarError, ParseError, ParserState, Phase, Star


_RECORD_ACTIONS = {
    MOVE: LastAction.MOVE,
    DRAW: LastAction.DRAW,
}


class ConstellationLineParser:
    def __init__(self, catalog: StarCatalog):
        self.catalog = catalog
        self.state = ParserState()
        self.stars: List[Star] = []
        self.points: List[int] = []
        self._line_number = 0

    @property
    def done(self) -> bool:
        return self.state.phase is Phase.DONE

    def feed(self, line: str) -> bool:
        """Processes one line. Returns False once the section has ended."""
        state = self.state
        if state.phase is Phase.DONE:
            return False

        self._line_number += 1
        first_char = line[:1]

        if state.phase is Phase.BEFORE_SECTION:
            if first_char == SECTION_MARKER:
                # Start of Western constellations list
                state.phase = Phase.IN_SECTION
                state.prev_char = first_char
            return True

        if first_char == SECTION_MARKER:
            # Next (non-Western) section
            state.phase = Phase.DONE
            return False

        if first_char == SEPARATOR and state.prev_char == SEPARATOR:
            self.start_constellation()

        action = _RECORD_ACTIONS.get(first_char)
        if action is None:
            state.last_action = LastAction.NONE
        else:
            tokens = line.split()
            if len(tokens) < 2:
                raise ParseError(f"record without star identifier: {line.rstrip()!r}", self._line_number)
            self.emit(action, self.record_index(tokens[1]))

        state.prev_char = first_char
        return True

    def start_constellation(self) -> None:
        self.state.constellation_stars = []
        self.state.constellation_offset = self.state.star_count

    def record_index(self, identifier: str) -> int:
        """Returns the global star index for identifier, adding the star on first use
        within the current constellation."""
        state = self.state
        try:
            position = state.constellation_stars.index(identifier)
        except ValueError:
            star = self.catalog.lookup(identifier)
            if star is None:
                raise MissingStarError(identifier) from None
            self.stars.append(star)
            state.constellation_stars.append(identifier)
            state.star_count += 1
            return state.star_count - 1
        return position + state.constellation_offset

    def emit(self, action: LastAction, index: int) -> None:
        """Appends segment endpoints for a MOVE or DRAW record at star index."""
        state = self.state
        if action is LastAction.DRAW and state.last_action is LastAction.DRAW:
            # close the pair ending at the previous point, then open the next one there
            self.points.append(state.prev_index)
        self.points.append(index)
        state.prev_index = index
        state.last_action = action

    def parse(self, lines: Iterable[str]) -> ConstellationData:
        for line in lines:
            if not self.feed(line.rstrip("\r\n")):
                break
        if len(self.points) % 2:
            raise ParseError(f"segment list ends with an unpaired endpoint ({len(self.points)} points)", self._line_number)
        return self.result()

    def result(self) -> ConstellationData:
        return ConstellationData(stars=list(self.stars), points=list(self.points))


def parse_constellations(lines: Iterable[str], catalog: StarCatalog) -> ConstellationData:
    return ConstellationLineParser(catalog).parse(lines)


def load_constellations(filename: str, catalog: StarCatalog) -> ConstellationData:
    """Reads clines.dat and resolves its stars against catalog."""
    with open(filename, encoding="utf-8") as f:
        return parse_constellations(f, catalog)
