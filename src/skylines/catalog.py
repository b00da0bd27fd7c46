import csv
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .astro import star_from_text
from .paths import DEC_COLUMN, ID_COLUMN, MIN_COLUMNS, RA_COLUMN
from .types import ParseError, Star


# HD stars used by clines.dat but absent from the HYG catalog (data from wikisky.org).
# id -> (RA hours, Dec degrees)
MISSING_STARS: Dict[str, Tuple[str, str]] = {
    "108249": ("12.443472222200002", "-63.09944444399999"),
    "24072": ("3.8099722222", "-37.620555556"),
    "18623": ("2.9711944444666663", "-40.304444444"),
    "68243": ("8.158138888866668", "-47.345833333"),
}


class StarCatalog:
    """Maps a catalog identifier (HD number) to its position.

    Adding an identifier that is already present replaces the earlier entry,
    so the last row of the source wins.
    """

    def __init__(self) -> None:
        self._stars: Dict[str, Star] = {}

    def add(self, identifier: str, ra_text: str, dec_text: str) -> Star:
        star = star_from_text(ra_text, dec_text)
        self._stars[identifier] = star
        return star

    def apply_patches(self, patches: Dict[str, Tuple[str, str]]) -> None:
        for identifier, (ra_text, dec_text) in patches.items():
            self.add(identifier, ra_text, dec_text)

    def lookup(self, identifier: str) -> Optional[Star]:
        return self._stars.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._stars

    def __len__(self) -> int:
        return len(self._stars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._stars)


def read_star_catalog(
    lines: Iterable[str],
    patches: Optional[Dict[str, Tuple[str, str]]] = MISSING_STARS,
) -> StarCatalog:
    """Builds a StarCatalog from comma-separated rows.

    The first row is a header and is skipped. Rows with an empty identifier
    are skipped; rows too short to hold the id/RA/Dec columns raise ParseError.
    """
    catalog = StarCatalog()
    reader = csv.reader(lines)
    next(reader, None)
    for row in reader:
        if len(row) < MIN_COLUMNS:
            raise ParseError(f"expected at least {MIN_COLUMNS} fields, got {len(row)}", reader.line_num)
        identifier = row[ID_COLUMN]
        if identifier == "":
            continue
        try:
            catalog.add(identifier, row[RA_COLUMN], row[DEC_COLUMN])
        except ParseError as e:
            raise ParseError(str(e), reader.line_num) from e

    if patches:
        catalog.apply_patches(patches)
    return catalog


def load_star_catalog(
    filename: str,
    patches: Optional[Dict[str, Tuple[str, str]]] = MISSING_STARS,
) -> StarCatalog:
    """Loads the HYG star catalog CSV and applies the missing-star patches."""
    with open(filename, newline="", encoding="utf-8") as csvfile:
        return read_star_catalog(csvfile, patches=patches)
