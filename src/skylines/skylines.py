# -*- coding: utf-8 -*-
import argparse
from pathlib import Path
import sys
from typing import List, Optional

from .catalog import load_star_catalog
from .clines import load_constellations
from .config import cache_dir, load_config
from .export import write_constellations
from .fetch import ensure_sources
from .paths import CLINES_FILE_NAME, HYGDATA_FILE_NAME, OUTPUT_FILE
from .types import MissingStarError, ParseError


EXIT_IO_ERROR = 1
EXIT_MISSING_STAR = 2
EXIT_PARSE_ERROR = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments."""
    parser = argparse.ArgumentParser(description="Generate constellation line data for the sky viewer")
    parser.add_argument("-d", "--data-dir", type=str, default=None, help="Directory holding hygdata_v3.csv and clines.dat (default: user cache directory)")
    parser.add_argument("-o", "--output", type=str, default=OUTPUT_FILE, help=f"Output file (default: {OUTPUT_FILE})")
    parser.add_argument("-p", "--precision", type=int, default=None, help="Decimal places kept for coordinates (default: from config, 6)")
    parser.add_argument("--no-download", action="store_true", help="Do not download missing source files.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the constellation data generator."""
    args = parse_args(argv)
    config = load_config()

    data_dir = Path(args.data_dir) if args.data_dir else cache_dir()
    precision = args.precision if args.precision is not None else config["precision"]

    try:
        if args.no_download:
            catalog_file = data_dir / HYGDATA_FILE_NAME
            clines_file = data_dir / CLINES_FILE_NAME
        else:
            catalog_file, clines_file = ensure_sources(data_dir, config)

        catalog = load_star_catalog(str(catalog_file))
        print(f"Loaded {len(catalog)} stars from {catalog_file.name}")

        data = load_constellations(str(clines_file), catalog)
        print(f"Collected {len(data.stars)} stars and {len(data.points) // 2} lines")

        write_constellations(args.output, data, precision=precision)
    except MissingStarError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MISSING_STAR
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print("Constellations file successfully generated! :-)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
