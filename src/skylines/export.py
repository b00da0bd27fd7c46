"""Serialisation of parsed constellation data for the front end.

The generated file is a CommonJS module whose payload is
``{"s": [[ra, dec], ...], "l": [[i, j], ...]}``.
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np

from .paths import MODULE_PREFIX, OUTPUT_PRECISION
from .types import ConstellationData


def to_payload(data: ConstellationData, precision: Optional[int] = OUTPUT_PRECISION) -> Dict[str, Any]:
    """Builds the ``{"s": ..., "l": ...}`` structure.

    Coordinates are rounded to ``precision`` decimals to keep the file small;
    pass None to keep full precision.
    """
    coords = np.array([[star.ra, star.dec] for star in data.stars], dtype=float).reshape(-1, 2)
    if precision is not None:
        coords = np.round(coords, precision)

    return {
        "s": coords.tolist(),
        "l": [[start, end] for start, end in data.lines],
    }


def render_module(
    data: ConstellationData,
    precision: Optional[int] = OUTPUT_PRECISION,
    prefix: str = MODULE_PREFIX,
) -> str:
    return prefix + json.dumps(to_payload(data, precision), separators=(",", ":"))


def write_constellations(
    filename: Union[str, Path],
    data: ConstellationData,
    precision: Optional[int] = OUTPUT_PRECISION,
    prefix: str = MODULE_PREFIX,
) -> Path:
    path = Path(filename)
    path.write_text(render_module(data, precision, prefix), encoding="utf-8")
    return path
