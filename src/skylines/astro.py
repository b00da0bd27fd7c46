import astropy.units as u

from .types import ParseError, Star


# 1 h of right ascension = 2pi/24 rad, 1 deg = 2pi/360 rad
_HOUR_TO_RAD = (1.0 * u.hourangle).to_value(u.rad)
_DEG_TO_RAD = (1.0 * u.deg).to_value(u.rad)


def _parse_number(text: str, what: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"malformed {what}: {text!r}") from e


def ra_to_radians(ra_text: str) -> float:
    """Convert right ascension given in (fractional) hours to radians."""
    return _parse_number(ra_text, "right ascension") * _HOUR_TO_RAD


def dec_to_radians(dec_text: str) -> float:
    """Convert declination in signed degrees to radians measured from the south pole.

    -90 maps to 0 and +90 maps to pi. No clamping is performed.
    """
    return (_parse_number(dec_text, "declination") + 90.0) * _DEG_TO_RAD


def star_from_text(ra_text: str, dec_text: str) -> Star:
    return Star(ra=ra_to_radians(ra_text), dec=dec_to_radians(dec_text))
