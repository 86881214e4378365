"""Value-level rewrites: relative length units to device pixels."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

REM_BASE = 16

# A number followed by em or rem, e.g. "1.5rem", ".25em", "2 rem".
_RELATIVE_LENGTH_RE = re.compile(r"(\d*\.?\d+)\s*r?em")


def format_number(number: float) -> str:
    """Render *number* the shortest way: ``24.0 -> "24"``, ``1.6 -> "1.6"``."""
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))


def convert_units(value: str, debug: bool = False) -> str:
    """Replace every em/rem length in *value* by its unitless pixel value."""
    if "em" not in value:
        return value

    def _replace(match: re.Match[str]) -> str:
        converted = format_number(float(match.group(1)) * REM_BASE)
        if debug:
            logger.info("Converting %s to %s", match.group(0), converted)
        return converted

    return _RELATIVE_LENGTH_RE.sub(_replace, value)
