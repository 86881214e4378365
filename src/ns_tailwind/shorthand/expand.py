"""Expand the ``animation`` shorthand into NativeScript longhand declarations."""

from __future__ import annotations

import logging

from ns_tailwind.errors import ShorthandParseError
from ns_tailwind.model.declaration import Expanded
from ns_tailwind.shorthand.parser import UNSET, parse_animation, serialize_animation
from ns_tailwind.values import format_number

logger = logging.getLogger(__name__)

# NativeScript has no animation-play-state.
_EMITTED_FIELDS = (
    "name",
    "duration",
    "timing_function",
    "delay",
    "iteration_count",
    "direction",
    "fill_mode",
)
_TIME_FIELDS = ("duration", "delay")


def _format_time(millis: int | float) -> str:
    if isinstance(millis, int):
        return f"{format_number(millis / 1000)}s"
    return f"{format_number(millis)}ms"


def _longhand_value(key: str, value: object) -> str:
    if key in _TIME_FIELDS and isinstance(value, (int, float)):
        return _format_time(value)
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (str, int)):
        return str(value)
    # Composite values: longhands take a single token.
    return serialize_animation({key: value}).split(" ")[0]


def expand_animation(value: str) -> Expanded:
    """Fan ``animation: <value>`` out into ``animation-*`` declarations.

    Falls back to the original declaration when the value cannot be parsed
    (for example ``var(--animate-spin)`` or a comma-separated list).
    """
    try:
        fields = parse_animation(value)
    except ShorthandParseError as exc:
        logger.debug("Keeping animation shorthand %r: %s", value, exc)
        return Expanded(lines=(f"animation: {value}",))

    lines = tuple(
        f"animation-{key.replace('_', '-')}: {_longhand_value(key, fields[key])}"
        for key in _EMITTED_FIELDS
        if fields.get(key, UNSET) != UNSET
    )
    if not lines:
        return Expanded(lines=(f"animation: {value}",))
    return Expanded(lines=lines)
