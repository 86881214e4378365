"""Lark-based parser and serializer for the CSS ``animation`` shorthand.

``parse_animation`` decomposes one animation (no commas) into its
sub-properties; fields that the value leaves unspecified are ``"unset"``.
Times are returned in milliseconds, ``int`` when integral.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from ns_tailwind.errors import ShorthandParseError

__all__ = [
    "FIELDS",
    "UNSET",
    "TimingFunction",
    "parse_animation",
    "serialize_animation",
]

GRAMMAR_PATH = Path(__file__).parent / "animation.lark"

UNSET = "unset"

# Canonical shorthand order, also the output order of serialize_animation().
FIELDS = (
    "name",
    "duration",
    "timing_function",
    "delay",
    "iteration_count",
    "direction",
    "fill_mode",
    "play_state",
)

_TIMING_KEYWORDS = frozenset({
    "ease",
    "ease-in",
    "ease-out",
    "ease-in-out",
    "linear",
    "step-start",
    "step-end",
})
_DIRECTION_KEYWORDS = frozenset({"normal", "reverse", "alternate", "alternate-reverse"})
_FILL_MODE_KEYWORDS = frozenset({"none", "forwards", "backwards", "both"})
_PLAY_STATE_KEYWORDS = frozenset({"running", "paused"})

# Keyword categories in the order CSS resolves ambiguous keywords.
_KEYWORD_SLOTS = (
    ("timing_function", _TIMING_KEYWORDS),
    ("direction", _DIRECTION_KEYWORDS),
    ("fill_mode", _FILL_MODE_KEYWORDS),
    ("play_state", _PLAY_STATE_KEYWORDS),
)


@dataclass(frozen=True)
class TimingFunction:
    """A functional easing value such as ``cubic-bezier(0.4, 0, 0.6, 1)``."""

    function: str
    args: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.function}({','.join(self.args)})"


@dataclass(frozen=True)
class _Component:
    kind: str  # "time", "number", "keyword", "string", "function"
    value: object


class _AnimationTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the parse tree into a flat list of typed components."""

    def time(self, items: list[Token]) -> _Component:
        raw = str(items[0]).lower()
        if raw.endswith("ms"):
            millis = float(raw[:-2])
        else:
            millis = float(raw[:-1]) * 1000
        millis = round(millis, 6)
        if millis.is_integer():
            return _Component("time", int(millis))
        return _Component("time", millis)

    def number(self, items: list[Token]) -> _Component:
        number = float(items[0])
        return _Component("number", int(number) if number.is_integer() else number)

    def keyword(self, items: list[Token]) -> _Component:
        return _Component("keyword", str(items[0]))

    def string(self, items: list[Token]) -> _Component:
        return _Component("string", str(items[0]))

    def fn_arg(self, items: list[Token]) -> str:
        return " ".join(str(t) for t in items)

    def timing_function(self, items: list[object]) -> _Component:
        name = str(items[0])
        args = tuple(str(a) for a in items[1:])
        return _Component("function", TimingFunction(function=name, args=args))

    def start(self, items: list[_Component]) -> list[_Component]:
        return items


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _assign(fields: dict[str, object], component: _Component) -> None:
    """Place one component in its slot, following CSS resolution order."""
    kind, value = component.kind, component.value

    if kind == "time":
        for slot in ("duration", "delay"):
            if fields[slot] == UNSET:
                fields[slot] = value
                return
        raise ShorthandParseError(f"Too many time values: {value!r}")

    if kind == "function":
        if fields["timing_function"] != UNSET:
            raise ShorthandParseError(f"Duplicate timing function: {value}")
        # Longhands take one token; a spaced argument would be cut in half.
        if any(" " in arg for arg in value.args):  # type: ignore[attr-defined]
            raise ShorthandParseError(f"Multi-token timing function argument: {value}")
        fields["timing_function"] = value
        return

    if kind == "number":
        if fields["iteration_count"] != UNSET:
            raise ShorthandParseError(f"Duplicate iteration count: {value!r}")
        fields["iteration_count"] = value
        return

    if kind == "keyword" and value == "infinite" and fields["iteration_count"] == UNSET:
        fields["iteration_count"] = value
        return

    if kind == "keyword":
        for slot, keywords in _KEYWORD_SLOTS:
            if value in keywords and fields[slot] == UNSET:
                fields[slot] = value
                return

    # Strings and any keyword whose category is already filled name the animation.
    if fields["name"] != UNSET:
        raise ShorthandParseError(f"Unexpected value in animation shorthand: {value!r}")
    fields["name"] = value


def parse_animation(text: str) -> dict[str, object]:
    """Parse a single-animation shorthand into a field mapping.

    Raises ShorthandParseError for lists of animations, ``var()`` references,
    and anything else the grammar does not accept.
    """
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ShorthandParseError(str(e), line=line, column=column) from e

    components = _AnimationTransformer().transform(tree)
    fields: dict[str, object] = {name: UNSET for name in FIELDS}
    for component in components:
        _assign(fields, component)
    return fields


def _serialize_value(key: str, value: object) -> str:
    if key in ("duration", "delay") and isinstance(value, (int, float)):
        return f"{value}ms"
    return str(value)


def serialize_animation(fields: dict[str, object]) -> str:
    """Render the set fields of *fields* back into shorthand text."""
    parts = [
        _serialize_value(key, fields[key])
        for key in FIELDS
        if key in fields and fields[key] != UNSET
    ]
    return " ".join(parts)
