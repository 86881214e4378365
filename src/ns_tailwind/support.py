"""Properties and values understood by the NativeScript styling engine.

Every property maps to a :class:`SupportRule`: ``Always`` accepts any value
(subject to the unsupported-suffix check), ``OneOf`` accepts only the listed
keywords.  The table is read-only and shared by all transformations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

__all__ = [
    "Always",
    "OneOf",
    "SupportRule",
    "SUPPORTED_PROPERTIES",
    "UNSUPPORTED_VALUE_SUFFIXES",
    "CUSTOM_PROPERTY_PREFIX",
    "is_supported",
    "is_bookkeeping_variable",
]


@dataclass(frozen=True)
class Always:
    """Any value is accepted."""


@dataclass(frozen=True, init=False)
class OneOf:
    """Only the listed keyword values are accepted."""

    values: frozenset[str]

    def __init__(self, *values: str) -> None:
        object.__setattr__(self, "values", frozenset(values))


SupportRule = Union[Always, OneOf]

_ALWAYS = Always()

# ---------------------------------------------------------------------------
# Support table
# ---------------------------------------------------------------------------

_ALWAYS_SUPPORTED = (
    "align-content",
    "align-items",
    "align-self",
    "android-selected-tab-highlight-color",
    "android-elevation",
    "android-dynamic-elevation-offset",
    "animation",
    "animation-delay",
    "animation-direction",
    "animation-duration",
    "animation-fill-mode",
    "animation-iteration-count",
    "animation-name",
    "animation-timing-function",
    "background",
    "background-color",
    "background-image",
    "background-position",
    "background-size",
    "border-bottom-color",
    "border-bottom-left-radius",
    "border-bottom-right-radius",
    "border-bottom-width",
    "border-color",
    "border-left-color",
    "border-left-width",
    "border-radius",
    "border-right-color",
    "border-right-width",
    "border-top-color",
    "border-top-left-radius",
    "border-top-right-radius",
    "border-top-width",
    "border-width",
    "box-shadow",
    "clip-path",
    "color",
    "flex",
    "flex-grow",
    "flex-direction",
    "flex-shrink",
    "flex-wrap",
    "font",
    "font-family",
    "font-size",
    "font-weight",
    "font-variation-settings",
    "height",
    "highlight-color",
    "justify-content",
    "justify-items",
    "justify-self",
    "letter-spacing",
    "line-height",
    "margin",
    "margin-bottom",
    "margin-left",
    "margin-right",
    "margin-top",
    "margin-block",
    "margin-block-start",
    "margin-block-end",
    "margin-inline",
    "margin-inline-start",
    "margin-inline-end",
    "min-height",
    "min-width",
    "max-height",
    "max-width",
    "off-background-color",
    "opacity",
    "order",
    "padding",
    "padding-block",
    "padding-bottom",
    "padding-inline",
    "padding-left",
    "padding-right",
    "padding-top",
    "place-content",
    "placeholder-color",
    "place-items",
    "place-self",
    "selected-tab-text-color",
    "tab-background-color",
    "tab-text-color",
    "tab-text-font-size",
    "text-shadow",
    "transform",
    "rotate",
    "width",
    "z-index",
)

_ENUMERATED: dict[str, SupportRule] = {
    "background-repeat": OneOf("repeat", "repeat-x", "repeat-y", "no-repeat"),
    "font-style": OneOf("italic", "normal"),
    "horizontal-align": OneOf("left", "center", "right", "stretch"),
    "text-transform": OneOf("none", "capitalize", "uppercase", "lowercase"),
    "text-align": OneOf("left", "center", "right"),
    "text-decoration": OneOf("none", "line-through", "underline"),
    "vertical-align": OneOf("top", "center", "bottom", "stretch"),
    "visibility": OneOf("visible", "collapse"),
}

SUPPORTED_PROPERTIES: Mapping[str, SupportRule] = MappingProxyType(
    {**{prop: _ALWAYS for prop in _ALWAYS_SUPPORTED}, **_ENUMERATED}
)

# Values ending with any of these are rejected whatever the property.
UNSUPPORTED_VALUE_SUFFIXES = ("max-content", "min-content", "vh", "vw")

CUSTOM_PROPERTY_PREFIX = "--"

# Tailwind cascade bookkeeping variables; meaningless to NativeScript.
_BOOKKEEPING_PREFIXES = (
    "--tw-ring",
    "--tw-shadow",
    "--tw-ordinal",
    "--tw-slashed-zero",
    "--tw-numeric",
)
_REVERSE_VARIABLE_RE = re.compile(r"--tw-(divide|space)-[xy]-reverse")


def is_bookkeeping_variable(prop: str) -> bool:
    """Return True for Tailwind custom properties that are always dropped."""
    if prop.startswith(_BOOKKEEPING_PREFIXES):
        return True
    return _REVERSE_VARIABLE_RE.search(prop) is not None


def is_supported(prop: str, value: str | None = None) -> bool:
    """Return True if NativeScript accepts ``prop: value``.

    Without a *value* only the property name is checked.
    """
    rule = SUPPORTED_PROPERTIES.get(prop)
    if rule is None:
        return False
    if not value:
        return True
    if value.endswith(UNSUPPORTED_VALUE_SUFFIXES):
        return False
    if isinstance(rule, OneOf):
        return value in rule.values
    return True
