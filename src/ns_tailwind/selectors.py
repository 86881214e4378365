"""Selector checks and rewrites for the NativeScript selector vocabulary."""

from __future__ import annotations

import re

__all__ = [
    "ROOT_SELECTOR",
    "UNSUPPORTED_PSEUDO_CLASSES",
    "is_placeholder_selector",
    "is_supported_selector",
    "rewrite_selector",
]

# NativeScript's equivalents of the document root.
ROOT_SELECTOR = ".ns-root, .ns-modal"

UNSUPPORTED_PSEUDO_CLASSES = (":focus-within", ":hover")

NESTING_SELECTOR = "&"

_ROOT_RE = re.compile(r":root|:host")
_WHERE_RE = re.compile(r":where\(([^)]+)\)")
# Tailwind's space-* / divide-* sibling patterns.
_SIBLING_RES = (
    re.compile(r":not\(:last-child\)"),
    re.compile(r":not\(\[hidden\]\) ~ :not\(\[hidden\]\)"),
)
_PLACEHOLDER = "::placeholder"


def is_supported_selector(selector: str) -> bool:
    """Return False for nested (``&``) selectors and unsupported pseudo-classes."""
    if NESTING_SELECTOR in selector:
        return False
    return not any(pseudo in selector for pseudo in UNSUPPORTED_PSEUDO_CLASSES)


def is_placeholder_selector(selector: str) -> bool:
    return _PLACEHOLDER in selector


def rewrite_selector(selector: str) -> str:
    """Rewrite *selector* into NativeScript's selector vocabulary.

    Rewrites apply in order, each to the previous result:
    ``:root``/``:host`` to the root classes, ``:where(X)`` to ``X``, the
    sibling patterns to ``* + *``, and ``::placeholder`` removed.
    """
    selector = _ROOT_RE.sub(ROOT_SELECTOR, selector)
    selector = _WHERE_RE.sub(r"\1", selector)
    for pattern in _SIBLING_RES:
        selector = pattern.sub("* + *", selector)
    selector = selector.replace(_PLACEHOLDER, "")
    return selector.strip()
