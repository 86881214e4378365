"""Stylesheet entry points: split, dispatch each node, serialize."""

from __future__ import annotations

import logging

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.node import AtRule, Rule
from ns_tailwind.parser import split_stylesheet
from ns_tailwind.transforms.atrule import transform_at_rule
from ns_tailwind.transforms.rule import transform_rule

logger = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = "\n\n"


def transform_nodes(css: str, options: TransformOptions, depth: int) -> str:
    """Transform *css* as a stylesheet nested *depth* ``@layer`` levels deep."""
    fragments: list[str] = []
    for node in split_stylesheet(css):
        if isinstance(node, AtRule):
            fragment = transform_at_rule(node, options, depth)
        elif isinstance(node, Rule):
            fragment = transform_rule(node, options)
        else:  # pragma: no cover
            continue
        if fragment:
            fragments.append(fragment)
    return FRAGMENT_SEPARATOR.join(fragments)


def transform(css: str, options: TransformOptions | None = None) -> str:
    """Rewrite a Tailwind stylesheet into NativeScript-compatible CSS.

    Unsupported rules, declarations and at-rules are dropped silently;
    ``@layer`` contents are lifted to the top level.  Returns an empty
    string when nothing survives.
    """
    return transform_nodes(css, options or TransformOptions(), depth=0)


def safe_transform(css: str, options: TransformOptions | None = None) -> str | None:
    """Like :func:`transform`, but never raises.

    Returns None on an unexpected failure so the caller can pass the
    original text through untouched.
    """
    try:
        return transform(css, options)
    except Exception:
        logger.exception("Failed to transform stylesheet")
        return None
