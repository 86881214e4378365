"""Hand-written splitter for machine-generated stylesheets.

Only top-level constructs are located; nested blocks are skipped over by
brace-depth counting and returned as raw body text::

    .a { color: red; }              -> Rule(".a", "color: red;")
    @layer base { .b { ... } }      -> AtRule("layer", "base", ".b { ... }")
    @layer theme, base;             -> AtRule("layer", "theme, base", None)

The scan is a small state machine over a character cursor.  The cursor index
advances on every consumed character, so malformed input always terminates:
an unterminated block runs to the end of the text, and trailing text with no
``{`` is dropped.
"""

from __future__ import annotations

import re

from ns_tailwind.model.node import AtRule, Rule, StyleNode

__all__ = ["split_stylesheet"]

# @name params terminated by ';' or '{'
_AT_RULE_HEAD_RE = re.compile(r"@(-?\w[\w-]*)([^{;]*)(;|\{)")


class _Cursor:
    """Position and brace depth over a source string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.depth = 0

    @property
    def done(self) -> bool:
        return self.index >= len(self.source)

    def skip_whitespace(self) -> None:
        while not self.done and self.source[self.index].isspace():
            self.index += 1

    def peek(self) -> str:
        return self.source[self.index]

    def read_block(self) -> str:
        """Consume up to the ``}`` closing an already-opened block.

        The cursor must sit just past the opening ``{``.  Returns the text
        between the braces; an unterminated block yields the rest of the input.
        """
        start = self.index
        self.depth = 1
        while not self.done:
            char = self.source[self.index]
            self.index += 1
            if char == "{":
                self.depth += 1
            elif char == "}":
                self.depth -= 1
                if self.depth == 0:
                    return self.source[start : self.index - 1]
        self.depth = 0
        return self.source[start:]


def _read_at_rule(cursor: _Cursor) -> AtRule | None:
    match = _AT_RULE_HEAD_RE.match(cursor.source, cursor.index)
    if match is None:
        return None
    name, params, terminator = match.groups()
    cursor.index = match.end()
    if terminator == ";":
        return AtRule(name=name, params=params.strip(), body=None)
    return AtRule(name=name, params=params.strip(), body=cursor.read_block())


def _read_rule(cursor: _Cursor) -> Rule | None:
    """Read ``selector { body }``; return None when the rule is empty.

    When no ``{`` remains the cursor is moved to the end of the input.
    """
    open_brace = cursor.source.find("{", cursor.index)
    if open_brace == -1:
        cursor.index = len(cursor.source)
        return None
    selector = cursor.source[cursor.index : open_brace].strip()
    cursor.index = open_brace + 1
    body = cursor.read_block().strip()
    if not selector or not body:
        return None
    return Rule(selector=selector, body=body)


def split_stylesheet(css: str) -> list[StyleNode]:
    """Split *css* into its top-level rules and at-rules, in source order."""
    nodes: list[StyleNode] = []
    cursor = _Cursor(css)
    while True:
        cursor.skip_whitespace()
        if cursor.done:
            break
        if cursor.peek() == "@":
            at_rule = _read_at_rule(cursor)
            if at_rule is not None:
                nodes.append(at_rule)
                continue
        rule = _read_rule(cursor)
        if rule is not None:
            nodes.append(rule)
    return nodes
