"""Top-level stylesheet constructs produced by the splitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Rule:
    """A selector and the raw text of its declaration block."""

    selector: str
    body: str


@dataclass(frozen=True)
class AtRule:
    """An ``@name params`` construct.

    ``body`` is the raw text between the outer braces, or ``None`` when the
    at-rule was terminated by ``;`` (for example ``@layer base, utilities;``).
    """

    name: str
    params: str
    body: str | None = None

    @property
    def has_block(self) -> bool:
        return self.body is not None


StyleNode = Union[Rule, AtRule]
