"""Base protocol for declaration steps."""

from __future__ import annotations

from typing import Protocol

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.declaration import Declaration, TransformResult


class DeclarationStep(Protocol):
    """One entry of the ordered declaration policy.

    The first step whose ``matches`` returns True decides the result.
    """

    def matches(self, decl: Declaration) -> bool: ...

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult: ...
