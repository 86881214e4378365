"""ns_tailwind model layer -- public type re-exports."""

from ns_tailwind.model.node import AtRule, Rule, StyleNode
from ns_tailwind.model.declaration import (
    Declaration,
    Drop,
    Expanded,
    Keep,
    TransformResult,
)

__all__ = [
    # node
    "Rule",
    "AtRule",
    "StyleNode",
    # declaration
    "Declaration",
    "Drop",
    "Keep",
    "Expanded",
    "TransformResult",
]
