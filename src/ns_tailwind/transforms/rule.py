"""Rule transform: selector rewrite plus the declaration policy."""

from __future__ import annotations

from dataclasses import replace

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.node import Rule
from ns_tailwind.parser import parse_declarations
from ns_tailwind.selectors import (
    is_placeholder_selector,
    is_supported_selector,
    rewrite_selector,
)
from ns_tailwind.transforms.declaration import transform_declaration


def transform_rule(rule: Rule, options: TransformOptions) -> str | None:
    """Rewrite one rule, or return None when nothing of it survives."""
    if not is_supported_selector(rule.selector):
        return None
    selector = rewrite_selector(rule.selector)
    if not selector:
        return None

    # NativeScript styles placeholders through a property on the element itself.
    is_placeholder = is_placeholder_selector(rule.selector)

    lines: list[str] = []
    for decl in parse_declarations(rule.body):
        if is_placeholder and decl.property == "color":
            decl = replace(decl, property="placeholder-color")
        lines.extend(transform_declaration(decl, options).render())

    if not lines:
        return None
    body = ";\n  ".join(lines)
    return f"{selector} {{\n  {body};\n}}"
