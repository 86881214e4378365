"""Ordered declaration policy: drops, keyword rewrites, expansion, support check.

Each step pairs a predicate with a result.  ``transform_declaration`` walks
``BUILTIN_STEPS`` and stops at the first step that matches; the last step
matches everything.
"""

from __future__ import annotations

from typing import Sequence

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.declaration import (
    Declaration,
    Drop,
    Keep,
    TransformResult,
)
from ns_tailwind.shorthand import expand_animation
from ns_tailwind.support import is_bookkeeping_variable, is_supported
from ns_tailwind.transforms.base import DeclarationStep
from ns_tailwind.values import convert_units


class DropBookkeepingVariable:
    """Drop Tailwind ring/shadow/numeric and divide/space reverse variables."""

    def matches(self, decl: Declaration) -> bool:
        return is_bookkeeping_variable(decl.property)

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        return Drop()


class DropValueContaining:
    """Drop any declaration whose value mentions *needle*."""

    def __init__(self, needle: str, case_sensitive: bool = True) -> None:
        self.needle = needle if case_sensitive else needle.lower()
        self.case_sensitive = case_sensitive

    def matches(self, decl: Declaration) -> bool:
        value = decl.value if self.case_sensitive else decl.value.lower()
        return self.needle in value

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        return Drop()


class RenameKeyword:
    """Replace one exact ``property: value`` keyword by NativeScript's name for it."""

    def __init__(self, prop: str, value: str, replacement: str) -> None:
        self.prop = prop
        self.value = value
        self.replacement = replacement

    def matches(self, decl: Declaration) -> bool:
        return decl.property == self.prop and decl.value == self.value

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        return Keep(property=self.prop, value=self.replacement)


class ExpandAnimation:
    def matches(self, decl: Declaration) -> bool:
        return decl.property == "animation"

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        return expand_animation(decl.value)


class KeepCustomProperty:
    """Custom properties skip the support table; only units are converted."""

    def matches(self, decl: Declaration) -> bool:
        return decl.is_custom_property

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        return Keep(property=decl.property, value=convert_units(decl.value, options.debug))


class CheckSupport:
    """Convert units, then keep the declaration only if NativeScript supports it."""

    def matches(self, decl: Declaration) -> bool:
        return True

    def apply(self, decl: Declaration, options: TransformOptions) -> TransformResult:
        value = convert_units(decl.value, options.debug)
        if not is_supported(decl.property, value):
            return Drop()
        return Keep(property=decl.property, value=value)


BUILTIN_STEPS: tuple[DeclarationStep, ...] = (
    DropBookkeepingVariable(),
    DropValueContaining("color-mix"),
    DropValueContaining("currentColor", case_sensitive=False),
    RenameKeyword("visibility", "hidden", "collapse"),
    RenameKeyword("vertical-align", "middle", "center"),
    ExpandAnimation(),
    KeepCustomProperty(),
    CheckSupport(),
)


def transform_declaration(
    decl: Declaration,
    options: TransformOptions,
    steps: Sequence[DeclarationStep] = BUILTIN_STEPS,
) -> TransformResult:
    """Apply the first matching step in *steps* to *decl*."""
    for step in steps:
        if step.matches(decl):
            return step.apply(decl, options)
    return Drop()
