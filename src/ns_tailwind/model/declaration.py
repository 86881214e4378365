"""Declaration model: parsed property/value pairs and per-declaration results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ns_tailwind.support import CUSTOM_PROPERTY_PREFIX


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a rule body, in source order."""

    property: str
    value: str

    @property
    def is_custom_property(self) -> bool:
        return self.property.startswith(CUSTOM_PROPERTY_PREFIX)


@dataclass(frozen=True)
class Drop:
    """The declaration is removed from the output."""

    def render(self) -> list[str]:
        return []


@dataclass(frozen=True)
class Keep:
    """The declaration survives, possibly with a rewritten property or value."""

    property: str
    value: str

    def render(self) -> list[str]:
        return [f"{self.property}: {self.value}"]


@dataclass(frozen=True)
class Expanded:
    """One shorthand declaration fanned out into several output lines."""

    lines: tuple[str, ...]

    def render(self) -> list[str]:
        return list(self.lines)


TransformResult = Union[Drop, Keep, Expanded]
