from __future__ import annotations

import os
from dataclasses import dataclass

DEBUG_ENV_VAR = "NS_TAILWIND_DEBUG"

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class TransformOptions:
    debug: bool = False  # log unit conversions and dropped at-rules
    max_depth: int = 32  # deepest @layer nesting that is still flattened

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> TransformOptions:
        """Build options from ``NS_TAILWIND_DEBUG`` in *environ* (default ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(debug=env.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY)
