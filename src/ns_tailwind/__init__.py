"""Rewrite Tailwind CSS v4 output into NativeScript-compatible CSS."""

from ns_tailwind.config import TransformOptions
from ns_tailwind.errors import ShorthandParseError, TransformError
from ns_tailwind.transforms import safe_transform, transform

__version__ = "0.1.0"

__all__ = [
    "TransformOptions",
    "TransformError",
    "ShorthandParseError",
    "transform",
    "safe_transform",
    "__version__",
]
