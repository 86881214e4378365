from ns_tailwind.transforms.declaration import BUILTIN_STEPS, transform_declaration
from ns_tailwind.transforms.rule import transform_rule
from ns_tailwind.transforms.atrule import transform_at_rule
from ns_tailwind.transforms.stylesheet import safe_transform, transform

__all__ = [
    "BUILTIN_STEPS",
    "transform_declaration",
    "transform_rule",
    "transform_at_rule",
    "transform",
    "safe_transform",
]
