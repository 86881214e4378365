from ns_tailwind.shorthand.expand import expand_animation
from ns_tailwind.shorthand.parser import (
    TimingFunction,
    parse_animation,
    serialize_animation,
)

__all__ = ["expand_animation", "parse_animation", "serialize_animation", "TimingFunction"]
