from ns_tailwind.parser.declarations import parse_declarations
from ns_tailwind.parser.splitter import split_stylesheet

__all__ = ["split_stylesheet", "parse_declarations"]
