"""Error types raised inside the transformation pipeline."""


class TransformError(Exception):
    """Base class for errors raised while rewriting a stylesheet."""


class ShorthandParseError(TransformError):
    """Raised when an animation shorthand value cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
