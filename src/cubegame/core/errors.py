"""Parse errors for game logs.

Every error is fatal: the parser aborts on the first one and returns
no partial results.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a game log line cannot be parsed.

    Attributes:
        message: What was wrong with the line.
        line_no: 1-based line number, or None when parsing a lone line.
        line: Raw line text, or None when unknown.
    """

    def __init__(self, message: str, *, line_no: int | None = None, line: str | None = None):
        self.message = message
        self.line_no = line_no
        self.line = line
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class MalformedLineError(ParseError):
    """Line does not match the ``Game <id>: <draw>; ...`` grammar."""

    pass


class InvalidColorError(ParseError):
    """Token is not one of the recognized color names."""

    pass


class InvalidCountError(ParseError):
    """Count is non-numeric, negative or out of range."""

    pass
