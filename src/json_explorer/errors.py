"""Exceptions raised by the document services (parsing and querying).

The core algorithms (diff, visibility) are total over JSON values and raise
only builtin ``TypeError`` for non-JSON input.  Both domain exceptions
subclass ``ValueError`` so callers that already catch bad input keep working.
"""

from __future__ import annotations

__all__ = ["JsonParseError", "JsonPathQueryError"]


class JsonParseError(ValueError):
    """JSON text could not be parsed.

    Attributes:
        message:  Parser message without position information.
        line:     1-based line of the failure.
        column:   1-based column of the failure.
        position: 0-based character offset of the failure.
    """

    def __init__(self, message: str, line: int, column: int, position: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.position = position
        super().__init__(
            f"JSON syntax error at line {line}, column {column}: {message}"
        )


class JsonPathQueryError(ValueError):
    """A JSONPath expression could not be parsed or evaluated.

    Attributes:
        expression: The offending JSONPath expression.
        reason:     Underlying error message.
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid JSONPath {expression!r}: {reason}")
