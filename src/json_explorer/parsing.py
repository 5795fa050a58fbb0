"""JSON text to JSON value, with positioned, user-facing errors.

Wraps the stdlib ``json`` parser.  Blank input is not an error: it means
"no document yet" and returns ``ABSENT``.  Parse failures are raised as
``JsonParseError`` with 1-based line/column so an editor can mark the
offending line.  The non-standard ``NaN``/``Infinity``/``-Infinity``
literals that ``json.loads`` accepts by default are rejected.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import Any

from json_explorer.errors import JsonParseError
from json_explorer.values import ABSENT

__all__ = ["load_json_file", "parse_json"]

logger = logging.getLogger(__name__)


class _ConstantRejected(ValueError):
    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"Invalid literal {literal}")


def _reject_constant(literal: str) -> Any:
    raise _ConstantRejected(literal)


def _line_column(text: str, position: int) -> tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def parse_json(text: str) -> Any:
    """Parse JSON text into a JSON value.

    Args:
        text: Raw JSON text.

    Returns:
        The parsed value, or ``ABSENT`` when ``text`` is empty or whitespace.

    Raises:
        JsonParseError: If ``text`` is not valid JSON.
    """
    if not text.strip():
        return ABSENT

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.debug("JSON parse failed at %d:%d: %s", exc.lineno, exc.colno, exc.msg)
        raise JsonParseError(exc.msg, exc.lineno, exc.colno, exc.pos) from exc
    except _ConstantRejected as exc:
        position = max(text.find(exc.literal), 0)
        line, column = _line_column(text, position)
        logger.debug("JSON parse rejected literal %s at %d:%d", exc.literal, line, column)
        raise JsonParseError(str(exc), line, column, position) from exc


def load_json_file(path: str | FilePath) -> Any:
    """Read a UTF-8 JSON file (a leading BOM is tolerated) and parse it.

    Raises:
        OSError:        If the file cannot be read.
        JsonParseError: If the contents are not valid JSON.
    """
    text = FilePath(path).read_text(encoding="utf-8-sig")
    return parse_json(text)
