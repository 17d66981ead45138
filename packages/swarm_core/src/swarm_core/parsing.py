"""Lenient extraction of JSON objects embedded in model text.

Model replies wrap JSON in prose or markdown fences. Every helper here treats
"nothing found" as a normal outcome and returns None instead of raising.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

_FENCED_JSON_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_DECODER = json.JSONDecoder()


def iter_json_spans(text: str) -> Iterator[tuple[int, int, dict[str, Any]]]:
    """Yield (start, end, object) for top-level JSON objects, left to right."""
    pos = text.find("{")
    while pos != -1:
        try:
            value, end = _DECODER.raw_decode(text, pos)
        except json.JSONDecodeError:
            pos = text.find("{", pos + 1)
            continue
        if isinstance(value, dict):
            yield pos, end, value
        pos = text.find("{", end)


def iter_json_objects(text: str) -> Iterator[dict[str, Any]]:
    """Yield top-level JSON objects found anywhere in text."""
    for _start, _end, value in iter_json_spans(text):
        yield value


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Return the first JSON object in text, or None."""
    return next(iter_json_objects(text), None)


def extract_fenced_json(text: str) -> dict[str, Any] | None:
    """Return the first ```json fenced block that decodes to an object."""
    for match in _FENCED_JSON_RE.finditer(text):
        try:
            value = json.loads(match.group(1))
        except json.JSONDecodeError:
            continue
        if isinstance(value, dict):
            return value
    return None


def strip_fenced_json(text: str) -> str:
    """Remove ```json fenced blocks and trim the remaining prose."""
    return _FENCED_JSON_RE.sub("", text).strip()
