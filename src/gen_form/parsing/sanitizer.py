"""
Response sanitizer.

Model output nominally contains JSON but routinely arrives wrapped in
prose or markdown fences, with trailing commas or JavaScript-style
quoting. ``sanitize`` is a best-effort textual normalizer for those
habits. It is not a parser and never raises.
"""

import re

_FENCE_JSON = re.compile(r"```json\s*")
_FENCE = re.compile(r"```\s*")
_FENCE_LINE = re.compile(r"^```$", re.MULTILINE)
_JSON_START = re.compile(r"^\s*[{\[]", re.MULTILINE)
_TRAILING_COMMA_OBJECT = re.compile(r",\s*}")
_TRAILING_COMMA_ARRAY = re.compile(r",\s*]")
_BARE_KEY = re.compile(r"([{,]\s*)(\w+):")
_SINGLE_QUOTED_VALUE = re.compile(r":\s*'([^']*)'")
_WHITESPACE = re.compile(r"\s+")


def _strip_fences(text: str) -> str:
    text = _FENCE_JSON.sub("", text)
    text = _FENCE.sub("", text)
    return _FENCE_LINE.sub("", text)


def _cut_to_json(text: str) -> str:
    """Drop prose before the first line opening a JSON value and after the last closer."""
    start = _JSON_START.search(text)
    if start:
        text = text[start.start():]

    end = max(text.rfind("}"), text.rfind("]"))
    if end != -1:
        text = text[: end + 1]
    return text


def _repair_syntax(text: str) -> str:
    text = _TRAILING_COMMA_OBJECT.sub("}", text)
    text = _TRAILING_COMMA_ARRAY.sub("]", text)
    text = _BARE_KEY.sub(r'\1"\2":', text)
    return _SINGLE_QUOTED_VALUE.sub(r': "\1"', text)


def sanitize(raw: str) -> str:
    """
    Normalize raw model text into something ``json.loads`` can read.

    Steps, in order: strip code fences, trim, cut to the JSON span,
    remove trailing commas, quote bare keys, convert single-quoted
    values, collapse whitespace.

    Example:
        >>> sanitize("```json\\n{title: 'Contact',}\\n```")
        '{"title": "Contact"}'
    """
    if raw is None:
        return ""
    text = _strip_fences(str(raw)).strip()
    text = _cut_to_json(text)
    text = _repair_syntax(text)
    text = text.replace("\n", " ")
    return _WHITESPACE.sub(" ", text).strip()
