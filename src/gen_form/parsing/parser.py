"""
Schema parser.

Turns raw model text into a candidate schema: whatever JSON value could
be extracted, with no guarantee about its shape. Shape checks belong to
the schema validator.
"""

import json
import re
from typing import Any

from gen_form.errors import ParseError
from gen_form.parsing.sanitizer import sanitize

_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def parse_response(raw: str) -> Any:
    """
    Extract a JSON value from raw model output.

    Args:
        raw: Text returned by the completion service.

    Returns:
        The decoded JSON value (normally a dict).

    Raises:
        ParseError: If neither the sanitized text nor the widest
            ``{...}`` span inside it decodes. Carries the decoder
            message and the original raw text.
    """
    cleaned = sanitize(raw)

    try:
        return json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as e:
        reason = _describe(e)

    match = _OBJECT_SPAN.search(cleaned)
    if match:
        try:
            return json.loads(match.group(0))
        except (json.JSONDecodeError, RecursionError) as e:
            reason = _describe(e)

    raise ParseError(f"Failed to parse JSON: {reason}", raw_text="" if raw is None else str(raw))


def _describe(error: Exception) -> str:
    if isinstance(error, json.JSONDecodeError):
        return error.msg
    # Nesting deeper than the interpreter's recursion limit
    return "JSON is nested too deeply"
