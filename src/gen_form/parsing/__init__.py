"""
Parsing of raw model output.

- Sanitizer: strips prose/markdown and repairs common JSON defects
- Parser: decodes the sanitized text into a candidate schema
"""

from gen_form.parsing.sanitizer import sanitize
from gen_form.parsing.parser import parse_response

__all__ = [
    "sanitize",
    "parse_response",
]
