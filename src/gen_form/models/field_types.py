"""
Field type taxonomy for generated forms.

This is the closed set of field types the renderer knows how to draw.
The system prompt, the schema validator and the tagged field models
all read from here, so adding a type means touching only this module
and the variant that owns it.
"""

from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Supported form field types."""

    # Basic text
    DATA = "data"
    SMALL_TEXT = "small_text"
    LONG_TEXT = "long_text"
    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"
    CODE = "code"

    # Numeric
    INT = "int"
    FLOAT = "float"
    CURRENCY = "currency"
    PERCENT = "percent"
    RATING = "rating"

    # Date & time
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    DURATION = "duration"

    # Relationships
    LINK = "link"
    DYNAMIC_LINK = "dynamic_link"
    TABLE = "table"
    TABLE_MULTISELECT = "table_multiselect"

    # Choice
    SELECT = "select"
    AUTOCOMPLETE = "autocomplete"
    MULTISELECT = "multiselect"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    # Files & media
    ATTACH = "attach"
    ATTACH_IMAGE = "attach_image"
    IMAGE = "image"
    SIGNATURE = "signature"
    BARCODE = "barcode"

    # Visual / layout
    COLOR = "color"
    HEADING = "heading"
    BUTTON = "button"
    READ_ONLY = "read_only"
    ICON = "icon"

    # Specialized
    GEOLOCATION = "geolocation"
    JSON = "json"
    PASSWORD = "password"
    PHONE = "phone"
    EMAIL = "email"
    URL = "url"

    # Additional web types
    NUMBER = "number"
    RANGE = "range"
    SEARCH = "search"
    SWITCH = "switch"
    TAGS = "tags"
    FILE = "file"


FIELD_TYPE_GROUPS: dict[str, tuple[FieldType, ...]] = {
    "Basic Data Types": (
        FieldType.DATA,
        FieldType.SMALL_TEXT,
        FieldType.LONG_TEXT,
        FieldType.TEXT,
        FieldType.MARKDOWN,
        FieldType.HTML,
        FieldType.CODE,
    ),
    "Numeric Types": (
        FieldType.INT,
        FieldType.FLOAT,
        FieldType.CURRENCY,
        FieldType.PERCENT,
        FieldType.RATING,
    ),
    "Date & Time": (
        FieldType.DATE,
        FieldType.DATETIME,
        FieldType.TIME,
        FieldType.DURATION,
    ),
    "Relationships": (
        FieldType.LINK,
        FieldType.DYNAMIC_LINK,
        FieldType.TABLE,
        FieldType.TABLE_MULTISELECT,
    ),
    "Choice": (
        FieldType.SELECT,
        FieldType.AUTOCOMPLETE,
        FieldType.MULTISELECT,
        FieldType.RADIO,
        FieldType.CHECKBOX,
    ),
    "Files & Media": (
        FieldType.ATTACH,
        FieldType.ATTACH_IMAGE,
        FieldType.IMAGE,
        FieldType.SIGNATURE,
        FieldType.BARCODE,
    ),
    "Visual/Layout/UI": (
        FieldType.COLOR,
        FieldType.HEADING,
        FieldType.BUTTON,
        FieldType.READ_ONLY,
        FieldType.ICON,
    ),
    "Specialized": (
        FieldType.GEOLOCATION,
        FieldType.JSON,
        FieldType.PASSWORD,
        FieldType.PHONE,
        FieldType.EMAIL,
        FieldType.URL,
    ),
    "Additional Web Types": (
        FieldType.NUMBER,
        FieldType.RANGE,
        FieldType.SEARCH,
        FieldType.SWITCH,
        FieldType.TAGS,
        FieldType.FILE,
    ),
}

# Declaration order, used in error messages and the system prompt
ALLOWED_TYPES: tuple[str, ...] = tuple(t.value for t in FieldType)

# Family sets hold plain values since Enum hashes members by name.
# Types that cannot render without a non-empty options list
CHOICE_TYPES: frozenset[str] = frozenset({
    FieldType.SELECT.value,
    FieldType.MULTISELECT.value,
    FieldType.RADIO.value,
    FieldType.AUTOCOMPLETE.value,
})

# Types that should name the record type they point at
LINK_TYPES: frozenset[str] = frozenset({
    FieldType.LINK.value,
    FieldType.DYNAMIC_LINK.value,
})


def is_field_type(value: Any) -> bool:
    """Check whether an untyped value names a supported field type."""
    return isinstance(value, str) and value in ALLOWED_TYPES
