"""
Form schema models.

A FormSchema is what the renderer consumes: an optional title and
description, an ordered list of fields and the button labels. Fields are
a tagged union keyed on ``type`` so every variant only carries the
attributes that make sense for it (a rating has ``maxStars``, a choice
has ``options``, and so on). Keys the model emits for the wrong variant
are dropped on load.

Wire names are camelCase; use ``to_dict()`` to get the exact shape the
client expects.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator


Bound = int | float | str


class FieldValidation(BaseModel):
    """Nested validation hints for a field."""

    min_length: int | None = Field(default=None, alias="minLength", description="Minimum string length")
    max_length: int | None = Field(default=None, alias="maxLength", description="Maximum string length")
    min: Bound | None = Field(default=None, description="Minimum value or date")
    max: Bound | None = Field(default=None, description="Maximum value or date")
    pattern: str | None = Field(default=None, description="Regex pattern")
    custom: str | None = Field(default=None, description="Message shown when the pattern fails")
    file_size: str | None = Field(default=None, alias="fileSize", description="Max upload size, e.g. '5MB'")
    file_types: list[str] | None = Field(default=None, alias="fileTypes", description="Allowed upload types")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class BaseField(BaseModel):
    """Attributes shared by every field variant."""

    name: str = Field(..., description="Unique key into the submitted data")
    label: str = Field(..., description="Display label")
    required: bool = Field(default=False, description="Whether a value must be supplied")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    description: str | None = Field(default=None, description="Help text")
    default_value: Any | None = Field(default=None, alias="defaultValue", description="Initial value")
    validation: FieldValidation | None = Field(default=None, description="Validation hints")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class TextField(BaseField):
    """Free text, specialized text inputs, toggles and layout elements."""

    type: Literal[
        "data", "small_text", "long_text", "text", "markdown", "html", "code",
        "password", "phone", "email", "url", "search", "json",
        "color", "heading", "button", "read_only", "icon",
        "checkbox", "switch", "tags", "duration",
    ]
    pattern: str | None = Field(default=None, description="Regex the value must match")


class RangedField(BaseField):
    """Fields that accept lower and upper bounds."""

    min: Bound | None = Field(default=None, description="Lower bound")
    max: Bound | None = Field(default=None, description="Upper bound")
    step: int | float | None = Field(default=None, description="Increment")
    precision: int | None = Field(default=None, description="Decimal places")


class NumericField(RangedField):
    """Numbers, percentages, ranges and date/time pickers."""

    type: Literal["int", "float", "percent", "number", "range", "date", "datetime", "time"]


class CurrencyField(RangedField):
    """Monetary amount in a given currency."""

    type: Literal["currency"]
    currency: str | None = Field(default=None, description="ISO 4217 currency code")


class RatingField(BaseField):
    """Star rating."""

    type: Literal["rating"]
    max_stars: int | None = Field(default=None, alias="maxStars", description="Number of stars (1-10)")
    allow_half_rating: bool | None = Field(default=None, alias="allowHalfRating")


class ChoiceField(BaseField):
    """Single or multiple choice from a fixed list."""

    type: Literal["select", "multiselect", "radio", "autocomplete"]
    options: list[str] = Field(..., min_length=1, description="Choices, in display order")


class LinkField(BaseField):
    """Reference to another record or a child table."""

    type: Literal["link", "dynamic_link", "table", "table_multiselect"]
    target_doc_type: str | None = Field(default=None, alias="targetDocType", description="Linked record type")
    link_filters: dict[str, Any] | None = Field(default=None, alias="linkFilters")
    options: list[str] | None = Field(default=None, description="Known link targets")


class FileField(BaseField):
    """File and image uploads."""

    type: Literal["attach", "attach_image", "image", "file"]
    accept: str | None = Field(default=None, description="Comma-separated accepted extensions")
    multiple: bool | None = Field(default=None, description="Allow several files")


class MediaField(BaseField):
    """Captured media: signatures and barcodes."""

    type: Literal["signature", "barcode"]


class GeolocationField(BaseField):
    """Map location picker."""

    type: Literal["geolocation"]
    map_type: Literal["roadmap", "satellite", "hybrid", "terrain"] | None = Field(
        default=None, alias="mapType", description="Map style"
    )


FieldSpec = Annotated[
    Union[
        TextField,
        NumericField,
        CurrencyField,
        RatingField,
        ChoiceField,
        LinkField,
        FileField,
        MediaField,
        GeolocationField,
    ],
    Field(discriminator="type"),
]


def _comparable(low: Any, high: Any) -> bool:
    if isinstance(low, bool) or isinstance(high, bool):
        return False
    numeric = (int, float)
    if isinstance(low, numeric) and isinstance(high, numeric):
        return True
    return isinstance(low, str) and isinstance(high, str)


class FormSchema(BaseModel):
    """
    Complete generated form.

    Invariants: at least one field, unique field names, and ``min <= max``
    on every ranged field that sets both.
    """

    title: str | None = Field(default=None, description="Form title")
    description: str | None = Field(default=None, description="Form description")
    fields: list[FieldSpec] = Field(..., min_length=1, description="Form fields, in display order")
    submit_text: str | None = Field(default=None, alias="submitText", description="Submit button label")
    reset_text: str | None = Field(default=None, alias="resetText", description="Reset button label")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @model_validator(mode="after")
    def _check_fields(self) -> "FormSchema":
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name '{field.name}'")
            seen.add(field.name)
            if isinstance(field, RangedField) and field.min is not None and field.max is not None:
                if _comparable(field.min, field.max) and field.min > field.max:
                    raise ValueError(f"Field '{field.name}': 'min' cannot be greater than 'max'")
        return self

    @classmethod
    def from_candidate(cls, candidate: dict[str, Any]) -> "FormSchema":
        """Build a schema from a parsed candidate that already passed validation."""
        return cls.model_validate(candidate)

    def get_field(self, name: str) -> BaseField | None:
        """Look up a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]

    def to_dict(self) -> dict[str, Any]:
        """Export in the camelCase wire format the renderer consumes."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
