"""
Defaulting / enrichment stage.

The model often leaves out low-stakes cosmetic attributes. Every such
default lives here so the renderer never needs per-type fallbacks.
Enrichment only fills values that are absent; it never overrides what
the model set. Applying it twice gives the same result as once.
"""

from gen_form.models.field_types import FieldType
from gen_form.models.form_schema import (
    BaseField,
    CurrencyField,
    FileField,
    FormSchema,
    GeolocationField,
    RatingField,
)

DEFAULT_TITLE = "Generated Form"
DEFAULT_SUBMIT_TEXT = "Submit"
DEFAULT_RESET_TEXT = "Reset"

DEFAULT_CURRENCY = "USD"
DEFAULT_MAX_STARS = 5
DEFAULT_IMAGE_ACCEPT = ".jpg,.jpeg,.png,.gif,.webp"
DEFAULT_MAP_TYPE = "roadmap"


def _enrich_field(field: BaseField) -> BaseField:
    if isinstance(field, CurrencyField) and not field.currency:
        return field.model_copy(update={"currency": DEFAULT_CURRENCY})
    if isinstance(field, RatingField) and field.max_stars is None:
        return field.model_copy(update={"max_stars": DEFAULT_MAX_STARS})
    if isinstance(field, FileField) and field.type == FieldType.ATTACH_IMAGE and not field.accept:
        return field.model_copy(update={"accept": DEFAULT_IMAGE_ACCEPT})
    if isinstance(field, GeolocationField) and field.map_type is None:
        return field.model_copy(update={"map_type": DEFAULT_MAP_TYPE})
    return field


def enrich(schema: FormSchema) -> FormSchema:
    """
    Fill schema-level and type-specific defaults.

    Args:
        schema: A schema that already passed validation.

    Returns:
        A new FormSchema; the input is left untouched.
    """
    return schema.model_copy(
        update={
            "title": schema.title or DEFAULT_TITLE,
            "submit_text": schema.submit_text or DEFAULT_SUBMIT_TEXT,
            "reset_text": schema.reset_text or DEFAULT_RESET_TEXT,
            "fields": [_enrich_field(field) for field in schema.fields],
        }
    )
