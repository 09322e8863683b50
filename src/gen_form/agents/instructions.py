"""
Prompt text for the schema generator.

The system prompt is fixed per process: it spells out the JSON shape,
the full field type taxonomy and the formatting rules. The user message
only wraps the caller's description.
"""

from gen_form.models.field_types import ALLOWED_TYPES, FIELD_TYPE_GROUPS


def _render_type_groups() -> str:
    lines = []
    for group, types in FIELD_TYPE_GROUPS.items():
        lines.append(f"- {group}: {', '.join(t.value for t in types)}")
    return "\n".join(lines)


SCHEMA_GENERATOR_INSTRUCTIONS = f"""You are an advanced form builder AI. You must respond with ONLY valid JSON that matches the exact schema format specified below. Do not include any markdown formatting, explanations, or additional text.

CRITICAL INSTRUCTIONS:
1. Return ONLY valid JSON - no markdown, no explanations, no additional text
2. Do not wrap the JSON in ```json blocks
3. Ensure all strings are properly quoted with double quotes
4. Remove any trailing commas
5. Validate your JSON before responding

REQUIRED JSON SCHEMA:
{{
  "title": "Form Title",
  "description": "Optional form description",
  "fields": [
    {{
      "name": "field_name",
      "label": "Field Label",
      "type": "field_type",
      "required": true|false,
      "placeholder": "optional placeholder",
      "options": ["option1", "option2"],
      "validation": {{
        "minLength": 0,
        "maxLength": 100
      }}
    }}
  ],
  "submitText": "Submit",
  "resetText": "Reset"
}}

FIELD TYPES: {", ".join(ALLOWED_TYPES)}

FIELD TYPE GROUPS:
{_render_type_groups()}

TYPE-SPECIFIC PROPERTIES:
- Numeric and date fields may include "min", "max" and "step"
- Currency fields should include a "currency" code (e.g. "USD")
- Rating fields should include "maxStars" between 1 and 10
- Link fields should include "targetDocType"
- Image attachments may include "accept" (e.g. ".jpg,.png")
- Geolocation fields may include "mapType": roadmap, satellite, hybrid or terrain

RULES:
- Field names must be unique and camelCase
- Select, multiselect, radio and autocomplete fields must have a non-empty options array
- "min" must not be greater than "max"
- All field names must be unique
- Respond with valid JSON only"""


USER_PROMPT_TEMPLATE = "Create a form schema for: {prompt}"


def build_user_prompt(prompt: str) -> str:
    """Wrap the caller's form description, verbatim, in the user message."""
    return USER_PROMPT_TEMPLATE.format(prompt=prompt)
