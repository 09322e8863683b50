"""Tests for the response sanitizer and schema parser."""

import json

import pytest

from gen_form.errors import ParseError
from gen_form.parsing import parse_response, sanitize


class TestSanitize:
    """Tests for sanitize()."""

    def test_strips_json_fence(self):
        raw = '```json\n{"a": 1}\n```'
        assert sanitize(raw) == '{"a": 1}'

    def test_strips_bare_fence(self):
        raw = '```\n{"a": 1}\n```'
        assert sanitize(raw) == '{"a": 1}'

    def test_drops_prose_around_json(self):
        raw = 'Here is your form:\n{"a": 1}\nLet me know if you need changes.'
        assert sanitize(raw) == '{"a": 1}'

    def test_keeps_top_level_array(self):
        raw = 'Fields:\n[{"a": 1}]'
        assert sanitize(raw) == '[{"a": 1}]'

    def test_removes_trailing_commas(self):
        assert sanitize('{"a": [1, 2,], "b": 3,}') == '{"a": [1, 2], "b": 3}'

    def test_quotes_bare_keys(self):
        assert sanitize("{a: 1, b_2: 2}") == '{"a": 1, "b_2": 2}'

    def test_leaves_quoted_keys_alone(self):
        assert sanitize('{"a": "x"}') == '{"a": "x"}'

    def test_converts_single_quoted_values(self):
        assert sanitize("{\"a\": 'hello world'}") == '{"a": "hello world"}'

    def test_collapses_whitespace(self):
        raw = '{\n  "a":    1,\n\n  "b": 2\n}'
        assert sanitize(raw) == '{ "a": 1, "b": 2 }'

    def test_text_without_json_is_unchanged(self):
        assert sanitize("I cannot help with that.") == "I cannot help with that."

    def test_never_raises(self):
        assert sanitize("") == ""
        assert sanitize(None) == ""
        assert sanitize("}}}{{{") == "}}}"

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "T", "fields": [{"name": "a", "label": "A", "type": "text"}]},
            [{"x": 1}, {"y": [1, 2]}],
            {"nested": {"deep": {"list": [True, False, None]}}},
        ],
    )
    def test_wrapped_json_decodes(self, payload):
        """Fenced output with trailing commas decodes whenever the bare JSON would."""
        text = json.dumps(payload, indent=2)
        text = text.replace("\n}", ",\n}").replace("\n]", ",\n]")
        raw = f"Sure! Here it is:\n```json\n{text}\n```\nHope this helps."
        assert json.loads(sanitize(raw)) == payload


class TestParseResponse:
    """Tests for parse_response()."""

    def test_contact_scenario(self):
        """Fenced, relaxed JSON from the model parses to one required email field."""
        raw = "```json\n{title: 'Contact', fields: [{name: 'email', label: 'Email', type: 'email', required: true,}]}\n```"
        candidate = parse_response(raw)
        assert candidate == {
            "title": "Contact",
            "fields": [{"name": "email", "label": "Email", "type": "email", "required": True}],
        }

    def test_refusal_raises_parse_error(self):
        raw = "I cannot help with that."
        with pytest.raises(ParseError) as exc_info:
            parse_response(raw)
        assert exc_info.value.raw_text == raw
        assert "Failed to parse JSON" in exc_info.value.message

    def test_falls_back_to_object_span(self):
        raw = '[ broken {"fields": []} ]'
        assert parse_response(raw) == {"fields": []}

    def test_unrecoverable_json_raises(self):
        with pytest.raises(ParseError):
            parse_response('{"fields": [unquoted value here]}')

    @pytest.mark.parametrize("raw", ["[" * 100000 + "]" * 100000, '{"a": ' + "[" * 100000 + "]" * 100000 + "}"])
    def test_deep_nesting_raises_parse_error(self, raw):
        with pytest.raises(ParseError) as exc_info:
            parse_response(raw)
        assert exc_info.value.message == "Failed to parse JSON: JSON is nested too deeply"
        assert exc_info.value.raw_text == raw

    def test_does_not_check_shape(self):
        assert parse_response("[1, 2, 3]") == [1, 2, 3]
