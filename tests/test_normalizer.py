"""Unit tests for response normalization."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from resumechat.transport import NoContentError, classify_response, normalize_response
from resumechat.transport.models import (
    NestedMessageShape,
    NestedResultShape,
    OpaqueShape,
    PlainTextShape,
    RawTextShape,
)

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=5), children, max_size=3),
    max_leaves=8,
)


class TestFallbackOrder:
    """Tests for the ordered extraction policy."""

    @given(
        raw=st.text(min_size=1).filter(lambda s: s.strip()),
        response=json_values,
    )
    def test_raw_response_always_wins(self, raw: str, response):
        """Property test: a non-empty raw_response is returned verbatim."""
        body = {"success": True, "raw_response": raw, "response": response}
        assert normalize_response(body) == raw

    def test_plain_string_response(self):
        assert normalize_response({"response": "W"}) == "W"

    def test_nested_result(self):
        assert normalize_response({"response": {"result": "Y"}}) == "Y"

    def test_nested_message(self):
        assert normalize_response({"response": {"message": "Z"}}) == "Z"

    def test_result_preferred_over_message(self):
        body = {"response": {"result": "Y", "message": "Z"}}
        assert normalize_response(body) == "Y"

    def test_empty_raw_response_falls_through(self):
        body = {"raw_response": "", "response": "fallback"}
        assert normalize_response(body) == "fallback"

    def test_non_string_raw_response_falls_through(self):
        body = {"raw_response": {"text": "nope"}, "response": {"result": "Y"}}
        assert normalize_response(body) == "Y"

    def test_empty_result_falls_through_to_message(self):
        body = {"response": {"result": "", "message": "Z"}}
        assert normalize_response(body) == "Z"

    def test_opaque_response_serialized_compactly(self):
        body = {"response": {"answer": "Café", "score": 3}}
        assert normalize_response(body) == '{"answer":"Café","score":3}'

    def test_list_response_serialized(self):
        assert normalize_response({"response": [1, "two"]}) == '[1,"two"]'

    def test_multiline_text_preserved(self):
        text = "Line one\n  Line two\n"
        assert normalize_response({"raw_response": text}) == text


class TestNoContent:
    """Tests for the empty-result post-condition."""

    @pytest.mark.parametrize(
        "body",
        [
            {"success": True},
            {"response": None},
            {"response": ""},
            {"response": "   \n\t"},
            {"raw_response": "   ", "response": "  "},
            [],
            "just a string",
        ],
    )
    def test_empty_extraction_raises(self, body):
        with pytest.raises(NoContentError) as exc_info:
            normalize_response(body)
        assert exc_info.value.message == "Unable to process your question."

    def test_whitespace_raw_response_is_still_chosen(self):
        """raw_response wins when non-empty, so whitespace leads to no content."""
        body = {"raw_response": "  ", "response": "ignored"}
        with pytest.raises(NoContentError):
            normalize_response(body)


class TestClassifyResponse:
    """Tests for the response shape tagged union."""

    def test_shapes(self):
        assert classify_response({"raw_response": "X"}) == RawTextShape("X")
        assert classify_response({"response": "W"}) == PlainTextShape("W")
        assert classify_response({"response": {"result": "Y"}}) == NestedResultShape("Y")
        assert classify_response({"response": {"message": "Z"}}) == NestedMessageShape("Z")
        assert classify_response({"response": {"other": 1}}) == OpaqueShape({"other": 1})

    def test_non_object_body_is_opaque_and_empty(self):
        shape = classify_response(["not", "an", "object"])
        assert isinstance(shape, OpaqueShape)
        assert shape.display_text() == ""
