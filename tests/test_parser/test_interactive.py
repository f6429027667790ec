"""Tests for interactive field and request collection."""

from __future__ import annotations

import pytest

from mongen.parser.interactive import (
    AVAILABLE_TYPES,
    QUESTION_FIELD_NAME,
    QUESTION_FIELD_REF,
    QUESTION_FIELD_TYPE,
    QUESTION_FILES_TREE,
    QUESTION_GENERATE_REST,
    QUESTION_MODEL_NAME,
    ask_until_valid,
    collect_fields_interactive,
    collect_request_interactive,
)
from mongen.parser.fields import parse_rest_answer
from mongen.parser.models import (
    REFERENCE_PLACEHOLDER,
    FieldSpec,
    FieldType,
    LanguageVariant,
    LayoutMode,
)

pytestmark = pytest.mark.unit


class TestCollectFields:
    def test_empty_name_stops_immediately(self, scripted):
        ask = scripted([""])
        assert collect_fields_interactive(ask) == []
        assert ask.questions == [QUESTION_FIELD_NAME]

    def test_whitespace_name_stops(self, scripted):
        ask = scripted(["title", "", "   "])
        assert collect_fields_interactive(ask) == [FieldSpec(name="title")]

    def test_type_defaults_to_string(self, scripted):
        ask = scripted(["title", "", ""])
        fields = collect_fields_interactive(ask)
        assert fields[0].type is FieldType.STRING

    def test_reference_question_only_for_object_id(self, scripted):
        ask = scripted([
            "title", "string",
            "author", "objectId", "User",
            "",
        ])
        fields = collect_fields_interactive(ask)
        assert fields == [
            FieldSpec(name="title"),
            FieldSpec(name="author", type=FieldType.OBJECT_ID, reference="User"),
        ]
        assert ask.questions.count(QUESTION_FIELD_REF) == 1

    def test_blank_reference_becomes_placeholder(self, scripted):
        ask = scripted(["author", "objectId", "", ""])
        fields = collect_fields_interactive(ask)
        assert fields[0].reference == REFERENCE_PLACEHOLDER

    def test_invalid_type_is_asked_again(self, scripted):
        errors: list[str] = []
        ask = scripted(["views", "integer", "number", ""])
        fields = collect_fields_interactive(ask, on_error=errors.append)
        assert fields == [FieldSpec(name="views", type=FieldType.NUMBER)]
        assert ask.questions.count(QUESTION_FIELD_TYPE) == 2
        assert len(errors) == 1

    def test_array_type_answer(self, scripted):
        ask = scripted(["tags", "array", ""])
        fields = collect_fields_interactive(ask)
        assert fields[0].is_array is True
        assert fields[0].type is FieldType.STRING


class TestAskUntilValid:
    def test_returns_first_valid(self, scripted):
        ask = scripted(["maybe", "nope", "no"])
        assert ask_until_valid(ask, "Rest? ", parse_rest_answer) is False
        assert ask.remaining == 0


class TestCollectRequest:
    def test_full_sequence(self, scripted):
        info: list[str] = []
        ask = scripted([
            "Post",
            "title", "",
            "author", "objectId", "User",
            "",
            "",
            "m",
        ])
        request = collect_request_interactive(
            ask, language_variant=LanguageVariant.TYPED, on_info=info.append
        )

        assert request.model_name == "Post"
        assert [f.name for f in request.fields] == ["title", "author"]
        assert request.include_rest is True
        assert request.layout_mode is LayoutMode.BY_MODULE
        assert request.language_variant is LanguageVariant.TYPED
        assert info == [AVAILABLE_TYPES]
        assert ask.questions[0] == QUESTION_MODEL_NAME
        assert ask.questions[-2:] == [QUESTION_GENERATE_REST, QUESTION_FILES_TREE]

    def test_model_name_asked_until_given(self, scripted):
        errors: list[str] = []
        ask = scripted(["", "  ", "Comment", "", "no", "t"])
        request = collect_request_interactive(ask, on_error=errors.append)
        assert request.model_name == "Comment"
        assert request.fields == ()
        assert request.include_rest is False
        assert request.layout_mode is LayoutMode.BY_TYPE
        assert errors == ["Argument required : Model name"] * 2

    def test_invalid_tree_asked_again(self, scripted):
        ask = scripted(["Post", "", "yes", "x", "t"])
        request = collect_request_interactive(ask)
        assert request.layout_mode is LayoutMode.BY_TYPE
        assert ask.questions.count(QUESTION_FILES_TREE) == 2
