"""Shared pytest fixtures for the mongen test suite.

Provides reusable fixtures for:
- Parsed field lists (the blog-post example and a wider mix of types)
- Generation requests for each layout/language combination
- A scripted answer provider for interactive collection
- A copy of the bundled templates for failure injection
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest

from mongen.parser.models import (
    FieldSpec,
    FieldType,
    GenerationRequest,
    LanguageVariant,
    LayoutMode,
)
from mongen.scaffolder.templates import _DEFAULT_TEMPLATE_DIR


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------

@pytest.fixture
def post_fields() -> list[FieldSpec]:
    """Fields of ``title:string,published:boolean,author:objectId:User``."""
    return [
        FieldSpec(name="title", type=FieldType.STRING),
        FieldSpec(name="published", type=FieldType.BOOLEAN),
        FieldSpec(name="author", type=FieldType.OBJECT_ID, reference="User"),
    ]


@pytest.fixture
def mixed_fields() -> list[FieldSpec]:
    """One field of every kind, including arrays of references."""
    return [
        FieldSpec(name="title", type=FieldType.STRING),
        FieldSpec(name="views", type=FieldType.NUMBER),
        FieldSpec(name="publishedAt", type=FieldType.DATE),
        FieldSpec(name="draft", type=FieldType.BOOLEAN),
        FieldSpec(name="tags", type=FieldType.STRING, is_array=True),
        FieldSpec(name="editors", type=FieldType.OBJECT_ID, reference="User", is_array=True),
    ]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def make_request(post_fields) -> Callable[..., GenerationRequest]:
    """Factory for ``Post`` requests with overridable options."""

    def _make(**overrides) -> GenerationRequest:
        values = {
            "model_name": "Post",
            "fields": tuple(post_fields),
            "layout_mode": LayoutMode.BY_TYPE,
            "language_variant": LanguageVariant.PLAIN,
            "include_rest": True,
        }
        values.update(overrides)
        return GenerationRequest(**values)

    return _make


@pytest.fixture
def post_request(make_request) -> GenerationRequest:
    return make_request()


# ---------------------------------------------------------------------------
# Interactive answers
# ---------------------------------------------------------------------------

class ScriptedAnswers:
    """Answer provider that replays a fixed list and records the questions."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected question: {question!r}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted() -> Callable[[list[str]], ScriptedAnswers]:
    return ScriptedAnswers


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@pytest.fixture
def template_copy(tmp_path: Path) -> Path:
    """Writable copy of the bundled templates (auto-cleanup)."""
    target = tmp_path / "templates"
    shutil.copytree(_DEFAULT_TEMPLATE_DIR, target)
    yield target
