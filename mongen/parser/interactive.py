"""Question-driven collection of a ``GenerationRequest``.

The interactive mode asks one question at a time through an *answer
provider*: any callable that takes the question text and returns the raw
answer (``rich`` console input in the CLI, a scripted iterator in tests).
Questions guarded by a validator are asked again until the answer passes.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .fields import (
    FieldSpecError,
    parse_field_type,
    parse_layout_mode,
    parse_rest_answer,
    validate_model_name,
)
from .models import FieldSpec, FieldType, GenerationRequest, LanguageVariant

T = TypeVar("T")

AnswerProvider = Callable[[str], str]
ErrorReporter = Callable[[str], None]


QUESTION_MODEL_NAME = "Model Name : "
QUESTION_FIELD_NAME = "Field Name (press <return> to stop adding fields) : "
QUESTION_FIELD_TYPE = "Field Type [string] : "
QUESTION_FIELD_REF = "Reference (model name referred by the objectId field) : "
QUESTION_GENERATE_REST = "Generate Rest (yes/no) ? [yes] : "
QUESTION_FILES_TREE = "Files tree generation grouped by Type or by Module (t/m) ? [t] : "
AVAILABLE_TYPES = "Available types : " + ", ".join(FieldType.names())


def ask_until_valid(
    ask: AnswerProvider,
    question: str,
    parse: Callable[[str], T],
    on_error: Optional[ErrorReporter] = None,
) -> T:
    """Ask *question* until *parse* accepts the answer, returning its result."""
    while True:
        answer = ask(question)
        try:
            return parse(answer)
        except FieldSpecError as exc:
            if on_error is not None:
                on_error(str(exc))


def collect_fields_interactive(
    ask: AnswerProvider,
    on_error: Optional[ErrorReporter] = None,
) -> list[FieldSpec]:
    """Collect fields until the user enters an empty field name.

    An empty name is the stop signal, not an error, so the result may be
    empty.  Type defaults to ``string``; an ``objectId`` field is followed by
    a reference question whose blank answer becomes the placeholder marker.
    """
    fields: list[FieldSpec] = []
    while True:
        name = (ask(QUESTION_FIELD_NAME) or "").strip()
        if not name:
            return fields

        field_type = ask_until_valid(ask, QUESTION_FIELD_TYPE, parse_field_type, on_error)

        reference = ""
        if field_type is FieldType.OBJECT_ID:
            reference = (ask(QUESTION_FIELD_REF) or "").strip()

        fields.append(FieldSpec(name=name, type=field_type, reference=reference))


def collect_request_interactive(
    ask: AnswerProvider,
    *,
    language_variant: LanguageVariant = LanguageVariant.PLAIN,
    on_error: Optional[ErrorReporter] = None,
    on_info: Optional[ErrorReporter] = None,
) -> GenerationRequest:
    """Run the full question sequence and build the request.

    Order: model name, fields loop, REST generation, files tree.
    """
    model_name = ask_until_valid(ask, QUESTION_MODEL_NAME, validate_model_name, on_error)
    if on_info is not None:
        on_info(AVAILABLE_TYPES)

    fields = collect_fields_interactive(ask, on_error)
    include_rest = ask_until_valid(ask, QUESTION_GENERATE_REST, parse_rest_answer, on_error)
    layout_mode = ask_until_valid(ask, QUESTION_FILES_TREE, parse_layout_mode, on_error)

    return GenerationRequest(
        model_name=model_name,
        fields=tuple(fields),
        layout_mode=layout_mode,
        language_variant=language_variant,
        include_rest=include_rest,
    )
