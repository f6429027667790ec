"""mongen field-spec parser.

Turns the ``name:type[:ref][:array],...`` command-line format, or answers
collected interactively, into validated ``FieldSpec`` lists and a
``GenerationRequest`` for the scaffolder.
"""

from mongen.parser.fields import (
    FieldSpecError,
    ValidationRule,
    format_field_spec,
    parse_field_spec_string,
    parse_field_type,
    parse_layout_mode,
    parse_rest_answer,
    validate_field,
    validate_model_name,
)
from mongen.parser.interactive import (
    collect_fields_interactive,
    collect_request_interactive,
)
from mongen.parser.models import (
    REFERENCE_PLACEHOLDER,
    ArtifactKind,
    FieldSpec,
    FieldType,
    GenerationRequest,
    LanguageVariant,
    LayoutMode,
)

__all__ = [
    "REFERENCE_PLACEHOLDER",
    "ArtifactKind",
    "FieldSpec",
    "FieldSpecError",
    "FieldType",
    "GenerationRequest",
    "LanguageVariant",
    "LayoutMode",
    "ValidationRule",
    "collect_fields_interactive",
    "collect_request_interactive",
    "format_field_spec",
    "parse_field_spec_string",
    "parse_field_type",
    "parse_layout_mode",
    "parse_rest_answer",
    "validate_field",
    "validate_model_name",
]
