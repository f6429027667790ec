"""Field-spec grammar and validation predicates.

The command-line wire format is::

    name1:type1[:ref1][:array],name2:type2[...],...

Fields are separated by ``,`` and sub-tokens by ``:``.  The position of the
``array`` marker depends on the type: for ``objectId`` fields the third
token is the referenced model and the fourth may be ``array``; for every
other type the third token may be ``array``.

Every predicate raises :class:`FieldSpecError` with one message per rule so
the CLI can tell the user exactly what was wrong.  Parsing is fail-fast: the
first invalid field aborts the whole parse and nothing is returned.
"""

from __future__ import annotations

from enum import Enum

from .models import FieldSpec, FieldType, LayoutMode


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ValidationRule(str, Enum):
    """Identifies which validation rule rejected the input."""
    MODEL_NAME_REQUIRED = "Argument required : Model name"
    FIELDS_REQUIRED = "Argument required : fields"
    FIELD_NAME_REQUIRED = "Argument required : Field Name"
    FIELD_TYPE_REQUIRED = "Argument required : Field type"
    FIELD_TYPE_INVALID = "Invalid Argument : Field type is not allowed"
    REST_INVALID = "Argument invalid : rest"
    TREE_INVALID = "Argument invalid : file tree generation"


class FieldSpecError(ValueError):
    """Raised when user input fails validation."""

    def __init__(self, rule: ValidationRule, detail: str = "") -> None:
        self.rule = rule
        self.detail = detail
        message = rule.value if not detail else f"{rule.value} ({detail})"
        super().__init__(message)


FIELD_SEPARATOR = ","
TOKEN_SEPARATOR = ":"
ARRAY_MARKER = FieldType.ARRAY.value
DEFAULT_FIELD_TYPE = FieldType.STRING


# ---------------------------------------------------------------------------
# Validation predicates
# ---------------------------------------------------------------------------

def validate_model_name(name: str | None) -> str:
    """Return the stripped model name or raise if it is blank."""
    if not name or not name.strip():
        raise FieldSpecError(ValidationRule.MODEL_NAME_REQUIRED)
    return name.strip()


def parse_field_type(raw: str | None) -> FieldType:
    """Resolve a type token, defaulting blank input to ``string``."""
    if raw is None or not raw.strip():
        return DEFAULT_FIELD_TYPE
    try:
        return FieldType(raw.strip())
    except ValueError:
        raise FieldSpecError(ValidationRule.FIELD_TYPE_INVALID, raw.strip()) from None


def validate_field(name: str | None, type_token: str | None) -> FieldType:
    """Check one field in rule order: name, then type presence, then type value."""
    if not name or not name.strip():
        raise FieldSpecError(ValidationRule.FIELD_NAME_REQUIRED)
    if type_token is None or not type_token.strip():
        raise FieldSpecError(ValidationRule.FIELD_TYPE_REQUIRED, name.strip())
    try:
        return FieldType(type_token.strip())
    except ValueError:
        raise FieldSpecError(ValidationRule.FIELD_TYPE_INVALID, type_token.strip()) from None


def parse_rest_answer(raw: str | None) -> bool:
    """``yes``/``no`` answer to the REST question; blank means yes."""
    answer = (raw or "").strip() or "yes"
    if answer == "yes":
        return True
    if answer == "no":
        return False
    raise FieldSpecError(ValidationRule.REST_INVALID, answer)


def parse_layout_mode(raw: str | None) -> LayoutMode:
    """``t``/``m`` tree answer; blank means by type."""
    answer = (raw or "").strip() or LayoutMode.BY_TYPE.value
    try:
        return LayoutMode(answer)
    except ValueError:
        raise FieldSpecError(ValidationRule.TREE_INVALID, answer) from None


# ---------------------------------------------------------------------------
# String grammar
# ---------------------------------------------------------------------------

def _token(tokens: list[str], index: int) -> str:
    return tokens[index].strip() if index < len(tokens) else ""


def parse_field_group(group: str) -> FieldSpec:
    """Parse one ``name:type[:ref][:array]`` group into a ``FieldSpec``."""
    tokens = group.split(TOKEN_SEPARATOR)

    name = _token(tokens, 0)
    type_token = _token(tokens, 1) or DEFAULT_FIELD_TYPE.value
    field_type = validate_field(name, type_token)

    reference = ""
    if field_type is FieldType.OBJECT_ID:
        reference = _token(tokens, 2)
        is_array = _token(tokens, 3) == ARRAY_MARKER
    else:
        is_array = _token(tokens, 2) == ARRAY_MARKER

    return FieldSpec(
        name=name,
        type=field_type,
        is_array=is_array,
        reference=reference,
    )


def parse_field_spec_string(raw: str | None) -> list[FieldSpec]:
    """Parse the full comma-separated field spec.

    Returns the complete ordered list, or raises :class:`FieldSpecError` for
    the first invalid field.  No partial result is ever returned.

    Examples::

        parse_field_spec_string("title:string,author:objectId:User")
        parse_field_spec_string("tags:array")   # -> tags, string, is_array
    """
    if raw is None or not raw.strip():
        raise FieldSpecError(ValidationRule.FIELDS_REQUIRED)
    return [parse_field_group(group) for group in raw.split(FIELD_SEPARATOR)]


def format_field_spec(fields: list[FieldSpec]) -> str:
    """Render fields back into the command-line wire format."""
    groups: list[str] = []
    for field in fields:
        tokens = [field.name, field.type.value]
        if field.is_reference:
            tokens.append(field.reference)
        if field.is_array:
            tokens.append(ARRAY_MARKER)
        groups.append(TOKEN_SEPARATOR.join(tokens))
    return FIELD_SEPARATOR.join(groups)
