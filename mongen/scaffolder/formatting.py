"""Text helpers that turn field lists into template code blocks.

All output uses ``\\n`` line endings and 4-space indentation so that the
same request always renders to byte-identical files.
"""

from __future__ import annotations

from typing import Sequence

from mongen.parser.models import FieldSpec, FieldType


INDENT = "    "

# Mongoose schema type for each base field type.
_SCHEMA_TYPES: dict[FieldType, str] = {
    FieldType.STRING: "String",
    FieldType.NUMBER: "Number",
    FieldType.DATE: "Date",
    FieldType.BOOLEAN: "Boolean",
}

_VOWELS = frozenset("aeiou")
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


def capitalize_first_letter(value: str) -> str:
    """Upper-case the first character only (``blogPost`` -> ``BlogPost``)."""
    return value[:1].upper() + value[1:]


def pluralize(value: str) -> str:
    """Best-effort English plural for route and variable names.

    Examples::

        pluralize("post")     -> "posts"
        pluralize("category") -> "categories"
        pluralize("box")      -> "boxes"
    """
    if not value:
        return value
    lower = value.lower()
    if lower.endswith("y") and len(value) > 1 and lower[-2] not in _VOWELS:
        return value[:-1] + "ies"
    if lower.endswith(_SIBILANT_ENDINGS):
        return value + "es"
    return value + "s"


# ---------------------------------------------------------------------------
# Model schema block
# ---------------------------------------------------------------------------


def schema_type(field: FieldSpec, depth: int = 1) -> str:
    """Mongoose type declaration for one field.

    *depth* is the indentation level of the field's own line; nested object
    declarations (``objectId``) are indented one level deeper.
    """
    if field.type is FieldType.OBJECT_ID:
        inner = INDENT * (depth + 1)
        declaration = (
            "{\n"
            f"{inner}type: Schema.Types.ObjectId,\n"
            f"{inner}ref: '{field.reference}'\n"
            f"{INDENT * depth}}}"
        )
    else:
        declaration = _SCHEMA_TYPES[field.type]
    if field.is_array:
        return f"[{declaration}]"
    return declaration


def schema_fields_block(fields: Sequence[FieldSpec]) -> str:
    """Object literal passed to ``new Schema(...)``, one entry per field."""
    if not fields:
        return "{}"
    entries = [f"{INDENT}'{field.name}' : {schema_type(field)}" for field in fields]
    return "{\n" + ",\n".join(entries) + "\n}"


# ---------------------------------------------------------------------------
# Controller blocks
# ---------------------------------------------------------------------------


def create_fields_block(fields: Sequence[FieldSpec], depth: int = 3) -> str:
    """Constructor entries copied from the request body.

    Starts with a newline so the first entry sits on its own line after the
    opening brace; the last entry has no trailing comma.  Empty without
    fields.
    """
    if not fields:
        return ""
    indent = INDENT * depth
    entries = [f"{indent}{field.name} : req.body.{field.name}" for field in fields]
    return "\n" + ",\n".join(entries)


def update_fields_block(name: str, fields: Sequence[FieldSpec], depth: int = 3) -> str:
    """One conditional assignment per field, in field order.

    The template places this block at the start of a line between two
    statements.  With fields it is wrapped in blank lines; without fields it
    is empty and leaves a single blank line behind.
    """
    if not fields:
        return ""
    indent = INDENT * depth
    lines = [
        f"{indent}{name}.{field.name} = req.body.{field.name} ? req.body.{field.name} : {name}.{field.name};"
        for field in fields
    ]
    return "\n" + "\n".join(lines) + "\n"
