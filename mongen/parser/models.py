"""Pydantic v2 models for the mongen field-spec parser.

Defines the closed enumerations (field types, layout modes, language
variants, artifact kinds) and the two structures that flow from the parser
into the generation engine: ``FieldSpec`` and ``GenerationRequest``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


#: Marker substituted for an ``objectId`` field whose referenced model was
#: not given.  The generated schema is intentionally invalid until edited.
REFERENCE_PLACEHOLDER = "INSERT_YOUR_REFERENCE_NAME_HERE"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """Allowed field types, in the order they are advertised to the user."""
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT_ID = "objectId"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


class LayoutMode(str, Enum):
    """Output directory convention, keyed by the ``--tree`` flag value."""
    BY_TYPE = "t"
    BY_MODULE = "m"


class LanguageVariant(str, Enum):
    """Template variant; the value doubles as the file extension."""
    PLAIN = "js"
    TYPED = "ts"

    @property
    def extension(self) -> str:
        return self.value


class ArtifactKind(str, Enum):
    """The three generated artifacts."""
    MODEL = "model"
    ROUTER = "router"
    CONTROLLER = "controller"

    @property
    def folder(self) -> str:
        """Top-level folder used by the by-type layout."""
        return {
            ArtifactKind.MODEL: "models",
            ArtifactKind.ROUTER: "routes",
            ArtifactKind.CONTROLLER: "controllers",
        }[self]

    @property
    def suffix(self) -> str:
        """File-name suffix appended to the model name."""
        return {
            ArtifactKind.MODEL: "Model",
            ArtifactKind.ROUTER: "Routes",
            ArtifactKind.CONTROLLER: "Controller",
        }[self]


# ---------------------------------------------------------------------------
# Field & request models
# ---------------------------------------------------------------------------

class FieldSpec(BaseModel):
    """One declared field of a generated model.

    ``array`` given as the type is shorthand for an array of strings, so a
    validated ``FieldSpec`` never carries ``FieldType.ARRAY``: it becomes
    ``type=string, is_array=True``.  An ``objectId`` without a reference
    receives :data:`REFERENCE_PLACEHOLDER`; every other type has an empty
    reference.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Field name")
    type: FieldType = Field(default=FieldType.STRING, description="Field base type")
    is_array: bool = Field(default=False, description="Whether the field holds a collection")
    reference: str = Field(default="", description="Referenced model for objectId fields")

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("type") in (FieldType.ARRAY, FieldType.ARRAY.value):
            data["type"] = FieldType.STRING
            data["is_array"] = True
        if data.get("type") in (FieldType.OBJECT_ID, FieldType.OBJECT_ID.value):
            if not (data.get("reference") or "").strip():
                data["reference"] = REFERENCE_PLACEHOLDER
        else:
            data["reference"] = ""
        return data

    @property
    def is_reference(self) -> bool:
        return self.type is FieldType.OBJECT_ID


class GenerationRequest(BaseModel):
    """Everything the generation engine needs for one model."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field(..., min_length=1, description="Model name, used verbatim")
    fields: tuple[FieldSpec, ...] = Field(default=(), description="Fields in declaration order")
    layout_mode: LayoutMode = Field(default=LayoutMode.BY_TYPE)
    language_variant: LanguageVariant = Field(default=LanguageVariant.PLAIN)
    include_rest: bool = Field(default=False, description="Also generate router and controller")

    def artifact_kinds(self) -> list[ArtifactKind]:
        """Artifacts this request produces, model first."""
        if self.include_rest:
            return [ArtifactKind.MODEL, ArtifactKind.ROUTER, ArtifactKind.CONTROLLER]
        return [ArtifactKind.MODEL]
