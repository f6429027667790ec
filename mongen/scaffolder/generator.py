"""Generation engine: renders model, router and controller artifacts.

Rendering is pure: :meth:`GenerationEngine.render` maps an artifact kind and
a ``GenerationRequest`` to the rendered text and its path relative to the
output directory.  Writing is a separate step; :meth:`GenerationEngine.generate`
renders and writes every requested artifact concurrently, and a failure in
one artifact does not stop the others.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Callable

from mongen.parser.models import ArtifactKind, GenerationRequest, LayoutMode
from mongen.utils import write_file_async

from .formatting import (
    capitalize_first_letter,
    create_fields_block,
    pluralize,
    schema_fields_block,
    update_fields_block,
)
from .templates import Replacement, TemplateLoader


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderedArtifact:
    """One fully composed output file."""

    kind: ArtifactKind
    text: str
    relative_path: PurePosixPath


@dataclass
class GenerationResult:
    """Outcome of generating every artifact of one request."""

    written: dict[ArtifactKind, Path] = field(default_factory=dict)
    errors: dict[ArtifactKind, Exception] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


# ---------------------------------------------------------------------------
# Naming & paths
# ---------------------------------------------------------------------------


def artifact_directory(kind: ArtifactKind, request: GenerationRequest) -> PurePosixPath:
    """Folder of an artifact relative to the output directory."""
    if request.layout_mode is LayoutMode.BY_TYPE:
        return PurePosixPath(kind.folder)
    return PurePosixPath(request.model_name)


def artifact_path(kind: ArtifactKind, request: GenerationRequest) -> PurePosixPath:
    """Relative path such as ``models/PostModel.js`` or ``Post/PostRoutes.ts``."""
    filename = f"{request.model_name}{kind.suffix}.{request.language_variant.extension}"
    return artifact_directory(kind, request) / filename


def import_path(target: ArtifactKind, request: GenerationRequest) -> str:
    """Quoted module path from a sibling artifact to *target*.

    By-type layouts import across folders (``'../controllers/...'``);
    by-module layouts import from the same folder (``'./...'``).
    """
    filename = f"{request.model_name}{target.suffix}.{request.language_variant.extension}"
    if request.layout_mode is LayoutMode.BY_TYPE:
        return f"'../{target.folder}/{filename}'"
    return f"'./{filename}'"


def controller_name(request: GenerationRequest) -> str:
    return request.model_name + "Controller"


# ---------------------------------------------------------------------------
# Placeholder mappings
# ---------------------------------------------------------------------------


def model_placeholders(request: GenerationRequest) -> dict[str, Replacement]:
    return {
        "modelName": request.model_name,
        "schemaName": request.model_name + "Schema",
        "fields": lambda: schema_fields_block(request.fields),
    }


def router_placeholders(request: GenerationRequest) -> dict[str, Replacement]:
    return {
        "controllerName": controller_name(request),
        "controllerPath": import_path(ArtifactKind.CONTROLLER, request),
    }


def controller_placeholders(request: GenerationRequest) -> dict[str, Replacement]:
    name = request.model_name
    return {
        "modelName": capitalize_first_letter(name) + "Model",
        "name": name,
        "pluralName": pluralize(name),
        "controllerName": controller_name(request),
        "modelPath": import_path(ArtifactKind.MODEL, request),
        "createFields": lambda: create_fields_block(request.fields),
        "updateFields": lambda: update_fields_block(name, request.fields),
    }


_PLACEHOLDER_BUILDERS: dict[ArtifactKind, Callable[[GenerationRequest], dict[str, Replacement]]] = {
    ArtifactKind.MODEL: model_placeholders,
    ArtifactKind.ROUTER: router_placeholders,
    ArtifactKind.CONTROLLER: controller_placeholders,
}


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class GenerationEngine:
    """Renders and writes artifacts for a ``GenerationRequest``.

    The engine trusts its input: requests are validated by the parser
    before they get here.  The only failures it originates are I/O errors
    (missing template, unwritable output), which propagate unchanged.
    """

    def __init__(self, loader: TemplateLoader | None = None) -> None:
        self.loader = loader or TemplateLoader()

    # -- Rendering ---------------------------------------------------------

    def placeholders_for(self, kind: ArtifactKind, request: GenerationRequest) -> dict[str, Replacement]:
        return _PLACEHOLDER_BUILDERS[kind](request)

    def render(self, kind: ArtifactKind, request: GenerationRequest) -> RenderedArtifact:
        """Render one artifact entirely in memory.

        Raises:
            FileNotFoundError: If the template for *kind* is missing.
        """
        template = self.loader.load(kind, request.language_variant)
        text = template.substitute(self.placeholders_for(kind, request))
        return RenderedArtifact(kind=kind, text=text, relative_path=artifact_path(kind, request))

    # -- Writing (async) ---------------------------------------------------

    async def write(self, artifact: RenderedArtifact, output_dir: str | Path) -> Path:
        """Write a rendered artifact below *output_dir* in a single call."""
        target = Path(output_dir) / Path(*artifact.relative_path.parts)
        return await write_file_async(target, artifact.text)

    async def generate_artifact(
        self, kind: ArtifactKind, request: GenerationRequest, output_dir: str | Path
    ) -> Path:
        artifact = self.render(kind, request)
        return await self.write(artifact, output_dir)

    async def generate(self, request: GenerationRequest, output_dir: str | Path) -> GenerationResult:
        """Render and write all requested artifacts concurrently.

        Each artifact succeeds or fails on its own; files already written
        stay in place when a sibling fails.
        """
        kinds = request.artifact_kinds()
        outcomes = await asyncio.gather(
            *(self.generate_artifact(kind, request, output_dir) for kind in kinds),
            return_exceptions=True,
        )

        result = GenerationResult()
        for kind, outcome in zip(kinds, outcomes):
            if isinstance(outcome, OSError):
                result.errors[kind] = outcome
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.written[kind] = outcome
        return result
