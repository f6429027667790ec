"""mongen scaffolder -- renders Mongoose models and Express REST boilerplate.

Quick usage::

    from mongen.parser import ArtifactKind, GenerationRequest, parse_field_spec_string
    from mongen.scaffolder import GenerationEngine

    request = GenerationRequest(
        model_name="Post",
        fields=parse_field_spec_string("title:string,author:objectId:User"),
        include_rest=True,
    )
    engine = GenerationEngine()
    artifact = engine.render(ArtifactKind.MODEL, request)
    result = await engine.generate(request, "./src")
"""

from mongen.scaffolder.generator import (
    GenerationEngine,
    GenerationResult,
    RenderedArtifact,
    artifact_path,
)
from mongen.scaffolder.templates import PLACEHOLDERS, PlaceholderTemplate, TemplateLoader

__all__ = [
    "PLACEHOLDERS",
    "GenerationEngine",
    "GenerationResult",
    "PlaceholderTemplate",
    "RenderedArtifact",
    "TemplateLoader",
    "artifact_path",
]
