"""Template loading and placeholder substitution.

Artifact templates are plain JavaScript/TypeScript boilerplate stored under
``mongen/scaffolder/templates/`` as ``<artifact>.<ext>``.  They are located
through a Jinja2 ``FileSystemLoader`` but never compiled as Jinja templates:
their only dynamic parts are fixed ``{placeholder}`` markers, replaced in a
single pass by :class:`PlaceholderTemplate`.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Mapping, Union

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from mongen.parser.models import ArtifactKind, LanguageVariant


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

#: Every placeholder a template may contain.
PLACEHOLDERS: frozenset[str] = frozenset({
    "modelName",
    "schemaName",
    "fields",
    "controllerName",
    "controllerPath",
    "modelPath",
    "pluralName",
    "name",
    "createFields",
    "updateFields",
})

_PLACEHOLDER_RE = re.compile(r"\{(" + "|".join(sorted(PLACEHOLDERS)) + r")\}")

Replacement = Union[str, Callable[[], str]]


# ---------------------------------------------------------------------------
# PlaceholderTemplate
# ---------------------------------------------------------------------------


class PlaceholderTemplate:
    """Opaque template text with fixed ``{name}`` placeholders.

    Substitution scans the text once, so replacement values are never
    themselves re-scanned.  Placeholders that are not recognized, or that the
    mapping does not cover, are left untouched.
    """

    def __init__(self, text: str, name: str = "<string>") -> None:
        self.text = text
        self.name = name

    def placeholders(self) -> set[str]:
        """Recognized placeholders that occur in the text."""
        return set(_PLACEHOLDER_RE.findall(self.text))

    def missing(self, mapping: Mapping[str, Replacement]) -> set[str]:
        """Placeholders present in the text but absent from *mapping*."""
        return self.placeholders() - set(mapping)

    def substitute(self, mapping: Mapping[str, Replacement]) -> str:
        """Replace every covered placeholder occurrence in one pass.

        Values may be strings or zero-argument callables; a callable is
        evaluated at most once even if its placeholder occurs many times.
        """
        resolved: dict[str, str] = {}

        def _replace(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in mapping:
                return match.group(0)
            if key not in resolved:
                value = mapping[key]
                resolved[key] = value() if callable(value) else value
            return resolved[key]

        return _PLACEHOLDER_RE.sub(_replace, self.text)

    def __repr__(self) -> str:
        return f"PlaceholderTemplate({self.name!r})"


# ---------------------------------------------------------------------------
# TemplateLoader
# ---------------------------------------------------------------------------


class TemplateLoader:
    """Loads artifact templates by kind and language variant.

    Loaded templates are cached per instance; the cache is read-only after
    the first load and safe to share between concurrent renders.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            keep_trailing_newline=True,
        )
        self._cache: dict[str, PlaceholderTemplate] = {}

    @staticmethod
    def template_name(kind: ArtifactKind, variant: LanguageVariant) -> str:
        """File name of the template, e.g. ``controller.ts``."""
        return f"{kind.value}.{variant.extension}"

    def load_source(self, name: str) -> str:
        """Return raw template text.

        Raises:
            FileNotFoundError: If no template called *name* exists.
        """
        try:
            source, _filename, _uptodate = self.env.loader.get_source(self.env, name)
        except TemplateNotFound:
            raise FileNotFoundError(
                f"Template not found: {name} (searched {self.template_dir})"
            ) from None
        return source

    def load(self, kind: ArtifactKind, variant: LanguageVariant) -> PlaceholderTemplate:
        name = self.template_name(kind, variant)
        if name not in self._cache:
            self._cache[name] = PlaceholderTemplate(self.load_source(name), name)
        return self._cache[name]
