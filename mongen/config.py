"""mongen configuration.

Typed defaults for a generation run.  Values come from the environment via
:meth:`Config.from_env` and are then overridden by command-line flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from mongen.parser.fields import parse_layout_mode
from mongen.parser.models import LanguageVariant, LayoutMode

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global mongen configuration.

    Instances are created once by the CLI entry point and used to build the
    ``TemplateLoader`` and the ``GenerationRequest``.
    """

    output_dir: Path = Field(default=Path("."), description="Directory generated files go under")
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the bundled template directory"
    )
    layout_mode: LayoutMode = Field(default=LayoutMode.BY_TYPE)
    language_variant: LanguageVariant = Field(default=LanguageVariant.PLAIN)
    include_rest: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MONGEN_OUTPUT_DIR, MONGEN_TEMPLATE_DIR, MONGEN_TREE (t/m),
            MONGEN_TS (truthy for TypeScript), MONGEN_REST (truthy).

        Raises:
            FieldSpecError: If ``MONGEN_TREE`` is not ``t`` or ``m``.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MONGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["MONGEN_OUTPUT_DIR"])
        if os.environ.get("MONGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["MONGEN_TEMPLATE_DIR"])
        if os.environ.get("MONGEN_TREE"):
            kwargs["layout_mode"] = parse_layout_mode(os.environ["MONGEN_TREE"])
        if os.environ.get("MONGEN_TS", "").strip().lower() in _TRUTHY:
            kwargs["language_variant"] = LanguageVariant.TYPED
        if os.environ.get("MONGEN_REST", "").strip().lower() in _TRUTHY:
            kwargs["include_rest"] = True
        return cls(**kwargs)
