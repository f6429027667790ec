"""mongen command-line entry point.

Usage::

    mongen                                   # interactive questions
    mongen -m Post -f title:string,author:objectId:User --rest
    mongen -m Post -f tags:string:array -t m --ts -o ./src
"""

from __future__ import annotations

import argparse
import asyncio
import shlex
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from mongen import __version__
from mongen.config import Config
from mongen.parser import (
    FieldSpecError,
    GenerationRequest,
    LanguageVariant,
    LayoutMode,
    collect_request_interactive,
    format_field_spec,
    parse_field_spec_string,
    parse_layout_mode,
    validate_model_name,
)
from mongen.parser.fields import FIELD_SEPARATOR, TOKEN_SEPARATOR
from mongen.scaffolder import GenerationEngine, GenerationResult, TemplateLoader
from mongen.utils import (
    console,
    print_error,
    print_fields_table,
    print_info,
    print_success,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mongen",
        description="Generate Mongoose models, Express routers and controllers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Field format:\n"
            "  name1:type1[:ref][:array],name2:type2,...\n"
            "  types: string, number, date, boolean, array, objectId\n"
            "\n"
            "Examples:\n"
            "  mongen -m Post -f title:string,published:boolean --rest\n"
            "  mongen -m Post -f author:objectId:User,tags:string:array -t m --ts\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-m", "--model", default=None, help="model name")
    parser.add_argument(
        "-f", "--fields", default=None,
        help="model fields (name1:type1,name2:type2)",
    )
    parser.add_argument("-r", "--rest", action="store_true", help="enable generation REST")
    parser.add_argument(
        "-t", "--tree", default=None,
        help="files tree generation grouped by <t>ype or by <m>odule",
    )
    parser.add_argument("--ts", action="store_true", help="generating code in TS")
    parser.add_argument(
        "-o", "--output", default=None,
        help="output directory (default: current directory)",
    )
    return parser


def _ask(question: str) -> str:
    return console.input(escape(question))


def request_from_args(args: argparse.Namespace, config: Config) -> GenerationRequest:
    """Validate command-line flags into a request.

    Raises:
        FieldSpecError: On the first rule the flags break.
    """
    model_name = validate_model_name(args.model)
    fields = parse_field_spec_string(args.fields)
    layout_mode = parse_layout_mode(args.tree) if args.tree is not None else config.layout_mode
    return GenerationRequest(
        model_name=model_name,
        fields=tuple(fields),
        layout_mode=layout_mode,
        language_variant=LanguageVariant.TYPED if args.ts else config.language_variant,
        include_rest=args.rest or config.include_rest,
    )


def equivalent_command(request: GenerationRequest) -> Optional[str]:
    """Shell-quoted command line that reproduces *request*.

    Returns ``None`` when a field name or reference contains a separator,
    since ``--fields`` cannot express it.
    """
    for field in request.fields:
        for token in (field.name, field.reference):
            if FIELD_SEPARATOR in token or TOKEN_SEPARATOR in token:
                return None

    parts = ["mongen", "-m", request.model_name, "-f", format_field_spec(list(request.fields))]
    if request.include_rest:
        parts.append("-r")
    if request.layout_mode is LayoutMode.BY_MODULE:
        parts.extend(["-t", LayoutMode.BY_MODULE.value])
    if request.language_variant is LanguageVariant.TYPED:
        parts.append("--ts")
    return shlex.join(parts)


def report(result: GenerationResult) -> None:
    for kind, path in result.written.items():
        print_success(f"Created {kind.value}: {path}")
    for kind, error in result.errors.items():
        print_error(f"Failed to generate {kind.value}: {error}")


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``mongen`` and ``python -m mongen.cli``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.output:
            config.output_dir = Path(args.output)

        if args.model is not None or args.fields is not None:
            request = request_from_args(args, config)
        else:
            request = collect_request_interactive(
                _ask,
                language_variant=LanguageVariant.TYPED if args.ts else config.language_variant,
                on_error=print_error,
                on_info=print_info,
            )
            if request.fields:
                command = equivalent_command(request)
                if command is None:
                    print_warning(
                        "No equivalent command: field names and references "
                        f"containing '{FIELD_SEPARATOR}' or '{TOKEN_SEPARATOR}' "
                        "cannot be passed with --fields"
                    )
                else:
                    print_info(f"Equivalent command: {command}")
    except FieldSpecError as exc:
        print_error(str(exc))
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print_error("Aborted.")
        sys.exit(1)

    print_fields_table(request.model_name, request.fields)

    engine = GenerationEngine(TemplateLoader(config.template_dir))
    result = asyncio.run(engine.generate(request, config.output_dir))
    report(result)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
