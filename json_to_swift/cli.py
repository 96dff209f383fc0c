"""
Command-line interface for Swift code generation.

Reads a JSON document from a file, URL or standard input and prints
(or writes) the generated declarations.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    Configuration,
    DeclarationKeyword,
    GeneratorError,
    LineIndent,
    RegistryError,
    TypeUnwrapping,
    build_property,
    generate_code,
    get_generator,
    list_supported_languages,
)
from .codegen.registry import is_language_supported
from .codegen.core.templates import TemplateError
from .codegen.core.config import get_config_manager
from .logging_config import configure_logging, get_logger
from .utils import JSONLoaderError, json_object, load_json

logger = get_logger(__name__)

# Generated code goes to stdout; errors, warnings and metadata to stderr
console = Console()
err_console = Console(stderr=True)

FRAGMENTS = ("all", "keys", "types", "properties", "init")


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-to-swift",
        description="Generate Swift declarations from a JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-to-swift data.json
  json-to-swift --url https://example.com/user.json --use-var --optional
  json-to-swift data.json --fragment properties --default-values
  cat data.json | json-to-swift --init -o Model.swift
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "file", nargs="?", help="JSON file (standard input when omitted)"
    )
    input_group.add_argument("--url", help="URL to fetch JSON from")

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--language",
        "-l",
        default="swift",
        help="Target language (default: swift)",
    )
    parser.add_argument(
        "--root-name", default="Root", help="Name for the root struct (default: Root)"
    )
    parser.add_argument(
        "--fragment",
        choices=FRAGMENTS,
        default="all",
        help="Print one fragment instead of the full declaration",
    )
    parser.add_argument(
        "--settings", metavar="FILE", help="Persisted settings file (JSON)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging and metadata"
    )

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--use-var",
        action="store_true",
        help="Declare properties with var instead of let",
    )
    gen_group.add_argument(
        "--optional",
        action="store_true",
        help="Use optional (?) instead of implicitly unwrapped (!) types",
    )
    gen_group.add_argument(
        "--no-keys", action="store_true", help="Don't generate the Key container"
    )
    gen_group.add_argument(
        "--default-values",
        action="store_true",
        help="Add default values to property declarations",
    )
    gen_group.add_argument(
        "--init",
        action="store_true",
        help="Add a dictionary initializer and dictionary export",
    )
    gen_group.add_argument(
        "--type-suffix",
        default="Type",
        help="Suffix for generated nested type names (default: Type)",
    )

    indent_group = parser.add_argument_group("indentation")
    indent_group.add_argument(
        "--tabs", action="store_true", help="Indent with tabs"
    )
    indent_group.add_argument(
        "--indent-width",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per indentation level (default: 4)",
    )

    return parser


def _build_config(args: argparse.Namespace) -> Configuration:
    """Merge the settings file with command-line flags.

    Overrides use the persisted setting names so they replace file entries.
    """
    overrides: dict[str, Any] = {}

    if args.use_var:
        overrides["declaration"] = DeclarationKeyword.MUTABLE
    if args.optional:
        overrides["typeUnwrapping"] = TypeUnwrapping.OPTIONAL
    if args.no_keys:
        overrides["addKeys"] = False
    if args.default_values:
        overrides["addDefaultValue"] = True
    if args.init:
        overrides["addInitAndDictionary"] = True

    manager = get_config_manager()
    try:
        config = manager.get_config(overrides, args.settings)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in manager.validate_config(config):
        logger.warning(warning)
    return config


def _build_indent(args: argparse.Namespace) -> LineIndent:
    try:
        indent = get_config_manager().get_indent(args.settings)
        if args.tabs:
            indent = LineIndent(use_tabs=True, width=indent.width)
        if args.indent_width is not None:
            indent = LineIndent(use_tabs=indent.use_tabs, width=args.indent_width)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e
    return indent


def _load_input(args: argparse.Namespace) -> tuple[str, Any]:
    """Return (source, parsed JSON) from a file, URL or stdin."""
    if args.file or args.url:
        try:
            return load_json(file_path=args.file, url=args.url)
        except (JSONLoaderError, FileNotFoundError) as e:
            raise CLIError(str(e)) from e

    data = json_object(sys.stdin.read())
    if data is None:
        raise CLIError("Standard input is not a JSON object or array")
    return "<stdin>", data


def _render(args: argparse.Namespace, data: Any, config: Configuration, indent: LineIndent):
    """Render the requested fragment; returns (code, warnings, metadata)."""
    prop = build_property(data, type_name_suffix=args.type_suffix)
    if prop is None:
        raise CLIError("JSON root must be an object or array")

    try:
        generator = get_generator(args.language, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    if args.fragment == "all":
        result = generate_code(generator, prop, indent, args.root_name)
        if not result.success:
            raise CLIError(result.error_message)
        return result.code, result.warnings, result.metadata

    fragment = {
        "keys": generator.property_keys,
        "types": generator.type_content,
        "properties": generator.property_content,
        "init": generator.init_content,
    }[args.fragment]
    return fragment(prop, indent), generator.validate_property(prop), {}


def _print_metadata(metadata: dict[str, Any]) -> None:
    table = Table(
        title="Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")
    for key, value in metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    err_console.print(table)


def run(args: argparse.Namespace) -> int:
    """Run a generation request from parsed arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        if not is_language_supported(args.language):
            raise CLIError(
                f"Unsupported language '{args.language}'. "
                f"Supported: {', '.join(list_supported_languages())}"
            )

        config = _build_config(args)
        indent = _build_indent(args)
        source, data = _load_input(args)
        logger.info("Generating %s from %s", args.fragment, source)

        code, warnings, metadata = _render(args, data, config, indent)
    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except (GeneratorError, TemplateError) as e:
        err_console.print(f"[red]✗ Generation failed:[/red] {escape(str(e))}")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {escape(str(e))}")
            return 1
        err_console.print(f"[green]✓[/green] Swift code saved to [cyan]{output_path}[/cyan]")
    elif console.is_terminal:
        console.print(Syntax(code, "swift", theme="monokai"))
    else:
        # Piped output stays byte-for-byte
        sys.stdout.write(code)

    if args.verbose and metadata:
        _print_metadata(metadata)

    for warning in warnings:
        err_console.print(f"[yellow]⚠ {escape(warning)}[/yellow]")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the json-to-swift command."""
    args = create_parser().parse_args(argv)
    configure_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
