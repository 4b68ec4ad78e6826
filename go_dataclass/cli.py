"""
Command-line interface for the dataclass generator.

    dataclass [flags] -type T -field F [packages]
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .codegen.core.config import ConfigError, ENV_DEBUG, ENV_STDOUT, ConfigManager
from .codegen.core.generator import GeneratorError
from .codegen.core.naming import validate_type_name
from .codegen.core.templates import TemplateError
from .codegen.languages.go import DataclassGenerator
from .logging_config import get_logger, setup_logging
from .utils import OutputError, load_package_name, write_result

logger = get_logger(__name__)

# Errors go to stderr; stdout may carry generated code
console = Console(stderr=True)

DESCRIPTION = """\
T is the interface name.
F is the list of "fieldName typeName".
"""

EPILOG = f"""\
Environment variables:
  {ENV_DEBUG}
    If set, enable debug logs.
  {ENV_STDOUT}
    If set, write result to stdout.

Example:
  dataclass -type User -field "ID int|Name string|Tags []string" ./models
"""


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser; flags accept one or two dashes."""
    parser = argparse.ArgumentParser(
        prog="dataclass",
        usage="%(prog)s [flags] -type T -field F [packages]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-type", "--type", dest="type_name", default="",
        help="interface name; must be set",
    )
    parser.add_argument(
        "-field", "--field", dest="fields", default="",
        help="list of field names separated by '|'; must be set",
    )
    parser.add_argument(
        "-goimports", "--goimports", dest="goimports", default=None,
        help="goimports executable (default: goimports)",
    )
    parser.add_argument(
        "-output", "--output", dest="output", default=None,
        help="output file name; default srcdir/dataclass.go",
    )
    parser.add_argument(
        "-config", "--config", dest="config", default=None,
        help="JSON configuration file",
    )
    parser.add_argument(
        "-dump-config", "--dump-config", dest="dump_config", default=None,
        help="write the effective configuration to a JSON file and exit",
    )
    parser.add_argument(
        "patterns", nargs="*", metavar="packages",
        help="package directory or Go files (default: current directory)",
    )
    return parser


def _build_overrides(args: argparse.Namespace) -> dict:
    """Configuration overrides coming from flags."""
    overrides = {}
    if args.goimports:
        overrides["goimports"] = args.goimports
    if args.output:
        overrides["output_file"] = args.output
    return overrides


def _print_error(error: Exception) -> None:
    console.print(f"[red]✗ Error:[/red] {escape(str(error))}", soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the generator.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    args = create_parser().parse_args(argv)

    manager = ConfigManager()
    try:
        config = manager.get_config(_build_overrides(args), args.config)
        if args.dump_config:
            manager.save_config(config, args.dump_config)
            console.print(f"[green]✓[/green] Configuration saved to {escape(args.dump_config)}")
            return 0
    except ConfigError as e:
        _print_error(e)
        return 1

    setup_logging(debug=config.debug, console=console)
    logger.debug("Arguments: %s", argv)

    try:
        validate_type_name(args.type_name)

        generator = DataclassGenerator(args.type_name, config)
        package_name = config.package_name or load_package_name(args.patterns)
        generator.parse_fields(args.fields)

        generator.write_header(" ".join(argv), package_name)
        generator.generate()

        write_result(generator.bytes(), args.patterns, config)
    except (GeneratorError, TemplateError, OutputError) as e:
        logger.debug("Generation failed", exc_info=True)
        _print_error(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
