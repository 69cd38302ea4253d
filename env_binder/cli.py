"""
ABOUTME: Command-line interface for checking environment bindings
ABOUTME: Binds a dataclass named on the command line and reports the resolved fields
"""

import argparse
import dataclasses
import importlib
import json
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .binder import load
from .config import load_environment
from .exceptions import BindError
from .fields import describe

console = Console()

MASK = "********"


def parse_default(item: str) -> tuple[str, str]:
    """Parse a KEY=VALUE pair given to --default."""
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {item!r}")
    return key, value


def import_target(target: str) -> type:
    """
    Import the dataclass named by a "module:ClassName" string.

    Raises:
        ValueError: If the string is malformed or does not name a dataclass.
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like module:ClassName, got {target!r}")

    # Console scripts start with their bin/ directory on sys.path, not cwd.
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    obj = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)

    if not (isinstance(obj, type) and dataclasses.is_dataclass(obj)):
        raise ValueError(f"{target} is not a dataclass")
    return obj


def cli() -> argparse.Namespace:
    """
    Parse and return command-line arguments for the env-binder CLI tool.

    Returns:
        argparse.Namespace: Parsed arguments naming the target record, the env file, fallback values and output options.
    """
    p = argparse.ArgumentParser(
        description="Populate a dataclass from environment variables and report the result"
    )
    p.add_argument(
        "target",
        help="Dataclass to bind, as module:ClassName",
    )
    p.add_argument(
        "--env-file",
        default=".env",
        help="Dotenv file loaded before binding (skipped if missing)",
    )
    p.add_argument(
        "--default",
        dest="defaults",
        type=parse_default,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Fallback value used when KEY is unset; may be repeated",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output the bound record as JSON instead of a rich table",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"env-binder {__version__}",
    )
    return p.parse_args()


def report_values(record) -> dict:
    """Bound values keyed by field name, with secret fields masked."""
    values = dataclasses.asdict(record)
    for descriptor in describe(type(record)):
        if descriptor.secret:
            values[descriptor.name] = MASK
    return values


def render_table(record) -> Table:
    """Build a rich table with one row per bound field; secret fields are masked."""
    values = report_values(record)
    table = Table(title=type(record).__name__)
    table.add_column("Field", style="cyan")
    table.add_column("Variable", style="magenta")
    table.add_column("Type")
    table.add_column("Value", style="green")
    for descriptor in describe(type(record)):
        table.add_row(
            descriptor.name,
            descriptor.source_key,
            descriptor.type_name,
            MASK if descriptor.secret else repr(values[descriptor.name]),
        )
    return table


def main():
    """
    Execute the main entry point for the env-binder CLI tool.

    Parses arguments, loads the env file, imports and binds the target record,
    then prints the bound fields. Exits with status 1 on a binding error or an
    unusable target.
    """
    a = cli()

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    load_environment(a.env_file)

    try:
        record_type = import_target(a.target)
    except (ImportError, AttributeError, ValueError) as exc:
        console.print(f"❌ Cannot load target: {exc}")
        sys.exit(1)

    try:
        record = load(record_type, dict(a.defaults))
    except BindError as exc:
        console.print(f"❌ Configuration error: {exc}")
        sys.exit(1)
    except TypeError as exc:
        # record_type() failed: some field has no default
        console.print(f"❌ Cannot instantiate {a.target}: {exc}")
        sys.exit(1)

    if a.json:
        print(json.dumps(report_values(record), indent=2))
    else:
        console.print(render_table(record))
        console.print(f"✅ Bound {len(dataclasses.fields(record))} fields")


if __name__ == "__main__":
    main()
