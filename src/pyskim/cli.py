import json
import logging
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pyskim import __version__
from pyskim.config import ScanConfig, load_scan_config
from pyskim.info import get_module_summary
from pyskim.models import ModuleSummary
from pyskim.render import render_arguments, render_module, to_dict
from pyskim.scanner import find_class_by_name, find_classes_with_base, find_function_by_name

app = typer.Typer(
    help="pyskim - extract top-level functions, classes and globals from Python source",
    no_args_is_help=True,
)

console = Console()


def _load_summary(file_path: str) -> ModuleSummary:
    """Scan a file, turning expected failures into exit code 1 and the rest into 2."""
    try:
        return get_module_summary(file_path)
    except (FileNotFoundError, ValueError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


def _apply_config(summary: ModuleSummary, config: ScanConfig) -> ModuleSummary:
    """Apply display options; the scan itself always reports everything."""
    classes = summary.classes
    if config.hide_self:
        classes = tuple(
            replace(c, constructor_arguments=c.constructor_arguments[1:])
            if c.constructor_arguments and c.constructor_arguments[0].name == "self"
            else c
            for c in classes
        )

    return replace(
        summary,
        functions=summary.functions if config.include_functions else (),
        classes=classes if config.include_classes else (),
        global_variables=summary.global_variables if config.include_globals else (),
    )


def _print_tables(summary: ModuleSummary, config: ScanConfig) -> None:
    if config.include_functions:
        table = Table(title="Functions")
        table.add_column("Name")
        table.add_column("Arguments")
        for function in summary.functions:
            table.add_row(function.name, render_arguments(function.arguments))
        console.print(table)

    if config.include_classes:
        table = Table(title="Classes")
        table.add_column("Name")
        table.add_column("Bases")
        table.add_column("Constructor")
        for cls in summary.classes:
            table.add_row(
                cls.name,
                ", ".join(cls.base_classes),
                render_arguments(cls.constructor_arguments),
            )
        console.print(table)

    if config.include_globals:
        table = Table(title="Globals")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Value")
        for variable in summary.global_variables:
            table.add_row(variable.name, variable.type_annotation or "", variable.value_expression)
        console.print(table)


@app.command()
def scan(
    file_path: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Scan a Python file for top-level functions, classes and globals.

    Args:
        file_path: Path to the file to scan
    """
    config = load_scan_config()
    summary = _apply_config(_load_summary(file_path), config)

    if json_output:
        output = {}
        if config.include_functions:
            output["functions"] = [to_dict(f) for f in summary.functions]
        if config.include_classes:
            output["classes"] = [to_dict(c) for c in summary.classes]
        if config.include_globals:
            output["globals"] = [to_dict(v) for v in summary.global_variables]
        typer.echo(json.dumps(output, indent=2))
    else:
        _print_tables(summary, config)


@app.command()
def show(file_path: str):
    """Print the scanned file's top-level constructs as Python-like stubs.

    Args:
        file_path: Path to the file to scan
    """
    summary = _apply_config(_load_summary(file_path), load_scan_config())
    typer.echo(render_module(summary))


@app.command()
def find(
    file_path: str,
    name: str,
    base: bool = typer.Option(False, "--base", help="Find classes inheriting from NAME"),
):
    """Find a function or class by name in a Python file.

    Args:
        file_path: Path to the file to scan
        name: Function or class name (or base class name with --base)

    Examples:
        pyskim find src/models.py Config
        pyskim find src/models.py BaseModel --base
    """
    summary = _apply_config(_load_summary(file_path), ScanConfig(hide_self=load_scan_config().hide_self))

    if base:
        matches = find_classes_with_base(name, summary.classes)
        if not matches:
            typer.echo(f"Error: No class in {file_path} inherits from '{name}'", err=True)
            raise typer.Exit(code=1)
        typer.echo(json.dumps([{"class": to_dict(c)} for c in matches], indent=2))
        return

    function = find_function_by_name(name, summary.functions)
    if function is not None:
        typer.echo(json.dumps({"function": to_dict(function)}, indent=2))
        return

    cls = find_class_by_name(name, summary.classes)
    if cls is not None:
        typer.echo(json.dumps({"class": to_dict(cls)}, indent=2))
        return

    typer.echo(f"Error: '{name}' not found in {file_path}", err=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"pyskim version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
