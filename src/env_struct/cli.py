"""CLI entrypoints for env-struct."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from env_struct.codegen import module_filename, render_module, write_module
from env_struct.config import ToolConfig
from env_struct.declarations import parse_schema
from env_struct.errors import EnvStructError

app = typer.Typer(
    no_args_is_help=True,
    help="Generate environment-backed configuration classes from field declarations.",
)
console = Console()

DECLARATIONS_ARGUMENT = typer.Argument(
    ...,
    help="Field declarations: `name` for a required field, `name=default` for a defaulted one.",
)
OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Output module path (default: <output_dir>/<snake_case_name>.py).",
)
DOC_OPTION = typer.Option(
    None,
    "--doc",
    help="Docstring for the generated class.",
)
STDOUT_OPTION = typer.Option(
    False,
    "--stdout",
    help="Print the generated module instead of writing it.",
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _to_bad_parameter(exc: Exception) -> typer.BadParameter:
    return typer.BadParameter(str(exc))


@app.callback()
def main_callback() -> None:
    cfg = ToolConfig()
    _configure_logging(cfg.log_level)


@app.command("config")
def show_config() -> None:
    """Print the current tool configuration."""
    cfg = ToolConfig()
    console.print(f"[bold]Output dir:[/bold] {cfg.output_dir}")
    console.print(f"[bold]Log level:[/bold] {cfg.log_level}")


@app.command("keys")
def show_keys(declarations: list[str] = DECLARATIONS_ARGUMENT) -> None:
    """Show the environment variable each declared field is read from."""
    try:
        schema = parse_schema("Env", declarations)
    except EnvStructError as exc:
        raise _to_bad_parameter(exc) from exc

    table = Table(title=f"Lookup keys ({schema.mode.value} mode)")
    table.add_column("Field")
    table.add_column("Variable")
    table.add_column("Default")
    for spec in schema.fields:
        table.add_row(spec.name, spec.key, "-" if spec.default is None else repr(spec.default))
    console.print(table)


@app.command("generate")
def generate_command(
    name: str = typer.Argument(..., help="Class name of the generated configuration type."),
    declarations: list[str] = DECLARATIONS_ARGUMENT,
    output: Path | None = OUTPUT_OPTION,
    doc: str | None = DOC_OPTION,
    stdout: bool = STDOUT_OPTION,
) -> None:
    """Render an EnvStruct subclass module from field declarations."""
    try:
        schema = parse_schema(name, declarations, doc=doc)
    except EnvStructError as exc:
        raise _to_bad_parameter(exc) from exc

    if stdout:
        typer.echo(render_module(schema), nl=False)
        return

    path = output or Path(ToolConfig().output_dir) / module_filename(schema)
    write_module(schema, path)
    console.print(
        f"[bold green]Wrote {schema.name} ({len(schema.fields)} {schema.mode.value} fields) to {path}[/bold green]"
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
