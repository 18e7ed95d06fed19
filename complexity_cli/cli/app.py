"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

# Create main typer app
app = typer.Typer(
    help="Complexity CLI - estimate the time complexity of JavaScript functions",
    add_completion=True,
    rich_markup_mode="markdown",
)


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    path: Optional[str] = typer.Argument(
        None,
        help="JavaScript file to analyze ('-' reads stdin)",
        autocompletion=Completions.source_files,
    ),
    code: Optional[str] = typer.Option(
        None, "--code", "-c", help="Source code to analyze instead of a file"
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (table, json)",
        autocompletion=Completions.output_formats,
    ),
    explain: Optional[bool] = typer.Option(
        None, "--explain/--no-explain", help="Show the complexity explanation"
    ),
    suggest: bool = typer.Option(
        False, "--suggest", "-s", help="Show optimization suggestions"
    ),
    bottlenecks: bool = typer.Option(
        False, "--bottlenecks", "-b", help="Show performance bottlenecks"
    ),
    detailed: bool = typer.Option(
        False, "--detailed", "-d", help="Show the signals for every function"
    ),
    output_path: Optional[str] = typer.Option(
        None, "--output", "-o", help="Also write the JSON result to a file"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file"),
):
    """Analyze the time complexity of every function in a JavaScript source."""
    options = resolve_options(
        config_override=config,
        format_override=output_format,
        explain_override=explain,
        suggest_override=suggest,
        bottlenecks_override=bottlenecks,
        debug_override=debug,
        verbose_override=verbose,
        log_file=log_file,
    )

    exit_code = CommandHandlers.handle_analyze(
        options, path, code=code, output_path=output_path, detailed=detailed
    )
    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
@with_error_handling
def classes():
    """List complexity classes from best to worst."""
    CommandHandlers.handle_classes()


def main():
    app()


if __name__ == "__main__":
    main()
