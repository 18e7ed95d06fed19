"""
Decorators for Complexity CLI.
"""

import traceback
from functools import wraps
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape

from complexity_cli.core.exceptions import ComplexityCLIError

console = Console(stderr=True)


def with_error_handling(func: Callable) -> Callable:
    """
    Turn errors raised by a command into a message on stderr and exit code 1.

    Known errors print their message only. Anything else also prints a
    traceback when the command was invoked with ``--debug``.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ComplexityCLIError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            raise typer.Exit(code=1)
        except Exception as e:
            console.print(
                f"[bold red]Unexpected error in {func.__name__}:[/bold red] "
                f"{escape(str(e))}"
            )
            if kwargs.get("debug"):
                console.print(escape(traceback.format_exc()))
            raise typer.Exit(code=1)

    return wrapper
