import json
from typing import Any, List, Optional, Union

from rich.box import ROUNDED
from rich.markup import escape
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from complexity_cli.analysis.complexity import ComplexityClass
from complexity_cli.analysis.models import AnalysisResult, FunctionAnalysis
from complexity_cli.core.formatting import (
    format_flag,
    format_line_span,
    sort_call_frequency,
)
from complexity_cli.insights import (
    complexity_style,
    explain_complexity,
    find_bottlenecks,
    optimization_suggestions,
)

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

SUCCESS_STYLE = Style(color="green", bold=True)
FAIL_STYLE = Style(color="red", bold=True)
WARNING_STYLE = Style(color="yellow", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")
YELLOW_STYLE = Style(color="yellow")

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple[int, int] = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs
    )


def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs
    )


def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    """Helper function to print simple status messages."""
    console.print(Text.assemble((icon, style), "  ", (msg, style)))


def _complexity_text(complexity: ComplexityClass) -> Text:
    return Text(complexity.label, style=complexity_style(complexity))


def _print_bullet_panel(items: List[str], title: str, empty_message: str):
    if items:
        content = "\n".join(f"• {escape(item)}" for item in items)
    else:
        content = f"[dim]{empty_message}[/dim]"
    console.print(_create_panel(content, title=title, padding=(0, 1)))


# ==============================================================================
# Simple Status Messages
# ==============================================================================


def print_info(msg: str):
    """Print an informational message (neutral information)."""
    _print_status_message("ℹ", msg, INFO_STYLE)


def print_success(msg: str):
    """Print a success message (operation completed successfully)."""
    _print_status_message("✓", msg, SUCCESS_STYLE)


# ==============================================================================
# Complexity Analysis Output
# ==============================================================================


def print_analysis_error(source_name: str, message: str):
    """Display a parse failure."""
    content = Text.assemble(
        ("Could not parse ", "default"),
        (source_name, CYAN_STYLE),
        ("\n", "default"),
        (message, FAIL_STYLE),
    )
    console.print(_create_panel(content, title="[red]Error[/red]", border_style=FAIL_STYLE))


def print_overall(result: AnalysisResult, source_name: str):
    """Summary panel with the overall complexity."""
    summary = Text.assemble(
        ("Overall: ", BOLD_STYLE + YELLOW_STYLE),
        _complexity_text(result.overall_complexity),
        ("  (", DIM_STYLE),
        (str(len(result.functions)), INFO_STYLE),
        (" function(s) in ", DIM_STYLE),
        (source_name, CYAN_STYLE),
        (")", DIM_STYLE),
    )
    parts: List[RenderableType] = [summary]
    if result.recursive_functions:
        parts.append(
            Text.assemble(
                ("Recursion detected: ", WARNING_STYLE),
                (", ".join(result.recursive_functions), "default"),
            )
        )
    console.print(
        _create_panel(
            Group(*parts),
            title="[bold]COMPLEXITY ANALYSIS RESULTS[/bold]",
            border_style=complexity_style(result.overall_complexity),
        )
    )


def print_function_table(functions: List[FunctionAnalysis]):
    """One row per analyzed function."""
    table = _create_table(title="[bold]Functions[/bold]")
    table.add_column("Function", style=CYAN_STYLE)
    table.add_column("Lines", style="dim")
    table.add_column("Complexity")
    table.add_column("Loops", justify="right")
    table.add_column("Nesting", justify="right")
    table.add_column("Recursion", justify="center")

    for analysis in functions:
        features = analysis.features
        table.add_row(
            Text(analysis.name),
            format_line_span(analysis.start_line, analysis.end_line),
            _complexity_text(analysis.complexity),
            str(features.loop_count),
            str(features.nested_loop_depth),
            format_flag(features.recursion_detected),
        )
    console.print(table)


def print_function_signals(analysis: FunctionAnalysis):
    """Tree of the signals behind one function's classification."""
    features = analysis.features
    tree = Tree(f"[bold blue]Function: {escape(analysis.name)}[/bold blue]")
    tree.add(Text.assemble(("Complexity: ", CYAN_STYLE), _complexity_text(analysis.complexity)))
    tree.add(f"[cyan]Recursive calls: {features.recursive_call_count}[/cyan]")
    signals = tree.add("[cyan]Signals[/cyan]")
    signals.add(f"Divide and conquer: {format_flag(features.divide_and_conquer)}")
    signals.add(f"Logarithmic operations: {format_flag(features.logarithmic_operations)}")
    signals.add(f"Linear operations: {format_flag(features.linear_operations)}")
    signals.add(f"Binary search: {format_flag(features.binary_search_pattern)}")
    signals.add(
        f"Recursive binary search: {format_flag(features.recursive_binary_search)}"
    )
    console.print(_create_panel(tree, padding=(0, 1)))


def print_call_frequency(result: AnalysisResult):
    """Call-site counts across the whole source, most frequent first."""
    calls = sort_call_frequency(result.total_function_calls())
    if not calls:
        return
    table = _create_table(title="[bold]Function Call Frequency[/bold]")
    table.add_column("Function", style=CYAN_STYLE)
    table.add_column("Calls", justify="right", style="green")
    for name, count in calls:
        table.add_row(Text(name), str(count))
    console.print(table)


def print_analysis_result(
    result: AnalysisResult,
    source_name: str = "<input>",
    show_explanation: bool = True,
    show_suggestions: bool = False,
    show_bottlenecks: bool = False,
    show_call_frequency: bool = True,
    detailed: bool = False,
):
    """Render a full analysis result."""
    if not result.ok:
        print_analysis_error(source_name, result.error)
        return

    console.print()
    print_overall(result, source_name)

    if not result.functions:
        print_info("No functions found.")
        return

    print_function_table(list(result.functions))

    if detailed:
        for analysis in result.functions:
            print_function_signals(analysis)

    if show_explanation:
        console.print(
            _create_panel(
                explain_complexity(result.overall_complexity),
                title="[blue]Complexity Explanation[/blue]",
                padding=(0, 1),
            )
        )
    if show_suggestions:
        _print_bullet_panel(
            optimization_suggestions(result),
            "[blue]Optimization Suggestions[/blue]",
            "No specific optimizations suggested",
        )
    if show_bottlenecks:
        _print_bullet_panel(
            find_bottlenecks(result),
            "[blue]Performance Bottlenecks[/blue]",
            "No significant bottlenecks detected",
        )
    if show_call_frequency:
        print_call_frequency(result)

    console.print(Rule(style=INFO_STYLE))


def print_json(data: Any):
    """Print data as indented JSON without rich markup or wrapping."""
    console.print(
        json.dumps(data, indent=2, ensure_ascii=False),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def print_complexity_classes():
    """Table of complexity classes from best to worst."""
    table = _create_table(title="[bold]Complexity Classes[/bold]")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Class", style=CYAN_STYLE)
    table.add_column("Label")
    for complexity in ComplexityClass:
        table.add_row(str(int(complexity)), complexity.name, _complexity_text(complexity))
    console.print(table)
