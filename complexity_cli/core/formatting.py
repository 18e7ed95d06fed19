from typing import Dict, List, Tuple


def format_line_span(start_line: int, end_line: int) -> str:
    """
    Format a 1-based line range:
    - single line: "L4"
    - range: "L4-L9"
    Args:
        start_line: First line of the span
        end_line: Last line of the span
    Returns:
        Formatted span string
    """
    if start_line == end_line:
        return f"L{start_line}"
    return f"L{start_line}-L{end_line}"


def sort_call_frequency(function_calls: Dict[str, int]) -> List[Tuple[str, int]]:
    """
    Order call counts from most to least frequent, ties broken by name.
    Args:
        function_calls: Mapping of callee name to call-site count
    Returns:
        List of (name, count) pairs
    """
    return sorted(function_calls.items(), key=lambda item: (-item[1], item[0]))


def format_flag(value: bool) -> str:
    """Render a boolean signal as a check mark or a dash."""
    return "✓" if value else "-"

