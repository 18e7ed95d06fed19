"""
Human-readable explanations, optimization tips and bottleneck notes for a
finished analysis. Pure lookup and formatting; nothing here re-derives
complexity.
"""

from typing import List

from complexity_cli.analysis.complexity import ComplexityClass
from complexity_cli.analysis.models import AnalysisResult
from complexity_cli.core.constants import LINEAR_OPERATIONS

EXPLANATIONS = {
    ComplexityClass.CONSTANT: (
        "O(1) - Constant time. The code performs a fixed number of operations "
        "regardless of input size."
    ),
    ComplexityClass.LOGARITHMIC: (
        "O(log n) - Logarithmic time. The problem size is halved at each step, "
        "as in binary search."
    ),
    ComplexityClass.LINEAR: (
        "O(n) - Linear time. The code visits each input element a bounded "
        "number of times."
    ),
    ComplexityClass.LINEARITHMIC: (
        "O(n log n) - Linearithmic time. Typical of divide-and-conquer "
        "algorithms such as merge sort and quicksort."
    ),
    ComplexityClass.QUADRATIC: (
        "O(n²) - Quadratic time. Usually two nested loops over the input."
    ),
    ComplexityClass.CUBIC: (
        "O(n³) - Cubic time. Usually three nested loops over the input."
    ),
    ComplexityClass.EXPONENTIAL: (
        "O(2^n) - Exponential time. Recursive calls branch at each step, "
        "doubling the work for every extra input element."
    ),
    ComplexityClass.FACTORIAL: (
        "O(n!) - Factorial time. The code explores every ordering of the "
        "input, as when generating permutations."
    ),
}

STYLES = {
    ComplexityClass.CONSTANT: "bold green",
    ComplexityClass.LOGARITHMIC: "green",
    ComplexityClass.LINEAR: "blue",
    ComplexityClass.LINEARITHMIC: "yellow",
    ComplexityClass.QUADRATIC: "dark_orange",
    ComplexityClass.CUBIC: "red",
    ComplexityClass.EXPONENTIAL: "bold red",
    ComplexityClass.FACTORIAL: "magenta",
}

HOT_CALL_THRESHOLD = 3


def explain_complexity(complexity: ComplexityClass) -> str:
    return EXPLANATIONS[complexity]


def complexity_style(complexity: ComplexityClass) -> str:
    """Rich style used when rendering a complexity label."""
    return STYLES[complexity]


def optimization_suggestions(result: AnalysisResult) -> List[str]:
    """Generic advice keyed on the classes and signals present in a result."""
    if not result.ok:
        return []

    suggestions: List[str] = []

    def add(text: str):
        if text not in suggestions:
            suggestions.append(text)

    for analysis in result.functions:
        features = analysis.features
        complexity = analysis.complexity
        name = analysis.name

        if complexity == ComplexityClass.EXPONENTIAL and features.recursion_detected:
            add(
                f"{name}: memoize results or rewrite bottom-up with dynamic "
                "programming to avoid recomputing subproblems."
            )
        if complexity == ComplexityClass.FACTORIAL:
            add(
                f"{name}: prune the search (backtracking with early exits) or "
                "avoid enumerating every permutation."
            )
        if complexity in (ComplexityClass.QUADRATIC, ComplexityClass.CUBIC):
            add(
                f"{name}: replace inner loops with a hash map or set lookup "
                "where the loop only searches for a value."
            )
            add(
                f"{name}: if the input can be sorted, consider two pointers or "
                "binary search instead of nested iteration."
            )
        transforms = [c for c in features.function_calls if c in LINEAR_OPERATIONS]
        if complexity == ComplexityClass.LINEAR and len(transforms) > 1:
            add(
                f"{name}: chained array transforms each walk the array; "
                "combine them into a single pass."
            )
        if features.recursion_detected and features.text.has_accumulation:
            add(
                f"{name}: slicing or spreading arrays in every recursive call "
                "copies data; pass index bounds instead."
            )

    return suggestions


def find_bottlenecks(result: AnalysisResult) -> List[str]:
    """Point at the functions and call sites that dominate the result."""
    if not result.ok:
        return []

    bottlenecks: List[str] = []
    for analysis in result.functions:
        features = analysis.features
        where = f"{analysis.name} (lines {analysis.start_line}-{analysis.end_line})"

        if analysis.complexity >= ComplexityClass.QUADRATIC:
            bottlenecks.append(f"{where} is {analysis.complexity.label}.")
        if features.nested_loop_depth >= 2:
            bottlenecks.append(
                f"{where} nests loops {features.nested_loop_depth} deep."
            )
        if features.recursive_call_count >= 2 and not features.recursive_binary_search:
            bottlenecks.append(
                f"{where} calls itself from {features.recursive_call_count} sites."
            )
        for callee, count in features.function_calls.items():
            if callee != analysis.name and count >= HOT_CALL_THRESHOLD:
                bottlenecks.append(f"{where} calls {callee}() {count} times.")

    return bottlenecks
