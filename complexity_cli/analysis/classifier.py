"""
Decision-list classification of a Feature Record.

Rules are evaluated in order and the first match wins, so a specific idiom
(binary search) pre-empts a general fallback (recursion is exponential) even
when both apply.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from complexity_cli.analysis.complexity import ComplexityClass
from complexity_cli.analysis.models import FeatureRecord


@dataclass(frozen=True)
class Rule:
    name: str
    description: str
    applies: Callable[[FeatureRecord], bool]
    result: ComplexityClass


def _recursive_halving_search(f: FeatureRecord) -> bool:
    t = f.text
    return (
        f.recursion_detected
        and t.has_halving
        and t.has_comparison
        and t.has_return
        and not t.has_accumulation
    )


def _recursive_midpoint_search(f: FeatureRecord) -> bool:
    t = f.text
    return (
        f.recursion_detected
        and t.has_midpoint_rounding
        and t.has_return
        and t.has_comparison
        and f.recursive_call_count <= 2
    )


def _recursive_divide_and_conquer(f: FeatureRecord) -> bool:
    return f.recursion_detected and (
        f.divide_and_conquer
        or f.text.has_transform_call
        or f.loop_count > 0
        or len(f.helper_names) > 0
    )


def _branching_recursion(f: FeatureRecord) -> bool:
    return (
        f.recursion_detected
        and f.self_call_count >= 2
        and not f.recursive_binary_search
    )


def _permutation_recursion(f: FeatureRecord) -> bool:
    return (
        f.recursion_detected
        and f.nested_loop_depth > 0
        and len(f.function_calls) > 2
    )


RULES: Tuple[Rule, ...] = (
    Rule(
        "recursive-binary-search",
        "Recursive binary search detected",
        lambda f: f.recursive_binary_search,
        ComplexityClass.LOGARITHMIC,
    ),
    Rule(
        "recursive-halving-search",
        "Recursion halves the range and returns without building output",
        _recursive_halving_search,
        ComplexityClass.LOGARITHMIC,
    ),
    Rule(
        "recursive-midpoint-search",
        "Recursion on a rounded midpoint with at most two self-calls",
        _recursive_midpoint_search,
        ComplexityClass.LOGARITHMIC,
    ),
    Rule(
        "recursive-divide-and-conquer",
        "Recursion combined with partitioning, a loop or helper calls",
        _recursive_divide_and_conquer,
        ComplexityClass.LINEARITHMIC,
    ),
    Rule(
        "branching-recursion",
        "Function calls itself two or more times",
        _branching_recursion,
        ComplexityClass.EXPONENTIAL,
    ),
    Rule(
        "permutation-recursion",
        "Recursion inside a loop with several distinct callees",
        _permutation_recursion,
        ComplexityClass.FACTORIAL,
    ),
    Rule(
        "recursion",
        "Recursion without a recognised idiom",
        lambda f: f.recursion_detected,
        ComplexityClass.EXPONENTIAL,
    ),
    Rule(
        "triple-nested-loops",
        "Loops nested three or more deep",
        lambda f: f.nested_loop_depth >= 3,
        ComplexityClass.CUBIC,
    ),
    Rule(
        "double-nested-loops",
        "Loops nested two deep",
        lambda f: f.nested_loop_depth == 2,
        ComplexityClass.QUADRATIC,
    ),
    Rule(
        "iterative-binary-search",
        "Loop halving a search range",
        lambda f: f.binary_search_pattern,
        ComplexityClass.LOGARITHMIC,
    ),
    Rule(
        "looped-divide-and-conquer",
        "Loop combined with a divide step",
        lambda f: f.divide_and_conquer and f.loop_count > 0,
        ComplexityClass.LINEARITHMIC,
    ),
    Rule(
        "linear-pass",
        "Single loop or per-element array transform",
        lambda f: f.loop_count > 0 or f.linear_operations,
        ComplexityClass.LINEAR,
    ),
    Rule(
        "halving-operation",
        "Halving, rounding or shifting without a loop",
        lambda f: f.divide_and_conquer or f.logarithmic_operations,
        ComplexityClass.LOGARITHMIC,
    ),
    Rule(
        "constant",
        "No loops, recursion or known linear operations",
        lambda f: True,
        ComplexityClass.CONSTANT,
    ),
)


def matching_rule(features: FeatureRecord) -> Rule:
    """First rule in RULES that applies to the record."""
    for rule in RULES:
        if rule.applies(features):
            return rule
    # The final rule always applies
    return RULES[-1]


def classify(features: FeatureRecord) -> ComplexityClass:
    return matching_rule(features).result
