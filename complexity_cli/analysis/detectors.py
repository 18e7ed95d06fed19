"""
Pattern detectors consulted by the feature extractor.

Each detector looks at one node (plus the record built so far) and may set
derived signals on the accumulator. Lexical checks against the body text are
computed once by ``scan_body_text`` and read from ``TextSignals``; they back up
the structural checks where halving for a search and halving for a
divide-and-conquer split look the same locally.
"""

import re
from typing import List, Optional

from tree_sitter import Node

from complexity_cli.analysis.models import FeatureAccumulator, TextSignals
from complexity_cli.analysis.parser import ParsedSource, field, node_text, operator_of
from complexity_cli.core.constants import (
    LINEAR_OPERATIONS,
    ROUNDING_OBJECT,
    ROUNDING_OPERATIONS,
    SEARCH_BOUND_NAMES,
    SLICING_PROPERTIES,
    SPLIT_OPERATIONS,
)

RETURN_RE = re.compile(r"\breturn\b")
RELATIONAL_RE = re.compile(r"(?<![<>])[<>]=|(?<![<=>])[<>](?![<>=])")
EQUALITY_RE = re.compile(r"[=!]==?")
ASSIGNMENT_RE = re.compile(
    r"(?<![=!<>+\-*/%&|^])=(?![=>])|(?:[+\-*/%&|^]|<<|>>>?|\*\*)=(?!=)"
)
HALVING_RE = re.compile(r"/=?\s*2(?![\d.])|>>>?=?\s*1(?!\d)")
ROUNDED_HALVING_RE = re.compile(
    r"Math\.(?:floor|ceil|round|trunc)\s*\([^;]*?/\s*2(?![\d.])|>>>?\s*1(?!\d)"
)
MIDPOINT_RE = re.compile(
    r"Math\.(?:floor|ceil|round|trunc)\s*\(\s*\(\s*[\w$.]+\s*[+-]\s*[\w$.]+\s*\)\s*/\s*2\s*\)"
    r"|\(\s*[\w$.]+\s*[+-]\s*[\w$.]+\s*\)\s*>>>?\s*1(?!\d)"
)
ACCUMULATION_RE = re.compile(r"\.(?:concat|push|splice|slice)\s*\(|\.\.\.")
TRANSFORM_CALL_RE = re.compile(
    r"\.(?:%s)\s*\(" % "|".join(sorted(SLICING_PROPERTIES))
)
SEARCH_BOUNDS_RE = re.compile(r"\b(?:%s)\b" % "|".join(SEARCH_BOUND_NAMES))


def scan_body_text(text: str) -> TextSignals:
    """Compute the lexical signals for a function body."""
    has_relational = bool(RELATIONAL_RE.search(text))
    return TextSignals(
        has_return=bool(RETURN_RE.search(text)),
        has_comparison=has_relational or bool(EQUALITY_RE.search(text)),
        has_relational=has_relational,
        has_assignment=bool(ASSIGNMENT_RE.search(text)),
        has_halving=bool(HALVING_RE.search(text)),
        has_rounded_halving=bool(ROUNDED_HALVING_RE.search(text)),
        has_midpoint_rounding=bool(MIDPOINT_RE.search(text)),
        has_accumulation=bool(ACCUMULATION_RE.search(text)),
        has_transform_call=bool(TRANSFORM_CALL_RE.search(text)),
        has_search_bounds=bool(SEARCH_BOUNDS_RE.search(text)),
    )


# ---- Structural helpers ----


def unwrap_parens(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        inner = [child for child in node.named_children if child.type != "comment"]
        if len(inner) != 1:
            break
        node = inner[0]
    return node


def literal_number(parsed: ParsedSource, node: Optional[Node]) -> Optional[float]:
    """Numeric value of a number literal, or None for anything else."""
    node = unwrap_parens(node)
    if node is None or node.type != "number":
        return None
    text = node_text(parsed, node).replace("_", "")
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float(int(text.rstrip("n"), 0))
    except ValueError:
        return None


def is_offset_by_one(parsed: ParsedSource, node: Node) -> bool:
    """True for ``boundary + 1`` or ``boundary - 1``."""
    node = unwrap_parens(node)
    if node is None or node.type != "binary_expression":
        return False
    if operator_of(node) not in ("+", "-"):
        return False
    return literal_number(parsed, field(node, "right")) == 1


def call_arguments(node: Node) -> List[Node]:
    arguments = field(node, "arguments")
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def callee_name(parsed: ParsedSource, callee: Optional[Node]) -> Optional[str]:
    """Identifier for plain calls, property name for member calls."""
    callee = unwrap_parens(callee)
    if callee is None:
        return None
    if callee.type == "identifier":
        return node_text(parsed, callee)
    if callee.type == "member_expression":
        return member_property(parsed, callee)
    return None


def member_property(parsed: ParsedSource, node: Node) -> Optional[str]:
    prop = field(node, "property")
    if prop is None:
        return None
    return node_text(parsed, prop).lstrip("#")


def is_rounding_call(parsed: ParsedSource, callee: Optional[Node]) -> bool:
    callee = unwrap_parens(callee)
    if callee is None or callee.type != "member_expression":
        return False
    obj = node_text(parsed, field(callee, "object"))
    return obj == ROUNDING_OBJECT and member_property(parsed, callee) in ROUNDING_OPERATIONS


def is_self_call(parsed: ParsedSource, callee: Optional[Node], function_name: str) -> bool:
    """A plain call to ``function_name`` or a ``this.function_name(...)`` call."""
    callee = unwrap_parens(callee)
    if callee is None:
        return False
    if callee.type == "identifier":
        return node_text(parsed, callee) == function_name
    if callee.type == "member_expression":
        receiver = unwrap_parens(field(callee, "object"))
        return (
            receiver is not None
            and receiver.type == "this"
            and member_property(parsed, callee) == function_name
        )
    return False


# ---- Detectors ----


def detect_division(acc: FeatureAccumulator, divisor: float, in_loop: bool) -> None:
    """
    Division by a literal.

    Recursive functions halving toward ``mid``/``left``/``right`` with a
    bounding comparison and a return are recursive binary searches; other
    recursive division is a divide step. Non-recursive halving inside a loop
    that updates bounds is an iterative binary search.
    """
    text = acc.text
    if acc.recursion_detected:
        acc.divide_and_conquer = True
        if (
            divisor == 2
            and text.has_relational
            and text.has_return
            and text.has_search_bounds
        ):
            acc.mark_recursive_binary_search()
    elif in_loop and divisor == 2 and text.has_assignment and text.has_relational:
        acc.binary_search_pattern = True
        acc.logarithmic_operations = True
    else:
        acc.divide_and_conquer = True


def detect_recursive_binary_search_call(
    acc: FeatureAccumulator, parsed: ParsedSource, arguments: List[Node]
) -> None:
    """Self-call narrowing a range by ``mid ± 1`` after a rounded halving."""
    if len(arguments) < 3:
        return
    text = acc.text
    if not (text.has_rounded_halving and text.has_return) or text.has_accumulation:
        return
    if any(is_offset_by_one(parsed, arg) for arg in arguments):
        acc.mark_recursive_binary_search()


def detect_method_call(acc: FeatureAccumulator, method: str) -> None:
    """Per-element transforms and splitting calls on an object."""
    if method in LINEAR_OPERATIONS:
        acc.linear_operations = True
        if acc.recursion_detected:
            acc.divide_and_conquer = True
    if method in SPLIT_OPERATIONS and acc.recursion_detected:
        acc.divide_and_conquer = True


def detect_comparison(acc: FeatureAccumulator, in_loop: bool) -> None:
    # A bounding comparison in a loop of a recursive function is a divide step.
    if in_loop and acc.recursion_detected:
        acc.divide_and_conquer = True


def detect_member_access(
    acc: FeatureAccumulator, computed: bool, property_name: Optional[str]
) -> None:
    if not acc.recursion_detected:
        return
    if computed or property_name in SLICING_PROPERTIES:
        acc.divide_and_conquer = True


def detect_shift(acc: FeatureAccumulator, in_loop: bool) -> None:
    if in_loop or acc.recursion_detected:
        acc.divide_and_conquer = True
