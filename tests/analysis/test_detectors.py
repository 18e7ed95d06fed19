import pytest

from complexity_cli.analysis import detectors
from complexity_cli.analysis.locator import FunctionLocator
from complexity_cli.analysis.models import FeatureAccumulator, TextSignals
from complexity_cli.analysis.parser import field, iter_nodes, node_text, parse_source


def _accumulator(text: TextSignals, recursive_calls: int = 0) -> FeatureAccumulator:
    acc = FeatureAccumulator(function_name="f", body_text="", text=text)
    for _ in range(recursive_calls):
        acc.record_call("f")
        acc.record_recursive_call()
    return acc


def test_scan_body_text_search_signals():
    signals = detectors.scan_body_text(
        "{ const mid = Math.floor((left + right) / 2); if (a[mid] < x) return mid; }"
    )
    assert signals.has_return
    assert signals.has_relational
    assert signals.has_comparison
    assert signals.has_assignment
    assert signals.has_halving
    assert signals.has_rounded_halving
    assert signals.has_midpoint_rounding
    assert signals.has_search_bounds
    assert not signals.has_accumulation


def test_scan_body_text_ignores_arrows_and_equality_as_assignment():
    signals = detectors.scan_body_text("{ return a === b ? () => 1 : null; }")
    assert signals.has_comparison
    assert not signals.has_relational
    assert not signals.has_assignment


def test_scan_body_text_shift_counts_as_rounded_halving():
    signals = detectors.scan_body_text("{ const mid = (lo + hi) >> 1; }")
    assert signals.has_halving
    assert signals.has_rounded_halving
    assert signals.has_midpoint_rounding
    assert not signals.has_relational


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{ out.push(x); }", True),
        ("{ return [...a, ...b]; }", True),
        ("{ return a.slice(1); }", True),
        ("{ return a.length / 2; }", False),
    ],
)
def test_scan_body_text_accumulation(text, expected):
    assert detectors.scan_body_text(text).has_accumulation is expected


def test_division_in_recursion_marks_divide_and_conquer():
    acc = _accumulator(TextSignals(), recursive_calls=1)
    detectors.detect_division(acc, 2, in_loop=False)
    assert acc.divide_and_conquer
    assert not acc.recursive_binary_search


def test_division_refines_to_recursive_binary_search():
    text = TextSignals(has_relational=True, has_return=True, has_search_bounds=True)
    acc = _accumulator(text, recursive_calls=1)
    detectors.detect_division(acc, 2, in_loop=False)
    assert acc.recursive_binary_search
    assert acc.logarithmic_operations
    assert not acc.divide_and_conquer


def test_division_by_three_is_not_binary_search():
    text = TextSignals(has_relational=True, has_return=True, has_search_bounds=True)
    acc = _accumulator(text, recursive_calls=1)
    detectors.detect_division(acc, 3, in_loop=False)
    assert acc.divide_and_conquer
    assert not acc.recursive_binary_search


def test_division_in_loop_is_iterative_binary_search():
    acc = _accumulator(TextSignals(has_assignment=True, has_relational=True))
    detectors.detect_division(acc, 2, in_loop=True)
    assert acc.binary_search_pattern
    assert acc.logarithmic_operations
    assert not acc.divide_and_conquer


def test_division_outside_loop_without_recursion():
    acc = _accumulator(TextSignals(has_assignment=True, has_relational=True))
    detectors.detect_division(acc, 2, in_loop=False)
    assert acc.divide_and_conquer
    assert not acc.binary_search_pattern


def test_method_call_detector():
    acc = _accumulator(TextSignals())
    detectors.detect_method_call(acc, "map")
    assert acc.linear_operations
    assert not acc.divide_and_conquer

    recursive = _accumulator(TextSignals(), recursive_calls=1)
    detectors.detect_method_call(recursive, "slice")
    assert recursive.divide_and_conquer
    assert not recursive.linear_operations


def test_member_access_only_counts_under_recursion():
    acc = _accumulator(TextSignals())
    detectors.detect_member_access(acc, computed=True, property_name=None)
    assert not acc.divide_and_conquer

    recursive = _accumulator(TextSignals(), recursive_calls=1)
    detectors.detect_member_access(recursive, computed=False, property_name="length")
    assert not recursive.divide_and_conquer
    detectors.detect_member_access(recursive, computed=False, property_name="slice")
    assert recursive.divide_and_conquer


def test_comparison_and_shift():
    acc = _accumulator(TextSignals(), recursive_calls=1)
    detectors.detect_comparison(acc, in_loop=False)
    assert not acc.divide_and_conquer
    detectors.detect_comparison(acc, in_loop=True)
    assert acc.divide_and_conquer

    plain = _accumulator(TextSignals())
    detectors.detect_shift(plain, in_loop=False)
    assert not plain.divide_and_conquer
    detectors.detect_shift(plain, in_loop=True)
    assert plain.divide_and_conquer


def _first_call(source: str, callee: str):
    parsed = parse_source(source)
    for node in iter_nodes(parsed.root):
        if node.type == "call_expression":
            if detectors.callee_name(parsed, field(node, "function")) == callee:
                return parsed, node
    raise AssertionError(f"no call to {callee}")


def test_callee_name_and_rounding():
    parsed, node = _first_call("const m = Math.floor(n / 2);", "floor")
    assert detectors.is_rounding_call(parsed, field(node, "function"))

    parsed, node = _first_call("const m = tools.floor(n / 2);", "floor")
    assert not detectors.is_rounding_call(parsed, field(node, "function"))

    parsed, node = _first_call("run(1);", "run")
    assert not detectors.is_rounding_call(parsed, field(node, "function"))


def test_literal_number():
    parsed = parse_source("x = (2); y = 0x10; z = 1_000; w = n;")
    values = [
        detectors.literal_number(parsed, field(node, "right"))
        for node in iter_nodes(parsed.root)
        if node.type == "assignment_expression"
    ]
    assert values == [2.0, 16.0, 1000.0, None]


def test_recursive_binary_search_call_needs_offset_argument():
    source = (
        "function search(a, x, lo, hi) {\n"
        "  const mid = Math.floor((lo + hi) / 2);\n"
        "  return search(a, x, mid + 1, hi);\n"
        "}\n"
    )
    parsed, node = _first_call(source, "search")
    body = FunctionLocator().locate(parsed)[0].body
    text = detectors.scan_body_text(node_text(parsed, body))
    acc = _accumulator(text, recursive_calls=1)
    detectors.detect_recursive_binary_search_call(
        acc, parsed, detectors.call_arguments(node)
    )
    assert acc.recursive_binary_search

    two_args = _accumulator(text, recursive_calls=1)
    detectors.detect_recursive_binary_search_call(
        two_args, parsed, detectors.call_arguments(node)[:2]
    )
    assert not two_args.recursive_binary_search


def test_is_self_call():
    parsed, node = _first_call("this.walk(1);", "walk")
    assert detectors.is_self_call(parsed, field(node, "function"), "walk")

    parsed, node = _first_call("tree.walk(1);", "walk")
    assert not detectors.is_self_call(parsed, field(node, "function"), "walk")

    parsed, node = _first_call("walk(1);", "walk")
    assert detectors.is_self_call(parsed, field(node, "function"), "walk")
    assert not detectors.is_self_call(parsed, field(node, "function"), "run")
