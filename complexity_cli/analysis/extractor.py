"""
Single-pass feature extraction over one function body.
"""

from typing import List, Optional, Tuple

from tree_sitter import Node

from complexity_cli.analysis import detectors
from complexity_cli.analysis.locator import LocatedFunction, is_separate_definition
from complexity_cli.analysis.models import FeatureAccumulator, FeatureRecord
from complexity_cli.analysis.parser import ParsedSource, field, node_text, operator_of
from complexity_cli.core.constants import (
    COMPARISON_OPERATORS,
    DIVISION_OPERATORS,
    LOOP_NODE_TYPES,
    SHIFT_OPERATORS,
)


class FeatureExtractor:
    """
    Walks a function body depth-first and accumulates its Feature Record.

    Loop depth follows a stack discipline: it is incremented on entering a
    loop and decremented on leaving it, so ``nested_loop_depth`` is the
    deepest simultaneous nesting rather than the number of loops. Nested
    definitions the locator reports on their own (named functions, methods,
    classes and arrow functions) are skipped. Unbound ``function`` expressions
    are walked as part of the enclosing function.

    The walk uses an explicit stack, so arbitrarily deep expressions do not
    hit the interpreter recursion limit.
    """

    def __init__(self, parsed: ParsedSource, function: LocatedFunction):
        self.parsed = parsed
        self.function = function
        self._depth = 0
        body_text = node_text(parsed, function.body)
        self.acc = FeatureAccumulator(
            function_name=function.name,
            body_text=body_text,
            text=detectors.scan_body_text(body_text),
        )
        self._handlers = {
            "call_expression": self._on_call,
            "binary_expression": self._on_operator,
            "augmented_assignment_expression": self._on_operator,
            "member_expression": self._on_member,
            "subscript_expression": self._on_subscript,
        }

    def extract(self) -> FeatureRecord:
        # Entries are (node, in_loop); a None node marks leaving a loop
        stack: List[Tuple[Optional[Node], bool]] = [(self.function.body, False)]
        while stack:
            node, in_loop = stack.pop()
            if node is None:
                self._depth -= 1
                continue
            if is_separate_definition(node):
                continue

            if node.type in LOOP_NODE_TYPES:
                self._depth += 1
                self.acc.record_loop(self._depth)
                stack.append((None, in_loop))
                in_loop = True
            else:
                handler = self._handlers.get(node.type)
                if handler is not None:
                    handler(node, in_loop)

            stack.extend((child, in_loop) for child in reversed(node.children))
        return self.acc.seal()

    def _on_call(self, node: Node, in_loop: bool) -> None:
        callee = field(node, "function")
        name = detectors.callee_name(self.parsed, callee)
        if name is None:
            return

        self.acc.record_call(name)
        if detectors.is_self_call(self.parsed, callee, self.function.name):
            self.acc.record_recursive_call()
            detectors.detect_recursive_binary_search_call(
                self.acc, self.parsed, detectors.call_arguments(node)
            )

        if detectors.unwrap_parens(callee).type == "member_expression":
            detectors.detect_method_call(self.acc, name)

        if detectors.is_rounding_call(self.parsed, callee):
            self.acc.logarithmic_operations = True

    def _on_operator(self, node: Node, in_loop: bool) -> None:
        operator = operator_of(node)
        if operator in DIVISION_OPERATORS:
            divisor = detectors.literal_number(self.parsed, field(node, "right"))
            if divisor is not None:
                detectors.detect_division(self.acc, divisor, in_loop)
        elif operator in COMPARISON_OPERATORS:
            detectors.detect_comparison(self.acc, in_loop)
        elif operator in SHIFT_OPERATORS:
            detectors.detect_shift(self.acc, in_loop)

    def _on_member(self, node: Node, in_loop: bool) -> None:
        detectors.detect_member_access(
            self.acc,
            computed=False,
            property_name=detectors.member_property(self.parsed, node),
        )

    def _on_subscript(self, node: Node, in_loop: bool) -> None:
        detectors.detect_member_access(self.acc, computed=True, property_name=None)


def extract_features(parsed: ParsedSource, function: LocatedFunction) -> FeatureRecord:
    return FeatureExtractor(parsed, function).extract()
