"""
Find every function-like definition in a parsed source unit.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from tree_sitter import Node

from complexity_cli.analysis.parser import (
    ParsedSource,
    end_line,
    field,
    node_text,
    start_line,
)
from complexity_cli.core.constants import (
    CLASS_NODE_TYPES,
    FUNCTION_DECLARATION_TYPES,
    FUNCTION_VALUE_TYPES,
    METHOD_NODE_TYPES,
)

# Node kinds that bind a name to a function value, and the field holding that name
BINDING_NAME_FIELDS = {
    "variable_declarator": ("name", "value"),
    "pair": ("key", "value"),
    "field_definition": ("property", "value"),
}


@dataclass(frozen=True)
class LocatedFunction:
    name: str
    node: Node
    body: Node

    @property
    def start_line(self) -> int:
        return start_line(self.node)

    @property
    def end_line(self) -> int:
        return end_line(self.node)


def bound_function(node: Node) -> Optional[Node]:
    """The function value a declarator, pair or class field binds, if any."""
    fields = BINDING_NAME_FIELDS.get(node.type)
    if fields is None:
        return None
    value = field(node, fields[1])
    if value is not None and value.type in FUNCTION_VALUE_TYPES:
        return value
    return None


def is_separate_definition(node: Node) -> bool:
    """
    True for nodes whose functions the locator reports on their own: named
    definitions, bindings of a function value, classes and unbound arrows.
    """
    if node.type in FUNCTION_DECLARATION_TYPES | METHOD_NODE_TYPES | CLASS_NODE_TYPES:
        return True
    if node.type == "arrow_function":
        return True
    return bound_function(node) is not None


def _clean_name(text: str) -> str:
    return text.strip().strip("'\"`")


def _claim(parsed: ParsedSource, node: Node) -> Optional[Tuple[str, Node]]:
    if node.type in FUNCTION_DECLARATION_TYPES | METHOD_NODE_TYPES:
        return _clean_name(node_text(parsed, field(node, "name"))), node

    value = bound_function(node)
    if value is not None:
        name_field = BINDING_NAME_FIELDS[node.type][0]
        return _clean_name(node_text(parsed, field(node, name_field))), value

    return None


class FunctionLocator:
    """Collects function-like definitions in source order."""

    def __init__(self, anonymous_name: str = "anonymous"):
        self.anonymous_name = anonymous_name

    def locate(self, parsed: ParsedSource) -> List[LocatedFunction]:
        found: List[LocatedFunction] = []
        # (node, claimable) pairs; children are pushed reversed to keep source order
        stack = [(parsed.root, True)]
        while stack:
            node, claimable = stack.pop()
            claimed = self._claim(parsed, node) if claimable else None
            function_node = None
            if claimed is not None:
                name, function_node = claimed
                body = field(function_node, "body")
                if body is not None:
                    found.append(LocatedFunction(name=name, node=function_node, body=body))

            for child in reversed(node.children):
                # A bound function value is reported under its binding only
                bound_value = function_node is not None and child == function_node
                stack.append((child, not bound_value))
        return found

    def _claim(self, parsed: ParsedSource, node: Node) -> Optional[Tuple[str, Node]]:
        claimed = _claim(parsed, node)
        if claimed is None and node.type == "arrow_function":
            return self.anonymous_name, node
        return claimed
