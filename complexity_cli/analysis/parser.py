"""
JavaScript syntax trees via tree-sitter.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

import tree_sitter_javascript as tsjavascript
from tree_sitter import Language, Node, Parser, Tree

from complexity_cli.core.exceptions import ParseError

JS_LANGUAGE = Language(tsjavascript.language())


@dataclass(frozen=True)
class ParsedSource:
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")


def parse_source(code: str) -> ParsedSource:
    """Parse JavaScript source, raising ParseError on malformed input."""
    source = code.encode("utf-8")
    tree = Parser(JS_LANGUAGE).parse(source)
    parsed = ParsedSource(source=source, tree=tree)
    if tree.root_node.has_error:
        raise _parse_error(parsed)
    return parsed


def _parse_error(parsed: ParsedSource) -> ParseError:
    node = first_error_node(parsed.root)
    if node is None:
        return ParseError("Invalid JavaScript code")
    line, column = node.start_point[0] + 1, node.start_point[1] + 1
    if node.is_missing:
        message = f"Missing '{node.type}' at line {line}, column {column}"
    else:
        message = f"Unexpected token at line {line}, column {column}"
    return ParseError(message, line=line, column=column)


def first_error_node(root: Node) -> Optional[Node]:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def iter_nodes(node: Node) -> Iterable[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(parsed: ParsedSource, node: Optional[Node]) -> str:
    if node is None:
        return ""
    return parsed.source[node.start_byte : node.end_byte].decode(
        "utf-8", errors="replace"
    )


def field(node: Node, name: str) -> Optional[Node]:
    return node.child_by_field_name(name)


def operator_of(node: Node) -> str:
    """Operator token of a binary, unary or compound-assignment node."""
    op = node.child_by_field_name("operator")
    return op.type if op is not None else ""


def start_line(node: Node) -> int:
    return node.start_point[0] + 1


def end_line(node: Node) -> int:
    return node.end_point[0] + 1
