import pytest

from complexity_cli.analysis.parser import iter_nodes, node_text, parse_source
from complexity_cli.core.exceptions import ParseError


def test_parse_valid_source():
    parsed = parse_source("function f() { return 1; }")
    assert parsed.root.type == "program"
    kinds = [node.type for node in iter_nodes(parsed.root)]
    assert "function_declaration" in kinds
    assert "return_statement" in kinds


def test_node_text_handles_unicode():
    parsed = parse_source('const s = "héllo"; const t = 1;')
    strings = [n for n in iter_nodes(parsed.root) if n.type == "string"]
    assert node_text(parsed, strings[0]) == '"héllo"'


def test_parse_error_reports_position():
    with pytest.raises(ParseError) as excinfo:
        parse_source("function f() {\n  return 1 +;\n}")
    error = excinfo.value
    assert error.message
    assert error.line is not None and error.line >= 1
    assert error.column is not None and error.column >= 1
    assert f"line {error.line}" in error.message


def test_empty_source_parses():
    parsed = parse_source("")
    assert parsed.root.child_count == 0
