from complexity_cli.analysis.locator import FunctionLocator
from complexity_cli.analysis.parser import node_text, parse_source

SOURCE = """
function declared(a) { return a; }

const arrow = (x) => x + 1;
let expr = function (y) { return y; };

class Stack {
  push(item) { this.items.push(item); }
  handler = () => this.items.length;
}

const api = {
  fetch: function () { return 1; },
  'quoted-key': () => 2,
  lookup(id) { return id; },
};

[1, 2, 3].forEach((n) => console.log(n));

function* ids() { yield 1; }
"""


def locate(code, **kwargs):
    parsed = parse_source(code)
    return parsed, FunctionLocator(**kwargs).locate(parsed)


def test_recognized_shapes_in_source_order():
    _, found = locate(SOURCE)
    assert [f.name for f in found] == [
        "declared",
        "arrow",
        "expr",
        "push",
        "handler",
        "fetch",
        "quoted-key",
        "lookup",
        "anonymous",
        "ids",
    ]


def test_bound_arrow_not_reported_twice():
    _, found = locate("const twice = (n) => n * 2;")
    assert [f.name for f in found] == ["twice"]


def test_body_and_lines():
    parsed, found = locate("\nfunction f(n) {\n  return n;\n}\n")
    located = found[0]
    assert located.start_line == 2
    assert located.end_line == 4
    assert node_text(parsed, located.body) == "{\n  return n;\n}"


def test_nested_definitions_are_located():
    _, found = locate(
        """
        function outer() {
          const helper = () => {
            function deepest() {}
          };
          return helper;
        }
        """
    )
    assert [f.name for f in found] == ["outer", "helper", "deepest"]


def test_placeholder_name():
    _, found = locate("setTimeout(() => {}, 10);", anonymous_name="<arrow>")
    assert [f.name for f in found] == ["<arrow>"]


def test_no_functions():
    _, found = locate("const x = [1, 2, 3];")
    assert found == []


def test_locate_long_expression():
    terms = " + ".join(["n"] * 3000)
    _, found = locate(f"const sum = (n) => {terms};")
    assert [f.name for f in found] == ["sum"]
