"""
Constants used throughout the application.
"""

# File names
CONFIG_FILENAME = "complexity_cli_config.json"

# Output formats
OUTPUT_FORMATS = ("table", "json")

# Node kinds (tree-sitter-javascript)
LOOP_NODE_TYPES = frozenset(
    {"for_statement", "for_in_statement", "while_statement", "do_statement"}
)
FUNCTION_DECLARATION_TYPES = frozenset(
    {"function_declaration", "generator_function_declaration"}
)
FUNCTION_VALUE_TYPES = frozenset(
    {"function_expression", "function", "generator_function", "arrow_function"}
)
METHOD_NODE_TYPES = frozenset({"method_definition"})
CLASS_NODE_TYPES = frozenset({"class_declaration", "class"})

# Operators
COMPARISON_OPERATORS = frozenset({"<", ">", "<=", ">=", "==", "===", "!=", "!=="})
DIVISION_OPERATORS = frozenset({"/", "/="})
SHIFT_OPERATORS = frozenset({"<<", ">>", ">>>", "<<=", ">>=", ">>>="})

# Known-effect callee names
LINEAR_OPERATIONS = frozenset(
    {"filter", "map", "reduce", "forEach", "find", "some", "every", "flatMap"}
)
SPLIT_OPERATIONS = frozenset({"slice", "concat", "splice"})
SLICING_PROPERTIES = LINEAR_OPERATIONS | SPLIT_OPERATIONS
ROUNDING_OPERATIONS = frozenset({"floor", "ceil", "round", "trunc", "log", "log2", "log10"})
ROUNDING_OBJECT = "Math"

# Identifiers that mark a bounded search
SEARCH_BOUND_NAMES = ("mid", "middle", "left", "right")
