from complexity_cli.analysis.aggregator import aggregate
from complexity_cli.analysis.complexity import ComplexityClass, worst
from complexity_cli.analysis.models import FeatureRecord, FunctionAnalysis, TextSignals


def analysis(name: str, complexity: ComplexityClass) -> FunctionAnalysis:
    features = FeatureRecord(function_name=name, body_text="", text=TextSignals())
    return FunctionAnalysis(
        name=name, start_line=1, end_line=1, features=features, complexity=complexity
    )


def test_total_order():
    assert list(ComplexityClass) == sorted(ComplexityClass)
    assert ComplexityClass.CONSTANT < ComplexityClass.LOGARITHMIC < ComplexityClass.LINEAR
    assert ComplexityClass.EXPONENTIAL < ComplexityClass.FACTORIAL


def test_labels():
    assert [c.label for c in ComplexityClass] == [
        "O(1)",
        "O(log n)",
        "O(n)",
        "O(n log n)",
        "O(n²)",
        "O(n³)",
        "O(2^n)",
        "O(n!)",
    ]
    assert str(ComplexityClass.LINEARITHMIC) == "O(n log n)"


def test_worst_of_empty_is_constant():
    assert worst([]) == ComplexityClass.CONSTANT
    assert aggregate([]) == ComplexityClass.CONSTANT


def test_aggregate_is_order_independent():
    analyses = [
        analysis("a", ComplexityClass.LINEAR),
        analysis("b", ComplexityClass.QUADRATIC),
        analysis("c", ComplexityClass.LOGARITHMIC),
    ]
    assert aggregate(analyses) == ComplexityClass.QUADRATIC
    assert aggregate(reversed(analyses)) == ComplexityClass.QUADRATIC
