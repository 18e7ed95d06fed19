from complexity_cli.core.formatting import format_flag, format_line_span, sort_call_frequency


def test_format_line_span():
    assert format_line_span(4, 4) == "L4"
    assert format_line_span(4, 9) == "L4-L9"


def test_sort_call_frequency():
    calls = {"push": 2, "merge": 1, "mergeSort": 2, "floor": 5}
    assert sort_call_frequency(calls) == [
        ("floor", 5),
        ("mergeSort", 2),
        ("push", 2),
        ("merge", 1),
    ]
    assert sort_call_frequency({}) == []


def test_format_flag():
    assert format_flag(True) == "✓"
    assert format_flag(False) == "-"
