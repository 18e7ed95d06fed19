from typing import Iterable

from complexity_cli.analysis.complexity import ComplexityClass, worst
from complexity_cli.analysis.models import FunctionAnalysis


def aggregate(analyses: Iterable[FunctionAnalysis]) -> ComplexityClass:
    """Overall complexity: the worst per-function class, CONSTANT when empty."""
    return worst(analysis.complexity for analysis in analyses)
