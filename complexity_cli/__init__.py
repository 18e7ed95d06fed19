from complexity_cli.analysis import (
    AnalysisResult,
    ComplexityAnalyzer,
    ComplexityClass,
    analyze_code,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "ComplexityAnalyzer",
    "ComplexityClass",
    "analyze_code",
]
