from complexity_cli.analysis.analyzer import ComplexityAnalyzer, analyze_code
from complexity_cli.analysis.complexity import ComplexityClass
from complexity_cli.analysis.models import AnalysisResult, FeatureRecord, FunctionAnalysis

__all__ = [
    "AnalysisResult",
    "ComplexityAnalyzer",
    "ComplexityClass",
    "FeatureRecord",
    "FunctionAnalysis",
    "analyze_code",
]
