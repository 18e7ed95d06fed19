"""
End-to-end complexity analysis of a JavaScript source unit.
"""

from pathlib import Path
from typing import List, Optional

from complexity_cli.analysis.aggregator import aggregate
from complexity_cli.analysis.classifier import matching_rule
from complexity_cli.analysis.extractor import extract_features
from complexity_cli.analysis.locator import FunctionLocator
from complexity_cli.analysis.models import AnalysisResult, FunctionAnalysis
from complexity_cli.analysis.parser import ParsedSource, parse_source
from complexity_cli.core.config import DEFAULT_ANONYMOUS_NAME, get_config
from complexity_cli.core.data_utils import read_source
from complexity_cli.core.exceptions import ParseError
from complexity_cli.core.logging import (
    log_classification,
    log_debug,
    log_file_operation,
    log_warning,
)


class ComplexityAnalyzer:
    """
    Estimates the time complexity of every function in a piece of JavaScript
    by inspecting its syntax tree. Nothing is executed; results are
    best-effort heuristics.
    """

    def __init__(self, anonymous_name: str = DEFAULT_ANONYMOUS_NAME):
        self.locator = FunctionLocator(anonymous_name=anonymous_name)

    def analyze_code(self, code: str, source_name: str = "<input>") -> AnalysisResult:
        """Analyze source text; parse failures become a failed result."""
        try:
            parsed = parse_source(code)
        except ParseError as e:
            log_warning(f"Parse failed: {e.message}", source=source_name)
            return AnalysisResult.failure(e.message)

        functions = self._analyze_functions(parsed, source_name)
        overall = aggregate(functions)
        log_debug(
            f"Analyzed {len(functions)} function(s); overall {overall.label}",
            source=source_name,
        )
        return AnalysisResult(overall_complexity=overall, functions=tuple(functions))

    def analyze_file(self, file_path: str) -> AnalysisResult:
        """Read a source file (or "-" for stdin) and analyze it."""
        log_file_operation("read", Path(file_path), source=file_path)
        code = read_source(file_path)
        return self.analyze_code(code, source_name=file_path)

    def _analyze_functions(
        self, parsed: ParsedSource, source_name: str
    ) -> List[FunctionAnalysis]:
        analyses = []
        for located in self.locator.locate(parsed):
            features = extract_features(parsed, located)
            rule = matching_rule(features)
            log_classification(
                located.name, rule.result.label, rule.name, source=source_name
            )
            analyses.append(
                FunctionAnalysis(
                    name=located.name,
                    start_line=located.start_line,
                    end_line=located.end_line,
                    features=features,
                    complexity=rule.result,
                )
            )
        return analyses


def analyze_code(code: str, anonymous_name: Optional[str] = None) -> AnalysisResult:
    """Analyze source text, naming anonymous functions from the active config."""
    if anonymous_name is None:
        anonymous_name = get_config().anonymous_name
    return ComplexityAnalyzer(anonymous_name=anonymous_name).analyze_code(code)
