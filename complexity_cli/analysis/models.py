"""
Data model for complexity analysis: feature records, per-function analyses
and the overall result handed to output and insight formatting.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from complexity_cli.analysis.complexity import ComplexityClass


@dataclass(frozen=True)
class TextSignals:
    """Lexical corroboration computed once from a function's body text."""

    has_return: bool = False
    has_comparison: bool = False
    has_relational: bool = False
    has_assignment: bool = False
    has_halving: bool = False
    has_rounded_halving: bool = False
    has_midpoint_rounding: bool = False
    has_accumulation: bool = False
    has_transform_call: bool = False
    has_search_bounds: bool = False


@dataclass(frozen=True)
class FeatureRecord:
    """Sealed structural signals for one function body."""

    function_name: str
    body_text: str
    text: TextSignals
    loop_count: int = 0
    nested_loop_depth: int = 0
    recursion_detected: bool = False
    recursive_call_count: int = 0
    function_calls: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    divide_and_conquer: bool = False
    logarithmic_operations: bool = False
    linear_operations: bool = False
    binary_search_pattern: bool = False
    recursive_binary_search: bool = False

    @property
    def self_call_count(self) -> int:
        """Calls to the function itself; same-named methods of other objects excluded."""
        return self.recursive_call_count

    @property
    def helper_names(self) -> List[str]:
        """Distinct callees other than the function itself."""
        return [name for name in self.function_calls if name != self.function_name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loopCount": self.loop_count,
            "nestedLoopDepth": self.nested_loop_depth,
            "recursionDetected": self.recursion_detected,
            "recursiveCallCount": self.recursive_call_count,
            "functionCalls": dict(self.function_calls),
            "divideAndConquer": self.divide_and_conquer,
            "logarithmicOperations": self.logarithmic_operations,
            "linearOperations": self.linear_operations,
            "binarySearchPattern": self.binary_search_pattern,
            "recursiveBinarySearch": self.recursive_binary_search,
            "bodyText": self.body_text,
        }


@dataclass
class FeatureAccumulator:
    """
    Mutable record filled in during a single feature-extraction walk.

    Boolean signals only ever go from False to True; the one exception is
    ``mark_recursive_binary_search``, which clears the divide-and-conquer
    signal once a recursive binary search is confirmed.
    """

    function_name: str
    body_text: str
    text: TextSignals
    loop_count: int = 0
    nested_loop_depth: int = 0
    recursive_call_count: int = 0
    function_calls: Dict[str, int] = field(default_factory=dict)
    divide_and_conquer: bool = False
    logarithmic_operations: bool = False
    linear_operations: bool = False
    binary_search_pattern: bool = False
    recursive_binary_search: bool = False

    @property
    def recursion_detected(self) -> bool:
        return self.recursive_call_count > 0

    def record_loop(self, depth: int) -> None:
        self.loop_count += 1
        self.nested_loop_depth = max(self.nested_loop_depth, depth)

    def record_call(self, name: str) -> None:
        self.function_calls[name] = self.function_calls.get(name, 0) + 1

    def record_recursive_call(self) -> None:
        self.recursive_call_count += 1

    def mark_recursive_binary_search(self) -> None:
        self.recursive_binary_search = True
        self.logarithmic_operations = True
        self.divide_and_conquer = False

    def seal(self) -> FeatureRecord:
        return FeatureRecord(
            function_name=self.function_name,
            body_text=self.body_text,
            text=self.text,
            loop_count=self.loop_count,
            nested_loop_depth=self.nested_loop_depth,
            recursion_detected=self.recursion_detected,
            recursive_call_count=self.recursive_call_count,
            function_calls=MappingProxyType(dict(self.function_calls)),
            divide_and_conquer=self.divide_and_conquer,
            logarithmic_operations=self.logarithmic_operations,
            linear_operations=self.linear_operations,
            binary_search_pattern=self.binary_search_pattern,
            recursive_binary_search=self.recursive_binary_search,
        )


@dataclass(frozen=True)
class FunctionAnalysis:
    name: str
    start_line: int
    end_line: int
    features: FeatureRecord
    complexity: ComplexityClass

    @property
    def body_text(self) -> str:
        return self.features.body_text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "complexity": self.complexity.label,
            "details": self.features.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one source unit: either functions or an error."""

    overall_complexity: ComplexityClass = ComplexityClass.CONSTANT
    functions: tuple = ()
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "AnalysisResult":
        return cls(overall_complexity=ComplexityClass.CONSTANT, functions=(), error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def recursive_functions(self) -> List[str]:
        return [f.name for f in self.functions if f.features.recursion_detected]

    def total_function_calls(self) -> Dict[str, int]:
        """Call-site counts summed across every analyzed function."""
        totals: Dict[str, int] = {}
        for analysis in self.functions:
            for name, count in analysis.features.function_calls.items():
                totals[name] = totals.get(name, 0) + count
        return totals

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "overallComplexity": self.overall_complexity.label,
            "functions": [f.to_dict() for f in self.functions],
        }
        if self.error is not None:
            data["error"] = self.error
        return data
