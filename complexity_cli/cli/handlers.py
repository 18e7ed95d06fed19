"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import time
from typing import Optional

from complexity_cli import output
from complexity_cli.analysis.analyzer import ComplexityAnalyzer
from complexity_cli.analysis.models import AnalysisResult
from complexity_cli.core.data_utils import read_source, save_json
from complexity_cli.core.exceptions import InputError
from complexity_cli.core.logging import (
    log_context,
    log_info,
    log_performance,
    logged_operation,
)

from .options import ResolvedOptions

INLINE_SOURCE_NAME = "<code>"


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def create_analyzer(options: ResolvedOptions) -> ComplexityAnalyzer:
        """Factory method to create ComplexityAnalyzer from resolved options."""
        return ComplexityAnalyzer(anonymous_name=options.anonymous_name)

    @staticmethod
    def load_code(path: Optional[str], code: Optional[str]) -> str:
        """Pick the source text from --code or a path."""
        if code is not None and path is not None:
            raise InputError("Pass either a file path or --code, not both.")
        if code is not None:
            return code
        if path is None:
            raise InputError("Nothing to analyze: pass a file path, '-' or --code.")
        return read_source(path)

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(
        options: ResolvedOptions,
        path: Optional[str],
        code: Optional[str] = None,
        output_path: Optional[str] = None,
        detailed: bool = False,
    ) -> int:
        """Handle the analyze command. Returns the process exit code."""
        source_name = INLINE_SOURCE_NAME if code is not None else path
        with log_context(source=source_name):
            source = CommandHandlers.load_code(path, code)
            analyzer = CommandHandlers.create_analyzer(options)

            start_time = time.time()
            result = analyzer.analyze_code(source, source_name=source_name)
            log_performance("analysis", time.time() - start_time)

            CommandHandlers.render(options, result, source_name, detailed)

            if output_path:
                save_json(output_path, result.to_dict())
                log_info(f"Wrote analysis to {output_path}")
                if options.output_format != "json":
                    output.print_success(f"Analysis written to {output_path}")

            return 0 if result.ok else 1

    @staticmethod
    def render(
        options: ResolvedOptions,
        result: AnalysisResult,
        source_name: str,
        detailed: bool,
    ) -> None:
        if options.output_format == "json":
            output.print_json(result.to_dict())
            return
        output.print_analysis_result(
            result,
            source_name=source_name,
            show_explanation=options.show_explanation,
            show_suggestions=options.show_suggestions,
            show_bottlenecks=options.show_bottlenecks,
            show_call_frequency=options.show_call_frequency,
            detailed=detailed,
        )

    @staticmethod
    def handle_classes() -> None:
        """Handle the classes command."""
        output.print_complexity_classes()
