"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_cli.core.config import AnalyzerConfig, load_config_file, set_config
from complexity_cli.core.constants import OUTPUT_FORMATS
from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.core.logging import configure_logging, log_debug, log_info


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    output_format: str
    show_explanation: bool
    show_suggestions: bool
    show_bottlenecks: bool
    show_call_frequency: bool
    anonymous_name: str
    debug: bool
    config: AnalyzerConfig  # Include the full config object


def resolve_options(
    config_override: Optional[str] = None,
    format_override: Optional[str] = None,
    explain_override: Optional[bool] = None,
    suggest_override: bool = False,
    bottlenecks_override: bool = False,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    configure_logging(debug=debug_override, verbose=verbose_override, log_file=log_file)

    log_debug(f"Loading config file: {config_override or 'default locations'}")
    config_data = load_config_file(config_override)
    config = AnalyzerConfig.from_dict(config_data)

    if debug_override:
        config.debug = True

    if format_override:
        if format_override not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: '{format_override}'. "
                f"Supported formats: {', '.join(OUTPUT_FORMATS)}"
            )
        log_debug(f"Format override: {format_override}")
        config.output_format = format_override

    display = config.display
    if explain_override is not None:
        display.show_explanation = explain_override
    # Flags only switch panels on; config decides when they are absent
    if suggest_override:
        display.show_suggestions = True
    if bottlenecks_override:
        display.show_bottlenecks = True

    set_config(config)

    resolved = ResolvedOptions(
        output_format=config.output_format,
        show_explanation=display.show_explanation,
        show_suggestions=display.show_suggestions,
        show_bottlenecks=display.show_bottlenecks,
        show_call_frequency=display.show_call_frequency,
        anonymous_name=config.anonymous_name,
        debug=config.debug,
        config=config,
    )

    log_info(f"Options resolved (format={resolved.output_format}, debug={resolved.debug})")

    return resolved
