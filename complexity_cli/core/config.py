import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import CONFIG_FILENAME, OUTPUT_FORMATS
from complexity_cli.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
DEFAULT_OUTPUT_FORMAT = "table"
DEFAULT_ANONYMOUS_NAME = "anonymous"
SHOW_EXPLANATION_DEFAULT = True
SHOW_SUGGESTIONS_DEFAULT = False
SHOW_BOTTLENECKS_DEFAULT = False
SHOW_CALL_FREQUENCY_DEFAULT = True

# Global configuration instance
_config: Optional["AnalyzerConfig"] = None


@dataclass
class DisplayConfig:
    """Which result panels are rendered."""

    show_explanation: bool = SHOW_EXPLANATION_DEFAULT
    show_suggestions: bool = SHOW_SUGGESTIONS_DEFAULT
    show_bottlenecks: bool = SHOW_BOTTLENECKS_DEFAULT
    show_call_frequency: bool = SHOW_CALL_FREQUENCY_DEFAULT


@dataclass
class AnalyzerConfig:
    """Main configuration class for Complexity CLI."""

    debug: bool = False
    output_format: str = DEFAULT_OUTPUT_FORMAT
    anonymous_name: str = DEFAULT_ANONYMOUS_NAME
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: '{self.output_format}'. "
                f"Supported formats: {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "AnalyzerConfig":
        """Load configuration from file."""
        config_data = load_config_file(config_path)
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Flat JSON keys map onto the nested display config
        field_mapping = {
            "show_explanation": "display.show_explanation",
            "show_suggestions": "display.show_suggestions",
            "show_bottlenecks": "display.show_bottlenecks",
            "show_call_frequency": "display.show_call_frequency",
            "format": "output_format",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if not isinstance(config_data.get(parent), dict):
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        if "display" in config_data and isinstance(config_data["display"], dict):
            try:
                config_data["display"] = DisplayConfig(**config_data["display"])
            except TypeError as e:
                raise ConfigurationError(f"Invalid display configuration: {e}") from e

        try:
            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read the first config file found.

    An explicit path must exist. Otherwise the working directory is searched,
    then the home directory; no file at all means defaults.
    """
    if config_path:
        explicit = Path(config_path)
        if not explicit.is_file():
            raise ConfigurationError(f"Config file not found: {explicit}")
        return _read_config(explicit)

    for path in (Path.cwd() / CONFIG_FILENAME, Path.home() / f".{CONFIG_FILENAME}"):
        if path.is_file():
            return _read_config(path)
    return {}


def get_config() -> AnalyzerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AnalyzerConfig.from_file()
    return _config


def set_config(config: Optional[AnalyzerConfig]) -> None:
    """Set the global configuration instance; None reloads it on next access."""
    global _config
    _config = config
