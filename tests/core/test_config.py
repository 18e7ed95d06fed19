import json

import pytest

from complexity_cli.core.config import (
    AnalyzerConfig,
    DisplayConfig,
    get_config,
    load_config_file,
    set_config,
)
from complexity_cli.core.exceptions import ConfigurationError


def test_defaults():
    config = AnalyzerConfig()
    assert config.output_format == "table"
    assert config.anonymous_name == "anonymous"
    assert config.display == DisplayConfig()


def test_from_dict_maps_flat_keys():
    config = AnalyzerConfig.from_dict(
        {"format": "json", "show_suggestions": True, "show_call_frequency": False}
    )
    assert config.output_format == "json"
    assert config.display.show_suggestions is True
    assert config.display.show_call_frequency is False
    assert config.display.show_explanation is True


def test_from_dict_nested_display():
    config = AnalyzerConfig.from_dict({"display": {"show_bottlenecks": True}})
    assert config.display.show_bottlenecks is True


def test_invalid_values_raise():
    with pytest.raises(ConfigurationError):
        AnalyzerConfig.from_dict({"output_format": "xml"})
    with pytest.raises(ConfigurationError):
        AnalyzerConfig.from_dict({"colour": "always"})


def test_to_dict_round_trip():
    config = AnalyzerConfig(output_format="json", anonymous_name="<lambda>")
    assert AnalyzerConfig.from_dict(config.to_dict()) == config


def test_load_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    assert load_config_file() == {}

    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"anonymous_name": "lambda"}))
    assert load_config_file(path) == {"anonymous_name": "lambda"}

    with pytest.raises(ConfigurationError):
        load_config_file(tmp_path / "missing.json")


def test_broken_config_file_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "complexity_cli_config.json").write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_config_file()

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        load_config_file(listed)


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config_file(tmp_path / "absent.json")


def test_get_config_reads_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    (tmp_path / "complexity_cli_config.json").write_text(
        json.dumps({"anonymous_name": "lambda"})
    )
    set_config(None)
    try:
        assert get_config().anonymous_name == "lambda"
        set_config(AnalyzerConfig(anonymous_name="fn"))
        assert get_config().anonymous_name == "fn"
    finally:
        set_config(None)
