"""Tests for YAML configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from matcher.configs import load_config, validate_config, get_config_value

PROJECT_ROOT = Path(__file__).parent.parent


def test_load_config(tmp_path, test_config):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(test_config))

    assert load_config(str(path)) == test_config


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(ValueError, match="empty"):
        load_config(str(path))


def test_shipped_config_is_valid():
    config = load_config(str(PROJECT_ROOT / "configs" / "config.yaml"))
    assert validate_config(config) == []


def test_valid_config_has_no_issues(test_config):
    assert validate_config(test_config) == []


def test_missing_sections():
    issues = validate_config({})
    for section in ["global", "data", "scoring", "matching"]:
        assert f"Missing required section: {section}" in issues


def test_missing_data_path(test_config):
    del test_config["data"]["path"]
    assert "Missing data.path" in validate_config(test_config)


def test_bad_log_level(test_config):
    test_config["global"]["log_level"] = "chatty"
    assert any("log_level" in i for i in validate_config(test_config))


def test_unknown_strategy(test_config):
    test_config["scoring"]["strategy"] = "hungarian"
    assert any("Unknown scoring.strategy" in i for i in validate_config(test_config))


def test_weighted_needs_size(test_config):
    test_config["scoring"]["strategy"] = "weighted"
    test_config["scoring"]["num_questions"] = None
    assert any("Weighted strategy needs" in i for i in validate_config(test_config))


@pytest.mark.parametrize("weights,message", [
    ([], "cannot be empty"),
    ([1.0, 0.0, 2.0], "must be positive"),
    ([1.0, -3.0, 2.0], "must be positive"),
])
def test_bad_weights(test_config, weights, message):
    test_config["scoring"]["strategy"] = "weighted"
    test_config["scoring"]["weights"] = weights
    assert any(message in i for i in validate_config(test_config))


def test_bad_polarization_multiplier(test_config):
    test_config["scoring"]["polarization"]["lean_multiplier"] = 0
    assert any("lean_multiplier" in i for i in validate_config(test_config))


def test_get_config_value(test_config):
    assert get_config_value(test_config, "scoring.polarization.extreme_multiplier") == 1.5
    assert get_config_value(test_config, "scoring.missing.key", default="x") == "x"
    assert get_config_value(test_config, "global.log_level.too_deep") is None
