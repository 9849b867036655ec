"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_STRATEGIES = {"simple_difference", "euclidean", "weighted", "polarization"}


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the config file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in ["global", "data", "scoring", "matching"]:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    if "global" in config:
        log_level = str(config["global"].get("log_level", "INFO")).upper()
        if log_level not in VALID_LOG_LEVELS:
            issues.append(f"Unknown global.log_level: {log_level}")

    if "data" in config and "path" not in config["data"]:
        issues.append("Missing data.path")

    if "scoring" in config:
        scoring = config["scoring"]
        strategy = scoring.get("strategy", "simple_difference")

        if strategy not in VALID_STRATEGIES:
            issues.append(f"Unknown scoring.strategy: {strategy}")

        if strategy == "weighted":
            weights = scoring.get("weights")
            if weights is None:
                if not _is_positive_number(scoring.get("num_questions")):
                    issues.append(
                        "Weighted strategy needs scoring.weights or a positive scoring.num_questions"
                    )
            elif not weights:
                issues.append("scoring.weights cannot be empty")
            elif not all(_is_positive_number(w) for w in weights):
                issues.append(f"All scoring.weights must be positive: {weights}")

        polarization = scoring.get("polarization") or {}
        for key, value in polarization.items():
            if not _is_positive_number(value):
                issues.append(f"scoring.polarization.{key} must be positive, got {value}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.polarization.extreme_multiplier")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
