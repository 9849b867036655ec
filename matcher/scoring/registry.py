"""
Strategy selection by name.

Lets the runner and the YAML config pick a scoring strategy without
importing concrete classes.
"""

import logging
from typing import Any, Dict, Type

from ..schema import ValidationError
from .strategies import (
    ScoringStrategy,
    SimpleDifferenceScorer,
    EuclideanDistanceScorer,
    WeightedScorer,
    PolarizationScorer
)

logger = logging.getLogger(__name__)

STRATEGY_REGISTRY: Dict[str, Type[ScoringStrategy]] = {
    SimpleDifferenceScorer.key: SimpleDifferenceScorer,
    EuclideanDistanceScorer.key: EuclideanDistanceScorer,
    WeightedScorer.key: WeightedScorer,
    PolarizationScorer.key: PolarizationScorer,
}


def create_strategy(name: str, **params: Any) -> ScoringStrategy:
    """
    Build a scoring strategy from its registry key.

    Args:
        name: One of "simple_difference", "euclidean", "weighted", "polarization"
        **params: Constructor parameters. For "weighted", either `weights`
            or `num_questions` (equal weights) must be given.

    Returns:
        Configured ScoringStrategy

    Raises:
        ValidationError: If the name is unknown or parameters are invalid
    """
    if name not in STRATEGY_REGISTRY:
        raise ValidationError(
            f"Unknown scoring strategy: {name!r}. "
            f"Available: {sorted(STRATEGY_REGISTRY)}"
        )

    if name == WeightedScorer.key:
        weights = params.get("weights")
        if weights is None:
            num_questions = params.get("num_questions")
            if not num_questions:
                raise ValidationError(
                    "Weighted strategy requires 'weights' or a positive 'num_questions'"
                )
            strategy = WeightedScorer.equal_weights(int(num_questions))
        else:
            strategy = WeightedScorer(weights)
    elif name == PolarizationScorer.key:
        strategy = PolarizationScorer(
            extreme_multiplier=params.get("extreme_multiplier", 1.5),
            lean_multiplier=params.get("lean_multiplier", 1.2),
            moderate_multiplier=params.get("moderate_multiplier", 1.0)
        )
    else:
        strategy = STRATEGY_REGISTRY[name]()

    logger.info(f"Using scoring strategy: {strategy.name}")
    return strategy


def create_strategy_from_config(config: Dict[str, Any]) -> ScoringStrategy:
    """
    Factory function to create a strategy from the main config.

    Args:
        config: Main configuration dictionary

    Returns:
        Configured ScoringStrategy
    """
    scoring_config = dict(config.get("scoring", {}))
    name = scoring_config.pop("strategy", SimpleDifferenceScorer.key)
    polarization_config = scoring_config.pop("polarization", {}) or {}

    if name == PolarizationScorer.key:
        scoring_config.update(polarization_config)

    return create_strategy(name, **scoring_config)
