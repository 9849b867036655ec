"""Scoring strategies for opposition between two participants."""

from .strategies import (
    ScoringStrategy,
    SimpleDifferenceScorer,
    EuclideanDistanceScorer,
    WeightedScorer,
    PolarizationScorer
)
from .registry import STRATEGY_REGISTRY, create_strategy, create_strategy_from_config

__all__ = [
    "ScoringStrategy",
    "SimpleDifferenceScorer",
    "EuclideanDistanceScorer",
    "WeightedScorer",
    "PolarizationScorer",
    "STRATEGY_REGISTRY",
    "create_strategy",
    "create_strategy_from_config"
]
