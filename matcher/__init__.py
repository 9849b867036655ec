"""
Opposite-Opinion Matcher

This package pairs participants who answered a fixed-length 1-7 Likert
survey with the participant whose answers are most opposite to their own.

Key Design Decisions:
- Scoring is pluggable: any ScoringStrategy turns two response vectors
  into a single opposition score (higher = more opposite)
- Matching is a greedy approximation of maximum-weight matching,
  trading global optimality for O(n^2 log n) simplicity
- Everything is pure: participants are read-only, pairings are immutable
- Identity, persistence and presentation are left to the caller
"""

from .schema import Participant, Pairing, ValidationError, ContractViolationError
from .scoring import (
    ScoringStrategy,
    SimpleDifferenceScorer,
    EuclideanDistanceScorer,
    WeightedScorer,
    PolarizationScorer,
    create_strategy,
)
from .matching import GreedyMatcher, find_matches

__version__ = "0.1.0"

__all__ = [
    "Participant",
    "Pairing",
    "ValidationError",
    "ContractViolationError",
    "ScoringStrategy",
    "SimpleDifferenceScorer",
    "EuclideanDistanceScorer",
    "WeightedScorer",
    "PolarizationScorer",
    "create_strategy",
    "GreedyMatcher",
    "find_matches",
]
