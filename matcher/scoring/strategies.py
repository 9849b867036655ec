"""
Scoring strategies for measuring how "opposite" two participants are.

Each strategy turns two equal-length response vectors into a single
non-negative opposition score (higher = more opposite). Scores are only
comparable within one strategy.

Strategies:
- Simple difference: sum(|A - B|), range [0, 6N]
- Euclidean distance: sqrt(sum((A - B)^2)), range [0, 6 * sqrt(N)]
- Weighted: sum(w * |A - B|), per-question importance
- Polarization: sum(|A - B| * m(A) * m(B)), where m rewards conviction

Every strategy is symmetric: score(A, B) == score(B, A).

Example of the Euclidean vs simple-difference contrast:
    A = [1, 4, 4], B = [4, 4, 4]  ->  simple 3, euclidean 3.0
    A = [1, 7, 1], B = [4, 4, 4]  ->  simple 9, euclidean sqrt(27) ~ 5.196
One large gap scores the same under both; many moderate gaps are
de-emphasized by the Euclidean distance.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from ..schema import Participant, ValidationError, check_same_length

logger = logging.getLogger(__name__)


class ScoringStrategy(ABC):
    """
    Base class for all scoring strategies.

    A strategy is bound once per matching run and never mutated during it.
    """

    key: str = ""

    @abstractmethod
    def score(self, a: Participant, b: Participant) -> float:
        """
        Calculate the opposition score between two participants.

        Args:
            a: First participant
            b: Second participant

        Returns:
            Opposition score (higher = more opposite)

        Raises:
            ContractViolationError: If the participants answered a
                different number of questions
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name for logging and reports."""

    def __call__(self, a: Participant, b: Participant) -> float:
        return self.score(a, b)

    def to_dict(self) -> Dict[str, Any]:
        """Describe the strategy and its parameters."""
        return {"strategy": self.key, "name": self.name}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _absolute_differences(a: Participant, b: Participant) -> np.ndarray:
    check_same_length(a.responses, b.responses)
    return np.abs(a.as_array() - b.as_array())


class SimpleDifferenceScorer(ScoringStrategy):
    """Sum of absolute per-question differences. The baseline strategy."""

    key = "simple_difference"

    def score(self, a: Participant, b: Participant) -> float:
        return float(_absolute_differences(a, b).sum())

    @property
    def name(self) -> str:
        return "Simple Difference"


class EuclideanDistanceScorer(ScoringStrategy):
    """
    Euclidean distance between response vectors.

    Non-linear: a few large per-question gaps score higher than many small
    ones with the same total absolute difference.
    """

    key = "euclidean"

    def score(self, a: Participant, b: Participant) -> float:
        diff = _absolute_differences(a, b)
        return float(np.sqrt(np.sum(diff * diff)))

    @property
    def name(self) -> str:
        return "Euclidean Distance"


class WeightedScorer(ScoringStrategy):
    """
    Absolute difference with a caller-supplied weight per question.

    Range: 0 to 6 * sum(weights).

    Attributes:
        weights: Positive weight per question; its length must equal the
            question count of every participant scored
    """

    key = "weighted"

    def __init__(self, weights: Sequence[float]):
        """
        Initialize the weighted scorer.

        Args:
            weights: One positive weight per question

        Raises:
            ValidationError: If weights is empty or contains a value <= 0
        """
        weights = [float(w) for w in weights]
        if not weights:
            raise ValidationError("Weights vector cannot be empty")
        if any(not math.isfinite(w) or w <= 0 for w in weights):
            raise ValidationError(f"All weights must be positive, got {weights}")

        self._weights = np.asarray(weights, dtype=np.float64)
        self._weights.setflags(write=False)
        logger.debug(f"Initialized WeightedScorer with {len(weights)} weights")

    @classmethod
    def equal_weights(cls, num_questions: int) -> "WeightedScorer":
        """
        Create a weighted scorer with all weights 1.0.

        Scores identically to SimpleDifferenceScorer on any input.
        """
        return cls([1.0] * num_questions)

    @property
    def weights(self) -> Tuple[float, ...]:
        return tuple(float(w) for w in self._weights)

    @property
    def num_questions(self) -> int:
        return len(self._weights)

    def score(self, a: Participant, b: Participant) -> float:
        diff = _absolute_differences(a, b)
        check_same_length(
            a.responses, self._weights,
            "Number of responses must match number of weights"
        )
        return float(np.sum(diff * self._weights))

    @property
    def name(self) -> str:
        return "Weighted"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["weights"] = list(self.weights)
        return d

    def __repr__(self) -> str:
        return f"WeightedScorer(weights={list(self.weights)})"


class PolarizationScorer(ScoringStrategy):
    """
    Absolute difference scaled by the conviction behind BOTH answers.

    Each answer gets a conviction multiplier from its bucket:
    - 1 or 7 (strongly disagree/agree): extreme_multiplier
    - 2 or 6 (lean disagree/agree): lean_multiplier
    - 3 to 5 (neutral to somewhat): moderate_multiplier

    A question contributes |A - B| * m(A) * m(B). With the defaults,
    1 vs 7 gives 6 * 1.5 * 1.5 = 13.5 while 3 vs 5 gives 2.0, so two
    moderates score exactly as under SimpleDifferenceScorer.
    """

    key = "polarization"

    def __init__(
        self,
        extreme_multiplier: float = 1.5,
        lean_multiplier: float = 1.2,
        moderate_multiplier: float = 1.0
    ):
        multipliers = {
            "extreme_multiplier": extreme_multiplier,
            "lean_multiplier": lean_multiplier,
            "moderate_multiplier": moderate_multiplier,
        }
        for attr, val in multipliers.items():
            if not math.isfinite(val) or val <= 0:
                raise ValidationError(f"{attr} must be positive, got {val}")

        self.extreme_multiplier = float(extreme_multiplier)
        self.lean_multiplier = float(lean_multiplier)
        self.moderate_multiplier = float(moderate_multiplier)

        # Indexed by answer value; slot 0 is never reached for valid participants
        self._lookup = np.array([
            1.0,
            self.extreme_multiplier,
            self.lean_multiplier,
            self.moderate_multiplier,
            self.moderate_multiplier,
            self.moderate_multiplier,
            self.lean_multiplier,
            self.extreme_multiplier,
        ])

    def conviction_multiplier(self, answer: int) -> float:
        """Return the conviction multiplier for a single answer."""
        if answer in (1, 7):
            return self.extreme_multiplier
        if answer in (2, 6):
            return self.lean_multiplier
        if 3 <= answer <= 5:
            return self.moderate_multiplier
        raise ValidationError(f"Answer must be between 1 and 7, got {answer}")

    def score(self, a: Participant, b: Participant) -> float:
        diff = _absolute_differences(a, b)
        # multiply the two convictions first so the result is order independent
        conviction = self._lookup[a.as_array()] * self._lookup[b.as_array()]
        return float(np.sum(diff * conviction))

    @property
    def name(self) -> str:
        return "Polarization"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "extreme_multiplier": self.extreme_multiplier,
            "lean_multiplier": self.lean_multiplier,
            "moderate_multiplier": self.moderate_multiplier
        })
        return d

    def __repr__(self) -> str:
        return (
            f"PolarizationScorer(extreme_multiplier={self.extreme_multiplier}, "
            f"lean_multiplier={self.lean_multiplier}, "
            f"moderate_multiplier={self.moderate_multiplier})"
        )
