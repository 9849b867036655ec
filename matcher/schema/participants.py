"""
Data model for survey participants and the pairings produced from them.

Every answer is on a 7-point Likert scale:
1 = Strongly Disagree
4 = Neutral
7 = Strongly Agree

The number of answers is the "question count". It must be identical
across all participants compared together, but that is a cross-participant
invariant checked at scoring time, not something a single Participant
can enforce.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from .errors import ContractViolationError, ValidationError

RESPONSE_MIN = 1
RESPONSE_MAX = 7


@dataclass(frozen=True)
class Participant:
    """
    One person who completed the questionnaire.

    Attributes:
        participant_id: Opaque unique identity supplied by the caller
        responses: Ordered answers, each an integer in [1, 7]
    """
    participant_id: str
    responses: Tuple[int, ...]

    def __post_init__(self):
        """Validate identity and Likert scale bounds."""
        if not isinstance(self.participant_id, str) or not self.participant_id:
            raise ValidationError(
                f"participant_id must be a non-empty string, got {self.participant_id!r}"
            )

        responses = []
        for position, val in enumerate(self.responses):
            if isinstance(val, (bool, np.bool_)) or not isinstance(val, (int, np.integer)):
                raise ValidationError(
                    f"Response {position} of {self.participant_id} must be an integer, got {val!r}"
                )
            if not RESPONSE_MIN <= val <= RESPONSE_MAX:
                raise ValidationError(
                    f"All responses must be between {RESPONSE_MIN} and {RESPONSE_MAX}: "
                    f"response {position} of {self.participant_id} is {val}"
                )
            responses.append(int(val))

        # frozen dataclass, so bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "responses", tuple(responses))

    @property
    def num_questions(self) -> int:
        """Number of questions this participant answered."""
        return len(self.responses)

    def as_array(self) -> np.ndarray:
        """Responses as an int64 vector for scoring."""
        return np.asarray(self.responses, dtype=np.int64)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "participant_id": self.participant_id,
            "responses": list(self.responses)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Create from dictionary."""
        return cls(participant_id=data["participant_id"], responses=data["responses"])


@dataclass(frozen=True)
class Pairing:
    """
    Two participants grouped together by the matcher.

    The pair is unordered conceptually but stored in the order the matcher
    enumerated it. The score's meaning depends on the strategy that produced
    it and is not comparable across strategies.

    Attributes:
        participant_a_id: First participant's identity
        participant_b_id: Second participant's identity
        score: Opposition score that justified the pairing
    """
    participant_a_id: str
    participant_b_id: str
    score: float

    @property
    def participant_ids(self) -> Tuple[str, str]:
        return (self.participant_a_id, self.participant_b_id)

    def involves(self, participant_id: str) -> bool:
        return participant_id in self.participant_ids

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "participant_a_id": self.participant_a_id,
            "participant_b_id": self.participant_b_id,
            "score": float(self.score)
        }


def check_same_length(
    first: Sequence[Any],
    second: Sequence[Any],
    message: str = "Participants must have same number of responses"
) -> None:
    """
    Enforce the equal-length precondition of scoring.

    Raises:
        ContractViolationError: If the two sequences differ in length
    """
    if len(first) != len(second):
        raise ContractViolationError(f"{message}: {len(first)} vs {len(second)}")
