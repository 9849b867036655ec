"""
Candidate pair generation for greedy matching.

This module enumerates every (Participant A, Participant B) pair and scores
it with the bound strategy.

Key Design Decisions:
- Pairs are unordered: (A, B) and (B, A) are the same candidate, so only
  i < j is generated
- Self-pairs are excluded: (A, A) is never generated
- Enumeration is exhaustive and row-major, never sampled, so the candidate
  order is a pure function of the input order
- Sorting is stable: ties keep enumeration order
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..schema import Participant
from ..scoring import ScoringStrategy

logger = logging.getLogger(__name__)


@dataclass
class CandidatePairs:
    """
    Scored candidate pairs.

    Attributes:
        indices_a: Index of the first participant of each pair
        indices_b: Index of the second participant (always > indices_a)
        scores: Opposition score of each pair
    """
    indices_a: np.ndarray
    indices_b: np.ndarray
    scores: np.ndarray

    def __len__(self) -> int:
        return len(self.scores)

    def sorted_descending(self) -> "CandidatePairs":
        """
        Return the candidates ordered by score, highest first.

        Uses a stable sort on the negated score so equal scores keep
        their enumeration order.
        """
        order = np.argsort(-self.scores, kind="stable")
        return CandidatePairs(
            indices_a=self.indices_a[order],
            indices_b=self.indices_b[order],
            scores=self.scores[order]
        )


def generate_candidate_pairs(n_participants: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate every unordered pair of participant indices.

    Args:
        n_participants: Number of participants

    Returns:
        Tuple of (indices_a, indices_b) arrays where each
        (indices_a[k], indices_b[k]) is a pair with indices_a[k] < indices_b[k],
        in row-major order. Empty arrays when fewer than 2 participants.
    """
    indices_a = []
    indices_b = []

    for i in range(n_participants):
        for j in range(i + 1, n_participants):
            indices_a.append(i)
            indices_b.append(j)

    indices_a = np.array(indices_a, dtype=np.int64)
    indices_b = np.array(indices_b, dtype=np.int64)

    logger.debug(f"Generated {len(indices_a)} candidate pairs from {n_participants} participants")
    return indices_a, indices_b


def score_candidate_pairs(
    strategy: ScoringStrategy,
    participants: List[Participant],
    indices_a: np.ndarray,
    indices_b: np.ndarray
) -> np.ndarray:
    """
    Score each candidate pair with the given strategy.

    Pairs are scored sequentially in enumeration order. A contract violation
    from the strategy (mismatched response lengths) propagates unchanged.

    Args:
        strategy: Scoring strategy bound for this run
        participants: Participants indexed by the candidate arrays
        indices_a: First participant indices
        indices_b: Second participant indices

    Returns:
        float64 array of scores aligned with the index arrays
    """
    scores = np.empty(len(indices_a), dtype=np.float64)
    for k, (i, j) in enumerate(zip(indices_a, indices_b)):
        scores[k] = strategy.score(participants[i], participants[j])
    return scores


def build_candidate_pairs(
    strategy: ScoringStrategy,
    participants: List[Participant]
) -> CandidatePairs:
    """
    Convenience function to enumerate and score all candidate pairs.

    Args:
        strategy: Scoring strategy bound for this run
        participants: Participants to pair

    Returns:
        Unsorted CandidatePairs in enumeration order
    """
    indices_a, indices_b = generate_candidate_pairs(len(participants))
    scores = score_candidate_pairs(strategy, participants, indices_a, indices_b)
    logger.info(f"Scored {len(scores)} candidate pairs with {strategy.name}")
    return CandidatePairs(indices_a=indices_a, indices_b=indices_b, scores=scores)
