"""
Greedy matching of participants with the most opposite opinions.

Algorithm:
1. Score every unordered participant pair: O(n^2) strategy calls
2. Sort pairs by score, highest first (stable): O(n^2 log n)
3. Walk the sorted list once, committing a pair when neither participant
   is matched yet: O(n^2)

This approximates maximum-weight matching. The first committed pairing is
always the highest-scoring candidate, but the total score is not
guaranteed to be optimal. With an odd number of participants exactly one
is left unmatched.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Set

from ..schema import Participant, Pairing, ValidationError
from ..scoring import ScoringStrategy
from ..pair_generation import CandidatePairs, build_candidate_pairs

logger = logging.getLogger(__name__)


class GreedyMatcher:
    """
    Greedy approximate maximum-weight matcher.

    Works with any ScoringStrategy. The strategy is bound at construction
    and used unchanged for every run.

    Attributes:
        strategy: Scoring strategy used to rank candidate pairs
        reject_duplicate_ids: Raise on repeated participant ids instead of
            matching them
    """

    def __init__(self, strategy: ScoringStrategy, reject_duplicate_ids: bool = True):
        self.strategy = strategy
        self.reject_duplicate_ids = reject_duplicate_ids

    def find_matches(self, participants: List[Participant]) -> List[Pairing]:
        """
        Pair participants greedily by descending opposition score.

        Args:
            participants: Participants to pair; all must have answered the
                same number of questions

        Returns:
            Committed pairings in commitment order (score-descending).
            Empty when fewer than 2 participants are given.

        Raises:
            ValidationError: If participant ids repeat and
                reject_duplicate_ids is set
            ContractViolationError: If response lengths differ
        """
        participants = list(participants)
        if len(participants) < 2:
            logger.info(f"Nothing to match: {len(participants)} participant(s)")
            return []

        if self.reject_duplicate_ids:
            _check_unique_ids(participants)

        logger.info(
            f"Matching {len(participants)} participants with {self.strategy.name}"
        )

        candidates = build_candidate_pairs(self.strategy, participants).sorted_descending()
        pairings = self._greedy_select(participants, candidates)

        n_unmatched = len(participants) - 2 * len(pairings)
        logger.info(f"Committed {len(pairings)} pairings, {n_unmatched} unmatched")
        return pairings

    def _greedy_select(
        self,
        participants: List[Participant],
        candidates: CandidatePairs
    ) -> List[Pairing]:
        """Commit sorted candidates whose participants are both still free."""
        matched: Set[str] = set()
        pairings: List[Pairing] = []
        max_pairings = len(participants) // 2

        for i, j, score in zip(candidates.indices_a, candidates.indices_b, candidates.scores):
            id_a = participants[i].participant_id
            id_b = participants[j].participant_id

            if id_a in matched or id_b in matched:
                continue

            matched.add(id_a)
            matched.add(id_b)
            pairings.append(Pairing(id_a, id_b, float(score)))
            logger.debug(f"Paired {id_a} with {id_b} (score={score:.4f})")

            if len(pairings) == max_pairings:
                break

        return pairings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": "greedy",
            "reject_duplicate_ids": self.reject_duplicate_ids,
            "scoring": self.strategy.to_dict()
        }


def _check_unique_ids(participants: List[Participant]) -> None:
    counts = Counter(p.participant_id for p in participants)
    duplicates = sorted(pid for pid, count in counts.items() if count > 1)
    if duplicates:
        raise ValidationError(f"Duplicate participant ids: {duplicates}")


def find_matches(strategy: ScoringStrategy, participants: List[Participant]) -> List[Pairing]:
    """
    Pair participants greedily using the given strategy.

    Deterministic for a fixed input ordering and a fixed strategy.

    Args:
        strategy: Scoring strategy
        participants: Participants to pair

    Returns:
        List of committed Pairings
    """
    return GreedyMatcher(strategy).find_matches(participants)


def unmatched(participants: List[Participant], pairings: List[Pairing]) -> List[Participant]:
    """
    Return participants that appear in no pairing, in input order.

    Args:
        participants: Participants that were matched
        pairings: Result of find_matches

    Returns:
        Participants left out of every pairing
    """
    matched_ids = {pid for pairing in pairings for pid in pairing.participant_ids}
    return [p for p in participants if p.participant_id not in matched_ids]
