"""
Reports for matching runs.

Greedy matching is an approximation, so reports describe what a run did
rather than how close it got to the optimum:
1. Coverage (how many participants were paired)
2. Distribution of committed scores vs all candidate scores
3. Agreement between two strategies on the same population

This module DOES NOT claim the matching is optimal.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
from scipy.stats import spearmanr

from ..schema import Participant, Pairing
from ..scoring import ScoringStrategy
from ..pair_generation import build_candidate_pairs
from ..matching import GreedyMatcher, unmatched

logger = logging.getLogger(__name__)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 2.0, "p50": 9.0, "p90": 20.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class StrategyAgreement:
    """How similarly two strategies rank and pair the same population."""
    strategy_a: str
    strategy_b: str
    rank_correlation: float  # Spearman correlation of candidate scores
    pairing_jaccard: float  # Overlap of committed pairings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy_a": self.strategy_a,
            "strategy_b": self.strategy_b,
            "rank_correlation": float(self.rank_correlation),
            "pairing_jaccard": float(self.pairing_jaccard)
        }


@dataclass
class MatchReport:
    """
    Summary of one matching run.

    Attributes:
        strategy_name: Display name of the strategy used
        n_participants: Number of participants given to the matcher
        pairings: Committed pairings in commitment order
        unmatched_ids: Participants absent from every pairing
        committed_stats: Distribution of committed pairing scores
        candidate_stats: Distribution of all candidate pair scores
    """
    strategy_name: str
    n_participants: int
    pairings: List[Pairing]
    unmatched_ids: List[str]
    committed_stats: Optional[ScoreDistributionStats] = None
    candidate_stats: Optional[ScoreDistributionStats] = None
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_score(self) -> float:
        return float(sum(p.score for p in self.pairings))

    @property
    def coverage(self) -> float:
        """Fraction of participants that were paired."""
        if self.n_participants == 0:
            return 0.0
        return 2 * len(self.pairings) / self.n_participants

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "strategy_name": self.strategy_name,
            "n_participants": int(self.n_participants),
            "n_pairings": len(self.pairings),
            "total_score": self.total_score,
            "coverage": float(self.coverage),
            "unmatched_ids": list(self.unmatched_ids),
            "pairings": [p.to_dict() for p in self.pairings],
            "additional_metrics": self.additional_metrics
        }
        if self.committed_stats:
            result["committed_stats"] = self.committed_stats.to_dict()
        if self.candidate_stats:
            result["candidate_stats"] = self.candidate_stats.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved match report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            f"Match Report: {self.strategy_name}",
            "=" * 50,
            "",
            f"Participants: {self.n_participants}",
            f"Pairings:     {len(self.pairings)}",
            f"Unmatched:    {len(self.unmatched_ids)}",
            f"Coverage:     {self.coverage:.2%}",
            f"Total score:  {self.total_score:.4f}",
        ]

        if self.committed_stats:
            lines.extend([
                "",
                "Committed Scores:",
                f"  Mean: {self.committed_stats.mean:.4f}",
                f"  Min:  {self.committed_stats.min:.4f}",
                f"  Max:  {self.committed_stats.max:.4f}",
            ])

        if self.candidate_stats:
            lines.extend([
                "",
                "Candidate Scores:",
                f"  Mean: {self.candidate_stats.mean:.4f}",
                f"  Std:  {self.candidate_stats.std:.4f}",
            ])
            for q_name, q_value in self.candidate_stats.quantiles.items():
                lines.append(f"  {q_name}: {q_value:.4f}")

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: np.ndarray,
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Array of opposition scores (must be non-empty)
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance
    """
    scores = np.asarray(scores, dtype=np.float64)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution stats of an empty score array")

    quantile_dict = {
        f"p{int(round(q * 100))}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def create_match_report(
    strategy: ScoringStrategy,
    participants: List[Participant],
    pairings: List[Pairing],
    include_candidates: bool = True
) -> MatchReport:
    """
    Build a report for a finished matching run.

    Args:
        strategy: Strategy the pairings were produced with
        participants: Participants given to the matcher
        pairings: Result of find_matches
        include_candidates: Also rescore all candidate pairs to describe
            the full score distribution (O(n^2) strategy calls)

    Returns:
        MatchReport instance
    """
    committed_stats = None
    if pairings:
        committed_stats = compute_score_distribution_stats(
            np.array([p.score for p in pairings])
        )

    candidate_stats = None
    additional_metrics: Dict[str, Any] = {}
    if include_candidates and len(participants) >= 2:
        candidates = build_candidate_pairs(strategy, participants)
        candidate_stats = compute_score_distribution_stats(candidates.scores)
        max_candidate = float(np.max(candidates.scores))
        additional_metrics["max_candidate_score"] = max_candidate
        additional_metrics["n_candidates"] = len(candidates)

    return MatchReport(
        strategy_name=strategy.name,
        n_participants=len(participants),
        pairings=list(pairings),
        unmatched_ids=[p.participant_id for p in unmatched(participants, pairings)],
        committed_stats=committed_stats,
        candidate_stats=candidate_stats,
        additional_metrics=additional_metrics
    )


def _pairing_key(pairing: Pairing) -> frozenset:
    return frozenset(pairing.participant_ids)


def compare_strategies(
    strategy_a: ScoringStrategy,
    strategy_b: ScoringStrategy,
    participants: List[Participant]
) -> StrategyAgreement:
    """
    Compare two strategies on the same population.

    Args:
        strategy_a: First strategy
        strategy_b: Second strategy
        participants: Participants to score and match (at least 3, so there
            are enough candidate pairs to rank)

    Returns:
        StrategyAgreement with the Spearman correlation of candidate scores
        and the Jaccard overlap of greedy pairings
    """
    if len(participants) < 3:
        raise ValueError("Need at least 3 participants to compare strategies")

    scores_a = build_candidate_pairs(strategy_a, participants).scores
    scores_b = build_candidate_pairs(strategy_b, participants).scores

    if np.all(scores_a == scores_a[0]) or np.all(scores_b == scores_b[0]):
        logger.warning("Constant candidate scores, rank correlation is undefined")
        rank_corr = 0.0
    else:
        corr, _ = spearmanr(scores_a, scores_b)
        rank_corr = float(corr)

    pairs_a = {_pairing_key(p) for p in GreedyMatcher(strategy_a).find_matches(participants)}
    pairs_b = {_pairing_key(p) for p in GreedyMatcher(strategy_b).find_matches(participants)}
    union = pairs_a | pairs_b
    jaccard = len(pairs_a & pairs_b) / len(union) if union else 1.0

    logger.info(
        f"{strategy_a.name} vs {strategy_b.name}: "
        f"rank correlation={rank_corr:.4f}, pairing overlap={jaccard:.4f}"
    )

    return StrategyAgreement(
        strategy_a=strategy_a.name,
        strategy_b=strategy_b.name,
        rank_correlation=rank_corr,
        pairing_jaccard=jaccard
    )
