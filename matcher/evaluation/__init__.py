"""Evaluation module for matching runs."""

from .metrics import (
    ScoreDistributionStats,
    StrategyAgreement,
    MatchReport,
    compute_score_distribution_stats,
    create_match_report,
    compare_strategies
)

__all__ = [
    "ScoreDistributionStats",
    "StrategyAgreement",
    "MatchReport",
    "compute_score_distribution_stats",
    "create_match_report",
    "compare_strategies"
]
