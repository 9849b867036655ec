"""Candidate pair enumeration and scoring."""

from .generator import (
    CandidatePairs,
    generate_candidate_pairs,
    score_candidate_pairs,
    build_candidate_pairs
)

__all__ = [
    "CandidatePairs",
    "generate_candidate_pairs",
    "score_candidate_pairs",
    "build_candidate_pairs"
]
