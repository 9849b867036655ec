"""Matching algorithms for pairing participants."""

from .greedy import GreedyMatcher, find_matches, unmatched

__all__ = ["GreedyMatcher", "find_matches", "unmatched"]
