"""Shared fixtures for matcher tests."""

from pathlib import Path
from typing import Any, Dict, List

import pytest

from matcher.schema import Participant


def make_participant(participant_id: str, responses: List[int]) -> Participant:
    return Participant(participant_id=participant_id, responses=responses)


@pytest.fixture
def four_participants() -> List[Participant]:
    """Two clear opposite pairs: (a, b) and (c, d)."""
    return [
        make_participant("a", [1, 1, 1, 1, 1]),
        make_participant("b", [7, 7, 7, 7, 7]),
        make_participant("c", [3, 4, 3, 4, 3]),
        make_participant("d", [5, 4, 5, 4, 5]),
    ]


@pytest.fixture
def five_participants(four_participants) -> List[Participant]:
    return four_participants + [make_participant("e", [4, 4, 4, 4, 4])]


@pytest.fixture
def responses_csv(tmp_path: Path) -> Path:
    path = tmp_path / "responses.csv"
    path.write_text(
        "participant_id,q1,q2,q3\n"
        "alice,1,7,4\n"
        "bob,7,1,4\n"
        "carol,4,4,4\n"
        "dave,2,6,3\n"
    )
    return path


@pytest.fixture
def test_config(tmp_path: Path, responses_csv: Path) -> Dict[str, Any]:
    """Minimal valid configuration pointing at the temporary responses file."""
    return {
        "global": {"log_level": "INFO", "output_dir": str(tmp_path / "artifacts")},
        "data": {"path": str(responses_csv), "id_column": "participant_id", "delimiter": ","},
        "scoring": {
            "strategy": "simple_difference",
            "weights": None,
            "num_questions": 3,
            "polarization": {
                "extreme_multiplier": 1.5,
                "lean_multiplier": 1.2,
                "moderate_multiplier": 1.0,
            },
        },
        "matching": {"reject_duplicate_ids": True, "include_candidate_stats": True},
    }
