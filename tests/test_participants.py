"""Unit tests for Participant and Pairing."""

import dataclasses

import numpy as np
import pytest

from matcher.schema import (
    Participant,
    Pairing,
    ValidationError,
    ContractViolationError,
    check_same_length
)


class TestParticipantValidation:
    """Responses must be integers in [1, 7]."""

    def test_valid_participant(self):
        p = Participant("test_id", [1, 2, 3, 4, 5, 6, 7])

        assert p.participant_id == "test_id"
        assert p.responses == (1, 2, 3, 4, 5, 6, 7)
        assert p.num_questions == 7

    @pytest.mark.parametrize("bad_value", [0, 8, -1, 100])
    def test_out_of_range_fails(self, bad_value):
        with pytest.raises(ValidationError, match="between 1 and 7"):
            Participant("test_id", [4, bad_value, 4])

    @pytest.mark.parametrize("boundary", [1, 7])
    def test_boundaries_succeed(self, boundary):
        p = Participant("test_id", [boundary])
        assert p.responses == (boundary,)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Participant("test_id", [0])

    def test_non_integer_fails(self):
        with pytest.raises(ValidationError, match="integer"):
            Participant("test_id", [3.5])

    def test_bool_fails(self):
        with pytest.raises(ValidationError):
            Participant("test_id", [True, 4])

    def test_empty_id_fails(self):
        with pytest.raises(ValidationError, match="participant_id"):
            Participant("", [4])

    def test_numpy_input_is_normalized(self):
        p = Participant("np", np.array([1, 4, 7]))

        assert p.responses == (1, 4, 7)
        assert all(type(r) is int for r in p.responses)
        np.testing.assert_array_equal(p.as_array(), np.array([1, 4, 7]))

    def test_empty_responses_allowed(self):
        assert Participant("nobody", []).num_questions == 0


class TestParticipantImmutability:

    def test_cannot_reassign_responses(self):
        p = Participant("a", [1, 2])
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.responses = (7, 7)

    def test_source_list_mutation_does_not_leak(self):
        answers = [1, 2, 3]
        p = Participant("a", answers)
        answers[0] = 7
        assert p.responses == (1, 2, 3)

    def test_dict_round_trip(self):
        p = Participant("a", [1, 5, 7])
        assert Participant.from_dict(p.to_dict()) == p


class TestPairing:

    def test_pairing_fields(self):
        pairing = Pairing("user1", "user2", 42.5)

        assert pairing.participant_ids == ("user1", "user2")
        assert pairing.score == 42.5
        assert pairing.involves("user2")
        assert not pairing.involves("user3")

    def test_pairing_is_immutable(self):
        pairing = Pairing("user1", "user2", 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pairing.score = 2.0

    def test_to_dict(self):
        assert Pairing("x", "y", 3.0).to_dict() == {
            "participant_a_id": "x",
            "participant_b_id": "y",
            "score": 3.0
        }


def test_check_same_length_raises_contract_violation():
    with pytest.raises(ContractViolationError, match="same number of responses"):
        check_same_length((1, 2, 3), (1, 2))


def test_contract_violation_is_assertion_error():
    with pytest.raises(AssertionError):
        check_same_length((1,), ())
