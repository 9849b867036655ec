"""Tests for loading questionnaire responses."""

import pytest

from matcher.schema import ValidationError
from matcher.data_loading import (
    load_responses,
    load_participants,
    participants_from_dataframe,
    get_question_columns,
    validate_response_columns
)


def write_csv(tmp_path, text, name="responses.csv"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_responses(str(tmp_path / "nope.csv"))


def test_header_only_file(tmp_path):
    path = write_csv(tmp_path, "participant_id,q1,q2\n")
    with pytest.raises(ValueError, match="empty"):
        load_responses(str(path))


def test_missing_id_column(tmp_path):
    path = write_csv(tmp_path, "user,q1\nalice,4\n")
    with pytest.raises(ValueError, match="participant_id"):
        load_responses(str(path))


def test_custom_id_column_and_delimiter(tmp_path):
    path = write_csv(tmp_path, "uid;q1;q2\nx;1;7\ny;7;1\n")
    participants = load_participants(str(path), id_column="uid", delimiter=";")
    assert [p.participant_id for p in participants] == ["x", "y"]


def test_load_participants_preserves_order(responses_csv):
    participants = load_participants(str(responses_csv))

    assert [p.participant_id for p in participants] == ["alice", "bob", "carol", "dave"]
    assert participants[0].responses == (1, 7, 4)
    assert participants[3].responses == (2, 6, 3)


def test_numeric_looking_ids_stay_strings(tmp_path):
    path = write_csv(tmp_path, "participant_id,q1\n001,4\n002,5\n")
    participants = load_participants(str(path))
    assert [p.participant_id for p in participants] == ["001", "002"]


def test_question_columns_in_file_order(responses_csv):
    df = load_responses(str(responses_csv))
    assert get_question_columns(df) == ["q1", "q2", "q3"]


def test_valid_file_has_no_issues(responses_csv):
    df = load_responses(str(responses_csv))
    assert validate_response_columns(df) == []


def test_issues_reported(tmp_path):
    path = write_csv(
        tmp_path,
        "participant_id,q1,q2,q3\n"
        "a,9,x,1\n"
        "a,4,y,\n"
    )
    df = load_responses(str(path))
    issues = validate_response_columns(df)

    assert any("q1" in i and "outside" in i for i in issues)
    assert any("q2" in i and "not numeric" in i for i in issues)
    assert any("q3" in i and "missing" in i for i in issues)
    assert any("Duplicate participant ids" in i for i in issues)


def test_missing_answer_raises(tmp_path):
    path = write_csv(tmp_path, "participant_id,q1,q2\na,1,2\nb,3,\n")
    df = load_responses(str(path))
    with pytest.raises(ValidationError, match="missing answers"):
        participants_from_dataframe(df)


def test_out_of_range_answer_raises(tmp_path):
    path = write_csv(tmp_path, "participant_id,q1,q2\na,1,8\n")
    with pytest.raises(ValidationError, match="between 1 and 7"):
        load_participants(str(path))
