"""
Data loading functions for questionnaire responses.

This module turns a response table (one row per participant, one column
per question) into Participant objects. It is caller-side glue: the
matching core itself never reads or writes a store.

Expected layout:
    participant_id,q1,q2,...,qN
    alice,1,7,4,...
    bob,6,2,4,...
"""

import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..schema import Participant, ValidationError, RESPONSE_MIN, RESPONSE_MAX

logger = logging.getLogger(__name__)


def load_responses(
    filepath: str,
    id_column: str = "participant_id",
    delimiter: str = ","
) -> pd.DataFrame:
    """
    Load questionnaire responses from CSV.

    Args:
        filepath: Path to the responses file
        id_column: Column holding participant identities
        delimiter: Field delimiter (default: comma)

    Returns:
        DataFrame with raw responses; the id column is read as strings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or lacks the id column
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Responses file not found: {filepath}")

    logger.info(f"Loading responses from {filepath} (delimiter: {repr(delimiter)})")
    df = pd.read_csv(filepath, sep=delimiter, dtype={id_column: str})

    if df.empty:
        raise ValueError(f"Responses file is empty: {filepath}")
    if id_column not in df.columns:
        raise ValueError(f"Responses file has no '{id_column}' column: {filepath}")

    logger.info(f"Loaded {len(df)} rows with {len(df.columns) - 1} question columns")
    return df


def get_question_columns(df: pd.DataFrame, id_column: str = "participant_id") -> List[str]:
    """
    Extract the question columns in file order.

    Args:
        df: Responses DataFrame
        id_column: Column holding participant identities

    Returns:
        Every column except the id column
    """
    return [c for c in df.columns if c != id_column]


def validate_response_columns(df: pd.DataFrame, id_column: str = "participant_id") -> List[str]:
    """
    Check the response table without raising.

    Args:
        df: Responses DataFrame
        id_column: Column holding participant identities

    Returns:
        List of issue messages (empty if valid)
    """
    issues = []
    question_cols = get_question_columns(df, id_column)

    if not question_cols:
        issues.append("No question columns found")

    for col in question_cols:
        if not pd.api.types.is_numeric_dtype(df[col]):
            issues.append(f"Column '{col}' is not numeric")
            continue
        n_missing = int(df[col].isna().sum())
        if n_missing:
            issues.append(f"Column '{col}' has {n_missing} missing values")
        out_of_range = df[col].dropna()
        out_of_range = out_of_range[(out_of_range < RESPONSE_MIN) | (out_of_range > RESPONSE_MAX)]
        if len(out_of_range):
            issues.append(
                f"Column '{col}' has {len(out_of_range)} values outside "
                f"[{RESPONSE_MIN}, {RESPONSE_MAX}]"
            )

    if id_column in df.columns:
        duplicated = df[id_column][df[id_column].duplicated()].unique().tolist()
        if duplicated:
            issues.append(f"Duplicate participant ids: {sorted(duplicated)}")

    return issues


def participants_from_dataframe(
    df: pd.DataFrame,
    id_column: str = "participant_id"
) -> List[Participant]:
    """
    Build Participants from a responses DataFrame, preserving row order.

    Args:
        df: Responses DataFrame
        id_column: Column holding participant identities

    Returns:
        List of Participant objects

    Raises:
        ValidationError: If a row has missing or invalid answers
    """
    question_cols = get_question_columns(df, id_column)
    participants = []

    for row_idx, row in df.iterrows():
        answers = row[question_cols]
        if answers.isna().any():
            missing = answers[answers.isna()].index.tolist()
            raise ValidationError(f"Row {row_idx} has missing answers for {missing}")

        values = []
        for val in answers.tolist():
            # Columns holding only whole numbers may still be read as floats
            if isinstance(val, float) and val.is_integer():
                val = int(val)
            values.append(val)

        participants.append(Participant(participant_id=str(row[id_column]), responses=values))

    logger.info(f"Built {len(participants)} participants with {len(question_cols)} questions each")
    return participants


def load_participants(
    filepath: str,
    id_column: str = "participant_id",
    delimiter: str = ","
) -> List[Participant]:
    """
    Convenience function to load a responses file straight into Participants.

    Args:
        filepath: Path to the responses file
        id_column: Column holding participant identities
        delimiter: Field delimiter

    Returns:
        List of Participant objects
    """
    df = load_responses(filepath, id_column=id_column, delimiter=delimiter)

    issues = validate_response_columns(df, id_column)
    for issue in issues:
        logger.warning(f"Responses issue: {issue}")

    return participants_from_dataframe(df, id_column)
