"""Data loading module for questionnaire responses."""

from .loaders import (
    load_responses,
    load_participants,
    participants_from_dataframe,
    get_question_columns,
    validate_response_columns
)

__all__ = [
    "load_responses",
    "load_participants",
    "participants_from_dataframe",
    "get_question_columns",
    "validate_response_columns"
]
