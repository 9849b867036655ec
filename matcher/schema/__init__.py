"""Participant and pairing data model."""

from .errors import ValidationError, ContractViolationError
from .participants import (
    Participant,
    Pairing,
    RESPONSE_MIN,
    RESPONSE_MAX,
    check_same_length
)

__all__ = [
    "Participant",
    "Pairing",
    "ValidationError",
    "ContractViolationError",
    "RESPONSE_MIN",
    "RESPONSE_MAX",
    "check_same_length"
]
