"""Error kinds raised by the matcher."""


class ValidationError(ValueError):
    """Malformed construction input. The object is never created."""


class ContractViolationError(AssertionError):
    """
    Mismatched response-vector lengths reached scoring.

    This means the caller assembled an inconsistent survey population
    (e.g. two questionnaire versions). It is never recovered inside the
    package, since any score computed past this point would be meaningless.
    """
