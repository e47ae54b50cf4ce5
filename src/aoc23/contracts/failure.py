"""Centralized failure policy for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing caller to handle engine bugs uniformly.
"""

from enum import Enum


class FailurePolicy(str, Enum):
    """Failure policy for contract violations.

    FAIL_FAST (default): Raise immediately on contract violation
    SKIP: Do not evaluate contracts at all (hot loops over huge inputs)
    """
    FAIL_FAST = "fail_fast"
    SKIP = "skip"


class ContractViolation(RuntimeError):
    """Raised when an engine contract is violated.

    This indicates a bug in the solver logic, not bad puzzle input. It means
    a stage of the computation did not produce the invariants it promised.

    Key distinction:
    - ParseError: Input error (malformed document)
    - ContractViolation: Engine bug (programmer error)
    """
    pass
