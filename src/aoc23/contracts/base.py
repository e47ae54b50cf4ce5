"""Contract enforcement primitive.

Every range-engine contract is expressed through require().
"""

from aoc23.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation unless ``condition`` holds.

    Called right after an engine step to check what that step guarantees.
    There is no recovery path.

    Parameters
    ----------
    condition : bool
        Invariant expected to be true.

    message : str
        Description of the broken invariant, including the offending values.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(piece.width == mapped.width, f"{piece} mapped to {mapped} changes width")
    """
    if not condition:
        raise ContractViolation(message)
