"""Error taxonomy for puzzle input handling.

Every error here is fatal for the run: inputs are local files read once, so
nothing is retried and malformed input aborts the solver.

Key distinction:
- PuzzleError: bad or unreadable input (user-facing)
- ContractViolation: broken internal invariant (see ``aoc23.contracts``)
- pydantic ValidationError: bad configuration
"""

from typing import Optional


class PuzzleError(Exception):
    """Base class for all input-related failures."""
    pass


class InputReadError(PuzzleError):
    """Raised when an input document cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class ParseError(PuzzleError, ValueError):
    """Raised when input text does not match the expected grammar.

    Parameters
    ----------
    message : str
        What was expected.
    fragment : str, optional
        The offending piece of input, kept for diagnosis.
    """

    def __init__(self, message: str, fragment: Optional[str] = None):
        self.fragment = fragment
        if fragment is not None:
            message = f"{message}: {fragment!r}"
        super().__init__(message)


class MalformedHeader(ParseError):
    """A mapping header did not yield two category names."""
    pass


class MalformedRow(ParseError):
    """A mapping row did not yield exactly three integers."""
    pass


class MissingSeeds(ParseError):
    """The first line is absent or does not match the ``seeds:`` grammar."""
    pass


class RangeOverflowError(PuzzleError, OverflowError):
    """A range bound left the signed 64-bit interval."""
    pass
