"""Engine contracts - fail-fast enforcement of component invariants.

Contracts fail immediately and loudly when a component does not produce its
promised invariants.

Key principle:
- Pydantic validates config correctness
- Parsers validate input correctness
- Contracts validate engine correctness
"""

from aoc23.contracts.failure import ContractViolation, FailurePolicy
from aoc23.contracts.base import require
from aoc23.contracts.ranges import assert_tiled, assert_width_preserved

__all__ = [
    "ContractViolation",
    "FailurePolicy",
    "require",
    "assert_tiled",
    "assert_width_preserved",
]
