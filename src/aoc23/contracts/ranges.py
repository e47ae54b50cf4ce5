"""Range engine contracts.

Enforces the guarantees the almanac engine makes between splitting and
mapping: pieces tile their source range, and mapping never changes width.
"""

from typing import Sequence, TYPE_CHECKING

from aoc23.contracts.base import require

if TYPE_CHECKING:
    from aoc23.almanac.model import Range


def assert_tiled(rng: "Range", pieces: Sequence["Range"]) -> None:
    """Enforce split contract.

    Called after split_range(). Verifies that the pieces, sorted by lower
    bound, form a contiguous partition of ``rng`` with no gaps or overlaps.

    Parameters
    ----------
    rng : Range
        Range that was split

    pieces : sequence of Range
        Output of split_range()

    Raises
    ------
    ContractViolation
        If the pieces do not tile ``rng`` exactly
    """
    if rng.empty:
        require(
            len(pieces) == 0,
            f"Split contract violated: empty range {rng} produced {len(pieces)} pieces"
        )
        return

    ordered = sorted(pieces)
    require(
        all(not piece.empty for piece in ordered),
        f"Split contract violated: empty piece produced from {rng}"
    )
    require(
        ordered[0].lo == rng.lo,
        f"Split contract violated: first piece starts at {ordered[0].lo}, expected {rng.lo}"
    )
    require(
        ordered[-1].hi == rng.hi,
        f"Split contract violated: last piece ends at {ordered[-1].hi}, expected {rng.hi}"
    )
    for left, right in zip(ordered, ordered[1:]):
        require(
            left.hi == right.lo,
            f"Split contract violated: pieces {left} and {right} are not contiguous"
        )


def assert_width_preserved(piece: "Range", mapped: "Range") -> None:
    """Enforce mapping contract: translation keeps the range width."""
    require(
        piece.width == mapped.width,
        f"Mapping contract violated: {piece} mapped to {mapped} changes width"
    )
