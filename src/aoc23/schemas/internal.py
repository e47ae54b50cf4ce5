"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains no optional fields that solver code depends on.
"""

from typing import Optional
from pydantic import Field, ConfigDict
from aoc23.contracts.failure import FailurePolicy
from aoc23.schemas.base import PuzzleBaseModel
from aoc23.schemas.param import LogLevel, Part


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalLoggingConfig(PuzzleBaseModel):
    """Runtime logging configuration."""
    level: LogLevel
    file: Optional[str]


class InternalAlmanacConfig(PuzzleBaseModel):
    """Runtime almanac engine configuration."""
    workers: int = Field(ge=1, le=64)
    contract_policy: FailurePolicy


class InternalCubeGameConfig(PuzzleBaseModel):
    """Runtime cube game configuration."""
    available: dict[str, int]


class InternalGearRatiosConfig(PuzzleBaseModel):
    """Runtime schematic configuration."""
    gear_symbol: str


class InternalRunnerConfig(PuzzleBaseModel):
    """Runtime runner configuration."""
    parts: list[Part]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(PuzzleBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, text, config: InternalConfig):
            self.workers = config.almanac.workers  # NOT .get()

    All validation and defaulting happens during config resolution, not in
    runtime code.
    """

    logging: InternalLoggingConfig
    almanac: InternalAlmanacConfig
    cube_game: InternalCubeGameConfig
    gear_ratios: InternalGearRatiosConfig
    runner: InternalRunnerConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
