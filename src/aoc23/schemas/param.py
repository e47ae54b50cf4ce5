"""ParamConfig: Complete defaults for the puzzle runner.

ALL tunable parameters have a default here. Runtime code never reads
ParamConfig directly; it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from aoc23.contracts.failure import FailurePolicy
from aoc23.schemas.base import PuzzleBaseModel


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
Part = Literal[1, 2]
CUBE_COLORS = ("red", "green", "blue")


# =============================================================================
# Nested Configuration Models
# =============================================================================

class LoggingConfig(PuzzleBaseModel):
    """Logging configuration."""
    level: LogLevel = "INFO"
    file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class AlmanacConfig(PuzzleBaseModel):
    """Range-propagation engine configuration (day 5)."""
    workers: int = Field(1, ge=1, le=64, description="Threads evaluating seed ranges")
    contract_policy: FailurePolicy = FailurePolicy.FAIL_FAST


class CubeGameConfig(PuzzleBaseModel):
    """Bag contents for cube games (day 2)."""
    available: dict[str, int] = Field(
        default_factory=lambda: {"red": 12, "green": 13, "blue": 14}
    )

    @field_validator("available")
    @classmethod
    def check_colors(cls, v):
        """Only known colours with non-negative counts."""
        for color, count in v.items():
            if color not in CUBE_COLORS:
                raise ValueError(f"Unknown cube colour '{color}'")
            if count < 0:
                raise ValueError(f"Cube count for '{color}' must be >= 0")
        return v


class GearRatiosConfig(PuzzleBaseModel):
    """Engine schematic settings (day 3)."""
    gear_symbol: str = Field("*", min_length=1, max_length=1)

    @field_validator("gear_symbol")
    @classmethod
    def check_symbol(cls, v):
        """A gear symbol cannot be a digit or the '.' filler."""
        if v.isdigit() or v == ".":
            raise ValueError(f"'{v}' cannot be a gear symbol")
        return v


class RunnerConfig(PuzzleBaseModel):
    """Which puzzle parts to solve."""
    parts: list[Part] = Field(default_factory=lambda: [1, 2], min_length=1)


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(PuzzleBaseModel):
    """Complete configuration with all defaults.

    This is the single source of truth for all runner parameters.

    Usage
    -----
    Serves as the base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    almanac: AlmanacConfig = Field(default_factory=AlmanacConfig)
    cube_game: CubeGameConfig = Field(default_factory=CubeGameConfig)
    gear_ratios: GearRatiosConfig = Field(default_factory=GearRatiosConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
