"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat keys in either case (``WORKERS`` or ``workers``) so a user
config file can stay short. Users only specify what they want to override
from the defaults.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from aoc23.schemas.base import PuzzleBaseModel
from aoc23.schemas.param import Part


class UserAlmanacConfig(PuzzleBaseModel):
    """User-facing almanac config."""
    workers: Optional[int] = None
    contract_policy: Optional[str] = None

    @field_validator("contract_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserConfig(PuzzleBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Converted to internal
    overrides during resolution.

    Usage
    -----
        user_cfg = UserConfig(workers=4, red=20, log_level="debug")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Logging
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Runner
    parts: Optional[list[Part]] = Field(None, alias="PARTS")

    # Almanac (flat aliases)
    workers: Optional[int] = Field(None, alias="WORKERS")
    contract_policy: Optional[str] = Field(None, alias="CONTRACT_POLICY")

    # Cube game bag contents (flat aliases)
    red: Optional[int] = Field(None, alias="RED")
    green: Optional[int] = Field(None, alias="GREEN")
    blue: Optional[int] = Field(None, alias="BLUE")

    # Schematic
    gear_symbol: Optional[str] = Field(None, alias="GEAR_SYMBOL")

    # Nested overrides (advanced users)
    almanac: Optional[UserAlmanacConfig] = None

    model_config = PuzzleBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("contract_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("parts", mode="before")
    @classmethod
    def coerce_single_part(cls, v):
        """Accept a single part number as well as a list."""
        if isinstance(v, int):
            return [v]
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        if self.parts is not None:
            overrides["runner"] = {"parts": list(self.parts)}

        # Almanac section
        almanac = {}
        if self.workers is not None:
            almanac["workers"] = self.workers
        if self.contract_policy is not None:
            almanac["contract_policy"] = self.contract_policy

        # Merge with explicit almanac config
        if self.almanac is not None:
            almanac.update(self.almanac.model_dump(exclude_none=True))

        if almanac:
            overrides["almanac"] = almanac

        available = {
            color: count
            for color, count in (("red", self.red), ("green", self.green), ("blue", self.blue))
            if count is not None
        }
        if available:
            overrides["cube_game"] = {"available": available}

        if self.gear_symbol is not None:
            overrides["gear_ratios"] = {"gear_symbol": self.gear_symbol}

        return overrides
