"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
which day and input, which part, worker count, verbosity.
"""

from typing import Literal, Optional
from pydantic import Field
from aoc23.schemas.base import PuzzleBaseModel
from aoc23.schemas.param import LogLevel


class CLIConfig(PuzzleBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution. ``day`` and ``input_path`` select
    the puzzle and are not part of InternalConfig.

    Usage
    -----
        cli_cfg = CLIConfig(day=5, input_path="data/day_5.dat", part=2, workers=4)
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    day: Optional[int] = Field(None, ge=1, le=5)
    input_path: Optional[str] = None
    part: Optional[Literal[1, 2]] = None
    workers: Optional[int] = Field(None, ge=1)
    log_level: Optional[LogLevel] = None
    log_file: Optional[str] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.part is not None:
            overrides["runner"] = {"parts": [self.part]}

        if self.workers is not None:
            overrides["almanac"] = {"workers": self.workers}

        logging_overrides = {}
        if self.log_level is not None:
            logging_overrides["level"] = self.log_level
        if self.log_file is not None:
            logging_overrides["file"] = str(self.log_file)
        if logging_overrides:
            overrides["logging"] = logging_overrides

        return overrides
