"""Pydantic configuration schemas for the puzzle runner.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Complete defaults
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from aoc23.schemas.resolve import resolve_config
from aoc23.schemas.internal import InternalConfig
from aoc23.schemas.param import ParamConfig
from aoc23.schemas.user import UserConfig
from aoc23.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
