"""Puzzle execution entrypoint.

``run_puzzle`` holds the real execution logic; ``main`` is the thin
argparse wrapper installed as the ``aoc23`` console script.

Usage:
    aoc23 5 data/day_5.dat
    aoc23 5 data/day_5.dat --part 2 --workers 4
    aoc23 2 data/day_2.dat --config scripts/user_config.py -v
"""

import sys
import json
import argparse
import logging
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any, List

from aoc23.errors import PuzzleError
from aoc23.pipeline.runner import PuzzleRunner, PUZZLE_TITLES
from aoc23.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_puzzle(
    day: int,
    input_path: str,
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Dict[int, int]:
    """Solve one day's puzzle.

    1. Loads and resolves configuration (Param < User < CLI)
    2. Sets up logging
    3. Runs the configured parts and prints the answers

    Parameters
    ----------
    day : int
        Puzzle day (1-5).
    input_path : str
        Path to the puzzle input document.
    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).
    cli_args : dict, optional
        CLI argument overrides. Keys: part, workers, log_level, log_file.
    verbose : bool, optional
        If True, enable DEBUG logging and print the resolved config.

    Returns
    -------
    dict
        Answer per part number.

    Raises
    ------
    FileNotFoundError
        If user_config_path does not exist.
    ValueError
        If configuration validation fails or the day is unknown.
    PuzzleError
        If the input cannot be read or parsed.

    Examples
    --------
    ::

        run_puzzle(5, "data/day_5.dat", cli_args={"part": 2, "workers": 4})
    """
    param_cfg = ParamConfig()

    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))
    else:
        user_cfg = UserConfig()

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_dict.update({"day": day, "input_path": str(input_path)})
    cli_cfg = CLIConfig.model_validate(cli_dict)

    config = resolve_config(param_cfg, user_cfg, cli_cfg)

    runner = PuzzleRunner(config)
    runner.setup_logging()

    print(f"\n{'='*60}")
    print(f"Day {cli_cfg.day}: {PUZZLE_TITLES.get(cli_cfg.day, 'unknown')}")
    print('='*60)
    print(f"Input:  {cli_cfg.input_path}")
    print(f"Parts:  {', '.join(str(p) for p in config.runner.parts)}")
    print('='*60)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('='*60)

    answers = runner.run(cli_cfg.day, cli_cfg.input_path)
    for part, answer in answers.items():
        print(f"Part {part}: {answer}")
    return answers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve an Advent of Code 2023 puzzle")
    parser.add_argument("day", type=int, choices=sorted(PUZZLE_TITLES), help="Puzzle day")
    parser.add_argument("input", help="Path to puzzle input")
    parser.add_argument("--part", type=int, choices=[1, 2], help="Solve only this part")
    parser.add_argument("--config", help="Path to user config file")
    parser.add_argument("--workers", type=int, help="Threads for almanac seed ranges")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override log level")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run_puzzle(
            args.day,
            args.input,
            user_config_path=args.config,
            cli_args={
                "part": args.part,
                "workers": args.workers,
                "log_level": args.log_level,
                "log_file": args.log_file,
            },
            verbose=args.verbose,
        )
    except PuzzleError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
