"""Layered config resolution for a puzzle run.

``resolve_config()`` is the only way runtime code obtains configuration.
Layers are applied lowest first:

1. ParamConfig (defaults for every section)
2. UserConfig (``CONFIG`` dict from a user file)
3. CLIConfig (flags of a single invocation)
"""

from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel

from aoc23.schemas.param import ParamConfig
from aoc23.schemas.user import UserConfig
from aoc23.schemas.cli import CLIConfig
from aoc23.schemas.internal import InternalConfig

ModelT = TypeVar("ModelT", bound=BaseModel)


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Merge override dicts into a copy of ``base``.

    Sections present on both sides merge key by key; any other value in a
    later dict replaces the earlier one. Inputs are not modified.

    Parameters
    ----------
    base : dict
        Lowest-priority values
    *overrides : dict
        Applied left to right, each winning over everything before it

    Returns
    -------
    dict
        New merged dictionary

    Examples
    --------
    >>> deep_merge({"almanac": {"workers": 1, "contract_policy": "skip"}},
    ...            {"almanac": {"workers": 4}})
    {'almanac': {'workers': 4, 'contract_policy': 'skip'}}
    """
    merged = dict(base)

    for override in overrides:
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = deep_merge(current, value)
            else:
                merged[key] = value

    return merged


def _as_model(layer: Union[None, dict, ModelT], model: Type[ModelT]) -> ModelT:
    """Validate a raw layer; None or an empty dict means no overrides."""
    if isinstance(layer, model):
        return layer
    return model.model_validate(layer or {})


def resolve_config(
    param_cfg: Union[dict, ParamConfig],
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Build the frozen runtime config for one run.

    Parameters
    ----------
    param_cfg : dict or ParamConfig
        Base layer holding every default. Required.
    user_cfg : dict or UserConfig, optional
        Flat user overrides, uppercase keys allowed.
    cli_cfg : dict or CLIConfig, optional
        Overrides from the command line; highest priority.

    Returns
    -------
    InternalConfig
        Validated, immutable configuration

    Raises
    ------
    ValidationError
        If a layer, or the merged result, breaks a schema rule

    Examples
    --------
    >>> from aoc23.schemas import resolve_config, ParamConfig, UserConfig
    >>> config = resolve_config(ParamConfig(), UserConfig(workers=4, red=20))
    >>> config.almanac.workers
    4
    >>> config.cube_game.available
    {'red': 20, 'green': 13, 'blue': 14}
    """
    param = _as_model(param_cfg, ParamConfig)
    user = _as_model(user_cfg, UserConfig)
    cli = _as_model(cli_cfg, CLIConfig)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )

    # Override values bypassed ParamConfig's field rules; check them here
    ParamConfig.model_validate(merged)

    return InternalConfig.model_validate(merged)
