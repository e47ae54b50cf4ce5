"""Root-level pytest fixtures for the aoc23 test suite.

Provides shared configuration fixtures and the example puzzle inputs.
Tests build configs through these fixtures instead of raw dicts.
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from aoc23.schemas import ParamConfig, UserConfig, resolve_config

DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_workers(make_config):
    ...     config = make_config(workers=4)
    ...     assert config.almanac.workers == 4
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Input Fixtures
# =============================================================================

@pytest.fixture
def data_dir():
    """Directory holding the published puzzle examples."""
    return DATA_DIR


@pytest.fixture
def example_lines():
    """Read an example input as lines, e.g. example_lines("day_2.dat")."""
    def _read(name):
        return (DATA_DIR / name).read_text().splitlines()
    return _read


@pytest.fixture
def almanac_text():
    """The published day 5 example almanac."""
    return (DATA_DIR / "day_5.dat").read_text()


@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)
