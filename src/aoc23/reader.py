"""Puzzle input reading.

Inputs are small local text files read once per run. Any OS-level failure
is surfaced as InputReadError; nothing is retried.
"""

import logging
from pathlib import Path
from typing import List, Union

from aoc23.errors import InputReadError

__all__ = ['read_document', 'read_lines']

logger = logging.getLogger(__name__)


def read_document(path: Union[str, Path]) -> str:
    """Read a whole input document as text.

    Raises
    ------
    InputReadError
        If the file is missing, unreadable or not valid UTF-8.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path, str(e)) from e

    logger.debug("Read %d characters from '%s'", len(text), path)
    return text


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read an input document as a list of lines without line endings."""
    return read_document(path).splitlines()
