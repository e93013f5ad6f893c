"""Ancestor-directory file search (internal)."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from jsworkspace.errors import NotFoundError

logger = logging.getLogger(__name__)


def find_file(
    name: str,
    start_dir: Union[str, os.PathLike],
    clamp_to_dir: Optional[Union[str, os.PathLike]] = None,
) -> Path:
    """Find ``name`` in start_dir or the nearest ancestor that has it.

    If clamp_to_dir is given, only clamp_to_dir and its descendants are
    searched; clamp_to_dir itself is the last directory looked at.

    Raises:
        NotFoundError: if no directory in bounds contains the file
    """
    start = Path(os.path.abspath(start_dir))
    clamp = Path(os.path.abspath(clamp_to_dir)) if clamp_to_dir is not None else None

    if clamp is not None and start != clamp and clamp not in start.parents:
        logger.debug("%s is outside of %s, not searching", start, clamp)
        raise NotFoundError(name, start, clamp)

    for directory in (start, *start.parents):
        candidate = directory / name
        logger.debug("looking for %s", candidate)
        if candidate.is_file():
            return candidate
        if clamp is not None and directory == clamp:
            break

    raise NotFoundError(name, start, clamp)
