"""discovery.py – Locate the C compiler executable.

An explicit ``cc`` override always wins; otherwise a fixed list of names is
searched on ``PATH``.  Cross builds prefer binaries prefixed with the target
triple.  Only POSIX-style drivers are searched; ``cl`` is never a candidate.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from cdetect.config import ToolchainConfig

logger = logging.getLogger(__name__)


def candidate_names(config: ToolchainConfig) -> list[str]:
    """Return compiler names to search for, most preferred first."""
    if config.is_cross:
        return [f"{config.target}-cc", "clang", "lccc", f"{config.target}-gcc"]
    return ["cc", "clang", "lccc", "gcc"]


def _which(name: str) -> Path | None:
    found = shutil.which(name)
    if found is None:
        return None
    return Path(found).absolute()


def resolve_compiler(config: ToolchainConfig) -> Path | None:
    """Find the compiler executable for *config*.

    Returns an absolute path, or ``None`` when nothing usable is found.  An
    override that cannot be resolved is not followed by a name search.
    """
    if config.cc is not None:
        override = Path(config.cc)
        if override.is_absolute():
            logger.debug("Using absolute compiler override %s", override)
            return override
        found = _which(config.cc)
        if found is None:
            logger.debug("Compiler override %r not found on PATH", config.cc)
        return found

    for name in candidate_names(config):
        found = _which(name)
        if found is not None:
            logger.debug("Found compiler %s as %s", name, found)
            return found
        logger.debug("Compiler candidate %s not on PATH", name)
    return None
