"""trial.py – Pick the first source variant that compiles.

Build scripts that need to work around compiler quirks keep several variants
of a small C file (``<stem><tag>.c``) and ask which one the toolchain builds.
The first stem that compiles wins; its binary is left at
``<bin_dir>/<stem><tag>``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from cdetect.config import ToolchainConfig
from cdetect.invocation import CompilerCommand, prepare_invocation

logger = logging.getLogger(__name__)

Customizer = Callable[[CompilerCommand], CompilerCommand]


def select_compiling_variant(
    config: ToolchainConfig,
    tag: str,
    stems: Iterable[str],
    source_dir: Path,
    bin_dir: Path,
    customize: Customizer | None = None,
) -> str | None:
    """Return the first stem in *stems* whose source compiles, or ``None``.

    Args:
        config: Toolchain settings; ``cflags``/``ldflags`` are appended to
            every attempt.
        tag: Suffix added to each stem to form the on-disk file stem.
        stems: Candidate stems, tried in order.
        source_dir: Directory holding ``<stem><tag>.c``.
        bin_dir: Directory receiving ``<stem><tag>``.
        customize: Optional hook that returns an adjusted command (extra
            flags, say) before the source and output arguments are added.

    Returns ``None`` immediately if no compiler is found.  Failed attempts
    may leave partial outputs behind.
    """
    for stem in stems:
        name = f"{stem}{tag}"
        source = source_dir / f"{name}.c"
        output = bin_dir / name

        cmd = prepare_invocation(config)
        if cmd is None:
            logger.debug("No C compiler found; skipping trial compiles")
            return None
        if customize is not None:
            cmd = customize(cmd)
        cmd = cmd.with_args(source, "-o", output)
        cmd = cmd.with_args(*config.compile_flag_list(), *config.link_flag_list())

        if cmd.run():
            logger.debug("Variant %s compiled", name)
            return stem
        logger.debug("Variant %s failed to compile", name)
    return None
