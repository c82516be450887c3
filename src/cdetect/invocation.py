"""invocation.py – Build ready-to-run compiler commands.

``CompilerCommand`` is an immutable argv builder: every ``with_args`` call
returns a new command, so callers can hand a command to a customizer hook
without sharing mutable state.

Cross builds get ``--target <triple>`` injected unless the resolved binary
name already starts with the triple (e.g. ``aarch64-linux-gnu-gcc``).
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from cdetect.config import ToolchainConfig
from cdetect.discovery import resolve_compiler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilerCommand:
    """A compiler executable plus the arguments that follow it."""

    program: Path
    args: tuple[str, ...] = ()

    def with_args(self, *args: str | Path) -> CompilerCommand:
        """Return a copy with *args* appended."""
        return CompilerCommand(self.program, self.args + tuple(str(a) for a in args))

    def argv(self) -> list[str]:
        """Full argument vector, program first."""
        return [str(self.program), *self.args]

    def run(self) -> bool:
        """Run to completion with all streams discarded.

        Returns True iff the exit status is zero.  ``OSError`` from spawning
        the process propagates.
        """
        result = subprocess.run(
            self.argv(),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return result.returncode == 0


def target_arguments(resolved_path: Path, config: ToolchainConfig) -> list[str]:
    """Return the ``--target`` arguments needed for *resolved_path*, if any."""
    target = config.target
    if target is None or target == config.host:
        return []
    if resolved_path.name.startswith(target):
        return []
    return ["--target", target]


def add_target_argument(
    cmd: CompilerCommand, resolved_path: Path, config: ToolchainConfig
) -> CompilerCommand:
    """Append ``--target <triple>`` to *cmd* when cross-compiling.

    Skipped when the binary name already encodes the target, so the flag is
    never given twice.
    """
    extra = target_arguments(resolved_path, config)
    if not extra:
        return cmd
    logger.debug("Adding %s to %s", " ".join(extra), resolved_path.name)
    return cmd.with_args(*extra)


def prepare_invocation(config: ToolchainConfig) -> CompilerCommand | None:
    """Resolve the compiler and return a command for it, or ``None``."""
    path = resolve_compiler(config)
    if path is None:
        return None
    return add_target_argument(CompilerCommand(path), path, config)
