"""probe.py – Empirically test which ``-std=`` flags a compiler accepts.

The probe writes a minimal translation unit into a caller-supplied scratch
directory and compiles it once per entry of
:data:`cdetect.properties.STANDARD_MATRIX`.  A flag counts as supported iff
the compiler exits with status zero; diagnostics are never read.

Scratch file
~~~~~~~~~~~~
The probe file has a fixed name (``test.c``) and is created with
exclusive-create semantics.  If another build process already holds it, the
probe sleeps and retries according to its :class:`RetryPolicy`.  Each
compile writes its object to ``test.o`` beside the source.  Both files are
left in place afterwards; cleaning up the scratch directory is the
caller's job.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from cdetect.config import ToolchainConfig
from cdetect.discovery import resolve_compiler
from cdetect.invocation import CompilerCommand, target_arguments
from cdetect.properties import STANDARD_MATRIX, CompilerFlavour, CompilerProperties

logger = logging.getLogger(__name__)

PROBE_FILENAME = "test.c"
PROBE_SOURCE = "int main(){}\n"


@dataclass(frozen=True)
class RetryPolicy:
    """How to wait for a scratch file held by a concurrent probe.

    ``max_attempts=None`` retries forever.
    """

    max_attempts: int | None = None
    delay: float = 0.001
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False)


def create_probe_file(
    scratch_dir: Path,
    name: str = PROBE_FILENAME,
    retry: RetryPolicy | None = None,
) -> Path:
    """Exclusively create *name* in *scratch_dir* and write the probe source.

    The file is closed before this returns, so a compiler spawned afterwards
    sees the full contents.

    Raises:
        FileExistsError: A bounded *retry* policy ran out of attempts.
        OSError: Any other failure creating or writing the file.
    """
    if retry is None:
        retry = RetryPolicy()
    probe_path = scratch_dir / name

    attempt = 0
    while True:
        attempt += 1
        try:
            with open(probe_path, "x", encoding="utf-8") as f:
                f.write(PROBE_SOURCE)
            return probe_path
        except FileExistsError:
            if retry.max_attempts is not None and attempt >= retry.max_attempts:
                raise
            logger.debug("%s is busy (attempt %d), retrying", probe_path, attempt)
            retry.sleep(retry.delay)


def populate_properties(
    properties: CompilerProperties,
    scratch_dir: Path,
    retry: RetryPolicy | None = None,
) -> None:
    """Probe ``properties.path`` and record the standards it accepts.

    ``properties.path`` must already point at the compiler and *scratch_dir*
    must be writable.  Only ``flavour`` is set and ``standards`` appended to;
    nothing already recorded is removed.
    """
    # Only POSIX-style drivers are supported for now
    properties.flavour = CompilerFlavour.POSIX_LIKE

    probe_path = create_probe_file(scratch_dir, retry=retry)
    # Keep the object next to the source, never in the caller's cwd
    object_path = probe_path.with_suffix(".o")

    base = CompilerCommand(properties.path).with_args(
        *properties.extra_opts, *properties.compile_flags
    )
    for standard, flag in STANDARD_MATRIX:
        cmd = base.with_args("-c", f"-std={flag}", "-o", object_path, probe_path)
        if cmd.run():
            logger.debug("%s accepts -std=%s", properties.path.name, flag)
            if standard not in properties.standards:
                properties.standards.append(standard)
        else:
            logger.debug("%s rejects -std=%s", properties.path.name, flag)


def detect_compiler(
    config: ToolchainConfig,
    scratch_dir: Path,
    retry: RetryPolicy | None = None,
) -> CompilerProperties | None:
    """Find the compiler for *config* and probe it.

    Returns ``None`` when no compiler can be found.
    """
    path = resolve_compiler(config)
    if path is None:
        logger.debug("No C compiler found")
        return None

    properties = CompilerProperties(
        path=path,
        extra_opts=target_arguments(path, config),
        compile_flags=config.compile_flag_list(),
        link_flags=config.link_flag_list(),
        target=config.target,
    )
    populate_properties(properties, scratch_dir, retry=retry)
    return properties
