"""Shared fixtures: tiny /bin/sh scripts that stand in for a C compiler."""

import stat
from collections.abc import Callable
from pathlib import Path

import pytest


def write_script(path: Path, body: str) -> Path:
    """Write an executable shell script and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_cc(tmp_path: Path) -> Callable[..., Path]:
    """Factory for fake compilers that log their argv to ``<name>.log``.

    ``accept`` lists the ``-std=`` values that succeed; anything else exits 1.
    With ``accept=None`` every invocation succeeds.
    """

    def _make(name: str = "cc", accept: list[str] | None = None) -> Path:
        bin_dir = tmp_path / "bin"
        log = bin_dir / f"{name}.log"
        if accept is None:
            check = "exit 0\n"
        else:
            cases = "|".join(f"-std={flag}" for flag in accept) or "-std=__none__"
            check = (
                'for arg in "$@"; do\n'
                '  case "$arg" in\n'
                f"    {cases}) exit 0 ;;\n"
                "  esac\n"
                "done\n"
                "exit 1\n"
            )
        return write_script(bin_dir / name, f'echo "$@" >> "{log}"\n' + check)

    return _make


@pytest.fixture
def make_script() -> Callable[[Path, str], Path]:
    """Expose :func:`write_script` to tests needing a custom fake tool."""
    return write_script
