"""Toolchain configuration for cdetect.

Every environment lookup the probe needs (compiler override, host and target
triples, extra flags) is collected here once, so discovery, invocation and
trial compilation stay pure functions of an explicit value.

Usage in a build script::

    from cdetect.config import from_env

    cfg = from_env()
    cfg.target          # "aarch64-linux-gnu" or None
    cfg.is_cross        # True when target differs from host

A project may also pin settings in ``cdetect.toml``::

    [toolchain]
    cc = "clang"
    target = "aarch64-linux-gnu"
    cflags = "-O2 -pipe"

Environment variables always override the file.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

CONFIG_FILENAME = "cdetect.toml"

# Field name → environment variable consumed by build scripts.
_ENV_VARS: dict[str, str] = {
    "cc": "CC",
    "host": "HOST",
    "target": "TARGET",
    "cflags": "CFLAGS",
    "ldflags": "LDFLAGS",
}


@dataclass(frozen=True)
class ToolchainConfig:
    """Explicit toolchain settings, normally built once from the environment."""

    # Compiler override: absolute path or a name to look up on PATH
    cc: str | None = None

    # Host / target triples (opaque strings)
    host: str | None = None
    target: str | None = None

    # Whitespace-delimited flag strings for trial compiles
    cflags: str | None = None
    ldflags: str | None = None

    @property
    def is_cross(self) -> bool:
        """True when a target is configured and differs from the host.

        An unknown host with a known target counts as cross-compiling.
        """
        return self.target is not None and self.target != self.host

    def compile_flag_list(self) -> list[str]:
        """Return ``cflags`` split on whitespace (empty when unset)."""
        return self.cflags.split() if self.cflags else []

    def link_flag_list(self) -> list[str]:
        """Return ``ldflags`` split on whitespace (empty when unset)."""
        return self.ldflags.split() if self.ldflags else []


def _env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect non-empty toolchain variables from *environ*."""
    found: dict[str, str] = {}
    for name, var in _ENV_VARS.items():
        value = environ.get(var)
        if value:
            found[name] = value
    return found


def from_env(environ: Mapping[str, str] | None = None) -> ToolchainConfig:
    """Build a config from ``CC``, ``HOST``, ``TARGET``, ``CFLAGS`` and ``LDFLAGS``.

    Empty variables are treated as unset.
    """
    if environ is None:
        environ = os.environ
    return ToolchainConfig(**_env_overrides(environ))


def _read_toml(toml_path: Path) -> dict[str, str]:
    """Parse the ``[toolchain]`` table of a cdetect.toml file."""
    with open(toml_path, "rb") as f:
        raw = tomllib.load(f)

    section = raw.get("toolchain", {})
    if not isinstance(section, dict):
        raise ValueError(f"{toml_path}: [toolchain] must be a table")

    known = {f.name for f in fields(ToolchainConfig)}
    values: dict[str, str] = {}
    for key, value in section.items():
        if key not in known:
            raise KeyError(
                f"Unknown key '{key}' in {toml_path} [toolchain].  "
                f"Valid keys: {sorted(known)}"
            )
        if not isinstance(value, str):
            raise ValueError(f"{toml_path}: toolchain.{key} must be a string, got {value!r}")
        if value:
            values[key] = value
    return values


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ToolchainConfig:
    """Load toolchain settings from a TOML file, then apply the environment.

    Args:
        path: Explicit ``cdetect.toml`` location.  When ``None`` the file is
              looked up in the current directory and skipped if absent.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        FileNotFoundError: *path* was given but does not exist.
        KeyError: The ``[toolchain]`` table has an unknown key.
        ValueError: A value is not a string.
    """
    if environ is None:
        environ = os.environ

    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        file_values = _read_toml(candidate) if candidate.is_file() else {}
    else:
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        file_values = _read_toml(path)

    cfg = ToolchainConfig(**file_values)
    return replace(cfg, **_env_overrides(environ))
