"""Types describing what is known about a C (or C++) compiler.

``CompilerProperties`` is filled in by :func:`cdetect.probe.populate_properties`.
Construct it with the fields you already know and let the probe append the
standards it observes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CompilerFlavour(Enum):
    """Command-line dialect of the compiler.

    New members may be added; match on the ones you handle and treat the
    rest as ``UNKNOWN``.
    """

    UNKNOWN = "unknown"
    POSIX_LIKE = "posix"  # gcc, clang, POSIX cc
    MSVC_LIKE = "msvc"  # cl.exe, reserved


class StandardFlag(Enum):
    """C and C++ language standards a compiler may accept."""

    # ISO C
    C89 = "c89"
    C95 = "c95"
    C99 = "c99"
    C11 = "c11"
    C18 = "c18"
    C2X = "c2x"
    # ISO C++
    CXX98 = "c++98"
    CXX03 = "c++03"
    CXX11 = "c++11"
    CXX14 = "c++14"
    CXX17 = "c++17"
    CXX20 = "c++20"
    CXX2X = "c++2x"
    # GNU C
    GNU89 = "gnu89"
    GNU95 = "gnu95"
    GNU99 = "gnu99"
    GNU11 = "gnu11"
    GNU18 = "gnu18"
    GNU2X = "gnu2x"
    # GNU C++
    GXX98 = "g++98"
    GXX03 = "g++03"
    GXX11 = "g++11"
    GXX14 = "g++14"
    GXX17 = "g++17"
    GXX20 = "g++20"
    GXX2X = "g++2x"


# Probe order: ISO first, GNU dialects last, chronological within a family.
STANDARD_MATRIX: tuple[tuple[StandardFlag, str], ...] = tuple(
    (std, std.value) for std in StandardFlag
)


@dataclass
class CompilerProperties:
    """Properties of a found C (or C++) compiler."""

    # Absolute path to the compiler executable
    path: Path = field(default_factory=Path)

    # Options that immediately follow the path on every invocation
    extra_opts: list[str] = field(default_factory=list)

    # Flags for the compile step / the link step (empty if not used to link)
    compile_flags: list[str] = field(default_factory=list)
    link_flags: list[str] = field(default_factory=list)

    # Target triple compiled for, or None if unknown
    target: str | None = None

    flavour: CompilerFlavour = CompilerFlavour.UNKNOWN

    # Standards observed to be accepted, in STANDARD_MATRIX order
    standards: list[StandardFlag] = field(default_factory=list)

    def supports(self, standard: StandardFlag) -> bool:
        """True if the probe observed *standard* being accepted."""
        return standard in self.standards
