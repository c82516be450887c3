"""cdetect – locate and interrogate C/C++ compilers from build scripts.

Finds the toolchain executable for native and cross builds, probes which
``-std=`` flags it accepts, and trial-compiles source variants so callers
can adapt to compiler quirks.
"""

from cdetect.config import ToolchainConfig, from_env, load_config
from cdetect.discovery import candidate_names, resolve_compiler
from cdetect.invocation import (
    CompilerCommand,
    add_target_argument,
    prepare_invocation,
    target_arguments,
)
from cdetect.probe import RetryPolicy, create_probe_file, detect_compiler, populate_properties
from cdetect.properties import STANDARD_MATRIX, CompilerFlavour, CompilerProperties, StandardFlag
from cdetect.trial import select_compiling_variant

__version__ = "0.1.0"

__all__ = [
    "STANDARD_MATRIX",
    "CompilerCommand",
    "CompilerFlavour",
    "CompilerProperties",
    "RetryPolicy",
    "StandardFlag",
    "ToolchainConfig",
    "add_target_argument",
    "candidate_names",
    "create_probe_file",
    "detect_compiler",
    "from_env",
    "load_config",
    "populate_properties",
    "prepare_invocation",
    "resolve_compiler",
    "select_compiling_variant",
    "target_arguments",
]
