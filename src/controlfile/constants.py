"""Shared constants for controlfile.

This module provides centralized configuration constants used across the
syntax, loading and repository layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Repository layout: File and directory names of a ports tree
- Batch loading: Worker pool bounds

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Repository layout
    "CONTROL_FILENAME",
    "PORTS_DIRNAME",
    "PACKAGES_DIRNAME",
    "DEFAULT_TRIPLET",
    # Batch loading
    "DEFAULT_MAX_WORKERS",
    # Text encoding
    "CONTROL_ENCODING",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length in characters accepted by ControlParser.
# CONTROL files are a few hundred bytes; 10 MiB is far beyond any real
# metadata file. Set max_source_size=0 on the parser to disable.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# REPOSITORY LAYOUT
# ============================================================================

CONTROL_FILENAME: str = "CONTROL"
PORTS_DIRNAME: str = "ports"
PACKAGES_DIRNAME: str = "packages"

# Triplet assumed when a package specification omits one ("zlib").
DEFAULT_TRIPLET: str = "x86-windows"

# ============================================================================
# BATCH LOADING
# ============================================================================

# Upper bound on threads used by load_all_ports(). Loads are I/O bound and
# independent, so a small fixed pool is enough.
DEFAULT_MAX_WORKERS: int = 8

# ============================================================================
# TEXT ENCODING
# ============================================================================

CONTROL_ENCODING: str = "utf-8"
