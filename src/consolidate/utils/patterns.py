# src/consolidate/utils/patterns.py
"""
patterns – Glob pattern validation and relative-path normalisation.

Provides:
  • validate_pattern(str)   – reject patterns the matcher cannot honour
  • strip_dot_prefix(str)   – drop leading './' segments
  • normalize_relpath(str)  – canonical posix form used as a dedup key
  • display_path(str)       – './'-prefixed form shown in banners and logs
"""

from __future__ import annotations

import os
import posixpath

from consolidate.core.errors import DiscoveryError


def strip_dot_prefix(path: str) -> str:
    """Remove any number of leading './' segments."""
    while path.startswith("./"):
        path = path[2:]
    return path


def validate_pattern(pattern: str) -> str:
    """Return *pattern* unchanged or raise DiscoveryError.

    A pattern is malformed when it is empty, absolute, climbs above the
    project root, or mixes '**' with other characters inside one segment
    (``src/**.ts``), which shell-style globbing does not define.
    """
    if not isinstance(pattern, str) or not pattern.strip():
        raise DiscoveryError("empty glob pattern", pattern=pattern)
    posix = pattern.replace("\\", "/")
    if posix.startswith("/") or os.path.isabs(pattern):
        raise DiscoveryError(f"absolute glob pattern {pattern!r}", pattern=pattern)
    segments = strip_dot_prefix(posix).split("/")
    if ".." in segments:
        raise DiscoveryError(f"glob pattern {pattern!r} leaves the project root", pattern=pattern)
    for seg in segments:
        if "**" in seg and seg != "**":
            raise DiscoveryError(f"'**' must be a whole path segment in {pattern!r}", pattern=pattern)
    return pattern


def normalize_relpath(path: str) -> str:
    """Return the canonical posix relative form of *path* ('./src//a.ts' → 'src/a.ts')."""
    return posixpath.normpath(path.replace(os.sep, "/"))


def display_path(path: str) -> str:
    """Return the './'-prefixed form of a relative path."""
    return f"./{normalize_relpath(path)}"
