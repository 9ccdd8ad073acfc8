from __future__ import annotations

"""
Glob-based file discovery.

Each job pattern is expanded against the project root with shell-style
semantics ('*' stays inside a segment, '**' crosses directories, wildcards
never match a leading dot, so hidden entries are reachable only when a
pattern names them). Results are unioned in
pattern order, de-duplicated on the normalised relative path, then filtered
through the global ignore list and the job's own output file.
"""

import glob
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Sequence

import pathspec

from consolidate.core.errors import DiscoveryError
from consolidate.core.interfaces import PathMatcherProtocol
from consolidate.logging.helpers import get_logger, trace_io
from consolidate.utils.patterns import (
    display_path,
    normalize_relpath,
    strip_dot_prefix,
    validate_pattern,
)


def compile_ignore_spec(patterns: Sequence[str]) -> pathspec.GitIgnoreSpec:
    """Compile ignore globs into a GitIgnoreSpec, raising DiscoveryError on bad input."""
    cleaned = [strip_dot_prefix(validate_pattern(p).replace("\\", "/")) for p in patterns]
    try:
        return pathspec.GitIgnoreSpec.from_lines(cleaned)
    except ValueError as exc:
        raise DiscoveryError(f"invalid ignore pattern list: {exc}") from exc


@dataclass
class PathMatcher(PathMatcherProtocol):
    """Expands job patterns under `root` and applies the ignore list."""

    root: Path
    ignore: Sequence[str] = ()
    logger: Optional[logging.Logger] = None
    _ignore_spec: pathspec.GitIgnoreSpec = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.ignore = tuple(self.ignore)
        self._ignore_spec = compile_ignore_spec(self.ignore)
        if self.logger is None:
            self.logger = get_logger("discovery")

    # -------- Internal helpers --------

    def _expand(self, pattern: str) -> list[str]:
        """Return the regular files matched by *pattern*, sorted for a stable order."""
        validate_pattern(pattern)
        posix = pattern.replace("\\", "/")
        try:
            hits = glob.glob(posix, root_dir=self.root, recursive=True)
        except (OSError, ValueError) as exc:
            raise DiscoveryError(f"cannot expand glob {pattern!r}: {exc}", pattern=pattern) from exc
        files = [h for h in hits if (self.root / h).is_file()]
        trace_io(self.logger, "glob expanded", pattern=pattern, hits=len(hits), files=len(files))
        return sorted(files, key=normalize_relpath)

    def is_excluded(self, relpath: str, output_file: str | None = None) -> bool:
        norm = normalize_relpath(relpath)
        if output_file is not None and norm == normalize_relpath(output_file):
            return True
        return self._ignore_spec.match_file(norm)

    # -------- PathMatcherProtocol --------

    def find_files(self, patterns: Sequence[str], output_file: str) -> list[str]:
        """Return './'-prefixed relative paths matched by *patterns*, in discovery order.

        A file hit by several patterns is kept once, at its first position.
        Matches under the ignore list, and the job's own *output_file*, are
        dropped. An empty list is a normal outcome.
        """
        seen: Dict[str, str] = {}
        for pattern in patterns:
            for hit in self._expand(pattern):
                key = normalize_relpath(hit)
                seen.setdefault(key, display_path(key))

        kept = [shown for key, shown in seen.items() if not self.is_excluded(key, output_file)]
        self.logger.debug(
            "%d file(s) matched, %d kept after exclusions for %s",
            len(seen), len(kept), output_file,
        )
        return kept
