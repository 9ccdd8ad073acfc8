from __future__ import annotations

"""Exception hierarchy for consolidate.

Two scopes exist:
    - run-scoped errors (DiscoveryError) abort the whole batch, since a bad
      pattern in the static job table is a configuration bug;
    - job-scoped errors (JobError and subclasses) abort a single job and the
      batch moves on to the next one.
"""

from pathlib import Path
from typing import Optional


class ConsolidationError(Exception):
    """Base class for every error raised by consolidate."""


class DiscoveryError(ConsolidationError):
    """A glob pattern or job definition is malformed."""

    def __init__(self, message: str, *, pattern: Optional[str] = None) -> None:
        super().__init__(message)
        self.pattern = pattern


class JobError(ConsolidationError):
    """A single job could not be completed."""

    def __init__(self, message: str, *, path: Optional[str | Path] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class FileReadError(JobError):
    """A matched source file vanished or could not be read."""


class FileWriteError(JobError):
    """The output directory or output file could not be written."""
