from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

from consolidate.constants import (
    COMMENT_PREFIX,
    DIVIDER_GLYPH,
    FILE_DIVIDER_WIDTH,
    SPACER_GLYPH,
    START_END_NEWLINE,
    START_END_SPACER,
)
from consolidate.core.errors import DiscoveryError
from consolidate.utils.patterns import validate_pattern


@dataclass(frozen=True)
class JobDefinition:
    """One row of the static job table."""
    name: str
    patterns: Tuple[str, ...]
    display_label: Optional[str] = None

    def __post_init__(self) -> None:
        if not (self.name or '').strip():
            raise DiscoveryError('job definition without a name')
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, 'patterns', tuple(self.patterns))
        if not self.patterns:
            raise DiscoveryError(f'job {self.name!r} defines no patterns')
        for pattern in self.patterns:
            validate_pattern(pattern)

    @property
    def label(self) -> str:
        return self.display_label or self.name

    @property
    def output_stem(self) -> str:
        return self.name.upper().replace(' ', '_')


@dataclass(frozen=True)
class Job:
    definition: JobDefinition
    output_file: str

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def label(self) -> str:
        return self.definition.label

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self.definition.patterns


@dataclass(frozen=True)
class FramingStyle:
    """Cosmetic settings for the banners wrapped around each file."""
    spacer_width: int = START_END_SPACER
    spacer_glyph: str = SPACER_GLYPH
    newline_count: int = START_END_NEWLINE
    divider_width: int = FILE_DIVIDER_WIDTH
    divider_glyph: str = DIVIDER_GLYPH
    comment_prefix: str = COMMENT_PREFIX


@dataclass(frozen=True)
class JobResult:
    job: Job
    files_processed: int = 0

    @property
    def output_file(self) -> str:
        return self.job.output_file

    @property
    def skipped(self) -> bool:
        return self.files_processed == 0


@dataclass
class RunSummary:
    total_files: int = 0
    processed_jobs: int = 0
    skipped_jobs: int = 0
    failed_jobs: int = 0

    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    def record(self, result: JobResult) -> None:
        self.total_files += result.files_processed
        if result.files_processed > 0:
            self.processed_jobs += 1
        else:
            self.skipped_jobs += 1

    def record_failure(self) -> None:
        self.failed_jobs += 1

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "total_files": self.total_files,
                "processed_jobs": self.processed_jobs,
                "skipped_jobs": self.skipped_jobs,
                "failed_jobs": self.failed_jobs,
                "duration_s": self.duration_s,
            },
            indent=indent,
        )

