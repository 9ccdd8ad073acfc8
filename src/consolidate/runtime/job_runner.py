from __future__ import annotations

import logging
from typing import List, Optional

from consolidate.core.interfaces import (
    ContentFramerProtocol,
    OutputWriterProtocol,
    PathMatcherProtocol,
    PresenterProtocol,
)
from consolidate.core.models import Job, JobResult
from consolidate.logging.helpers import get_logger


class JobRunner:
    """Runs one consolidation job: discover, frame every file, write once.

    Nothing touches the filesystem until all frames are assembled in memory,
    so a failed read leaves the previous output file exactly as it was.
    """

    def __init__(
        self,
        *,
        matcher: PathMatcherProtocol,
        framer: ContentFramerProtocol,
        writer: OutputWriterProtocol,
        presenter: PresenterProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._matcher = matcher
        self._framer = framer
        self._writer = writer
        self._presenter = presenter
        self._log = logger or get_logger('runtime.job')

    def discover(self, job: Job) -> List[str]:
        return self._matcher.find_files(job.patterns, job.output_file)

    def run(self, job: Job) -> JobResult:
        files = self.discover(job)
        if not files:
            self._log.debug('no files matched for %s, skipping', job.name)
            return JobResult(job=job, files_processed=0)

        self._presenter.job_started(job.label, job.output_file, len(files))

        parts: List[str] = []
        for path in files:
            parts.append(self._framer.frame(path))
            self._presenter.file_appended(path)

        self._writer.write(job.output_file, ''.join(parts))
        self._log.debug('✔ %s → %s (%d files)', job.name, job.output_file, len(files))
        self._presenter.job_completed()
        return JobResult(job=job, files_processed=len(files))
