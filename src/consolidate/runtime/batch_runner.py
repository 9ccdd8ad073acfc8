from __future__ import annotations

import logging
from typing import Optional, Sequence

from consolidate.core.errors import JobError
from consolidate.core.interfaces import PresenterProtocol
from consolidate.core.models import Job, RunSummary
from consolidate.logging.helpers import get_logger
from consolidate.runtime.job_runner import JobRunner


class BatchRunner:
    """Runs jobs strictly in sequence and accumulates a RunSummary.

    Job-scoped errors are reported and counted, then the batch continues.
    DiscoveryError is not caught here: a malformed pattern aborts the run.
    """

    def __init__(self, *, job_runner: JobRunner, presenter: PresenterProtocol, logger: Optional[logging.Logger] = None) -> None:
        self._job_runner = job_runner
        self._presenter = presenter
        self._log = logger or get_logger('runtime.batch')

    def run(self, jobs: Sequence[Job]) -> RunSummary:
        summary = RunSummary()
        for job in jobs:
            try:
                result = self._job_runner.run(job)
            except JobError as exc:
                self._log.error('⚠  job %s aborted: %s', job.name, exc)
                self._presenter.job_failed(job.label, exc)
                summary.record_failure()
                continue
            summary.record(result)

        summary.finish()
        self._log.debug(
            'run finished: %d files, %d processed, %d skipped, %d failed',
            summary.total_files, summary.processed_jobs, summary.skipped_jobs, summary.failed_jobs,
        )
        if summary.total_files > 0:
            self._presenter.final_summary(summary)
        return summary
