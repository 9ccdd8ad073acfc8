from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from consolidate.core.errors import (
    ConsolidationError,
    DiscoveryError,
    FileReadError,
    FileWriteError,
    JobError,
)
from consolidate.core.interfaces import PresenterProtocol
from consolidate.core.jobs import IGNORE_LIST, SOURCE_DEFINITIONS, default_jobs, generate_jobs_for_type
from consolidate.core.models import FramingStyle, Job, JobDefinition, JobResult, RunSummary
from consolidate.discovery.path_matcher import PathMatcher
from consolidate.processing.framer import ContentFramer
from consolidate.presentation import NullPresenter, RecordingPresenter, RichPresenter
from consolidate.runtime.batch_runner import BatchRunner
from consolidate.runtime.job_runner import JobRunner
from consolidate.runtime.wiring import build_batch_runner, build_config

__version__ = '1.0.0'


def consolidate(
    root: str | Path = '.',
    jobs: Optional[Sequence[Job]] = None,
    *,
    presenter: Optional[PresenterProtocol] = None,
    ignore: Optional[Sequence[str]] = None,
    style: Optional[FramingStyle] = None,
) -> RunSummary:
    """Run *jobs* (the static table by default) under *root* and return the summary.

    Output is silent unless a presenter is given.
    """
    cfg = build_config(root=root, presenter=presenter or NullPresenter(), ignore=ignore, style=style)
    return build_batch_runner(cfg).run(default_jobs() if jobs is None else jobs)


__all__ = [
    'consolidate',
    'ConsolidationError',
    'DiscoveryError',
    'JobError',
    'FileReadError',
    'FileWriteError',
    'FramingStyle',
    'Job',
    'JobDefinition',
    'JobResult',
    'RunSummary',
    'IGNORE_LIST',
    'SOURCE_DEFINITIONS',
    'default_jobs',
    'generate_jobs_for_type',
    'PathMatcher',
    'ContentFramer',
    'JobRunner',
    'BatchRunner',
    'NullPresenter',
    'RecordingPresenter',
    'RichPresenter',
]
