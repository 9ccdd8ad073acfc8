from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from consolidate.core.interfaces import PresenterProtocol
from consolidate.core.jobs import IGNORE_LIST
from consolidate.core.models import FramingStyle
from consolidate.discovery.path_matcher import PathMatcher
from consolidate.io.writer import AtomicOutputWriter
from consolidate.logging.helpers import get_logger
from consolidate.processing.framer import ContentFramer
from consolidate.runtime.batch_runner import BatchRunner
from consolidate.runtime.job_runner import JobRunner


@dataclass(frozen=True)
class ConsolidatorConfig:
    """Immutable configuration blob used to assemble the runners."""
    root: Path
    presenter: PresenterProtocol
    ignore: Sequence[str] = IGNORE_LIST
    style: FramingStyle = FramingStyle()
    logger: Optional[logging.Logger] = None


def build_config(
    *,
    root: str | Path,
    presenter: PresenterProtocol,
    ignore: Optional[Sequence[str]] = None,
    style: Optional[FramingStyle] = None,
    logger: Optional[logging.Logger] = None,
) -> ConsolidatorConfig:
    return ConsolidatorConfig(
        root=Path(root),
        presenter=presenter,
        ignore=tuple(IGNORE_LIST if ignore is None else ignore),
        style=style or FramingStyle(),
        logger=logger,
    )


def build_job_runner(cfg: ConsolidatorConfig) -> JobRunner:
    log = cfg.logger or get_logger('runtime')
    return JobRunner(
        matcher=PathMatcher(root=cfg.root, ignore=cfg.ignore, logger=log.getChild('discovery')),
        framer=ContentFramer(cfg.root, style=cfg.style, logger=log.getChild('framer')),
        writer=AtomicOutputWriter(
            cfg.root,
            on_directory_created=cfg.presenter.directory_created,
            logger=log.getChild('writer'),
        ),
        presenter=cfg.presenter,
        logger=log.getChild('job'),
    )


def build_batch_runner(cfg: ConsolidatorConfig) -> BatchRunner:
    log = cfg.logger or get_logger('runtime')
    return BatchRunner(job_runner=build_job_runner(cfg), presenter=cfg.presenter, logger=log.getChild('batch'))
