from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from rich.console import Console
from rich.text import Text

from consolidate.constants import ENV_JSON_LOGS
from consolidate.core.errors import ConsolidationError
from consolidate.core.interfaces import LoggerFactoryProtocol, PresenterProtocol
from consolidate.core.jobs import default_jobs, select_jobs
from consolidate.core.models import Job, RunSummary
from consolidate.logging.factory import DefaultLoggerFactory
from consolidate.logging.helpers import get_logger
from consolidate.parsing.parser import _build_parser
from consolidate.presentation import NullPresenter, RichPresenter
from consolidate.runtime.wiring import build_batch_runner, build_config, build_job_runner


logger = get_logger('consolidate')


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    global logger
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = factory.get_logger('consolidate')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _resolve_jobs(parser: argparse.ArgumentParser, names: Optional[Sequence[str]]) -> tuple[Job, ...]:
    jobs = default_jobs()
    if not names:
        return jobs
    try:
        return select_jobs(jobs, names)
    except KeyError as exc:
        parser.error(f'unknown job name(s): {exc.args[0]}')


def _dry_run(root: Path, jobs: Sequence[Job], console: Console) -> None:
    """Print what each job would consolidate without touching the filesystem."""
    cfg = build_config(root=root, presenter=NullPresenter(), logger=logger)
    runner = build_job_runner(cfg)
    for job in jobs:
        files = runner.discover(job)
        header = Text.assemble((job.label, 'bold'), f' → {job.output_file} ', (f'({len(files)} files)', 'cyan'))
        console.print(header)
        for path in files:
            console.print(Text(f'\t{path}'))


def _write_report(path: str, summary: RunSummary) -> None:
    try:
        Path(path).write_text(summary.to_json() + '\n', encoding='utf-8')
    except OSError as exc:
        _fatal(f'cannot write report {path}: {exc.strerror or exc}')


class Consolidator:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, console: Optional[Console] = None) -> Optional[RunSummary]:
        """Run the tool with an argv-like sequence.

        Returns the RunSummary, or None for a dry run.
        """
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        json_logs = ns.json_logs or os.getenv(ENV_JSON_LOGS) == '1'
        _configure_logging(json_logs, logging.DEBUG if ns.verbose else logging.INFO)

        root = Path(ns.root)
        if not root.is_dir():
            _fatal(f'project root {root} is not a directory')

        jobs = _resolve_jobs(parser, ns.jobs)
        console = console or Console(highlight=False)

        if ns.dry_run:
            _dry_run(root, jobs, console)
            return None

        presenter: PresenterProtocol = NullPresenter() if ns.quiet else RichPresenter(console)
        presenter.display_header()
        cfg = build_config(root=root, presenter=presenter, logger=logger)
        summary = build_batch_runner(cfg).run(jobs)

        if ns.report:
            _write_report(ns.report, summary)
        return summary


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `consolidate` console script."""
    try:
        Consolidator.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except ConsolidationError as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('✘ %s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
