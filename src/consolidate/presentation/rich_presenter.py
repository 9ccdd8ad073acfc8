from __future__ import annotations

"""Console presentation built on rich.

Header, per-job banners, per-file lines, a progress bar per job and a
double-boxed final summary. Label and path strings are wrapped in ``Text`` so
that brackets in file names are never read as console markup.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.text import Text

from consolidate.core.errors import JobError
from consolidate.core.interfaces import PresenterProtocol
from consolidate.core.models import RunSummary

TITLE = 'Consolidate!!!'
SUBTITLE = '*** PROJECT FILE CONSOLIDATOR SCRIPT ***'
BAR_WIDTH = 40


def format_summary(summary: RunSummary) -> str:
    msg = f'✓ Successfully consolidated {summary.total_files} files across {summary.processed_jobs} jobs.'
    if summary.skipped_jobs > 0:
        msg += f' ({summary.skipped_jobs} jobs skipped).'
    if summary.failed_jobs > 0:
        msg += f' ({summary.failed_jobs} jobs failed).'
    return msg


class RichPresenter(PresenterProtocol):
    def __init__(self, console: Optional[Console] = None, *, show_progress: bool = True) -> None:
        self._console = console or Console(highlight=False)
        self._show_progress = show_progress
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    @property
    def console(self) -> Console:
        return self._console

    def _rule(self) -> None:
        self._console.print()
        self._console.rule(style='bold')
        self._console.print()

    def _stop_progress(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task = None

    def display_header(self) -> None:
        self._rule()
        self._console.print(Text(TITLE, style='bold bright_yellow'), justify='center')
        self._console.print(Text(SUBTITLE, style='bold bright_magenta'), justify='center')
        self._rule()

    def job_started(self, label: str, output_file: str, total_files: int) -> None:
        self._console.print(
            Text.assemble(('Consolidating all project ', 'cyan'), (label, 'red underline')),
            justify='center',
        )
        self._console.print(Text(f'files into {output_file}...', style='cyan'), justify='center')
        self._console.print()
        if not self._show_progress:
            return
        self._progress = Progress(
            TextColumn('  processing'),
            BarColumn(bar_width=BAR_WIDTH),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=self._console,
        )
        self._progress.start()
        self._task = self._progress.add_task('processing', total=total_files)

    def directory_created(self, path: str) -> None:
        self._console.print(Text(f'\tCreating directory: {path}', style='yellow'))

    def file_appended(self, path: str) -> None:
        self._console.print(Text.assemble(('\tAppending: ', 'blue'), path))
        if self._progress is not None and self._task is not None:
            self._progress.advance(self._task)

    def job_completed(self) -> None:
        self._stop_progress()
        self._console.print()
        self._console.print(Text('Consolidation complete!!!', style='bold yellow'), justify='center')
        self._rule()

    def job_failed(self, label: str, error: JobError) -> None:
        self._stop_progress()
        self._console.print(
            Text.assemble(('✘ ', 'bold red'), (label, 'red underline'), (f': {error}', 'red')),
            justify='center',
        )
        self._rule()

    def final_summary(self, summary: RunSummary) -> None:
        panel = Panel(
            Text(format_summary(summary), style='bold green'),
            box=box.DOUBLE,
            border_style='green',
            expand=False,
        )
        self._console.print(panel, justify='center')
        self._rule()
