from __future__ import annotations

"""
Protocol for console presentation.

One method per notification. The runners only ever call these methods, so any
object implementing them (a rich console, a recorder, a no-op) can be plugged
in without the core knowing how, or whether, anything is drawn.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from consolidate.core.errors import JobError
    from consolidate.core.models import RunSummary


@runtime_checkable
class PresenterProtocol(Protocol):
    def display_header(self) -> None:
        ...

    def job_started(self, label: str, output_file: str, total_files: int) -> None:
        ...

    def directory_created(self, path: str) -> None:
        ...

    def file_appended(self, path: str) -> None:
        """Report one framed file and advance the progress indicator."""
        ...

    def job_completed(self) -> None:
        ...

    def job_failed(self, label: str, error: JobError) -> None:
        ...

    def final_summary(self, summary: RunSummary) -> None:
        ...
