from __future__ import annotations

from typing import Any, List, Tuple

from consolidate.core.interfaces import PresenterProtocol


class NullPresenter(PresenterProtocol):
    """Discards every notification (``--quiet``)."""

    def display_header(self) -> None:
        pass

    def job_started(self, label: str, output_file: str, total_files: int) -> None:
        pass

    def directory_created(self, path: str) -> None:
        pass

    def file_appended(self, path: str) -> None:
        pass

    def job_completed(self) -> None:
        pass

    def job_failed(self, label, error) -> None:
        pass

    def final_summary(self, summary) -> None:
        pass


class RecordingPresenter(PresenterProtocol):
    """Captures notifications as ``(event, args)`` tuples for headless runs."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Tuple[Any, ...]]] = []

    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def of(self, name: str) -> List[Tuple[Any, ...]]:
        return [args for ev, args in self.events if ev == name]

    def display_header(self) -> None:
        self.events.append(('display_header', ()))

    def job_started(self, label: str, output_file: str, total_files: int) -> None:
        self.events.append(('job_started', (label, output_file, total_files)))

    def directory_created(self, path: str) -> None:
        self.events.append(('directory_created', (path,)))

    def file_appended(self, path: str) -> None:
        self.events.append(('file_appended', (path,)))

    def job_completed(self) -> None:
        self.events.append(('job_completed', ()))

    def job_failed(self, label, error) -> None:
        self.events.append(('job_failed', (label, error)))

    def final_summary(self, summary) -> None:
        self.events.append(('final_summary', (summary,)))
