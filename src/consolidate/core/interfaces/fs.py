from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class PathMatcherProtocol(Protocol):
    def find_files(self, patterns: Sequence[str], output_file: str) -> list[str]:
        ...


@runtime_checkable
class ContentFramerProtocol(Protocol):
    def frame(self, path: str) -> str:
        ...


@runtime_checkable
class OutputWriterProtocol(Protocol):
    def write(self, output_file: str, content: str) -> None:
        ...
