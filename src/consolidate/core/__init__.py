from __future__ import annotations

"""Public surface for consolidate.core.

Exposes the error hierarchy and protocol types from a stable import location:

    from consolidate.core import DiscoveryError, PresenterProtocol, ...

Data classes live in ``consolidate.core.models`` and the static job table in
``consolidate.core.jobs``; they are not re-exported here so that utility
modules can import the errors without pulling the models in.
"""

from consolidate.core.errors import (
    ConsolidationError,
    DiscoveryError,
    FileReadError,
    FileWriteError,
    JobError,
)
from consolidate.core.interfaces import (
    ContentFramerProtocol,
    OutputWriterProtocol,
    PathMatcherProtocol,
    PresenterProtocol,
)

__all__ = [
    # Errors
    "ConsolidationError",
    "DiscoveryError",
    "JobError",
    "FileReadError",
    "FileWriteError",
    # Protocols
    "ContentFramerProtocol",
    "OutputWriterProtocol",
    "PathMatcherProtocol",
    "PresenterProtocol",
]
