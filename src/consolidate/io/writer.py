from __future__ import annotations

"""
Atomic output writes.

The consolidated text is written to a temporary file beside the target and
moved into place with ``os.replace``. A failed write removes the temporary
file and leaves any previous output untouched.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Callable, Optional

from consolidate.core.errors import FileWriteError
from consolidate.core.interfaces import OutputWriterProtocol
from consolidate.logging.helpers import get_logger, trace_io


def _target_mode(target: Path) -> int:
    """Permission bits for *target*: kept when it exists, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class AtomicOutputWriter(OutputWriterProtocol):
    def __init__(
        self,
        root: Path,
        *,
        on_directory_created: Optional[Callable[[str], None]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._root = Path(root)
        self._on_dir = on_directory_created
        self._log = logger or get_logger('io.writer')

    def ensure_directory(self, output_file: str) -> Path:
        """Create the parent directory of *output_file* if missing and return it."""
        parent = (self._root / output_file).parent
        if parent.is_dir():
            return parent
        rel = os.path.dirname(output_file) or '.'
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileWriteError(f'cannot create directory {rel}: {exc.strerror or exc}', path=rel) from exc
        self._log.debug('created directory %s', parent)
        if self._on_dir is not None:
            self._on_dir(rel)
        return parent

    def write(self, output_file: str, content: str) -> None:
        target = self._root / output_file
        parent = self.ensure_directory(output_file)
        tmp_name: Optional[str] = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f'.{target.name}.', suffix='.tmp', dir=parent)
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as fh:
                fh.write(content)
            os.chmod(tmp_name, _target_mode(target))
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as exc:
            raise FileWriteError(f'cannot write {output_file}: {exc.strerror or exc}', path=output_file) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        trace_io(self._log, 'wrote output', path=output_file, chars=len(content))
