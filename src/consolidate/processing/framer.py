from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from consolidate.core.errors import FileReadError
from consolidate.core.interfaces import ContentFramerProtocol
from consolidate.core.models import FramingStyle
from consolidate.logging.helpers import get_logger, trace_io


class ContentFramer(ContentFramerProtocol):
    """Wraps one source file in start/end banners followed by two divider lines.

    Layout for a file ``p`` with N = ``style.newline_count``::

        N newlines
        //■■■ Start of file: p ■■■
        2N + 1 newlines
        <raw content>
        2N + 1 newlines
        //■■■ End of file: p ■■■
        N newlines
        //████████
        //████████
    """

    def __init__(self, root: Path, *, style: Optional[FramingStyle] = None, logger: Optional[logging.Logger] = None) -> None:
        self._root = Path(root)
        self._style = style or FramingStyle()
        self._log = logger or get_logger('processing.framer')

    @property
    def style(self) -> FramingStyle:
        return self._style

    def start_banner(self, path: str) -> str:
        st = self._style
        space = st.spacer_glyph * st.spacer_width
        return f'{st.comment_prefix}{space} Start of file: {path} {space}'

    def end_banner(self, path: str) -> str:
        st = self._style
        space = st.spacer_glyph * st.spacer_width
        return f'{st.comment_prefix}{space} End of file: {path} {space}'

    def file_divider(self) -> str:
        st = self._style
        return f'{st.comment_prefix}{st.divider_glyph * st.divider_width}\n'

    def read(self, path: str) -> str:
        target = self._root / path
        try:
            # Bytes are decoded as-is: line endings survive, undecodable bytes are replaced.
            content = target.read_bytes().decode('utf-8', errors='replace')
        except OSError as exc:
            raise FileReadError(f'cannot read {path}: {exc.strerror or exc}', path=path) from exc
        trace_io(self._log, 'read source', path=path, chars=len(content))
        return content

    def frame(self, path: str) -> str:
        content = self.read(path)
        end_line = '\n' * self._style.newline_count
        divider = self.file_divider()
        start = f'{end_line}{self.start_banner(path)}{end_line}{end_line}\n'
        end = f'\n{end_line}{end_line}{self.end_banner(path)}{end_line}\n'
        return f'{start}{content}{end}{divider}{divider}'
