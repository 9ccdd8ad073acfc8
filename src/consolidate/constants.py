from __future__ import annotations

"""Project-wide constants used across modules.

Output locations, framing defaults and environment switches live here so the
job table, the framer and the CLI agree on a single set of values.
"""

# Output trees. Trailing slash is part of the value; job output names are appended to it.
TS_OUTPUT_DIR: str = './ALL/ts/'
TEXT_OUTPUT_DIR: str = './ALL/txt/'

# Banner geometry for framed files.
START_END_SPACER: int = 30
START_END_NEWLINE: int = 2
FILE_DIVIDER_WIDTH: int = 100
SPACER_GLYPH: str = '■'
DIVIDER_GLYPH: str = '█'
COMMENT_PREFIX: str = '//'

# Environment switches.
ENV_JSON_LOGS: str = 'CONSOLIDATE_JSON_LOGS'
ENV_TRACE_IO: str = 'CONSOLIDATE_TRACE_IO'
ENV_VERSION: str = 'CONSOLIDATE_VERSION'
