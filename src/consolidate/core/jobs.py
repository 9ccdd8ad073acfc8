from __future__ import annotations

"""
Static job table.

Each definition is validated when this module is imported, so a malformed
pattern surfaces as a DiscoveryError before any job runs. Jobs are produced
once per output format: the TypeScript mirror under ``./ALL/ts/`` and the
plain-text mirror under ``./ALL/txt/``.
"""

from typing import Sequence, Tuple

from consolidate.constants import TEXT_OUTPUT_DIR, TS_OUTPUT_DIR
from consolidate.core.models import Job, JobDefinition

SOURCE_DEFINITIONS: Tuple[JobDefinition, ...] = (
    JobDefinition(
        name='MAIN_FILES',
        display_label='Main Project TypeScript and JavaScript Files',
        patterns=(
            './src/**/*.ts',
            './src/**/*.js',
            './index.ts',
            './Consolidate.ts',
        ),
    ),
    JobDefinition(
        name='CONFIG',
        display_label='Configuration Files and Markdown',
        patterns=(
            './.vscode/launch.json',
            './.vscode/settings.json',
            './.gitignore',
            './*.json',
            './*.config.ts',
            './git-push.sh',
        ),
    ),
    JobDefinition(
        name='NEW_TEST',
        display_label='New Test Files',
        patterns=(
            './test/**/*.test.ts',
        ),
    ),
    JobDefinition(
        name='OLD_TEST',
        display_label='Old Test Files',
        patterns=(
            './test_old/**/*.ts',
            './test_old/**/*.test.ts',
        ),
    ),
    JobDefinition(
        name='MARKDOWN',
        display_label='Project Markdown Files',
        patterns=(
            './0. NOTES/*.md',
            './License',
            './README.md',
        ),
    ),
)

IGNORE_LIST: Tuple[str, ...] = (
    'coverage/**',
    'node_modules/**',
    'ALL/**',
)

OUTPUT_FORMATS: Tuple[Tuple[str, str], ...] = (
    (TS_OUTPUT_DIR, 'ts'),
    (TEXT_OUTPUT_DIR, 'txt'),
)


def output_file_for(output_dir: str, index: int, definition: JobDefinition, extension: str) -> str:
    """Return ``<output_dir><index+1>_ALL_<NAME>.<extension>``."""
    if not output_dir.endswith('/'):
        output_dir += '/'
    return f'{output_dir}{index + 1}_ALL_{definition.output_stem}.{extension}'


def generate_jobs_for_type(
    output_dir: str,
    extension: str,
    definitions: Sequence[JobDefinition] = SOURCE_DEFINITIONS,
) -> list[Job]:
    return [
        Job(definition=d, output_file=output_file_for(output_dir, i, d, extension))
        for i, d in enumerate(definitions)
    ]


def default_jobs(definitions: Sequence[JobDefinition] = SOURCE_DEFINITIONS) -> Tuple[Job, ...]:
    """Every definition once per output format, TypeScript mirror first."""
    jobs: list[Job] = []
    for output_dir, extension in OUTPUT_FORMATS:
        jobs.extend(generate_jobs_for_type(output_dir, extension, definitions))
    return tuple(jobs)


def select_jobs(jobs: Sequence[Job], names: Sequence[str]) -> Tuple[Job, ...]:
    """Keep the jobs whose definition name is in *names* (case-insensitive).

    Output numbering comes from the full table, so a filtered run writes to
    the same files as a full one.

    Raises:
        KeyError: if a requested name matches no job.
    """
    wanted = {n.strip().upper() for n in names}
    unknown = sorted(wanted - {job.name.upper() for job in jobs})
    if unknown:
        raise KeyError(', '.join(unknown))
    return tuple(job for job in jobs if job.name.upper() in wanted)
