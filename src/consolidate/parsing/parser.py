# consolidate/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    The job table itself is static; flags only choose the project root,
    narrow the table down to some jobs, and tune console and log output.
    """
    from consolidate import __version__

    p = argparse.ArgumentParser(
        prog="consolidate",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "consolidate – concatenate project files into one framed dump per job\n"
            "Every job writes ./ALL/ts/<n>_ALL_<NAME>.ts and ./ALL/txt/<n>_ALL_<NAME>.txt "
            "under the project root."
        ),
    )

    g_run = p.add_argument_group("Run selection")
    g_out = p.add_argument_group("Output & logging")

    g_run.add_argument(
        "-r",
        "--root",
        metavar="DIR",
        dest="root",
        default=".",
        help="Project root that patterns are expanded against (default: current directory).",
    )
    g_run.add_argument(
        "-j",
        "--job",
        metavar="NAME",
        action="append",
        dest="jobs",
        help=(
            "Run only the job(s) with this definition NAME (e.g. CONFIG). Repeatable. "
            "Both output formats of a selected job run; output numbering is unchanged."
        ),
    )
    g_run.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="List the files each job would consolidate and exit without writing anything.",
    )

    g_out.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress console presentation (header, progress, summary). Errors are still logged.",
    )
    g_out.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also enabled by CONSOLIDATE_JSON_LOGS=1).",
    )
    g_out.add_argument(
        "--report",
        metavar="FILE",
        dest="report",
        help="Write the run summary as JSON to FILE.",
    )
    g_out.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
