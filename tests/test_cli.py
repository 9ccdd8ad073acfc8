#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""CLI behaviour: flags, dry runs, reports and exit codes."""
from __future__ import annotations

import io
import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rich.console import Console  # noqa: E402

from consolidate import DiscoveryError  # noqa: E402
from consolidate.cli import Consolidator, main  # noqa: E402
from consolidate.logging.helpers import reset_base_logger  # noqa: E402

BUILD_SCRIPT = Path(__file__).resolve().parent / "tools" / "build_fixtures.py"


def _console() -> Console:
    return Console(file=io.StringIO(), width=160, color_system=None, highlight=False)


class CliBase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.root = self.tmp / "project"
        subprocess.check_call(
            [sys.executable, str(BUILD_SCRIPT), str(self.root)], stdout=subprocess.DEVNULL
        )

    def tearDown(self) -> None:
        reset_base_logger()
        self._tmp.cleanup()

    def run_cli(self, *args: str, console: Console | None = None):
        return Consolidator.run(["-r", str(self.root), *args], console=console)


class RunTests(CliBase):
    def test_quiet_run_returns_summary(self) -> None:
        summary = self.run_cli("-q")
        self.assertEqual(
            (summary.total_files, summary.processed_jobs, summary.skipped_jobs), (24, 8, 2)
        )
        self.assertTrue((self.root / "ALL/ts/1_ALL_MAIN_FILES.ts").exists())

    def test_console_output(self) -> None:
        console = _console()
        self.run_cli(console=console)
        out = console.file.getvalue()
        self.assertIn("Consolidate!!!", out)
        self.assertIn("Appending: ./src/app.ts", out)
        self.assertIn("Consolidation complete!!!", out)
        self.assertIn("✓ Successfully consolidated 24 files across 8 jobs.", out)
        self.assertIn("(2 jobs skipped).", out)

    def test_job_filter(self) -> None:
        summary = self.run_cli("-q", "-j", "config")
        self.assertEqual((summary.total_files, summary.processed_jobs), (10, 2))
        self.assertTrue((self.root / "ALL/txt/2_ALL_CONFIG.txt").exists())
        self.assertFalse((self.root / "ALL/ts/1_ALL_MAIN_FILES.ts").exists())

    def test_unknown_job_is_usage_error(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli("-q", "-j", "NOPE")
        self.assertEqual(ctx.exception.code, 2)

    def test_dry_run_writes_nothing(self) -> None:
        console = _console()
        self.assertIsNone(self.run_cli("-n", console=console))
        out = console.file.getvalue()
        self.assertIn("./ALL/ts/1_ALL_MAIN_FILES.ts", out)
        self.assertIn("(4 files)", out)
        self.assertIn("./src/utils/helpers.ts", out)
        self.assertIn("(0 files)", out)
        self.assertFalse((self.root / "ALL").exists())

    def test_report_file(self) -> None:
        report = self.tmp / "report.json"
        self.run_cli("-q", "--report", str(report))
        data = json.loads(report.read_text(encoding="utf-8"))
        self.assertEqual(data["total_files"], 24)
        self.assertEqual(data["skipped_jobs"], 2)


class MainExitCodeTests(CliBase):
    def test_success_exits_zero(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["-r", str(self.root), "-q"])
        self.assertEqual(ctx.exception.code, 0)

    def test_missing_root_exits_one(self) -> None:
        with self.assertLogs("consolidate", level="ERROR"):
            with self.assertRaises(SystemExit) as ctx:
                main(["-r", str(self.tmp / "missing"), "-q"])
        self.assertEqual(ctx.exception.code, 1)

    def test_run_scoped_error_exits_one(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "DEBUG"}
        with patch.dict(os.environ, env, clear=True), patch("consolidate.cli.build_batch_runner") as build:
            build.return_value.run.side_effect = DiscoveryError("bad pattern")
            with self.assertLogs("consolidate", level="ERROR") as logs:
                with self.assertRaises(SystemExit) as ctx:
                    main(["-r", str(self.root), "-q"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertTrue(any("bad pattern" in line for line in logs.output))

    def test_debug_env_reraises(self) -> None:
        with patch.dict(os.environ, {"DEBUG": "1"}), patch("consolidate.cli.build_batch_runner") as build:
            build.return_value.run.side_effect = DiscoveryError("bad pattern")
            with self.assertRaises(DiscoveryError):
                main(["-r", str(self.root), "-q"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
