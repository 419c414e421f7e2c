from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stream output and the resulting permission bits on disk.
"""

import json
import os
import stat
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "permwalk" / "main.py"

pytestmark = pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    HOME is redirected so the saved configuration never leaks in or out.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_recursive_json(sample_tree: Path, tmp_path: Path) -> None:
    result = run_cli([str(sample_tree), "750", "-R", "--json"], home=tmp_path)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["changed"][0] == str(sample_tree)
    assert data["changed"][1] == str(sample_tree / "file1.txt")
    assert stat.S_IMODE((sample_tree / "docs" / "nested").stat().st_mode) == 0o750


def test_cli_refuses_unreadable_owner(sample_tree: Path, tmp_path: Path) -> None:
    result = run_cli([str(sample_tree), "055"], home=tmp_path)

    assert result.returncode == 1
    assert "owner must keep read permission" in result.stderr


def test_cli_missing_path(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "missing"), "755"], home=tmp_path)

    assert result.returncode == 2
    assert "Path does not exist" in result.stderr
