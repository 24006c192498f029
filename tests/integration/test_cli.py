"""Integration tests for the command-line interface.

These run the installed ``dendro`` entry point in a subprocess and are skipped
unless pytest is given --run-cli-tests.
"""

import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_dendro(*args):
    return subprocess.run(
        [sys.executable, "-m", "dendro.cli.main", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_renders_tree(sample_project):
    result = run_dendro("--no-icons", str(sample_project))
    assert result.returncode == 0
    assert "└── project" in result.stdout
    assert "node_modules" not in result.stdout
    assert "3 directories, 5 files" in result.stdout


def test_cli_warns_about_unreadable_entries(sample_project):
    result = run_dendro("-a", "-P", "warn", str(sample_project))
    assert result.returncode == 0
    assert "WARNING: Error reading" in result.stderr
    assert "broken-link" in result.stderr


def test_cli_unreadable_root(tmp_path):
    result = run_dendro(str(tmp_path / "missing"))
    assert result.returncode == 1
    assert "Could not read directory" in result.stderr


def test_cli_version():
    result = run_dendro("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("dendro ")


def test_cli_broken_pipe(sample_project):
    producer = subprocess.Popen(
        [sys.executable, "-m", "dendro.cli.main", "-a", str(sample_project)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    producer.stdout.close()
    _, stderr = producer.communicate()
    assert producer.returncode in (0, 141)
    assert b"Traceback" not in stderr
