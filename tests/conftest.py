"""Test configuration and fixtures for dendro."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree.

    project/
        node_modules/
            broken-link -> missing
            lib.js
        src/
            utils/
                helpers.py
            main.js
        .env
        b.txt
        a.txt
        package-lock.json
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "utils").mkdir()
    (root / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (root / "src" / "main.js").write_text("console.log('hi')\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "lib.js").write_text("module.exports = {}\n")
    (root / "node_modules" / "broken-link").symlink_to(root / "node_modules" / "missing")
    (root / ".env").write_text("SECRET=1\n")
    (root / "b.txt").write_text("b\n")
    (root / "a.txt").write_text("a\n")
    (root / "package-lock.json").write_text("{}\n")
    return root
