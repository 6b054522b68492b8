"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attached so they never outlive a CliRunner stream."""
    yield
    logger = logging.getLogger("pfind")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small tree: root/a.txt, root/b/, root/b/c.txt."""
    root = tmp_path / "root"
    (root / "b").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b" / "c.txt").write_text("c")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Wider tree mixing cases and depths.

    Layout::

        tree/
            README.md
            docs/Guide.MD
            docs/notes.txt
            src/app/main.py
            src/app/util.py
            src/app/deep/er/still/leaf.py
            empty/
    """
    root = tmp_path / "tree"
    for rel in (
        "README.md",
        "docs/Guide.MD",
        "docs/notes.txt",
        "src/app/main.py",
        "src/app/util.py",
        "src/app/deep/er/still/leaf.py",
    ):
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rel)
    (root / "empty").mkdir()
    return root
