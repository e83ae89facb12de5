"""Shared fixtures for the LeakScan test suite."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from leakscan.utils.config import Config  # noqa: E402

AWS_KEY = "AKIA1234567890123456"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and LEAKSCAN_* variables out of tests."""
    home = tmp_path / "home" / ".leakscan"
    monkeypatch.setattr(Config, "USER_CONFIG_DIR", home)
    monkeypatch.setattr(Config, "USER_CONFIG_FILE", home / "config.yml")
    for var in ("LEAKSCAN_WORKERS", "LEAKSCAN_OUTPUT_FORMAT", "LEAKSCAN_OUTPUT_DIR", "LEAKSCAN_VERBOSE"):
        # setenv first so teardown removes values exported by load_env
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield
    logging.getLogger("leakscan").handlers.clear()


@pytest.fixture
def aws_detector():
    return {"Amazon AWS Access Key ID": "AKIA[0-9A-Z]{16}"}


@pytest.fixture
def project(tmp_path):
    """Small tree with matches in two files and one clean file."""
    root = tmp_path / "project"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text(f"first line\nsecond line\nkey = {AWS_KEY}\n")
    (root / "sub" / "b.cfg").write_text(f"{AWS_KEY}\nnothing\n{AWS_KEY} {AWS_KEY}\n")
    (root / "clean.md").write_text("# readme\n")
    return root
