"""Shared test fixtures for md2html."""

import logging
import os
from unittest.mock import patch

import pytest

from md2html.config.models import Md2HtmlConfig

SAMPLE_MARKDOWN = b"# Title\n\nHello.\n"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty cwd with no user or env config in reach."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MD2HTML_CONFIG", raising=False)
    yield workdir


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("md2html")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_config():
    return Md2HtmlConfig()


@pytest.fixture
def sample_markdown(tmp_path):
    """A small Markdown document outside the working directory."""
    docs = tmp_path / "docs"
    docs.mkdir()
    path = docs / "readme.md"
    path.write_bytes(SAMPLE_MARKDOWN)
    return path


@pytest.fixture
def deny_stat():
    """Return a patcher that makes os.stat fail with EACCES for one path only."""
    real_stat = os.stat

    def _install(target):
        denied = os.fspath(target)

        def _stat(path, *args, **kwargs):
            if os.fspath(path) == denied:
                raise PermissionError(13, "Permission denied", denied)
            return real_stat(path, *args, **kwargs)

        return patch("os.stat", side_effect=_stat)

    return _install
