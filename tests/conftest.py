"""Shared test fixtures."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True, scope="session")
def _isolate_logging():
    """Keep CLI log records out of the captured command output.

    The CLI calls ``setup_logging(stderr=True)``; ``CliRunner`` mixes stderr
    into ``result.output``, so the patched version drops the stderr handler.
    An explicit ``--log-file`` is still honoured.
    """
    import strct.cli as _cli
    import strct.logging as _strct_logging

    _real_setup = _strct_logging.setup_logging

    def _test_setup(level="WARNING", log_file=None, stderr=False):
        return _real_setup(level=level, log_file=log_file, stderr=False)

    with patch.object(_cli, "setup_logging", _test_setup):
        logger = logging.getLogger("strct")
        logger.handlers.clear()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        yield


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Run with an empty HOME and CWD so no user strct.yaml is picked up."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STRCT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STRCT_LOG_FILE", raising=False)
    return tmp_path
