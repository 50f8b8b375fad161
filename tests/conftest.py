"""Root test configuration: isolate each test from the caller's environment"""

import logging

import pytest

from docstore.config import Settings
from docstore.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run from an empty tmp directory with no DOCSTORE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by setup_logging so tests do not leak them."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
