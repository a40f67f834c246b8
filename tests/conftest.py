"""Shared fixtures for the detector tests."""

import logging
import os

import pytest

from domain_name.registry import TLDRegistry

ENV_KEYS = ("TLDS_FILE", "OUT_DIR", "ENABLE_EXCEL", "WORKERS", "LOG_LEVEL", "LOG_FILE")


@pytest.fixture
def registry():
    """Small registry with a compound-capable pair (com + cn) and an IDN TLD."""
    return TLDRegistry.from_lines(["com\n", "net\n", "org\n", "cn\n", "uk\n", "co\n", "中国\n", "xn--fiqs8s\n"])


@pytest.fixture
def tlds_file(tmp_path):
    """TLD list on disk, one TLD per line."""
    path = tmp_path / "tlds.txt"
    path.write_text("com\nnet\ncn\n", encoding="utf-8")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Drop detector settings from the environment, including any a .env load adds."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def restore_logging():
    """setup_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
