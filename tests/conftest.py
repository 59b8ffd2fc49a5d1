import logging
import os
import sys
import threading

import pytest

from threadsum.config import ENV_FIELDS, ENV_PREFIX

ENV_KEYS = [ENV_PREFIX + suffix for suffix in ENV_FIELDS]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    excepthook, thread_excepthook = sys.excepthook, threading.excepthook
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.excepthook, threading.excepthook = excepthook, thread_excepthook


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "absent.env")
