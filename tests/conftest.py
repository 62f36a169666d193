"""Test configuration helpers."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Drop handlers the CLI installs so tests do not leak into each other."""

    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        # pytest's own capture handlers are subclasses; leave those alone.
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
