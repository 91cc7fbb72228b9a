"""Tests for root logging setup."""

from __future__ import annotations

import logging

import pytest

from hello_fullstack.utils.log import LOG_FORMAT, configure_logging, ensure_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers, restored afterwards."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    return root


def test_ensure_logging_attaches_handler_when_none(bare_root):
    ensure_logging("INFO")
    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.INFO
    assert bare_root.handlers[0].formatter._fmt == LOG_FORMAT


def test_ensure_logging_leaves_existing_handlers(bare_root):
    existing = logging.NullHandler()
    bare_root.addHandler(existing)
    ensure_logging("DEBUG")
    assert bare_root.handlers == [existing]
    assert bare_root.level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info(bare_root):
    configure_logging("chatty")
    assert bare_root.level == logging.INFO
