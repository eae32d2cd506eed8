from __future__ import annotations

import logfire

from missive import VERSION, configure_logging
from missive import log


def test_configure_logging_without_token(monkeypatch):
    captured = {}
    monkeypatch.setattr(
        logfire, 'configure', lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(
        log, 'env', log.env.model_copy(update={'logfire_token': '', 'dev': False}))

    configure_logging()

    assert captured['service_name'] == 'missive'
    assert captured['service_version'] == VERSION
    assert captured['token'] is None
    assert captured['send_to_logfire'] == 'if-token-present'
    assert captured['console'] is False


def test_configure_logging_in_dev(monkeypatch):
    captured = {}
    monkeypatch.setattr(
        logfire, 'configure', lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(
        log, 'env', log.env.model_copy(update={'logfire_token': 'tok', 'dev': True}))

    configure_logging()

    assert captured['service_name'] == 'missive-dev'
    assert captured['token'] == 'tok'
    assert captured['environment'] == 'development'
    assert captured['console'] is None
