from __future__ import annotations

import pytest
from pydantic import ValidationError

from missive.enums import DecodeMode
from missive.env import Env


def test_defaults(monkeypatch):
    for name in (
        'MISSIVE_DECODE_MODE',
        'MISSIVE_MAX_COMPONENT_DEPTH',
        'MISSIVE_DEV',
        'LOGFIRE_TOKEN'
    ):
        monkeypatch.delenv(name, raising=False)

    env = Env.new()

    assert env.decode_mode is DecodeMode.LENIENT
    assert env.max_component_depth == 8
    assert env.dev is True
    assert env.logfire_token == ''


def test_overrides(monkeypatch):
    monkeypatch.setenv('MISSIVE_DECODE_MODE', 'STRICT')
    monkeypatch.setenv('MISSIVE_MAX_COMPONENT_DEPTH', '3')
    monkeypatch.setenv('MISSIVE_DEV', '0')

    env = Env.new()

    assert env.decode_mode is DecodeMode.STRICT
    assert env.max_component_depth == 3
    assert env.dev is False


def test_invalid_values(monkeypatch):
    monkeypatch.setenv('MISSIVE_DECODE_MODE', 'sloppy')

    with pytest.raises(ValidationError):
        Env.new()


def test_depth_must_be_positive(monkeypatch):
    monkeypatch.setenv('MISSIVE_MAX_COMPONENT_DEPTH', '0')

    with pytest.raises(ValidationError):
        Env.new()
