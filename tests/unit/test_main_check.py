from __future__ import annotations

import sys

import pytest

import main as cli


@pytest.fixture
def check_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "--check"])


def _stub_client(monkeypatch, credentials=True, available=True, generates=True):
    calls = []

    def test_generation():
        calls.append("generate")
        return generates

    monkeypatch.setattr(cli.llm_client, "has_credentials", lambda: credentials)
    monkeypatch.setattr(cli.llm_client, "is_available", lambda: available)
    monkeypatch.setattr(cli.llm_client, "test_generation", test_generation)
    return calls


def test_check_runs_generation(check_argv, monkeypatch):
    calls = _stub_client(monkeypatch)
    assert cli.main() == 0
    assert calls == ["generate"]


def test_check_fails_when_generation_fails(check_argv, monkeypatch):
    _stub_client(monkeypatch, generates=False)
    assert cli.main() == 1


def test_check_skips_generation_when_unreachable(check_argv, monkeypatch):
    calls = _stub_client(monkeypatch, available=False)
    assert cli.main() == 1
    assert calls == []


def test_check_without_key(check_argv, monkeypatch):
    calls = _stub_client(monkeypatch, credentials=False)
    assert cli.main() == 1
    assert calls == []
