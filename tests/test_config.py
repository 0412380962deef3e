"""Tests for config module."""

from grdeval import config


def test_default_cutoff(monkeypatch):
    monkeypatch.delenv("GRDEVAL_CUTOFF", raising=False)
    assert config.get_default_cutoff() == 20


def test_cutoff_env_override(monkeypatch):
    monkeypatch.setenv("GRDEVAL_CUTOFF", "10")
    assert config.get_default_cutoff() == 10


def test_cutoff_env_invalid_falls_back(monkeypatch):
    monkeypatch.setenv("GRDEVAL_CUTOFF", "ten")
    assert config.get_default_cutoff() == 20


def test_cutoff_env_negative_falls_back(monkeypatch):
    monkeypatch.setenv("GRDEVAL_CUTOFF", "-3")
    assert config.get_default_cutoff() == 20
