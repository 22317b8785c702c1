"""Shared fixtures for the chromalab test suite."""

import random
import sys

import pytest


class StubRandom:
    """Random source that replays a fixed sequence of values, cycling forever."""

    def __init__(self, *values):
        self.values = values or (0.0,)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def run_cli(monkeypatch, capsys):
    """Run the console entry point with argv, returning (exit_code, stdout, stderr)."""
    from chromalab.main import main

    monkeypatch.setenv("COLORTERM", "truecolor")

    def run(*argv):
        monkeypatch.setattr(sys, "argv", ["chromalab", *argv])
        code = 0
        try:
            main()
        except SystemExit as exc:
            code = exc.code if exc.code is not None else 0
        out, err = capsys.readouterr()
        return code, out, err

    return run
