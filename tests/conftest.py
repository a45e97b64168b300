"""Shared fixtures: headless Qt and thread pool stand-ins."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ImmediateThreadPool:
    """Runs each runnable inline so signal delivery is synchronous."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)
        runnable.run()


class DeferredThreadPool:
    """Collects runnables; the test decides when (and in which order) they run."""

    def __init__(self):
        self.pending = []

    def start(self, runnable):
        self.pending.append(runnable)

    def run(self, index: int):
        self.pending[index].run()


@pytest.fixture
def immediate_pool():
    return ImmediateThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()


@pytest.fixture
def catalog_file(tmp_path):
    """Write a small well-formed language catalog and return its path."""
    path = tmp_path / "lang.json"
    path.write_text(
        '[{"code": "auto", "name": "Auto Detect"},'
        ' {"code": "en", "name": "English"},'
        ' {"code": "es", "name": "Spanish"},'
        ' {"code": "ja", "name": "Japanese"}]',
        encoding="utf-8",
    )
    return path
