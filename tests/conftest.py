"""Shared fixtures: headless Qt and a fresh engine per test."""

import os

import pytest

# must be set before the first QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hotseat.game_logic import GameEngine  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine():
    return GameEngine()
