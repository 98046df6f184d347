"""Shared fixtures for Scaffolder tests."""

import pytest

from golessons.scaffolder import Scaffolder


class FakeConsole:
    """Records info and warning messages instead of printing them."""

    def __init__(self):
        self.infos = []
        self.warnings = []

    def info(self, message):
        self.infos.append(message)

    def warn(self, message):
        self.warnings.append(message)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def scaffolder(tmp_path, console):
    return Scaffolder(str(tmp_path), console)
