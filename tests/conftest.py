from __future__ import annotations

import pytest

import jss
from jss.engine import Jss
from jss.model.context import InlineStyle


@pytest.fixture
def engine():
    """A fresh engine with its own counters and an empty plugin registry."""
    return Jss()


@pytest.fixture
def default_engine():
    """The process-wide engine, reset before and cleared after each test."""
    jss.default.uid.reset()
    jss.default.plugins.clear()
    yield jss.default
    jss.default.plugins.clear()


class PickyStyle(InlineStyle):
    """Inline style that ignores values it does not support, like a browser."""

    def __init__(self, unsupported: set[str] | None = None) -> None:
        super().__init__()
        self.unsupported = unsupported or set()
        self.calls: list[tuple[str, object]] = []

    def set_property(self, name, value):
        self.calls.append((name, value))
        if value in self.unsupported:
            return
        super().set_property(name, value)


@pytest.fixture
def picky_style():
    """Factory for a PickyStyle rejecting the given values."""
    return PickyStyle
