from __future__ import annotations

from typing import Callable, Iterable

import pytest

from compound_interest.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("COMPOUND_INTEREST_LOG_LEVEL", "COMPOUND_INTEREST_CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def feed_input(monkeypatch) -> Callable[[Iterable[str]], None]:
    """Replace input() with a scripted sequence; running out behaves like Ctrl-D."""

    def _feed(answers: Iterable[str]) -> None:
        remaining = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
