"""Shared fixtures for the core tests."""

from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path
import random

import pytest

from flag_quiz.core.country_catalog import CountryCatalog
from flag_quiz.core.models import Country


class FakeScheduler:
    """Collects scheduled callbacks so tests decide when they fire."""

    def __init__(self) -> None:
        self.pending: list[tuple[int, Callable[[], None]]] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def run_pending(self) -> None:
        pending, self.pending = self.pending, []
        for _delay, callback in pending:
            callback()


def make_countries(names: list[str]) -> list[Country]:
    return [Country(name=name, flag_asset_ref=f"flags/{name.lower()}.svg") for name in names]


@pytest.fixture
def five_countries() -> list[Country]:
    return make_countries(["A", "B", "C", "D", "E"])


@pytest.fixture
def world_countries() -> list[Country]:
    return make_countries([f"Country {i:02d}" for i in range(30)])


@pytest.fixture
def world_catalog(world_countries, tmp_path) -> CountryCatalog:
    return CountryCatalog(world_countries, asset_root=tmp_path)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


@pytest.fixture
def write_listing(tmp_path) -> Callable[[object], Path]:
    def _write(payload: object) -> Path:
        path = tmp_path / "countries.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
