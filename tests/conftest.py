"""Shared pytest fixtures: a recording surface and country payload builders."""

from __future__ import annotations

from typing import Any, Sequence

import pytest

from global_explorer.domain.models import Country
from global_explorer.ui.surface import CountryCard, CountryDetail, PaginationState


class RecordingSurface:
    """Keeps the latest render instruction of each kind."""

    def __init__(self) -> None:
        self.cards: list[CountryCard] | None = None
        self.no_results: str | None = None
        self.pagination: PaginationState | None = None
        self.count: str | None = None
        self.suggestions: list[str] = []
        self.suggestions_visible = False
        self.details: list[CountryDetail] = []
        self.busy_changes: list[bool] = []
        self.notices: list[str] = []
        self.stars = 0
        self.rating_text = ""
        self.comment = "draft"
        self.acknowledgment: str | None = None
        self.closed = 0

    def show_countries(self, cards: Sequence[CountryCard]) -> None:
        self.cards = list(cards)
        self.no_results = None

    def show_no_results(self, message: str) -> None:
        self.cards = []
        self.no_results = message

    def clear_countries(self) -> None:
        self.cards = None
        self.no_results = None

    def show_pagination(self, state: PaginationState) -> None:
        self.pagination = state

    def hide_pagination(self) -> None:
        self.pagination = None

    def show_count(self, text: str) -> None:
        self.count = text

    def show_suggestions(self, items: Sequence[str]) -> None:
        self.suggestions = list(items)
        self.suggestions_visible = True

    def hide_suggestions(self) -> None:
        self.suggestions = []
        self.suggestions_visible = False

    def show_detail(self, detail: CountryDetail) -> None:
        self.details.append(detail)

    def set_busy(self, busy: bool) -> None:
        self.busy_changes.append(busy)

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def set_stars(self, active: int) -> None:
        self.stars = active

    def set_rating_text(self, text: str) -> None:
        self.rating_text = text

    def set_comment(self, text: str) -> None:
        self.comment = text

    def show_acknowledgment(self, message: str) -> None:
        self.acknowledgment = message

    def hide_acknowledgment(self) -> None:
        self.acknowledgment = None

    def close_feedback(self) -> None:
        self.closed += 1


def build_payload(name: str, code: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": {"common": name, "official": f"Republic of {name}"},
        "cca2": code,
        "capital": [f"{name} City"],
        "region": "Europe",
        "subregion": "Western Europe",
        "population": 1_000_000,
        "area": 1234.5,
        "timezones": ["UTC+01:00"],
        "idd": {"root": "+3", "suffixes": ["9"]},
        "flags": {"png": f"https://flags.example/{code.lower()}.png"},
        "coatOfArms": {"png": f"https://coa.example/{code.lower()}.png"},
        "maps": {"googleMaps": f"https://maps.example/{code}"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def payload_factory():
    return build_payload


@pytest.fixture
def country_factory():
    def _make(name: str, code: str | None = None, **overrides: Any) -> Country:
        return Country.from_api(build_payload(name, code or name[:2].upper(), **overrides))

    return _make
