"""Render instructions emitted by the browsing and feedback components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from global_explorer.domain.models import Country

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class CountryCard:
    code: str
    name: str
    capital: str
    region: str
    flag_url: str

    @classmethod
    def from_country(cls, country: Country) -> "CountryCard":
        return cls(
            code=country.code,
            name=country.common_name,
            capital=country.capital or NOT_AVAILABLE,
            region=country.region,
            flag_url=country.flag_url,
        )


@dataclass(frozen=True, slots=True)
class PaginationState:
    current_page: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True, slots=True)
class CountryDetail:
    code: str
    name: str
    official_name: str
    capital: str
    region: str
    subregion: str
    population: str
    area: str
    timezones: str
    dial_code: str
    map_url: str | None
    flag_url: str
    coat_of_arms_url: str

    @classmethod
    def from_country(cls, country: Country) -> "CountryDetail":
        return cls(
            code=country.code,
            name=country.common_name,
            official_name=country.official_name,
            capital=country.capital or NOT_AVAILABLE,
            region=country.region,
            subregion=country.subregion or NOT_AVAILABLE,
            population=f"{country.population:,}",
            area=f"{_format_number(country.area)} km²",
            timezones=", ".join(country.timezones),
            dial_code=country.dial_code or NOT_AVAILABLE,
            map_url=country.map_url,
            flag_url=country.flag_url,
            coat_of_arms_url=country.coat_of_arms,
        )


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


class BrowseSurface(Protocol):
    def show_countries(self, cards: Sequence[CountryCard]) -> None: ...

    def show_no_results(self, message: str) -> None: ...

    def clear_countries(self) -> None: ...

    def show_pagination(self, state: PaginationState) -> None: ...

    def hide_pagination(self) -> None: ...

    def show_count(self, text: str) -> None: ...

    def show_suggestions(self, items: Sequence[str]) -> None: ...

    def hide_suggestions(self) -> None: ...

    def show_detail(self, detail: CountryDetail) -> None: ...

    def set_busy(self, busy: bool) -> None: ...

    def notify(self, message: str) -> None: ...


class FeedbackSurface(Protocol):
    def set_stars(self, active: int) -> None: ...

    def set_rating_text(self, text: str) -> None: ...

    def set_comment(self, text: str) -> None: ...

    def show_acknowledgment(self, message: str) -> None: ...

    def hide_acknowledgment(self) -> None: ...

    def close_feedback(self) -> None: ...

    def notify(self, message: str) -> None: ...


__all__ = [
    "BrowseSurface",
    "CountryCard",
    "CountryDetail",
    "FeedbackSurface",
    "NOT_AVAILABLE",
    "PaginationState",
]
