"""Name autocomplete over the in-memory country catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from global_explorer.config import AutocompleteSettings
from global_explorer.domain.models import Country
from global_explorer.services.pagination import PageView, PaginationController
from global_explorer.ui.surface import BrowseSurface
from global_explorer.utils.text import find_match, highlight, sort_by_name


@dataclass(frozen=True, slots=True)
class Suggestion:
    country: Country
    start: int
    length: int

    @property
    def name(self) -> str:
        return self.country.common_name

    def markup(self) -> str:
        return highlight(self.name, self.start, self.length)


class AutocompleteMatcher:
    def __init__(
        self,
        surface: BrowseSurface,
        pagination: PaginationController,
        settings: AutocompleteSettings | None = None,
    ) -> None:
        self._surface = surface
        self._pagination = pagination
        self.max_suggestions = (settings or AutocompleteSettings()).max_suggestions
        self._catalog: tuple[Country, ...] = ()

    @property
    def catalog(self) -> tuple[Country, ...]:
        return self._catalog

    def load(self, countries: Iterable[Country]) -> None:
        self._catalog = tuple(sort_by_name(countries))

    def suggest(self, text: str) -> list[Suggestion]:
        query = text or ""
        if not query.strip():
            self._surface.hide_suggestions()
            return []

        matches: list[Suggestion] = []
        for country in self._catalog:
            span = find_match(country.common_name, query)
            if span is None:
                continue
            start, length = span
            matches.append(Suggestion(country=country, start=start, length=length))
            if len(matches) >= self.max_suggestions:
                break

        if matches:
            self._surface.show_suggestions([item.markup() for item in matches])
        else:
            self._surface.hide_suggestions()
        return matches

    def select(self, suggestion: Suggestion) -> PageView | None:
        self._surface.hide_suggestions()
        return self._pagination.replace([suggestion.country])


__all__ = ["AutocompleteMatcher", "Suggestion"]
