"""Result set ownership and page navigation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from global_explorer.config import PaginationSettings
from global_explorer.domain.models import Country
from global_explorer.i18n.service import I18nService, get_i18n
from global_explorer.ui.surface import BrowseSurface, CountryCard, PaginationState
from global_explorer.utils.text import sort_by_name


@dataclass(frozen=True, slots=True)
class PageView:
    countries: tuple[Country, ...]
    total: int
    pagination: PaginationState | None


class PaginationController:
    """Holds the current result set and the page cursor over it.

    The result set is ``None`` until the first ``replace``; an empty tuple is
    a loaded result with no matches.
    """

    def __init__(
        self,
        surface: BrowseSurface,
        settings: PaginationSettings | None = None,
        i18n: I18nService | None = None,
    ) -> None:
        self._surface = surface
        self.page_size = (settings or PaginationSettings()).page_size
        self._i18n = i18n or get_i18n()
        self._results: tuple[Country, ...] | None = None
        self.current_page = 1

    @property
    def results(self) -> tuple[Country, ...] | None:
        return self._results

    @property
    def loaded(self) -> bool:
        return self._results is not None

    @property
    def total_pages(self) -> int:
        if not self._results:
            return 1
        return math.ceil(len(self._results) / self.page_size)

    def replace(self, countries: Iterable[Country]) -> PageView | None:
        self._results = tuple(sort_by_name(countries))
        self.current_page = 1
        return self.render()

    def clear(self) -> None:
        self._results = None
        self.current_page = 1
        self._surface.clear_countries()
        self._surface.hide_pagination()
        self._surface.show_count("")

    def render(self) -> PageView | None:
        if self._results is None:
            return None

        total = len(self._results)
        self._surface.show_count(self._i18n.ngettext("country_count", total, count=total))
        if total == 0:
            self._surface.show_no_results(self._i18n.gettext("no_results"))
            self._surface.hide_pagination()
            return PageView(countries=(), total=0, pagination=None)

        start = (self.current_page - 1) * self.page_size
        visible = self._results[start : start + self.page_size]
        state = PaginationState(current_page=self.current_page, total_pages=self.total_pages)
        self._surface.show_countries([CountryCard.from_country(country) for country in visible])
        self._surface.show_pagination(state)
        return PageView(countries=visible, total=total, pagination=state)

    def go_previous(self) -> PageView | None:
        if not self._results or self.current_page <= 1:
            return None
        self.current_page -= 1
        return self.render()

    def go_next(self) -> PageView | None:
        if not self._results or self.current_page >= self.total_pages:
            return None
        self.current_page += 1
        return self.render()


__all__ = ["PageView", "PaginationController"]
