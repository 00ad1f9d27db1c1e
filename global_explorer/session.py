"""Wires the browsing and feedback components to one surface."""

from __future__ import annotations

import httpx

from global_explorer.config import ExplorerSettings, get_settings
from global_explorer.domain.models import LookupKind
from global_explorer.i18n.service import I18nService
from global_explorer.logging import logger
from global_explorer.services.activity import ActivityTracker
from global_explorer.services.autocomplete import AutocompleteMatcher, Suggestion
from global_explorer.services.dispatcher import DispatchOutcome, SearchDispatcher
from global_explorer.services.exceptions import CountryLookupError
from global_explorer.services.feedback import FeedbackClient, FeedbackFlow
from global_explorer.services.lookup import CountryLookupService
from global_explorer.services.pagination import PageView, PaginationController
from global_explorer.ui.surface import BrowseSurface, CountryDetail, FeedbackSurface


class ExplorerSession:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        surface: BrowseSurface,
        feedback_surface: FeedbackSurface | None = None,
        settings: ExplorerSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.surface = surface
        i18n = I18nService(default_locale=self.settings.default_language)

        self.activity = ActivityTracker(listener=surface.set_busy)
        self.gateway = CountryLookupService(
            http_client, settings=self.settings.country_api, activity=self.activity
        )
        self.pagination = PaginationController(
            surface, settings=self.settings.pagination, i18n=i18n
        )
        self.dispatcher = SearchDispatcher(self.gateway, self.pagination, surface, i18n=i18n)
        self.autocomplete = AutocompleteMatcher(
            surface, self.pagination, settings=self.settings.autocomplete
        )
        self.feedback = FeedbackFlow(
            FeedbackClient(http_client, settings=self.settings.feedback),
            feedback_surface or surface,  # type: ignore[arg-type]
            settings=self.settings.feedback,
            i18n=i18n,
        )

    async def start(self) -> int:
        """Load the autocomplete catalog; the result view stays empty."""

        result = await self.gateway.all()
        self.autocomplete.load(result.countries)
        logger.info("catalog_loaded", countries=len(self.autocomplete.catalog))
        return len(self.autocomplete.catalog)

    async def search(
        self,
        name: str = "",
        code: str = "",
        capital: str = "",
        region: str = "",
    ) -> DispatchOutcome:
        return await self.dispatcher.dispatch(name, code, capital, region)

    def suggest(self, text: str) -> list[Suggestion]:
        return self.autocomplete.suggest(text)

    def select_suggestion(self, suggestion: Suggestion) -> PageView | None:
        self.dispatcher.supersede()
        return self.autocomplete.select(suggestion)

    def previous_page(self) -> PageView | None:
        return self.pagination.go_previous()

    def next_page(self) -> PageView | None:
        return self.pagination.go_next()

    def reset_filters(self) -> None:
        self.dispatcher.supersede()
        self.surface.hide_suggestions()
        self.pagination.clear()

    async def show_details(self, code: str) -> CountryDetail | None:
        try:
            result = await self.gateway.lookup(LookupKind.BY_CODE, code)
        except CountryLookupError:
            logger.error("country_detail_unavailable", code=code)
            return None
        detail = CountryDetail.from_country(result.countries[0])
        self.surface.show_detail(detail)
        return detail

    async def aclose(self) -> None:
        await self.feedback.aclose()


__all__ = ["ExplorerSession"]
