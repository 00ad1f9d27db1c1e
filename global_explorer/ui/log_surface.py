"""Headless surface that records render instructions as log events."""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from global_explorer.logging import logger
from global_explorer.ui.surface import CountryCard, CountryDetail, PaginationState


class LogSurface:
    def show_countries(self, cards: Sequence[CountryCard]) -> None:
        logger.info("render_countries", codes=[card.code for card in cards])

    def show_no_results(self, message: str) -> None:
        logger.info("render_no_results", message=message)

    def clear_countries(self) -> None:
        logger.info("render_clear_countries")

    def show_pagination(self, state: PaginationState) -> None:
        logger.info(
            "render_pagination",
            current_page=state.current_page,
            total_pages=state.total_pages,
            has_previous=state.has_previous,
            has_next=state.has_next,
        )

    def hide_pagination(self) -> None:
        logger.info("render_hide_pagination")

    def show_count(self, text: str) -> None:
        logger.info("render_count", text=text)

    def show_suggestions(self, items: Sequence[str]) -> None:
        logger.info("render_suggestions", items=list(items))

    def hide_suggestions(self) -> None:
        logger.info("render_hide_suggestions")

    def show_detail(self, detail: CountryDetail) -> None:
        logger.info("render_detail", **asdict(detail))

    def set_busy(self, busy: bool) -> None:
        logger.debug("render_busy", busy=busy)

    def notify(self, message: str) -> None:
        logger.warning("render_notice", message=message)

    def set_stars(self, active: int) -> None:
        logger.info("render_stars", active=active)

    def set_rating_text(self, text: str) -> None:
        logger.info("render_rating_text", text=text)

    def set_comment(self, text: str) -> None:
        logger.info("render_comment", length=len(text))

    def show_acknowledgment(self, message: str) -> None:
        logger.info("render_acknowledgment", message=message)

    def hide_acknowledgment(self) -> None:
        logger.info("render_hide_acknowledgment")

    def close_feedback(self) -> None:
        logger.info("render_close_feedback")


__all__ = ["LogSurface"]
