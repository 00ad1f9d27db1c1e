"""Star-rating feedback capture and submission."""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass
from enum import Enum

import httpx

from global_explorer.config import FeedbackSettings
from global_explorer.domain.models import FeedbackAck, FeedbackDraft
from global_explorer.i18n.service import I18nService, get_i18n
from global_explorer.logging import logger
from global_explorer.services.exceptions import (
    FeedbackError,
    FeedbackSubmitError,
    InvalidRating,
    MissingComment,
    MissingRating,
)
from global_explorer.ui.surface import FeedbackSurface

STAR_COUNT = 5


@dataclass(frozen=True, slots=True)
class SubmitResult:
    ack: FeedbackAck | None = None
    error: FeedbackSubmitError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FeedbackClient:
    """Posts feedback entries to the persistence endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, settings: FeedbackSettings | None = None) -> None:
        self._client = http_client
        self._settings = settings or FeedbackSettings()

    async def submit(self, rating: int, comment: str) -> SubmitResult:
        try:
            response = await self._client.post(
                str(self._settings.endpoint),
                json={"rating": rating, "comment": comment},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
            ack = FeedbackAck.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            return SubmitResult(error=FeedbackSubmitError(f"Feedback rejected ({status_code}): {detail}"))
        except httpx.RequestError as exc:
            return SubmitResult(error=FeedbackSubmitError(f"Failed to reach feedback endpoint: {exc}"))
        except ValueError as exc:
            return SubmitResult(error=FeedbackSubmitError(f"Feedback response is invalid: {exc}"))
        return SubmitResult(ack=ack)


class FeedbackState(str, Enum):
    IDLE = "idle"
    RATED = "rated"
    SUBMITTING = "submitting"
    POST_SUBMIT = "post_submit"


class FeedbackFlow:
    """Rating + comment form that resets itself shortly after submission.

    Transmission runs in the background; its outcome is logged and never
    changes what the user sees.
    """

    def __init__(
        self,
        client: FeedbackClient,
        surface: FeedbackSurface,
        settings: FeedbackSettings | None = None,
        i18n: I18nService | None = None,
    ) -> None:
        self._client = client
        self._surface = surface
        self._settings = settings or FeedbackSettings()
        self._i18n = i18n or get_i18n()
        self.draft = FeedbackDraft()
        self.state = FeedbackState.IDLE
        self.pending_transmission: asyncio.Task[SubmitResult] | None = None
        self.pending_reset: asyncio.Task[None] | None = None
        self._transmissions: set[asyncio.Task[SubmitResult]] = set()

    @property
    def transmissions(self) -> frozenset[asyncio.Task[SubmitResult]]:
        """Sends that have not finished yet."""

        return frozenset(self._transmissions)

    def set_rating(self, rating: int) -> None:
        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= STAR_COUNT:
            raise InvalidRating(f"Rating must be within 1..{STAR_COUNT}, got {rating!r}.")
        self.draft = self.draft.model_copy(update={"rating": rating})
        if self.state is FeedbackState.IDLE:
            self.state = FeedbackState.RATED
        self._surface.set_stars(rating)
        self._surface.set_rating_text(self._i18n.ngettext("rating_text", rating, rating=rating))

    def set_comment(self, comment: str) -> None:
        self.draft = self.draft.model_copy(update={"comment": comment or ""})

    async def submit(self) -> asyncio.Task[SubmitResult] | None:
        if self.state in (FeedbackState.SUBMITTING, FeedbackState.POST_SUBMIT):
            logger.info("feedback_submit_ignored", state=self.state.value)
            return None

        comment = self.draft.comment.strip()
        try:
            if self.draft.rating == 0:
                raise MissingRating("A star rating is required.")
            if not comment:
                raise MissingComment("A comment is required.")
        except FeedbackError as exc:
            self._surface.notify(self._i18n.gettext(exc.notice_key))
            raise

        self.state = FeedbackState.SUBMITTING
        rating = self.draft.rating
        logger.info("feedback_submitted", rating=rating, comment_length=len(comment))
        transmission = asyncio.create_task(self._transmit(rating, comment))
        self._transmissions.add(transmission)
        transmission.add_done_callback(self._transmissions.discard)
        self.pending_transmission = transmission

        self._surface.show_acknowledgment(self._i18n.gettext("feedback_thanks"))
        self.state = FeedbackState.POST_SUBMIT
        self.pending_reset = asyncio.create_task(self._reset_later())
        return self.pending_transmission

    async def aclose(self) -> None:
        for task in (self.pending_reset, *self._transmissions):
            if task is None or task.done():
                continue
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _transmit(self, rating: int, comment: str) -> SubmitResult:
        result = await self._client.submit(rating, comment)
        if result.ok:
            logger.info("feedback_saved", message=result.ack.message if result.ack else "")
        else:
            logger.error("feedback_save_failed", error=str(result.error))
        return result

    async def _reset_later(self) -> None:
        await asyncio.sleep(self._settings.reset_delay_seconds)
        self._reset()

    def _reset(self) -> None:
        self.draft = FeedbackDraft()
        self._surface.set_stars(0)
        self._surface.set_rating_text("")
        self._surface.set_comment("")
        self._surface.hide_acknowledgment()
        self._surface.close_feedback()
        self.state = FeedbackState.IDLE


__all__ = [
    "FeedbackClient",
    "FeedbackFlow",
    "FeedbackState",
    "STAR_COUNT",
    "SubmitResult",
]
