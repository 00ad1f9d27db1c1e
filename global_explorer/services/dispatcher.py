"""Pick one lookup from the filter inputs and route its result."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

from global_explorer.domain.models import REGIONS, LookupKind
from global_explorer.i18n.service import I18nService, get_i18n
from global_explorer.logging import logger
from global_explorer.services.exceptions import CountryLookupError, RegionNotFound
from global_explorer.services.lookup import CountryLookupService, LookupResult
from global_explorer.services.pagination import PaginationController
from global_explorer.ui.surface import BrowseSurface


class RequestSequencer:
    """Issues increasing tokens; only the newest token is current."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self.latest = 0

    def issue(self) -> int:
        self.latest = next(self._counter)
        return self.latest

    def is_current(self, token: int) -> bool:
        return token == self.latest


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    kind: LookupKind
    key: str
    token: int
    applied: bool
    notice: str | None = None


def choose_lookup(name: str, code: str, capital: str, region: str) -> tuple[LookupKind, str]:
    """Return the first non-empty filter in precedence order."""

    for kind, value in (
        (LookupKind.BY_NAME, (name or "").strip()),
        (LookupKind.BY_CODE, (code or "").strip()),
        (LookupKind.BY_CAPITAL, (capital or "").strip()),
        (LookupKind.BY_REGION, region or ""),
    ):
        if value:
            return kind, value
    return LookupKind.ALL, ""


class SearchDispatcher:
    def __init__(
        self,
        gateway: CountryLookupService,
        pagination: PaginationController,
        surface: BrowseSurface,
        i18n: I18nService | None = None,
    ) -> None:
        self._gateway = gateway
        self._pagination = pagination
        self._surface = surface
        self._i18n = i18n or get_i18n()
        self.sequencer = RequestSequencer()

    def supersede(self) -> int:
        """Invalidate every dispatch still waiting on a response."""

        return self.sequencer.issue()

    async def dispatch(
        self,
        name: str = "",
        code: str = "",
        capital: str = "",
        region: str = "",
    ) -> DispatchOutcome:
        kind, key = choose_lookup(name, code, capital, region)
        token = self.sequencer.issue()
        logger.info("search_dispatched", kind=kind.value, key=key, token=token)

        try:
            if kind is LookupKind.BY_REGION and key not in REGIONS:
                raise RegionNotFound(key)
            result: LookupResult = await self._gateway.lookup(kind, key)
        except CountryLookupError as exc:
            if not self._is_current(token, kind):
                return DispatchOutcome(kind=kind, key=key, token=token, applied=False)
            notice = self._i18n.gettext(exc.notice_key)
            self._surface.notify(notice)
            return DispatchOutcome(kind=kind, key=key, token=token, applied=False, notice=notice)

        if not self._is_current(token, kind):
            return DispatchOutcome(kind=kind, key=result.key, token=token, applied=False)
        self._pagination.replace(result.countries)
        return DispatchOutcome(kind=kind, key=result.key, token=token, applied=True)

    def _is_current(self, token: int, kind: LookupKind) -> bool:
        if self.sequencer.is_current(token):
            return True
        logger.info(
            "stale_lookup_discarded",
            kind=kind.value,
            token=token,
            latest=self.sequencer.latest,
        )
        return False


__all__ = ["DispatchOutcome", "RequestSequencer", "SearchDispatcher", "choose_lookup"]
