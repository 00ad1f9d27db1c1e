"""Remote lookups against the REST Countries API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from global_explorer.config import CountryApiSettings
from global_explorer.domain.models import Country, LookupKind
from global_explorer.logging import logger
from global_explorer.services.activity import ActivityTracker
from global_explorer.services.exceptions import (
    CapitalNotFound,
    CountryLookupError,
    InvalidCode,
    RegionNotFound,
)
from global_explorer.utils.text import sort_by_name


@dataclass(frozen=True, slots=True)
class LookupSpec:
    """How one lookup kind reaches the API and what its failure means.

    ``error`` is ``None`` for kinds whose failure degrades to an empty list.
    """

    path: str
    error: type[CountryLookupError] | None = None
    single: bool = False
    needs_key: bool = True


LOOKUP_SPECS: dict[LookupKind, LookupSpec] = {
    LookupKind.BY_NAME: LookupSpec(path="name/{key}"),
    LookupKind.BY_CODE: LookupSpec(path="alpha/{key}", error=InvalidCode, single=True),
    LookupKind.BY_CAPITAL: LookupSpec(path="capital/{key}", error=CapitalNotFound),
    LookupKind.BY_REGION: LookupSpec(path="region/{key}", error=RegionNotFound),
    LookupKind.ALL: LookupSpec(path="all", needs_key=False),
}


@dataclass(slots=True)
class LookupResult:
    kind: LookupKind
    key: str
    countries: list[Country]
    busy: bool = False


class CountryLookupService:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CountryApiSettings | None = None,
        activity: ActivityTracker | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or CountryApiSettings()
        self.activity = activity or ActivityTracker()

    async def lookup(self, kind: LookupKind, key: str = "") -> LookupResult:
        """Run a single lookup.

        Kinds with an error class in ``LOOKUP_SPECS`` raise it on any failure;
        the others log the failure and return an empty result.
        """

        spec = LOOKUP_SPECS[kind]
        key = self._normalize_key(kind, key)
        with self.activity.track():
            try:
                payload = await self._fetch(spec, key)
                countries = self._parse(payload, spec)
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning(
                    "country_lookup_failed",
                    kind=kind.value,
                    key=key,
                    error=str(exc),
                )
                if spec.error is not None:
                    raise spec.error(key) from exc
                countries = []

        if kind is LookupKind.ALL:
            countries = sort_by_name(countries)
        return LookupResult(kind=kind, key=key, countries=countries, busy=self.activity.busy)

    async def by_name(self, name: str) -> LookupResult:
        return await self.lookup(LookupKind.BY_NAME, name)

    async def by_code(self, code: str) -> LookupResult:
        return await self.lookup(LookupKind.BY_CODE, code)

    async def by_capital(self, capital: str) -> LookupResult:
        return await self.lookup(LookupKind.BY_CAPITAL, capital)

    async def by_region(self, region: str) -> LookupResult:
        return await self.lookup(LookupKind.BY_REGION, region)

    async def all(self) -> LookupResult:
        return await self.lookup(LookupKind.ALL)

    @staticmethod
    def _normalize_key(kind: LookupKind, key: str) -> str:
        key = (key or "").strip()
        if kind is LookupKind.BY_CODE:
            return key.upper()
        return key

    async def _fetch(self, spec: LookupSpec, key: str) -> Any:
        if spec.needs_key and not key:
            raise ValueError("Lookup key must not be empty.")
        url = self._settings.endpoint(spec.path.format(key=quote(key, safe="")))
        params = None
        if not spec.needs_key and self._settings.catalog_fields:
            params = {"fields": ",".join(self._settings.catalog_fields)}
        response = await self._client.get(
            url,
            params=params,
            timeout=self._settings.request_timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _parse(payload: Any, spec: LookupSpec) -> list[Country]:
        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list):
            raise ValueError("Country response format is invalid.")
        countries = [Country.from_api(item) for item in payload if isinstance(item, dict)]
        if spec.single:
            if not countries:
                raise ValueError("Country response is empty.")
            return countries[:1]
        return countries


__all__ = ["CountryLookupService", "LOOKUP_SPECS", "LookupResult", "LookupSpec"]
