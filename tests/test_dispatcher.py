"""Search dispatch precedence, error notices and stale-response handling."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from global_explorer.domain.models import LookupKind
from global_explorer.services.activity import ActivityTracker
from global_explorer.services.dispatcher import SearchDispatcher, choose_lookup
from global_explorer.services.lookup import CountryLookupService
from global_explorer.services.pagination import PaginationController


def _build(client, surface, tracker: ActivityTracker | None = None):
    gateway = CountryLookupService(client, activity=tracker)
    pagination = PaginationController(surface)
    return SearchDispatcher(gateway, pagination, surface), pagination


def test_choose_lookup_precedence():
    assert choose_lookup("chi", "CL", "Santiago", "Americas") == (LookupKind.BY_NAME, "chi")
    assert choose_lookup("  ", " cl ", "Santiago", "Americas") == (LookupKind.BY_CODE, "cl")
    assert choose_lookup("", "", "Santiago", "Americas") == (LookupKind.BY_CAPITAL, "Santiago")
    assert choose_lookup("", "", " ", "Americas") == (LookupKind.BY_REGION, "Americas")
    assert choose_lookup("", "", "", "") == (LookupKind.ALL, "")


@pytest.mark.asyncio
async def test_all_filters_set_only_name_lookup_runs(surface, payload_factory):
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=[payload_factory("Chile", "CL")])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface)
        outcome = await dispatcher.dispatch("chile", "CL", "Santiago", "Americas")

    assert paths == ["/v3.1/name/chile"]
    assert outcome.kind is LookupKind.BY_NAME
    assert outcome.applied is True
    assert [c.code for c in pagination.results] == ["CL"]


@pytest.mark.asyncio
async def test_empty_filters_fall_back_to_all(surface, payload_factory):
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(
            200, json=[payload_factory("Chile", "CL"), payload_factory("Chad", "TD")]
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface)
        outcome = await dispatcher.dispatch("  ", "", " ", "")

    assert paths == ["/v3.1/all"]
    assert outcome.kind is LookupKind.ALL
    assert [c.common_name for c in pagination.results] == ["Chad", "Chile"]


@pytest.mark.asyncio
async def test_name_without_matches_replaces_with_empty_set(surface, country_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"status": 404})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface)
        pagination.replace([country_factory("Chad", "TD")])
        outcome = await dispatcher.dispatch(name="atlantis")

    assert outcome.applied is True
    assert pagination.results == ()
    assert surface.no_results == "No countries found"
    assert surface.notices == []


@pytest.mark.asyncio
async def test_invalid_code_keeps_results_and_notifies(surface, country_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"status": 400})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface)
        pagination.replace([country_factory("Chad", "TD")])
        before = pagination.results
        outcome = await dispatcher.dispatch(code="ZZ")

    assert outcome.applied is False
    assert outcome.notice == "Invalid country code!"
    assert surface.notices == ["Invalid country code!"]
    assert pagination.results == before


@pytest.mark.asyncio
async def test_region_failure_notifies(surface):
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(404)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, _ = _build(client, surface)
        outcome = await dispatcher.dispatch(region="Oceania")

    assert paths == ["/v3.1/region/Oceania"]
    assert outcome.kind is LookupKind.BY_REGION
    assert surface.notices == ["Region not found!"]


@pytest.mark.asyncio
async def test_unknown_region_rejected_without_request(surface, country_factory):
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=[])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface)
        pagination.replace([country_factory("Chad", "TD")])
        before = pagination.results
        outcome = await dispatcher.dispatch(region="Atlantis")

    assert paths == []
    assert outcome.kind is LookupKind.BY_REGION
    assert outcome.applied is False
    assert outcome.notice == "Region not found!"
    assert pagination.results == before


@pytest.mark.asyncio
async def test_stale_response_is_discarded(surface, payload_factory):
    release = asyncio.Event()
    changes: list[bool] = []
    tracker = ActivityTracker(listener=changes.append)

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/slow"):
            await release.wait()
            return httpx.Response(200, json=[payload_factory("Slowland", "SL")])
        return httpx.Response(200, json=[payload_factory("Fastland", "FL")])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher, pagination = _build(client, surface, tracker)
        slow = asyncio.create_task(dispatcher.dispatch(name="slow"))
        await asyncio.sleep(0)

        fast = await dispatcher.dispatch(name="fast")
        assert tracker.busy is True

        release.set()
        stale = await slow

    assert fast.applied is True
    assert stale.applied is False
    assert stale.token < fast.token
    assert [c.code for c in pagination.results] == ["FL"]
    assert changes == [True, False]
