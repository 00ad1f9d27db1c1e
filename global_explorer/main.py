"""Application entrypoint."""

from __future__ import annotations

import asyncio
import logging

import httpx

from global_explorer.config import get_settings
from global_explorer.logging import configure_logging, logger
from global_explorer.session import ExplorerSession
from global_explorer.ui.log_surface import LogSurface


async def main() -> None:
    settings = get_settings()
    configure_logging(
        logging.DEBUG if settings.environment == "dev" else logging.INFO,
        pretty=settings.environment == "dev",
    )

    async with httpx.AsyncClient() as client:
        session = ExplorerSession(client, LogSurface(), settings=settings)
        logger.info("explorer_starting", environment=settings.environment)
        try:
            await session.start()
            await session.search()
        finally:
            await session.aclose()


if __name__ == "__main__":
    asyncio.run(main())
