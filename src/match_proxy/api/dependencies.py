"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Clients and services created in the lifespan, before any request is served
    - Dependency functions retrieve them from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status

from match_proxy.config import settings
from match_proxy.handlers import MatchHandler
from match_proxy.logging_config import configure_logging
from match_proxy.repositories import RedisMatchRepository, RiotApiClient
from match_proxy.services import MatchService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> MatchHandler:
    """Dependency injection for MatchHandler from app.state.

    Raises:
        HTTPException: 503 if the handler is not initialized yet
    """
    handler = getattr(request.app.state, "match_handler", None)
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Match handler not initialized",
        )
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores the handler in app.state:
    1. Repositories (Redis match cache, Riot API client)
    2. Service (retrieval logic)
    3. Handler (HTTP endpoints) - stored in app.state.match_handler

    The Redis connection is checked here, so it is settled before the
    first request is accepted.

    Cleanup:
        Closes both clients and removes the handler from app.state on shutdown
    """
    configure_logging(settings.log_level)
    logger.info("Starting Match Proxy API...")

    if not settings.has_api_key:
        logger.warning("RIOT_API_KEY is not set; Riot API calls will be rejected")

    repository = RedisMatchRepository.create()
    upstream = RiotApiClient.create()

    if await repository.health_check():
        logger.info("Connected to Redis at %s", settings.redis_url)
    else:
        logger.error("Redis unreachable at %s; /api/match will fail until it is up", settings.redis_url)

    match_service = MatchService.create(store=repository, upstream=upstream)
    match_handler = MatchHandler(match_service=match_service)

    app.state.match_handler = match_handler

    yield

    await upstream.close()
    await repository.close()

    del app.state.match_handler
    logger.info("Match Proxy API shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[MatchHandler, Depends(get_handler)]
