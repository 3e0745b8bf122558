import logging
from pathlib import Path
from typing import Annotated, Any

from fastapi import FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from match_proxy import __version__
from match_proxy.api.dependencies import HandlerDep, lifespan
from match_proxy.config import settings
from match_proxy.dto import (
    ErrorResponse,
    HealthCheckResponse,
    MatchListQuery,
    MatchSummaryResponse,
    ServiceInfoResponse,
)

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


app = FastAPI(
    title="Match Proxy API",
    description="League of Legends match data proxy with Redis match caching",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_error(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render invalid path/query parameters as {"error": message}."""
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"error": f"Invalid request: {messages}"},
    )


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Never leak a raw exception to the client."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Server error"},
    )


@app.get("/api", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """API information endpoint."""
    return ServiceInfoResponse(
        name="Match Proxy API",
        version=__version__,
        description="League of Legends match data proxy with Redis match caching",
        endpoints={
            "match_history": "/api/match-history",
            "summoner": "/api/summoner/{gameName}/{tagLine}",
            "matches": "/api/matches/{puuid}",
            "match": "/api/match/{matchId}",
            "health": "/health",
            "docs": "/docs",
        },
    )


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/api/match-history", response_model=MatchSummaryResponse, responses=ERROR_RESPONSES)
async def match_history(handler: HandlerDep) -> MatchSummaryResponse:
    """Summarize the bundled match for the configured participant."""
    return await handler.match_history()


@app.get("/api/summoner/{game_name}/{tag_line}", responses=ERROR_RESPONSES)
async def get_summoner(game_name: str, tag_line: str, handler: HandlerDep) -> dict[str, Any]:
    """
    Resolve a Riot ID to its account (PUUID).

    Args:
        game_name: Name part of the Riot ID.
        tag_line: Tag part of the Riot ID.

    Returns:
        Riot account payload.
    """
    return await handler.get_summoner(game_name, tag_line)


@app.get("/api/matches/{puuid}", responses=ERROR_RESPONSES)
async def list_matches(
    puuid: str,
    query: Annotated[MatchListQuery, Query()],
    handler: HandlerDep,
) -> JSONResponse:
    """
    Fetch a player's recent matches, in match-ID order.

    Args:
        puuid: The player's PUUID.
        query: `count` (default 20) and optional exact `mode` filter.

    Returns:
        Array of raw match records.
    """
    return await handler.list_matches(puuid, query)


@app.get("/api/match/{match_id}", responses=ERROR_RESPONSES)
async def get_match(match_id: str, handler: HandlerDep) -> dict[str, Any]:
    """Get one match, served from the cache when available."""
    return await handler.get_match(match_id)


# Frontend (index.html, CSS, ...). Mounted last so /api routes win.
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


def main() -> None:
    import uvicorn

    uvicorn.run(
        "match_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
