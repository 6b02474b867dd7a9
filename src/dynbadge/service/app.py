"""FastAPI application serving dynamic regex badges.

Endpoints:
- GET /badge/dynamic/regex - Extract a value from a remote file with RE2
- GET /health - Service health status

Environment variables:
- LOG_LEVEL: Logging level (default: INFO)
- DYNBADGE_FETCH_TIMEOUT, DYNBADGE_MAX_DOCUMENT_BYTES, DYNBADGE_USER_AGENT:
  see dynbadge.shared.fetch.config

Usage:
    uvicorn dynbadge.service.app:app --port 8000
"""

from __future__ import annotations

import logging
import os
import time
from typing import Annotated

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from dynbadge.badge import Badge, render_dynamic_badge, render_error_badge
from dynbadge.badge.render import INACCESSIBLE_COLOR
from dynbadge.extraction import PipelineError, run_detailed
from dynbadge.shared.fetch import (
    Fetcher,
    FetchConfig,
    HttpFetcher,
    ResourceNotFound,
    TransportError,
)

logger = logging.getLogger(__name__)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

DESCRIPTION = """\
Extract text from a file using re2, a regex dialect that always runs in
linear time (https://github.com/google/re2/wiki/Syntax). Lookaround and
backreferences are not supported.

The main use-case is to extract values from plain-text files. If a file
contains a line like `version - 2.4`, a search of `version - (.*)` with `$1`
as replacement yields `2.4`.
"""


class HealthResponse(BaseModel):
    """Response body for /health endpoint."""
    status: str = Field(..., description="Always 'ok' while the process serves requests")
    uptime_seconds: float


def get_fetcher(request: Request) -> Fetcher:
    return request.app.state.fetcher


def _error_response(status_code: int, badge: Badge) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=badge.model_dump(by_alias=True))


async def _pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    logger.info(f"[Service] Rejected regex: {exc.cause.detail}")
    badge = render_error_badge(exc.pretty_message, label=request.query_params.get("label"))
    return _error_response(400, badge)


async def _transport_error_handler(request: Request, exc: TransportError) -> JSONResponse:
    label = request.query_params.get("label")
    if isinstance(exc, ResourceNotFound):
        return _error_response(404, render_error_badge("resource not found", label=label))
    logger.warning(f"[Service] Fetch failed: {exc}")
    badge = render_error_badge("inaccessible", label=label, color=INACCESSIBLE_COLOR)
    return _error_response(502, badge)


def create_app(fetcher: Fetcher | None = None) -> FastAPI:
    """Build the application.

    Args:
        fetcher: Document source; defaults to an HttpFetcher configured from env.
    """
    app = FastAPI(
        title="Dynamic Regex Badge Service",
        description="Badges built from values extracted out of remote text files",
        version="0.1.0",
    )
    app.state.fetcher = fetcher or HttpFetcher(FetchConfig.from_env())
    app.state.startup_time = time.time()
    app.add_exception_handler(PipelineError, _pipeline_error_handler)
    app.add_exception_handler(TransportError, _transport_error_handler)

    @app.get(
        "/badge/dynamic/regex",
        response_model=Badge,
        summary="Dynamic Regex (re2) Badge",
        description=DESCRIPTION,
        tags=["dynamic"],
    )
    def dynamic_regex(
        fetcher: Annotated[Fetcher, Depends(get_fetcher)],
        url: Annotated[str, Query(
            pattern=r"^https?://",
            description="The URL to a file to search. The full raw content is used as the search string.",
            examples=["https://raw.githubusercontent.com/badges/shields/master/README.md"],
        )],
        search: Annotated[str, Query(
            min_length=1,
            description="A re2 expression used to extract data from the document. Only the first match is used.",
            examples=["Every month it serves (.*?) images"],
        )],
        replace: Annotated[str | None, Query(
            min_length=1,
            description="Replacement for the matched text, like `$1` for the first group. "
                        "If omitted the full matched text is shown.",
            examples=["$1"],
        )] = None,
        flags: Annotated[str, Query(
            min_length=1,
            description="Flags used when compiling the regex: `i` case insensitive, `m` multiline, "
                        "`s` dot matches newline, `U` ungreedy.",
            examples=["imsU"],
        )] = "",
        no_match: Annotated[str, Query(
            alias="noMatch",
            min_length=1,
            description="Value shown when the regex does not match the document.",
        )] = "",
        label: Annotated[str | None, Query(description="Override the badge label")] = None,
        color: Annotated[str | None, Query(description="Override the badge color")] = None,
    ) -> Badge:
        """Fetch ``url``, extract a value with ``search`` and render it as a badge."""
        content = fetcher.fetch(url)

        result = run_detailed(content, search, flags, replace, no_match)
        logger.info(
            f"[Service] {url} ({len(content)} bytes) matched={result.matched}"
        )
        return render_dynamic_badge(result.value, label=label, color=color)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Get service health status."""
        return HealthResponse(
            status="ok",
            uptime_seconds=time.time() - app.state.startup_time,
        )

    return app


app = create_app()
