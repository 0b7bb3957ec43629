"""FastAPI application exposing host system information."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .config import INFO_PATH
from .metrics import CollectionError, MetricsSource, collect_system_info

ERROR_MESSAGE = "Unable to get system info"


def create_app(source: Optional[MetricsSource] = None) -> FastAPI:
    """Build an app serving only ``GET /info``; docs and schema routes are disabled."""
    app = FastAPI(
        title="Host Info Service",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Sync route: the blocking CPU sample runs in the worker threadpool.
    @app.get(INFO_PATH)
    def system_info() -> Response:
        try:
            snapshot = collect_system_info(source)
        except CollectionError:
            return PlainTextResponse(ERROR_MESSAGE, status_code=500)
        return JSONResponse(snapshot.to_dict())

    return app


app = create_app()
