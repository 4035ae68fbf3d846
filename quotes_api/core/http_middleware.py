from __future__ import annotations

import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

REQUEST_ID_HEADER = "X-Request-ID"
SERVER_ERROR_DETAIL = "Server Error"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("quotes_api.http")


def _request_id_from_header(raw: str | None) -> str:
    value = str(raw or "").strip()
    if not value:
        return uuid4().hex
    if not _REQUEST_ID_RE.fullmatch(value):
        return uuid4().hex
    return value


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "") or "-")


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed ids, query values and bodies are client errors, not "no match".
    _LOG.info(
        "malformed request %s %s request_id=%s",
        request.method,
        request.url.path,
        _request_id(request),
    )
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def install_http_middleware(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @app.middleware("http")
    async def _request_context_middleware(request: Request, call_next):
        request_id = _request_id_from_header(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        started_at = perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            _LOG.exception(
                "unhandled error %s %s request_id=%s",
                request.method,
                request.url.path,
                request_id,
            )
            response = JSONResponse(status_code=500, content={"detail": SERVER_ERROR_DETAIL})

        # Random picks must never be served from a cache.
        response.headers["Cache-Control"] = "no-store"
        response.headers[REQUEST_ID_HEADER] = request_id

        duration_ms = (perf_counter() - started_at) * 1000.0
        _LOG.info(
            "%s %s status=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response
