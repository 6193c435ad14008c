from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.credentials import CredentialsNotFound
from config.settings import settings
from messaging.messagebird import MessageBirdApiError
from nodes.errors import NodeOperationError
from ops.structured_logger import setup_logging
from utils.request_context import request_scope

from app.routers.health import router as health_router
from app.routers.nodes import router as nodes_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="MessageBird Node", version="1.0.0")
log = logging.getLogger("messagebird.api")


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id") or ""


def _error_body(request: Request, **content):
    return {**content, "request_id": _get_request_id(request), "revision": os.getenv("K_REVISION") or ""}


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    with request_scope(request.headers.get("x-request-id")) as rid:
        request.state.request_id = rid
        response = await call_next(request)
    response.headers["X-Request-Id"] = rid
    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    log.warning(
        "http_exception",
        extra={
            "extra": {
                "event": "http_exception",
                "status_code": exc.status_code,
                "detail": exc.detail,
                "path": request.url.path,
                "method": request.method,
            }
        },
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(request, detail=exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log.warning(
        "validation_error",
        extra={"extra": {"event": "validation_error", "path": request.url.path, "method": request.method}},
    )
    return JSONResponse(status_code=422, content=_error_body(request, detail=exc.errors()))


@app.exception_handler(NodeOperationError)
async def node_operation_error_handler(request: Request, exc: NodeOperationError):
    log.warning(
        "node_operation_error",
        extra={
            "extra": {
                "event": "node_operation_error",
                "error_type": type(exc).__name__,
                "message": str(exc),
                "node": exc.node,
                "path": request.url.path,
            }
        },
    )
    return JSONResponse(status_code=400, content=_error_body(request, detail=str(exc), node=exc.node))


@app.exception_handler(CredentialsNotFound)
async def credentials_not_found_handler(request: Request, exc: CredentialsNotFound):
    log.warning(
        "credentials_not_found",
        extra={"extra": {"event": "credentials_not_found", "credential": exc.name, "path": request.url.path}},
    )
    return JSONResponse(status_code=400, content=_error_body(request, detail=str(exc)))


@app.exception_handler(MessageBirdApiError)
async def messagebird_api_error_handler(request: Request, exc: MessageBirdApiError):
    # Provider status is reported, not mirrored; the failure is upstream.
    return JSONResponse(
        status_code=502,
        content=_error_body(request, detail=str(exc), provider_status=exc.status_code, errors=exc.errors),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.error(
        "internal_unhandled_exception",
        extra={
            "extra": {
                "event": "internal_unhandled_exception",
                "error_type": type(exc).__name__,
                "message": str(exc),
                "path": request.url.path,
                "method": request.method,
            }
        },
        exc_info=True,
    )
    return JSONResponse(status_code=500, content=_error_body(request, error="internal_unhandled_exception"))


app.include_router(health_router, tags=["health"])
app.include_router(nodes_router, tags=["nodes"])
