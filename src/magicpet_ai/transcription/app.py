"""FastAPI application exposing the transcription proxy."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from magicpet_ai.config import Settings, settings

from .proxy import InternalServerError, MethodNotAllowed, ProxyError, TranscriptionProxy

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def _read_body(request: Request) -> bytes:
    """Raw audio bytes; the body is never parsed as JSON or form data."""
    if request.method != "POST":
        return b""
    try:
        return await request.body()
    except Exception as exc:
        raise InternalServerError("Internal server error", message=str(exc)) from exc


def create_app(proxy: TranscriptionProxy | None = None, config: Settings | None = None) -> FastAPI:
    config = config or settings
    proxy = proxy or TranscriptionProxy(config)
    app = FastAPI(title="MagicPet transcription proxy")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    # Verbs outside ALL_METHODS are rejected by the router before reaching the proxy.
    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405 and request.url.path == config.proxy_path:
            rejected = MethodNotAllowed("Method not allowed")
            return JSONResponse(status_code=rejected.status_code, content=rejected.payload())
        return await http_exception_handler(request, exc)

    @app.api_route(config.proxy_path, methods=ALL_METHODS)
    async def transcribe(request: Request) -> JSONResponse:
        try:
            body = await _read_body(request)
            result = await proxy.handle(request.method, body, language=request.query_params.get("language"))
        except ProxyError as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.payload())
        return JSONResponse(status_code=200, content=result.as_dict())

    return app
