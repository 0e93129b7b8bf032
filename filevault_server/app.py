from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from filevault.config import ServerConfig
from filevault.errors import HTTP_STATUS, ErrorKind
from filevault.operations import OpResult
from filevault.resolver import ResolvedPath

from .paths import Storage
from .render import render_listing

logger = logging.getLogger("filevault.server")

_OP_MESSAGES = {
    ErrorKind.NOT_FOUND: "File not found.",
    ErrorKind.IS_DIRECTORY: "Cannot {verb} a directory.",
    ErrorKind.IO_ERROR: "Server Error: {detail}",
}


class RequestError(Exception):
    """A request that ends in a classified error response."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.kind]


def create_app(config: ServerConfig | None = None) -> FastAPI:
    config = config or ServerConfig()
    storage = Storage(config)

    app = FastAPI(
        title="filevault",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.storage = storage

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found.", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error for %s %s", request.method, request.url.path)
        return PlainTextResponse(f"Server Error: {exc}", status_code=500)

    def require_path(file: str | None) -> ResolvedPath:
        if not file:
            raise RequestError(ErrorKind.MISSING_PARAMETER, "Bad Request: Missing filename.")
        target = storage.resolver.resolve(file)
        if target is None:
            raise RequestError(ErrorKind.PATH_REJECTED, "Forbidden: Invalid file path or name.")
        return target

    def check(result: OpResult, verb: str) -> OpResult:
        if result.ok:
            return result
        message = _OP_MESSAGES[result.error].format(verb=verb, detail=result.detail)
        raise RequestError(result.error, message)

    @app.get("/")
    @app.get("/list")
    def list_files():
        entries = storage.files.list_entries(storage.resolver.root)
        return HTMLResponse(render_listing(entries))

    @app.get("/create")
    def create_file(file: str | None = None, content: str = ""):
        target = require_path(file)
        check(storage.files.create(target, content.encode("utf-8")), "create")
        return RedirectResponse("/", status_code=302)

    @app.get("/read")
    def read_file(file: str | None = None):
        target = require_path(file)
        result = check(storage.files.read(target), "read")
        return Response(content=result.data, media_type="text/plain")

    @app.get("/delete")
    def delete_file(file: str | None = None):
        target = require_path(file)
        check(storage.files.delete(target), "delete")
        return RedirectResponse("/", status_code=302)

    return app
