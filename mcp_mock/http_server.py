#!/usr/bin/env python3
"""
HTTP mock MCP server
Serves a JSON-RPC 2.0 endpoint on any POST path, plus /health and a /sse keep-alive stream
"""

import argparse
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response, StreamingResponse

from .config import ServerConfig
from .dispatcher import Dispatcher
from .errors import PayloadTooLargeError
from .observer import JsonLinesFileObserver
from .streaming import SSE_HEADERS, keepalive_stream

# Configure logging
LOG = logging.getLogger("mcp.mock")
LOG.setLevel(logging.INFO)
if not LOG.handlers:
    _sh = logging.StreamHandler()
    _sh.setFormatter(logging.Formatter("%(asctime)s - MCP-MOCK - %(message)s"))
    LOG.addHandler(_sh)


class OversizeTracebackFilter(logging.Filter):
    """Drops uvicorn's traceback for requests cut off by the body limit

    ``read_limited_body`` already logs those at warning level.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        exc = record.exc_info[1] if record.exc_info else None
        if isinstance(exc, PayloadTooLargeError):
            return False
        nested = getattr(exc, "exceptions", None) or ()
        return not any(isinstance(e, PayloadTooLargeError) for e in nested)


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Accumulate the request body, aborting once it grows past ``limit`` bytes"""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            LOG.warning(f"🛑 Request body over {limit} bytes, dropping connection")
            raise PayloadTooLargeError(len(body), limit)
    return bytes(body)


def create_app(config: Optional[ServerConfig] = None,
               dispatcher: Optional[Dispatcher] = None) -> FastAPI:
    config = config or ServerConfig.from_env()
    if dispatcher is None:
        dispatcher = Dispatcher(
            requests=JsonLinesFileObserver(config.request_log),
            responses=JsonLinesFileObserver(config.response_log),
        )

    # no docs routes: every GET outside /health and /sse must answer 405
    app = FastAPI(title="MCP Mock Server", version="0.1.0",
                  openapi_url=None, docs_url=None, redoc_url=None)
    app.state.config = config
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """Liveness probe"""
        return {"status": "ok"}

    @app.get("/sse")
    async def sse(request: Request):
        """Event stream: one status message, then periodic pings"""
        stream = keepalive_stream(request.is_disconnected, config.keepalive_seconds)
        return StreamingResponse(stream, media_type="text/event-stream", headers=SSE_HEADERS)

    @app.post("/{path:path}")
    async def rpc(request: Request, path: str):
        """JSON-RPC endpoint; the path is ignored"""
        raw = await read_limited_body(request, config.max_body_bytes)
        result = dispatcher.handle_body(raw)
        return JSONResponse(result.body, status_code=result.status_code)

    # Every path matches the POST route, so any other method lands here as a 405
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return Response(status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    return app


def main(argv=None):
    config = ServerConfig.from_env()

    ap = argparse.ArgumentParser(description="Mock MCP JSON-RPC server")
    ap.add_argument("--host", default=config.host, help=f"Bind address (default: {config.host})")
    ap.add_argument("--port", type=int, default=config.port, help=f"Listen port (default: {config.port})")
    args = ap.parse_args(argv)
    config.host = args.host
    config.port = args.port

    LOG.info(f"🌐 MCP mock server listening on {config.host}:{config.port}")
    LOG.info(f"🔧 Request log: {config.request_log}")
    LOG.info(f"🔧 Response log: {config.response_log}")
    logging.getLogger("uvicorn.error").addFilter(OversizeTracebackFilter())

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
