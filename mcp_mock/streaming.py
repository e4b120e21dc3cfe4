"""
Server-sent events keep-alive stream
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Dict

LOG = logging.getLogger("mcp.mock.sse")

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
}


def format_event(event: str, data: Dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data, separators=(',', ':'))}\n\n"


async def keepalive_stream(is_disconnected: Callable[[], Awaitable[bool]],
                           interval: float = 15.0) -> AsyncIterator[str]:
    """Yield one ``message`` event, then a ``ping`` every ``interval`` seconds

    Stops as soon as ``is_disconnected`` reports the client is gone.  When
    the response is torn down the pending sleep is cancelled, which ends the
    generator; nothing is yielded after that.
    """
    LOG.info("📡 SSE client connected")
    try:
        yield format_event("message", {"status": "ok"})
        while True:
            await asyncio.sleep(interval)
            if await is_disconnected():
                break
            yield format_event("ping", {})
    finally:
        LOG.info("📴 SSE client disconnected")
