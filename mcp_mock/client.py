"""
Smoke-test client for the mock MCP server
Talks JSON-RPC over HTTP the same way real MCP clients probe the mock
"""

import argparse
import asyncio
import itertools
import json
import os
import sys
from typing import Any, Dict, Optional

import httpx

DEFAULT_URL = os.getenv("MCP_MOCK_URL", "http://localhost:4000")


class MockClient:
    """Thin async JSON-RPC client over httpx"""

    def __init__(self, base_url: str = DEFAULT_URL,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=timeout)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> "MockClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def health(self) -> Dict[str, Any]:
        r = await self._http.get("/health")
        r.raise_for_status()
        return r.json()

    async def call(self, method: str, params: Optional[Dict[str, Any]] = None,
                   id: Any = None) -> Dict[str, Any]:
        """Send one request and return the decoded envelope, error or not"""
        payload: Dict[str, Any] = {
            "jsonrpc": "2.0",
            "method": method,
            "id": next(self._ids) if id is None else id,
        }
        if params is not None:
            payload["params"] = params
        r = await self._http.post("/", json=payload)
        return r.json()

    async def initialize(self) -> Dict[str, Any]:
        return await self.call("initialize")

    async def list_tools(self) -> Dict[str, Any]:
        return await self.call("tools/list")

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.call("tools/call", {"name": name, "arguments": arguments or {}})

    async def smoke(self, message: str = "hello") -> Dict[str, Any]:
        """Run health, handshake, listing and an echo call; return a summary"""
        health = await self.health()
        init = await self.initialize()
        tools = await self.list_tools()
        echoed = await self.call_tool("echo", {"message": message})

        tool_names = [t["name"] for t in tools.get("result", {}).get("tools", [])]
        output = echoed.get("result", {}).get("value", {}).get("output")
        return {
            "health": health.get("status"),
            "server": init.get("result", {}).get("serverInfo", {}),
            "tools": tool_names,
            "echo": output,
            "ok": health.get("status") == "ok" and "echo" in tool_names and output == message,
        }


async def _run(url: str, message: str) -> Dict[str, Any]:
    async with MockClient(url) as client:
        return await client.smoke(message)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Smoke-test a running MCP mock server")
    ap.add_argument("--url", default=DEFAULT_URL, help=f"Server base URL (default: {DEFAULT_URL})")
    ap.add_argument("--message", default="hello", help="Text to send through the echo tool")
    args = ap.parse_args(argv)

    try:
        summary = asyncio.run(_run(args.url, args.message))
    except httpx.HTTPError as e:
        print(f"❌ Smoke test failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(summary, indent=2))
    return 0 if summary["ok"] else 1


if __name__ == "__main__":
    sys.exit(main())
