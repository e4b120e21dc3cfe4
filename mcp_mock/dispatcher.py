"""
JSON-RPC method dispatch for the mock MCP server

Methods are resolved through a fixed table built once per dispatcher:
every alias is pre-resolved to the same handler as its canonical name,
so lookup is a single exact (case-sensitive) dict hit.
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional

from .errors import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TOOL_NOT_FOUND,
    JsonRpcError,
)
from .models import ToolDescriptor, make_error, make_result
from .observer import NullObserver, Observer

LOG = logging.getLogger("mcp.mock.dispatch")

PROTOCOL_VERSION = "2025-11-25"
SERVER_NAME = "mcp-mock"
SERVER_VERSION = "0.1.0"

ECHO_TOOL = ToolDescriptor(
    name="echo",
    description="Echoes the provided input back as result",
    parameters={
        "type": "object",
        "properties": {
            "message": {"type": "string"}
        },
        "required": ["message"],
    },
)

DEFAULT_TOOLS = (ECHO_TOOL,)

# canonical name -> accepted aliases
METHOD_ALIASES: Dict[str, tuple] = {
    "tools/list": ("listTools",),
    "resources/list": ("listResources",),
    "prompts/list": ("listPrompts",),
    "tools/call": ("callTool",),
    "initialize": ("init", "handshake"),
}

# Lightweight queries some clients send; all answered with ``{}``
NOOP_METHODS = frozenset({"ping", "serverInfo", "getMetadata", "status"})

Handler = Callable[[Dict[str, Any]], Dict[str, Any]]
ToolFn = Callable[[Dict[str, Any]], Any]


class DispatchResult(NamedTuple):
    status_code: int
    body: Dict[str, Any]


def echo(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {"output": arguments.get("message") or ""}


DEFAULT_TOOL_HANDLERS: Dict[str, ToolFn] = {"echo": echo}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class Dispatcher:
    """Routes parsed JSON-RPC requests to handlers and builds the envelopes"""

    def __init__(self,
                 tools: Iterable[ToolDescriptor] = DEFAULT_TOOLS,
                 tool_handlers: Optional[Mapping[str, ToolFn]] = None,
                 requests: Optional[Observer] = None,
                 responses: Optional[Observer] = None):
        self.tools = tuple(tools)
        self.tool_handlers = dict(DEFAULT_TOOL_HANDLERS if tool_handlers is None else tool_handlers)
        self.requests = requests or NullObserver()
        self.responses = responses or NullObserver()
        self._methods = self._build_method_table()

    def _build_method_table(self) -> Dict[str, Handler]:
        canonical: Dict[str, Handler] = {
            "tools/list": self._list_tools,
            "resources/list": self._list_resources,
            "prompts/list": self._list_prompts,
            "tools/call": self._call_tool,
            "initialize": self._initialize,
        }
        table: Dict[str, Handler] = {}
        for name, handler in canonical.items():
            table[name] = handler
            for alias in METHOD_ALIASES.get(name, ()):
                table[alias] = handler
        for name in NOOP_METHODS:
            table[name] = self._noop
        return table

    @property
    def accepted_methods(self) -> List[str]:
        return sorted(self._methods)

    # ----------------- Handlers -----------------
    def _list_tools(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": [t.model_dump() for t in self.tools]}

    def _list_resources(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"resources": []}

    def _list_prompts(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"prompts": []}

    def _call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        tool = _as_dict(params.get("tool"))
        name = params.get("name") or tool.get("name") or None
        arguments = _as_dict(params.get("arguments") or tool.get("arguments") or {})

        if not name:
            raise JsonRpcError(INVALID_PARAMS, "Missing tool name", http_status=400)

        fn = self.tool_handlers.get(name) if isinstance(name, str) else None
        if fn is None:
            raise JsonRpcError(TOOL_NOT_FOUND, f"Tool not found: {name}", http_status=404)

        LOG.info(f"🔧 TOOL INVOKED: {name}")
        return {"type": "tool_result", "value": fn(arguments)}

    def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "supportsToolCalls": True,
                "supportsStreams": False,
            },
            "serverInfo": {
                "name": SERVER_NAME,
                "version": SERVER_VERSION,
            },
        }

    def _noop(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    # ----------------- Entry points -----------------
    def handle_body(self, raw: bytes) -> DispatchResult:
        """Parse a raw HTTP body and dispatch it"""
        try:
            message = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            LOG.warning(f"❌ Could not parse request body as JSON: {type(e).__name__}")
            return DispatchResult(400, make_error(None, PARSE_ERROR, "Parse error"))
        return self.dispatch(message)

    def dispatch(self, message: Any) -> DispatchResult:
        """Dispatch one decoded JSON-RPC request; always yields one envelope

        A body that decodes to something other than an object (array, string,
        number, null) has no method and no id, so it ends up as an unknown
        method answered with ``id: null``.
        """
        fields = _as_dict(message)
        method = fields.get("method")
        request_id = fields.get("id")
        params = _as_dict(fields.get("params"))

        event = {"method": method, "id": request_id, "params": fields.get("params")}
        LOG.info(f"MCP mock received request: {json.dumps(event, default=str)}")
        self._record(self.requests, event)

        handler = self._methods.get(method) if isinstance(method, str) else None
        try:
            if handler is None:
                raise JsonRpcError(METHOD_NOT_FOUND, "Method not found", http_status=404)
            result = DispatchResult(200, make_result(request_id, handler(params)))
        except JsonRpcError as e:
            result = DispatchResult(e.http_status, make_error(request_id, e.code, e.message))

        LOG.info(f"MCP mock response: {json.dumps(result.body, default=str)}")
        self._record(self.responses, result.body)
        return result

    def _record(self, observer: Observer, event: Dict[str, Any]) -> None:
        try:
            observer.record(event)
        except Exception as e:
            LOG.debug(f"Observer {type(observer).__name__} failed: {e}")
