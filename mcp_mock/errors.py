"""Error types raised by the mock server."""

# JSON-RPC 2.0 error codes used by the dispatcher
PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
TOOL_NOT_FOUND = -32000


class MockServerError(Exception):
    """Base error for the mock server."""


class JsonRpcError(MockServerError):
    """A failure that is reported to the caller as a JSON-RPC error object."""

    def __init__(self, code: int, message: str, http_status: int = 400) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(f"[{code}] {message}")


class PayloadTooLargeError(MockServerError):
    """Request body grew past the configured limit while streaming in.

    No JSON-RPC envelope is produced for this; the connection is dropped.
    """

    def __init__(self, received: int, limit: int) -> None:
        self.received = received
        self.limit = limit
        super().__init__(f"Request body exceeded {limit} bytes (received {received})")
