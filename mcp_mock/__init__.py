"""
Mock MCP server
JSON-RPC 2.0 over HTTP with a fixed echo tool, a health check and an SSE keep-alive stream
"""

from .config import ServerConfig
from .dispatcher import Dispatcher, DispatchResult
from .errors import JsonRpcError, PayloadTooLargeError
from .observer import JsonLinesFileObserver, MemoryObserver, Observer

__all__ = [
    'ServerConfig',
    'Dispatcher',
    'DispatchResult',
    'JsonRpcError',
    'PayloadTooLargeError',
    'JsonLinesFileObserver',
    'MemoryObserver',
    'Observer',
]
