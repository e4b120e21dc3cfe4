"""
Configuration for the mock MCP server
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class ServerConfig:
    """Runtime settings for the mock server"""

    host: str = "0.0.0.0"
    port: int = 4000

    # Observer sinks (append-only JSON lines)
    request_log: str = "/tmp/mcp-mock-requests.log"
    response_log: str = "/tmp/mcp-mock-responses.log"

    # Limits
    max_body_bytes: int = 1_000_000
    keepalive_seconds: float = 15.0

    log_level: str = "info"

    @classmethod
    def from_env(cls) -> 'ServerConfig':
        """Create config from environment variables"""
        return cls(
            host=os.getenv('MCP_MOCK_HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', '4000')),
            request_log=os.getenv('MCP_MOCK_REQUEST_LOG', '/tmp/mcp-mock-requests.log'),
            response_log=os.getenv('MCP_MOCK_RESPONSE_LOG', '/tmp/mcp-mock-responses.log'),
            max_body_bytes=int(os.getenv('MCP_MOCK_MAX_BODY_BYTES', '1000000')),
            keepalive_seconds=float(os.getenv('MCP_MOCK_KEEPALIVE_SECONDS', '15')),
            log_level=os.getenv('MCP_MOCK_LOG_LEVEL', 'info').lower(),
        )
