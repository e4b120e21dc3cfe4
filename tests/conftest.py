import pytest
from fastapi.testclient import TestClient

from mcp_mock.config import ServerConfig
from mcp_mock.dispatcher import Dispatcher
from mcp_mock.http_server import create_app
from mcp_mock.observer import MemoryObserver


@pytest.fixture
def requests_log() -> MemoryObserver:
    return MemoryObserver()


@pytest.fixture
def responses_log() -> MemoryObserver:
    return MemoryObserver()


@pytest.fixture
def dispatcher(requests_log: MemoryObserver, responses_log: MemoryObserver) -> Dispatcher:
    return Dispatcher(requests=requests_log, responses=responses_log)


@pytest.fixture
def config(tmp_path) -> ServerConfig:
    return ServerConfig(
        request_log=str(tmp_path / "requests.log"),
        response_log=str(tmp_path / "responses.log"),
        keepalive_seconds=0.01,
    )


@pytest.fixture
def app(config: ServerConfig, dispatcher: Dispatcher):
    return create_app(config, dispatcher)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
