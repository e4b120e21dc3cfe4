"""Tests for traffic observers."""

import json

from mcp_mock.observer import JsonLinesFileObserver, MemoryObserver, NullObserver, Observer


class TestObserverProtocol:
    def test_implementations_satisfy_protocol(self, tmp_path) -> None:
        assert isinstance(MemoryObserver(), Observer)
        assert isinstance(NullObserver(), Observer)
        assert isinstance(JsonLinesFileObserver(str(tmp_path / "x.log")), Observer)


class TestJsonLinesFileObserver:
    def test_appends_one_line_per_event(self, tmp_path) -> None:
        path = tmp_path / "events.log"
        path.write_text('{"existing": true}\n')
        observer = JsonLinesFileObserver(str(path))

        observer.record({"method": "ping", "id": 1})
        observer.record({"method": "tools/list", "id": None})

        lines = path.read_text().splitlines()
        assert [json.loads(line) for line in lines] == [
            {"existing": True},
            {"method": "ping", "id": 1},
            {"method": "tools/list", "id": None},
        ]

    def test_write_failure_is_swallowed(self, tmp_path) -> None:
        observer = JsonLinesFileObserver(str(tmp_path))  # a directory
        observer.record({"method": "ping"})

    def test_unserializable_event_is_swallowed(self, tmp_path) -> None:
        path = tmp_path / "events.log"
        observer = JsonLinesFileObserver(str(path))
        observer.record({"bad": object()})
        assert not path.exists()


class TestMemoryObserver:
    def test_records_and_clears(self) -> None:
        observer = MemoryObserver()
        observer.record({"a": 1})
        assert observer.events == [{"a": 1}]
        observer.clear()
        assert observer.events == []
