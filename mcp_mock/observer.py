"""
Traffic observers

The dispatcher reports every request it handles and every envelope it
produces to an observer.  Observers are purely a side channel: nothing
reads their output back and a failing observer never changes what the
client receives.
"""

import json
import logging
from typing import Any, Dict, List, Protocol, runtime_checkable

LOG = logging.getLogger("mcp.mock.observer")


@runtime_checkable
class Observer(Protocol):
    """Anything that can record one traffic event"""

    def record(self, event: Dict[str, Any]) -> None: ...


class JsonLinesFileObserver:
    """Appends each event as one JSON line to ``path``"""

    def __init__(self, path: str):
        self.path = path

    def record(self, event: Dict[str, Any]) -> None:
        try:
            line = json.dumps(event)
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(line + "\n")
        except (OSError, TypeError, ValueError) as e:
            # best-effort: disk full, permission denied, unserializable event
            LOG.debug(f"Could not append to {self.path}: {e}")


class MemoryObserver:
    """Keeps events in a list; used by tests and the smoke client"""

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    def record(self, event: Dict[str, Any]) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class NullObserver:
    def record(self, event: Dict[str, Any]) -> None:
        return None
