# tests/fakes.py

from __future__ import annotations

import json
from typing import Any


class FakeSnapshotStore:
    """
    In-memory SnapshotRepo for unit tests.

    - Counts save_data calls so tests can assert persist-on-write
    - Round-trips through JSON like the real store does
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._raw: str | None = json.dumps(data) if data is not None else None
        self.saves = 0

    def load_data(self) -> dict[str, Any] | None:
        return json.loads(self._raw) if self._raw is not None else None

    def save_data(self, data: dict[str, Any]) -> None:
        self.saves += 1
        self._raw = json.dumps(data)



class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> int:
        self.now += ms
        return self.now
