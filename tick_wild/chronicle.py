from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Any

from tick_wild.types import Location

BIRTH = "birth"
DEATH = "death"


@dataclass(frozen=True)
class LifeEvent:
    tick: int
    kind: str
    species: str
    location: Location | None
    cause: str | None = None


class Chronicle:
    """Bounded log of births and deaths. ``max_entries <= 0`` keeps everything."""

    def __init__(self, max_entries: int = 0) -> None:
        self._max = max_entries
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[LifeEvent] = deque(maxlen=maxlen)

    def record(self, tick: int, kind: str, species: str,
               location: Location | None = None, cause: str | None = None) -> None:
        self._events.append(LifeEvent(tick, kind, species, location, cause))

    def query(self, kind: str | None = None, species: str | None = None,
              cause: str | None = None, after: int | None = None,
              before: int | None = None) -> list[LifeEvent]:
        result: list[LifeEvent] = list(self._events)
        if kind is not None:
            result = [e for e in result if e.kind == kind]
        if species is not None:
            result = [e for e in result if e.species == species]
        if cause is not None:
            result = [e for e in result if e.cause == cause]
        if after is not None:
            result = [e for e in result if e.tick > after]
        if before is not None:
            result = [e for e in result if e.tick < before]
        return result

    def last(self, kind: str) -> LifeEvent | None:
        for e in reversed(self._events):
            if e.kind == kind:
                return e
        return None

    def deaths_by_cause(self, species: str | None = None) -> Counter[str]:
        return Counter(e.cause for e in self.query(kind=DEATH, species=species))

    def clear(self) -> None:
        self._events.clear()

    def snapshot(self) -> list[dict[str, Any]]:
        return [
            {
                "tick": e.tick,
                "kind": e.kind,
                "species": e.species,
                "location": None if e.location is None else [e.location.row, e.location.col],
                "cause": e.cause,
            }
            for e in self._events
        ]

    def restore(self, data: list[dict[str, Any]]) -> None:
        self._events.clear()
        for d in data:
            loc = d["location"]
            self._events.append(LifeEvent(
                tick=d["tick"],
                kind=d["kind"],
                species=d["species"],
                location=None if loc is None else Location(loc[0], loc[1]),
                cause=d["cause"],
            ))

    def __len__(self) -> int:
        return len(self._events)
