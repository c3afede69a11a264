from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple


Level = Literal["info", "warning", "error"]


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class RunLog:
    """
    Leveled, in-memory log of one (or several) analysis runs.

    Repeated consecutive messages at the same level are stored once with a
    repeat count; only the newest ``max_entries`` entries are kept.
    """

    def __init__(self, *, max_entries: int = 2000) -> None:
        self._entries: List[_Entry] = []
        self._max_entries = int(max_entries)
        if self._max_entries <= 0:
            raise ValueError(f"max_entries must be > 0, got {max_entries}")

    def __len__(self) -> int:
        return len(self._entries)

    def info(self, message: str) -> None:
        self._record("info", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def messages(self, level: Optional[Level] = None) -> Tuple[str, ...]:
        """Messages in insertion order, optionally restricted to one level."""
        return tuple(e.message for e in self._entries if level is None or e.level == level)

    def lines(self) -> List[str]:
        """Rendered lines: ``LEVEL: message`` with a ``(xN)`` suffix for repeats."""
        return [
            f"{e.level.upper()}: {e.message}" + (f" (x{e.count})" if e.count > 1 else "")
            for e in self._entries
        ]

    def _record(self, level: Level, message: str) -> None:
        last = self._entries[-1] if self._entries else None
        if last is not None and (last.level, last.message) == (level, message):
            last.count += 1
            return
        self._entries.append(_Entry(level=level, message=message))
        del self._entries[: -self._max_entries]
