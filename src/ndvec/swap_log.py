"""
Swap Log
========
Chronological record of the axis swaps applied to a container.

Why is this file needed?
------------------------
1. Undo: `NDVec.revert` walks the log backwards and applies each inverse.
2. Policy: `RevertMode` decides whether the log survives a revert.

Classes:
    SwapRecord: One positional exchange (a, b).
    SwapLog: Append-only sequence of SwapRecords.
    RevertMode: Replay-only vs. consume-and-clear.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, List, Tuple


class RevertMode(StrEnum):
    REPLAY = "replay"      # keep the log after reverting
    CONSUME = "consume"    # clear the log after reverting


@dataclass(frozen=True)
class SwapRecord:
    a: int
    b: int

    def inverse(self) -> SwapRecord:
        """The exchange that undoes this one."""
        return SwapRecord(self.b, self.a)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.a, self.b)


@dataclass
class SwapLog:
    """
    Append-only log of swaps. Records are only removed by `clear()`, which the
    container calls when reverting in CONSUME mode.
    """
    _records: List[SwapRecord] = field(default_factory=list)

    def append(self, record: SwapRecord) -> None:
        self._records.append(record)

    def clear(self) -> None:
        self._records.clear()

    def reversed_records(self) -> Iterator[SwapRecord]:
        """Records in reverse chronological order (most recent first)."""
        return reversed(self._records)

    @property
    def records(self) -> Tuple[SwapRecord, ...]:
        return tuple(self._records)

    def __iter__(self) -> Iterator[SwapRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
