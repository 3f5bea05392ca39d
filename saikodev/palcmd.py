"""Queue of palette commands for machines with dedicated colour RAM."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

QUEUE_DEPTH = 16

# The low 14 bits of the op/count word hold the count minus one.
_COUNT_MASK = 0x3FFF

PalValue = Union[int, bytes, Sequence[int]]


class PalCmdOp(IntEnum):
    """Operation encoded in the top bits of a command's op/count word."""

    COPY_LINE_LONG = 0x0000
    COPY_LINE_HALF = 0x4000
    SET_COLOR = 0x8000


@dataclass
class PalCmd:
    """One queued palette operation.

    ``value`` is a single colour for SET_COLOR and the source data for the
    copy operations. ``dest`` is the colour RAM address written to.
    """

    op: PalCmdOp
    count: int
    dest: int
    value: PalValue

    @property
    def op_cnt(self) -> int:
        """The packed op/count word as the hardware routine reads it."""
        return int(self.op) | ((self.count - 1) & _COUNT_MASK)


class PalCmdQueue:
    """Fixed-depth queue of palette commands, drained once per frame."""

    def __init__(self, depth: int = QUEUE_DEPTH) -> None:
        if depth < 1:
            raise ValueError(f"queue depth must be at least 1, got {depth}")
        self.depth = depth
        self._commands: list[PalCmd] = []

    @property
    def full(self) -> bool:
        return len(self._commands) >= self.depth

    def add(self, op: PalCmdOp | int, count: int, dest: int, value: PalValue) -> PalCmd | None:
        """Queue a command; return it, or None when the queue is full."""
        if not 1 <= count <= _COUNT_MASK + 1:
            raise ValueError(f"count must be between 1 and {_COUNT_MASK + 1}, got {count}")
        if self.full:
            return None
        cmd = PalCmd(PalCmdOp(op), count, dest, value)
        self._commands.append(cmd)
        return cmd

    def clear(self) -> None:
        """Drop every queued command."""
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PalCmd]:
        return iter(list(self._commands))