"""Interpretation of interrupt callback pointers.

The top byte of a 68000 pointer never reaches the address bus, so it selects
how a registered callback is invoked.
"""

from __future__ import annotations

from enum import Enum

HANDLER_UNUSED = 0x68000000


class HandlerKind(Enum):
    """How an interrupt handler treats a registered callback."""

    FULL = "full"        # called with d0-d1/a0-a1 preserved
    NONE = "none"        # not called at all
    MINIMAL = "minimal"  # called with only a0 preserved


def classify_handler(pointer: int) -> HandlerKind:
    """Classify a 32-bit callback pointer by its top byte."""
    if not 0 <= pointer <= 0xFFFFFFFF:
        raise ValueError(f"pointer out of 32-bit range: {pointer:#x}")
    top = pointer >> 24
    if top & 0x80:
        return HandlerKind.MINIMAL
    if top == 0:
        return HandlerKind.FULL
    return HandlerKind.NONE