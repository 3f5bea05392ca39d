"""Target platforms, bit helpers and per-platform input button layouts."""

from __future__ import annotations

from enum import IntEnum

PLAYER_COUNT = 2


class Target(IntEnum):
    """Supported hardware targets."""

    UNDEFINED = 0
    MD = 1
    C1 = 2
    C2 = 3
    S16B = 4
    S18 = 5
    CPS = 6
    CPS2 = 7
    ESPRADE = 8


def bit(n: int) -> int:
    """Return the mask with only bit ``n`` set."""
    return 1 << n


def is_pow2(x: int) -> bool:
    """Return True if ``x`` has at most one bit set (zero counts)."""
    return (x & (x - 1)) == 0


def _layout(**bits: int) -> dict[str, int]:
    return {name: bit(n) for name, n in bits.items()}


_MD = _layout(
    UP=0, DOWN=1, LEFT=2, RIGHT=3, B=4, C=5, A=6, START=7,
    Z=8, Y=9, X=10, MODE=11, **{"6B": 15}, UNPLUGGED=14,
)

_SYSTEM_C = _layout(
    UP=5, DOWN=4, LEFT=7, RIGHT=6, A=0, B=1, C=2, D=3,
    COIN=8, START=9, TEST=10, SERVICE=11, SELECT=12,
)

_CPS = _layout(
    RIGHT=0, LEFT=1, DOWN=2, UP=3, A=4, B=5, C=6, D=8, E=9, F=10,
    START=11, COIN=12, TEST=13, SERVICE=14,
)

_S16B = _layout(
    LEFT=7, RIGHT=6, UP=5, DOWN=4, D=3, A=1, B=2, C=0,
    COIN=8, START=9, TEST=10, SERVICE=11,
)

_ESPRADE = _layout(
    UP=0, DOWN=1, LEFT=2, RIGHT=3, A=4, B=5, C=6, START=7,
    COIN=8, TEST=9, D=10, E=11, SERVICE=12,
)

_GENERIC = _layout(
    UP=0, DOWN=1, LEFT=2, RIGHT=3, A=4, B=5, C=6, D=7, E=8, F=9,
    START=10, COIN=11, TEST=12, SERVICE=13,
)

_LAYOUTS = {
    Target.MD: _MD,
    Target.C1: _SYSTEM_C,
    Target.C2: _SYSTEM_C,
    Target.S18: _SYSTEM_C,
    Target.CPS: _CPS,
    Target.CPS2: _CPS,
    Target.S16B: _S16B,
    Target.ESPRADE: _ESPRADE,
}


def button_map(target: Target | int) -> dict[str, int]:
    """Return the button name to bit mask layout for ``target``."""
    return dict(_LAYOUTS.get(Target(target), _GENERIC))


def player_count() -> int:
    """Return the number of players polled for input."""
    return PLAYER_COUNT