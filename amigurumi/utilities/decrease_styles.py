"""
Decrease style registry.

A decrease style decides which decrease variant (``DEC`` or ``INVDEC``) is
worked at each decrease position of a row. Both variants have identical
stitch arithmetic; they differ only in technique and finish, so the choice is
a caller preference rather than something the geometry determines.

Usage
-----
Styles self-register at import time by calling ``register()``::

    from amigurumi.utilities.decrease_styles import get

    pick = get("invisible")
    action = pick(0)  # StitchAction.INVDEC
"""

from __future__ import annotations

from collections.abc import Callable

from amigurumi.schemas.pattern import StitchAction

# Called with the 0-based index of the decrease within its row.
DecreaseStyle = Callable[[int], StitchAction]

_REGISTRY: dict[str, DecreaseStyle] = {}


def register(name: str, style: DecreaseStyle) -> None:
    """Register *style* under *name*, replacing any earlier registration.

    ``style(i)`` must return ``StitchAction.DEC`` or ``StitchAction.INVDEC``.
    """
    _REGISTRY[name] = style


def get(name: str) -> DecreaseStyle:
    """Return the decrease style registered as *name*.

    Raises
    ------
    KeyError
        If *name* has not been registered.
    """
    if name not in _REGISTRY:
        raise KeyError(f"Unknown decrease style: {name!r}")
    return _REGISTRY[name]


def list_styles() -> list[str]:
    """Return a sorted list of all registered style names."""
    return sorted(_REGISTRY.keys())


def _invisible(index: int) -> StitchAction:
    return StitchAction.INVDEC


def _standard(index: int) -> StitchAction:
    return StitchAction.DEC


def _alternating(index: int) -> StitchAction:
    return StitchAction.INVDEC if index % 2 == 0 else StitchAction.DEC


register("invisible", _invisible)
register("standard", _standard)
register("alternating", _alternating)
