"""
Pattern notation: compress a row's stitch actions into a readable instruction.

describe() renders one row:

  starting row  → "6 single crochet into starting loop"
  repeating row → "[1 sc, 1 inc] repeated 6 times"
  otherwise     → "3 sc, 1 inc, 4 sc, 1 inc, 2 sc"

The repeat block is the shortest block length dividing the row whose copies
reproduce it end to end. Both forms share one run-length encoding. The text is
for people only; stitch counts are never re-derived from it.

expand() reverses describe() and is used to check that the notation says
exactly what the actions do.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from types import MappingProxyType

from amigurumi.schemas.pattern import Row, StitchAction

STARTING_ROW_TEMPLATE = "{count} single crochet into starting loop"

ABBREVIATIONS: MappingProxyType[StitchAction, str] = MappingProxyType(
    {
        StitchAction.SC: "single crochet",
        StitchAction.INC: "increase (2 sc in the same stitch)",
        StitchAction.DEC: "decrease (sc2tog through both loops)",
        StitchAction.INVDEC: "invisible decrease (sc2tog through front loops only)",
    }
)

_STARTING_RE = re.compile(r"^(\d+) single crochet into starting loop$")
_REPEAT_RE = re.compile(r"^\[(.+)\] repeated (\d+) times$")
_TOKEN_RE = re.compile(r"^(\d+) ([a-z]+)$")


def action_name(action: StitchAction) -> str:
    """Short name used in notation."""
    match action:
        case StitchAction.SC:
            return "sc"
        case StitchAction.INC:
            return "inc"
        case StitchAction.DEC:
            return "dec"
        case StitchAction.INVDEC:
            return "invdec"
        case _:
            raise ValueError(f"Unhandled stitch action: {action!r}")


def run_length_encode(actions: Sequence[StitchAction]) -> str:
    """Collapse consecutive equal actions into ``"<count> <name>"`` tokens."""
    tokens: list[str] = []
    current: StitchAction | None = None
    run = 0
    for action in actions:
        if action is current:
            run += 1
            continue
        if current is not None:
            tokens.append(f"{run} {action_name(current)}")
        current = action
        run = 1
    if current is not None:
        tokens.append(f"{run} {action_name(current)}")
    return ", ".join(tokens)


def find_repeat_block(actions: Sequence[StitchAction]) -> int | None:
    """
    Length of the shortest block that tiles *actions* at least twice, or None.

    Only divisors of ``len(actions)`` up to half its length are candidates.
    """
    n = len(actions)
    for length in range(1, n // 2 + 1):
        if n % length:
            continue
        block = actions[:length]
        if all(actions[i : i + length] == block for i in range(length, n, length)):
            return length
    return None


def describe(actions: Sequence[StitchAction], *, starting_row: bool = False) -> str:
    """
    Render a row's actions as pattern notation.

    Parameters
    ----------
    actions:
        The row's stitch actions, in working order.
    starting_row:
        Render as the gathered starting loop. The actions must all be SC.
    """
    actions = tuple(actions)
    if starting_row:
        if any(a is not StitchAction.SC for a in actions):
            raise ValueError("starting row must be plain single crochet")
        return STARTING_ROW_TEMPLATE.format(count=len(actions))

    length = find_repeat_block(actions)
    if length is not None:
        block = run_length_encode(actions[:length])
        return f"[{block}] repeated {len(actions) // length} times"
    return run_length_encode(actions)


def describe_row(row: Row) -> str:
    """Render *row*, treating row 1 as the starting loop."""
    return describe(row.actions, starting_row=row.is_starting_row)


def expand(description: str) -> tuple[StitchAction, ...]:
    """
    Parse notation produced by describe() back into actions.

    Raises:
        ValueError: If *description* is not in describe() format.
    """
    m = _STARTING_RE.match(description)
    if m:
        return (StitchAction.SC,) * int(m.group(1))

    m = _REPEAT_RE.match(description)
    if m:
        return _expand_rle(m.group(1)) * int(m.group(2))

    return _expand_rle(description)


def _expand_rle(text: str) -> tuple[StitchAction, ...]:
    if not text:
        return ()
    result: list[StitchAction] = []
    for token in text.split(", "):
        m = _TOKEN_RE.match(token)
        if not m:
            raise ValueError(f"not a stitch token: {token!r}")
        result.extend([StitchAction(m.group(2))] * int(m.group(1)))
    return tuple(result)
