"""Reducer input: a closed set of event kinds"""
from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    MOVE = "move"
    ROTATE = "rotate"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    dx: int = 0
    dy: int = 0


def Move(dx: int, dy: int) -> Event:
    if not isinstance(dx, int) or not isinstance(dy, int):
        raise TypeError(f"Move deltas must be ints, got {dx!r}, {dy!r}")
    return Event(EventKind.MOVE, dx, dy)


def Rotate() -> Event:
    return Event(EventKind.ROTATE)


# A gravity tick is just a one-row soft drop.
GRAVITY = Move(0, 1)
