"""Events that drive the club simulation.

Every event carries the minute it happened at and a numeric event id, which
is what appears in the printed event log.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Event:
    """Base of all events: when it happened and its numeric id."""

    time: int
    event_id: int


@dataclass(frozen=True)
class ClientArriveEvent(Event):
    """A client comes into the club."""

    event_id: int = field(default=1, init=False)
    client: str


@dataclass(frozen=True)
class ClientAwaitEvent(Event):
    """A client asks to wait for a free station."""

    event_id: int = field(default=3, init=False)
    client: str


@dataclass(frozen=True)
class ClientLeaveEvent(Event):
    """A client leaves, on their own or sent away by the club."""

    client: str


@dataclass(frozen=True)
class ErrorEvent(Event):
    """An error raised by the club while handling another event."""

    event_id: int = field(default=13, init=False)
    message: str


@dataclass(frozen=True)
class StationOccupyEvent(Event):
    """A client takes a gaming station."""

    client: str
    station_id: int


@dataclass(frozen=True)
class ShutdownEvent(Event):
    """The club closes for the day."""

    event_id: int = field(default=0, init=False)