"""Line-by-line parser for the club's input file."""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from clubsim.timeutils import parse_time

_TIME = r"((?:[01][0-9]|2[0-3]):[0-5][0-9])"
_NUMBER_RE = re.compile(r"[0-9]+")
_WORKING_TIME_RE = re.compile(rf"{_TIME} {_TIME}")
_SPECIAL_EVENT_RE = re.compile(rf"{_TIME} 2 ([a-z0-9_-]+) ([0-9]+)")
_EVENT_RE = re.compile(rf"{_TIME} (1|3|4) ([a-z0-9_-]+)")


class ParseError(ValueError):
    """A line that does not fit where it appears in the file."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line


@dataclass(frozen=True)
class NumStationsRecord:
    num_stations: int


@dataclass(frozen=True)
class WorkingTimeRecord:
    open_time: int
    close_time: int


@dataclass(frozen=True)
class PriceRecord:
    price: int


@dataclass(frozen=True)
class SpecialEventRecord:
    """An event line that names a station (event id 2)."""

    time: int
    event_id: int
    client: str
    station_id: int


@dataclass(frozen=True)
class EventRecord:
    """An event line with a client name only (event ids 1, 3 and 4)."""

    time: int
    event_id: int
    client: str


Record = Union[
    NumStationsRecord, WorkingTimeRecord, PriceRecord, SpecialEventRecord, EventRecord
]


def _parse_num_stations(line: str) -> Optional[Record]:
    if _NUMBER_RE.fullmatch(line) is None:
        return None
    return NumStationsRecord(int(line))


def _parse_working_time(line: str) -> Optional[Record]:
    match = _WORKING_TIME_RE.fullmatch(line)
    if match is None:
        return None
    return WorkingTimeRecord(parse_time(match[1]), parse_time(match[2]))


def _parse_price(line: str) -> Optional[Record]:
    if _NUMBER_RE.fullmatch(line) is None:
        return None
    return PriceRecord(int(line))


def _parse_event(line: str) -> Optional[Record]:
    match = _SPECIAL_EVENT_RE.fullmatch(line)
    if match is not None:
        return SpecialEventRecord(parse_time(match[1]), 2, match[2], int(match[3]))
    match = _EVENT_RE.fullmatch(line)
    if match is not None:
        return EventRecord(parse_time(match[1]), int(match[2]), match[3])
    return None


class Parser:
    """Parses the file one line at a time: station count, hours, price, then events."""

    def __init__(self) -> None:
        self._records: list[Record] = []

    def _next_parser(self) -> Callable[[str], Optional[Record]]:
        if not self._records:
            return _parse_num_stations
        last = self._records[-1]
        if isinstance(last, NumStationsRecord):
            return _parse_working_time
        if isinstance(last, WorkingTimeRecord):
            return _parse_price
        return _parse_event

    def parse(self, line: str) -> Record:
        """Parse one line; raises ParseError and keeps its state if it does not fit."""
        record = self._next_parser()(line)
        if record is None:
            raise ParseError(line)
        self._records.append(record)
        return record

    def records(self) -> list[Record]:
        """Everything parsed so far, in file order."""
        return list(self._records)