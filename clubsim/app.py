"""Loading an input file, running the club day over it, and the command line."""

import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.orchestrator import Orchestrator
from clubsim.parser import (
    EventRecord,
    NumStationsRecord,
    ParseError,
    Parser,
    PriceRecord,
    Record,
    SpecialEventRecord,
    WorkingTimeRecord,
)


class AppError(Exception):
    """Base of the errors reported while loading the input file."""


class FileDoesNotExistError(AppError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File {filename} does not exist")


class UnableToOpenFileError(AppError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File {filename} could not be opened")


class InvalidFileFormatError(AppError):
    """Carries the offending line as its message."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line


def _check_file(path: Path) -> None:
    if not path.exists():
        raise FileDoesNotExistError(str(path))
    if not path.is_file():
        raise UnableToOpenFileError(str(path))


def _to_event(record: Record) -> Event:
    match record:
        case SpecialEventRecord(time, event_id, client, station_id):
            return StationOccupyEvent(time, event_id, client, station_id)
        case EventRecord(time, 1, client):
            return ClientArriveEvent(time, client)
        case EventRecord(time, 3, client):
            return ClientAwaitEvent(time, client)
        case EventRecord(time, 4, client):
            return ClientLeaveEvent(time, 4, client)
    raise ValueError(f"unexpected record: {record!r}")


class App:
    """A club day loaded from an input file."""

    def __init__(self, filename: Union[str, Path]) -> None:
        path = Path(filename)
        _check_file(path)
        parser = Parser()
        try:
            with path.open(encoding="utf-8", errors="replace", newline="\n") as handle:
                for line in handle:
                    try:
                        parser.parse(line.removesuffix("\n"))
                    except ParseError as error:
                        raise InvalidFileFormatError(error.line) from None
        except OSError:
            raise UnableToOpenFileError(str(filename)) from None

        records = parser.records()
        if len(records) < 3:
            raise InvalidFileFormatError("incomplete header")
        stations, hours, price = records[:3]
        assert isinstance(stations, NumStationsRecord)
        assert isinstance(hours, WorkingTimeRecord)
        assert isinstance(price, PriceRecord)
        self.num_stations = stations.num_stations
        self.open_time = hours.open_time
        self.close_time = hours.close_time
        self.price = price.price
        self.events: list[Event] = [_to_event(record) for record in records[3:]]

    def run(self) -> None:
        """Print the day's event log and the per-station summary to standard output."""
        orchestrator = Orchestrator(
            self.num_stations, self.open_time, self.close_time, self.price
        )
        orchestrator.log_time(self.open_time)
        for event in self.events:
            orchestrator.dispatch(event)
        orchestrator.dispatch(ShutdownEvent(self.close_time))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the club day described by the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: clubsim <filename>", file=sys.stderr)
        return 1
    try:
        App(args[0]).run()
    except Exception as error:
        print(error, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())