"""Reports on events and on station accounting, and their generators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from clubsim.accounting import AccountingSystem
from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.listeners import EventListener
from clubsim.monitoring import StationMonitoringSystem
from clubsim.timeutils import format_time


class Report(ABC):
    """A generated report, rendered as one line of text."""

    @property
    @abstractmethod
    def content(self) -> str:
        """The report's text."""

    def __str__(self) -> str:
        return self.content


class ReportGenerator(ABC):
    """Produces a report from what it has observed."""

    @abstractmethod
    def generate_report(self) -> Optional[Report]:
        """The latest report, or None if nothing has been reported yet."""


@dataclass(frozen=True)
class EventReport(Report):
    """Log line for one event: ``HH:MM <id> <payload>``."""

    event_id: int
    time: int
    payload: str

    @property
    def content(self) -> str:
        return f"{format_time(self.time)} {self.event_id} {self.payload}"


@dataclass(frozen=True)
class AccountingReport(Report):
    """Day summary for one station: ``<station> <revenue> HH:MM``."""

    station_id: int
    revenue: int
    duration: int

    @property
    def content(self) -> str:
        return f"{self.station_id} {self.revenue} {format_time(self.duration)}"


class EventReportGenerator(EventListener, ReportGenerator):
    """Turns each event except shutdown into an event report."""

    def __init__(self) -> None:
        self._generated: Optional[EventReport] = None

    def update_on_event(self, event: Event) -> None:
        """Report on ``event``; a shutdown keeps the previous report."""
        super().update_on_event(event)

    def generate_report(self) -> Optional[EventReport]:
        return self._generated

    def _report(self, event: Event, payload: str) -> None:
        self._generated = EventReport(event.event_id, event.time, payload)

    def on_client_arrive(self, event: ClientArriveEvent) -> None:
        self._report(event, event.client)

    def on_client_await(self, event: ClientAwaitEvent) -> None:
        self._report(event, event.client)

    def on_client_leave(self, event: ClientLeaveEvent) -> None:
        self._report(event, event.client)

    def on_error(self, event: ErrorEvent) -> None:
        self._report(event, event.message)

    def on_station_occupy(self, event: StationOccupyEvent) -> None:
        self._report(event, f"{event.client} {event.station_id}")


class AccountingReportGenerator(EventListener, ReportGenerator):
    """Summarises one station's revenue and usage when the club shuts down."""

    def __init__(
        self,
        accounting: AccountingSystem,
        monitoring: StationMonitoringSystem,
        station_id: int,
    ) -> None:
        self._accounting = accounting
        self._monitoring = monitoring
        self._station_id = station_id
        self._generated: Optional[AccountingReport] = None

    def update_on_event(self, event: Event) -> None:
        """Produce the station summary if ``event`` is a shutdown."""
        super().update_on_event(event)

    def generate_report(self) -> Optional[AccountingReport]:
        return self._generated

    def on_shutdown(self, event: ShutdownEvent) -> None:
        self._generated = AccountingReport(
            self._station_id,
            self._accounting.revenue(self._station_id),
            self._monitoring.usage_duration(self._station_id),
        )