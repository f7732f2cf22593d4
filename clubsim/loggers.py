"""Listeners that write event lines and the day's accounting summary to a logger."""

from clubsim.accounting import AccountingSystem
from clubsim.events import Event, ShutdownEvent
from clubsim.listeners import EventListener
from clubsim.logsystem import Logger
from clubsim.monitoring import StationMonitoringSystem
from clubsim.reports import AccountingReportGenerator, EventReportGenerator


class EventLogger(EventListener):
    """Logs one line for every event that has an event report."""

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def update_on_event(self, event: Event) -> None:
        """Log the report line for ``event``; shutdown events produce none."""
        generator = EventReportGenerator()
        generator.update_on_event(event)
        report = generator.generate_report()
        if report is not None:
            self._logger.log(report.content)


class AccountingLogger(EventListener):
    """Logs every station's revenue and usage when the club shuts down."""

    def __init__(
        self,
        logger: Logger,
        accounting: AccountingSystem,
        monitoring: StationMonitoringSystem,
    ) -> None:
        self._logger = logger
        self._accounting = accounting
        self._monitoring = monitoring

    def update_on_event(self, event: Event) -> None:
        """Log the per-station summary if ``event`` is a shutdown."""
        super().update_on_event(event)

    def on_shutdown(self, event: ShutdownEvent) -> None:
        for station_id in self._monitoring.station_ids():
            generator = AccountingReportGenerator(
                self._accounting, self._monitoring, station_id
            )
            generator.update_on_event(event)
            report = generator.generate_report()
            if report is not None:
                self._logger.log(report.content)