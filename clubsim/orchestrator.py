"""Wiring of the club's components and the order in which they see events."""

from typing import Optional

from clubsim.accountant import Accountant
from clubsim.accounting import AccountingSystem
from clubsim.club import ClubState
from clubsim.events import Event, ShutdownEvent
from clubsim.loggers import AccountingLogger, EventLogger
from clubsim.logsystem import ConsoleLogStream, Logger, LogStream
from clubsim.monitoring import ClientMonitoringSystem, StationMonitoringSystem
from clubsim.queue_manager import ClientQueueManager
from clubsim.timeutils import format_time


class Orchestrator:
    """Owns every component of one club day and feeds events through them."""

    def __init__(
        self,
        num_stations: int,
        open_time: int,
        close_time: int,
        price: int,
        stream: Optional[LogStream] = None,
    ) -> None:
        self.state = ClubState(num_stations)
        self.clients = ClientMonitoringSystem()
        self.stations = StationMonitoringSystem(open_time, close_time, num_stations)
        self.accounting = AccountingSystem(num_stations)
        self.logger = Logger(stream if stream is not None else ConsoleLogStream())
        self.queue_manager = ClientQueueManager(self.state, self.clients, self.stations)
        self.accountant = Accountant(self.stations, self.accounting, self.clients, price)
        self.event_logger = EventLogger(self.logger)
        self.accounting_logger = AccountingLogger(self.logger, self.accounting, self.stations)
        self.queue_manager.add_listener(self.event_logger)

    def dispatch(self, event: Event) -> None:
        """Pass ``event`` to the components; a shutdown also logs the closing time."""
        self.event_logger.update_on_event(event)
        self.accountant.update_on_event(event)
        self.queue_manager.update_on_event(event)
        if isinstance(event, ShutdownEvent):
            self.log_time(event.time)
        self.accounting_logger.update_on_event(event)

    def log_time(self, time: int) -> None:
        """Log a bare ``HH:MM`` line."""
        self.logger.log(format_time(time))