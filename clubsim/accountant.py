"""Charging clients for the time they spend at stations."""

from clubsim.accounting import AccountingSystem
from clubsim.events import (
    ClientAwaitEvent,
    ClientLeaveEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.listeners import EventListener, EventPublisher
from clubsim.monitoring import ClientMonitoringSystem, StationMonitoringSystem

_LEAVE_FORCED = 11


class Accountant(EventListener, EventPublisher):
    """Books revenue whenever a client's session at a station ends."""

    def __init__(
        self,
        stations: StationMonitoringSystem,
        accounting: AccountingSystem,
        clients: ClientMonitoringSystem,
        price: int,
    ) -> None:
        super().__init__()
        self._stations = stations
        self._accounting = accounting
        self._clients = clients
        self._price = price

    def update_on_event(self, event: Event) -> None:
        """Charge for the session that ``event`` ends, if any."""
        super().update_on_event(event)

    def _charge(self, client: str, time: int) -> None:
        station = self._clients.station_of(client)
        self._stations.stop_usage(station, time)
        duration = self._stations.usage_since_last_start(station, time)
        self._stations.start_usage(station, time)
        self._accounting.account(station, duration, self._price)

    def on_client_await(self, event: ClientAwaitEvent) -> None:
        if self._clients.is_bound(event.client):
            self._charge(event.client, event.time)

    def on_station_occupy(self, event: StationOccupyEvent) -> None:
        if self._clients.is_bound(event.client):
            self._charge(event.client, event.time)

    def on_client_leave(self, event: ClientLeaveEvent) -> None:
        """Charge the leaving client; raises KeyError if it holds no station."""
        self._charge(event.client, event.time)

    def on_shutdown(self, event: ShutdownEvent) -> None:
        for client in sorted(self._clients.clients()):
            self.update_on_event(ClientLeaveEvent(event.time, _LEAVE_FORCED, client))