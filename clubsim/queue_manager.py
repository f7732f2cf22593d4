"""Seating of clients at stations and the waiting queue."""

from collections import deque

from clubsim.club import ClubState
from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.listeners import EventListener, EventPublisher
from clubsim.monitoring import ClientMonitoringSystem, StationMonitoringSystem

_LEAVE_FORCED = 11
_OCCUPY_FROM_QUEUE = 12


class ClientQueueManager(EventListener, EventPublisher):
    """Applies client events to the club, publishing errors and follow-up events."""

    def __init__(
        self,
        state: ClubState,
        clients: ClientMonitoringSystem,
        stations: StationMonitoringSystem,
    ) -> None:
        super().__init__()
        self._state = state
        self._clients = clients
        self._stations = stations
        self._queue: deque[str] = deque()

    def update_on_event(self, event: Event) -> None:
        """Apply ``event``, publishing and handling any events it causes."""
        super().update_on_event(event)

    def _emit(self, event: Event) -> None:
        self.publish(event)
        self.update_on_event(event)

    def _seat_next(self, time: int, station_id: int) -> None:
        if self._queue:
            self._emit(
                StationOccupyEvent(time, _OCCUPY_FROM_QUEUE, self._queue.popleft(), station_id)
            )

    def on_client_arrive(self, event: ClientArriveEvent) -> None:
        if event.time < self._stations.open_time:
            self.publish(ErrorEvent(event.time, "NotOpenYet"))
        elif self._clients.is_checked_in(event.client):
            self.publish(ErrorEvent(event.time, "YouShallNotPass"))
        else:
            self._clients.check_in(event.client)

    def on_client_await(self, event: ClientAwaitEvent) -> None:
        client = event.client
        if not self._clients.is_checked_in(client):
            self.publish(ErrorEvent(event.time, "ClientUnknown"))
        elif self._state.has_vacant_station():
            self.publish(ErrorEvent(event.time, "ICanWaitNoLonger!"))
        elif len(self._queue) == self._state.total_stations():
            self._clients.check_out(client)
            self._emit(ClientLeaveEvent(event.time, _LEAVE_FORCED, client))
        elif self._clients.is_bound(client):
            station = self._clients.station_of(client)
            self._clients.unbind(client)
            self._stations.stop_usage(station, event.time)
            self._seat_next(event.time, station)
        self._queue.append(client)

    def on_client_leave(self, event: ClientLeaveEvent) -> None:
        client = event.client
        if not self._clients.is_checked_in(client):
            self.publish(ErrorEvent(event.time, "ClientUnknown"))
            return
        if self._clients.is_bound(client):
            station = self._clients.station_of(client)
            self._clients.unbind(client)
            self._stations.stop_usage(station, event.time)
            self._state.vacate(station)
            self._seat_next(event.time, station)
        self._clients.check_out(client)

    def on_station_occupy(self, event: StationOccupyEvent) -> None:
        client = event.client
        if not self._clients.is_checked_in(client):
            self.publish(ErrorEvent(event.time, "ClientUnknown"))
            return
        if not self._state.is_available(event.station_id):
            self.publish(ErrorEvent(event.time, "PlaceIsBusy"))
            return
        if self._clients.is_bound(client):
            station = self._clients.station_of(client)
            self._stations.stop_usage(station, event.time)
            self._clients.unbind(client)
            self._state.vacate(station)
        self._stations.start_usage(event.station_id, event.time)
        self._clients.bind(client, event.station_id)
        self._state.occupy(event.station_id)
        # The client and everyone queued behind it are dropped from the queue.
        if client in self._queue:
            position = self._queue.index(client)
            while len(self._queue) > position:
                self._queue.pop()

    def on_shutdown(self, event: ShutdownEvent) -> None:
        for client in sorted(self._clients.clients()):
            self._emit(ClientLeaveEvent(event.time, _LEAVE_FORCED, client))