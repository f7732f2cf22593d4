"""Event listeners, event publishers and dispatch of events to typed hooks."""

from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)

_HOOKS: dict[type, str] = {
    ClientArriveEvent: "on_client_arrive",
    ClientAwaitEvent: "on_client_await",
    ClientLeaveEvent: "on_client_leave",
    ErrorEvent: "on_error",
    StationOccupyEvent: "on_station_occupy",
    ShutdownEvent: "on_shutdown",
}


class EventListener:
    """Receives events and hands each one to the hook for its type.

    Every hook does nothing unless a subclass overrides it.
    """

    def update_on_event(self, event: Event) -> None:
        for cls in type(event).__mro__:
            hook = _HOOKS.get(cls)
            if hook is not None:
                getattr(self, hook)(event)
                return
        raise TypeError(f"unsupported event type: {type(event).__name__}")

    def on_client_arrive(self, event: ClientArriveEvent) -> None:
        pass

    def on_client_await(self, event: ClientAwaitEvent) -> None:
        pass

    def on_client_leave(self, event: ClientLeaveEvent) -> None:
        pass

    def on_error(self, event: ErrorEvent) -> None:
        pass

    def on_station_occupy(self, event: StationOccupyEvent) -> None:
        pass

    def on_shutdown(self, event: ShutdownEvent) -> None:
        pass


class EventPublisher:
    """Passes published events to its listeners in the order they were added."""

    def __init__(self) -> None:
        super().__init__()
        self._listeners: list[EventListener] = []

    def add_listener(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def publish(self, event: Event) -> None:
        for listener in self._listeners:
            listener.update_on_event(event)