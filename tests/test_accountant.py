import pytest

from clubsim.accountant import Accountant
from clubsim.accounting import AccountingSystem
from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.listeners import EventListener
from clubsim.monitoring import ClientMonitoringSystem, StationMonitoringSystem

PRICE = 10
OPEN = 540
CLOSE = 1140


class Setup:
    def __init__(self):
        self.stations = StationMonitoringSystem(OPEN, CLOSE, 2)
        self.accounting = AccountingSystem(2)
        self.clients = ClientMonitoringSystem()
        self.accountant = Accountant(self.stations, self.accounting, self.clients, PRICE)

    def seat(self, client, station_id, time):
        self.clients.check_in(client)
        self.clients.bind(client, station_id)
        self.stations.start_usage(station_id, time)


@pytest.fixture
def setup():
    return Setup()


def test_leave_charges_started_hours(setup):
    setup.seat("alice", 1, OPEN)
    setup.accountant.update_on_event(ClientLeaveEvent(OPEN + 90, 4, "alice"))
    assert setup.accounting.revenue(1) == 2 * PRICE
    assert setup.stations.usage_duration(1) == 90


def test_leave_exact_hour(setup):
    setup.seat("alice", 2, OPEN)
    setup.accountant.update_on_event(ClientLeaveEvent(OPEN + 60, 4, "alice"))
    assert setup.accounting.revenue(2) == PRICE


def test_leave_unbound_client_raises(setup):
    setup.clients.check_in("alice")
    with pytest.raises(KeyError):
        setup.accountant.update_on_event(ClientLeaveEvent(OPEN, 4, "alice"))


def test_await_charges_and_restarts(setup):
    setup.seat("alice", 1, OPEN)
    setup.accountant.update_on_event(ClientAwaitEvent(OPEN + 30, "alice"))
    assert setup.accounting.revenue(1) == PRICE
    assert setup.stations.usage_since_last_start(1, OPEN + 30) == 0


def test_occupy_charges_bound_client(setup):
    setup.seat("alice", 1, OPEN)
    setup.accountant.update_on_event(StationOccupyEvent(OPEN + 120, 2, "alice", 2))
    assert setup.accounting.revenue(1) == 2 * PRICE
    assert setup.accounting.revenue(2) == 0


def test_events_without_session_charge_nothing(setup):
    setup.clients.check_in("bob")
    for event in (
        ClientArriveEvent(OPEN, "bob"),
        ErrorEvent(OPEN, "ClientUnknown"),
        ClientAwaitEvent(OPEN + 10, "bob"),
        StationOccupyEvent(OPEN + 20, 2, "bob", 1),
    ):
        setup.accountant.update_on_event(event)
    assert [setup.accounting.revenue(s) for s in (1, 2)] == [0, 0]


def test_shutdown_charges_every_seated_client(setup):
    setup.seat("alice", 1, OPEN)
    setup.seat("bob", 2, OPEN + 30)
    setup.accountant.update_on_event(ShutdownEvent(CLOSE))
    assert setup.stations.usage_duration(1) == CLOSE - OPEN
    assert setup.stations.usage_duration(2) == CLOSE - OPEN - 30
    assert setup.accounting.revenue(1) == setup.accounting.revenue(2)


def test_shutdown_with_unseated_client_raises(setup):
    setup.clients.check_in("carol")
    with pytest.raises(KeyError):
        setup.accountant.update_on_event(ShutdownEvent(CLOSE))


def test_accountant_publishes_to_listeners(setup):
    received = []

    class Sink(EventListener):
        def on_shutdown(self, event):
            received.append(event)

    setup.accountant.add_listener(Sink())
    event = ShutdownEvent(CLOSE)
    setup.accountant.publish(event)
    assert received == [event]