import pytest

from clubsim.accounting import AccountingSystem
from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    ShutdownEvent,
    StationOccupyEvent,
)
from clubsim.monitoring import StationMonitoringSystem
from clubsim.reports import (
    AccountingReport,
    AccountingReportGenerator,
    EventReport,
    EventReportGenerator,
)
from clubsim.timeutils import format_time, parse_time


def test_event_report_content():
    report = EventReport(1, parse_time("09:05"), "alice")
    assert report.content == "09:05 1 alice"


def test_report_str_is_content():
    report = EventReport(13, parse_time("10:00"), "NotOpenYet")
    assert str(report) == report.content


def test_accounting_report_content():
    assert AccountingReport(2, 30, 90).content == "2 30 01:30"


def test_accounting_report_pads_duration():
    report = AccountingReport(1, 0, 5)
    assert report.content.endswith(" " + format_time(5))
    assert report.content.startswith("1 0 ")


def test_event_generator_starts_empty():
    assert EventReportGenerator().generate_report() is None


def test_event_generator_occupy_payload():
    generator = EventReportGenerator()
    generator.update_on_event(StationOccupyEvent(parse_time("10:00"), 2, "bob", 3))
    assert generator.generate_report().content == "10:00 2 bob 3"


def test_event_generator_error_uses_message():
    generator = EventReportGenerator()
    event = ErrorEvent(parse_time("08:00"), "NotOpenYet")
    generator.update_on_event(event)
    assert generator.generate_report() == EventReport(13, event.time, "NotOpenYet")


@pytest.mark.parametrize(
    "event",
    [
        ClientArriveEvent(600, "carol"),
        ClientAwaitEvent(601, "carol"),
        ClientLeaveEvent(602, 11, "carol"),
    ],
)
def test_event_generator_client_events(event):
    generator = EventReportGenerator()
    generator.update_on_event(event)
    assert generator.generate_report() == EventReport(event.event_id, event.time, "carol")


def test_event_generator_shutdown_keeps_previous():
    generator = EventReportGenerator()
    generator.update_on_event(ShutdownEvent(700))
    assert generator.generate_report() is None
    generator.update_on_event(ClientArriveEvent(600, "dave"))
    before = generator.generate_report()
    generator.update_on_event(ShutdownEvent(700))
    assert generator.generate_report() is before


@pytest.fixture
def systems():
    accounting = AccountingSystem(2)
    monitoring = StationMonitoringSystem(0, 1000, 2)
    monitoring.start_usage(1, 0)
    monitoring.stop_usage(1, 90)
    accounting.account(1, 90, 10)
    return accounting, monitoring


def test_accounting_generator_reports_on_shutdown(systems):
    accounting, monitoring = systems
    generator = AccountingReportGenerator(accounting, monitoring, 1)
    generator.update_on_event(ShutdownEvent(1000))
    assert generator.generate_report() == AccountingReport(
        1, accounting.revenue(1), monitoring.usage_duration(1)
    )


def test_accounting_generator_ignores_other_events(systems):
    accounting, monitoring = systems
    generator = AccountingReportGenerator(accounting, monitoring, 1)
    generator.update_on_event(ClientArriveEvent(10, "alice"))
    generator.update_on_event(ErrorEvent(10, "ClientUnknown"))
    assert generator.generate_report() is None


def test_accounting_generator_unused_station(systems):
    accounting, monitoring = systems
    generator = AccountingReportGenerator(accounting, monitoring, 2)
    generator.update_on_event(ShutdownEvent(1000))
    report = generator.generate_report()
    assert (report.station_id, report.revenue, report.duration) == (2, 0, 0)