"""Tracking of station usage time and of clients present in the club."""

from typing import Optional


class StationMonitor:
    """Accumulates the time a single station has been in use."""

    __slots__ = ("_last_start", "_total")

    def __init__(self) -> None:
        self._last_start = 0
        self._total = 0

    def start(self, time: int) -> None:
        self._last_start = time

    def stop(self, time: int) -> None:
        self._total += time - self._last_start

    def elapsed(self) -> int:
        """Total minutes accumulated by completed usage intervals."""
        return self._total

    def elapsed_since_last_start(self, time: int) -> int:
        return time - self._last_start


class StationMonitoringSystem:
    """Usage monitors for every station, with the club's opening hours."""

    def __init__(self, open_time: int, close_time: int, num_stations: int) -> None:
        self.open_time = open_time
        self.close_time = close_time
        self._monitors = [StationMonitor() for _ in range(num_stations)]

    def _monitor(self, station_id: int) -> StationMonitor:
        if station_id <= 0:
            raise ValueError(f"invalid station id: {station_id}")
        return self._monitors[station_id - 1]

    def start_usage(self, station_id: int, time: int) -> None:
        self._monitor(station_id).start(time)

    def stop_usage(self, station_id: int, time: int) -> None:
        self._monitor(station_id).stop(time)

    def usage_duration(self, station_id: int) -> int:
        return self._monitor(station_id).elapsed()

    def usage_since_last_start(self, station_id: int, time: int) -> int:
        return self._monitor(station_id).elapsed_since_last_start(time)

    def station_ids(self) -> list[int]:
        return list(range(1, len(self._monitors) + 1))

    def reset(self, station_id: Optional[int] = None) -> None:
        """Clear one station's monitor, or all of them when none is given."""
        if station_id is None:
            self._monitors = [StationMonitor() for _ in self._monitors]
        else:
            self._monitor(station_id)
            self._monitors[station_id - 1] = StationMonitor()


class ClientMonitoringSystem:
    """Which clients are in the club and which station each one holds."""

    def __init__(self) -> None:
        self._checked_in: set[str] = set()
        self._stations: dict[str, int] = {}

    def check_in(self, client: str) -> None:
        self._checked_in.add(client)

    def check_out(self, client: str) -> None:
        self._checked_in.discard(client)

    def bind(self, client: str, station_id: int) -> None:
        """Bind a client to a station; an existing binding is kept."""
        self._stations.setdefault(client, station_id)

    def unbind(self, client: str) -> None:
        self._stations.pop(client, None)

    def is_checked_in(self, client: str) -> bool:
        return client in self._checked_in

    def is_bound(self, client: str) -> bool:
        return client in self._stations

    def station_of(self, client: str) -> int:
        """Station held by ``client``; raises KeyError if there is none."""
        return self._stations[client]

    def clients(self) -> list[str]:
        return list(self._checked_in)