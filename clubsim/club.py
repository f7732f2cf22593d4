"""Occupancy state of the club's gaming stations."""

from dataclasses import dataclass


@dataclass
class GamingStation:
    """A single station that is either available or in use."""

    available: bool = True

    def start_working(self) -> None:
        self.available = False

    def stop_working(self) -> None:
        self.available = True


class ClubState:
    """Stations of the club, addressed by one-based station ids."""

    def __init__(self, num_stations: int) -> None:
        self._stations = [GamingStation() for _ in range(num_stations)]

    def _station(self, station_id: int) -> GamingStation:
        if station_id <= 0:
            raise ValueError(f"invalid station id: {station_id}")
        return self._stations[station_id - 1]

    def is_available(self, station_id: int) -> bool:
        return self._station(station_id).available

    def occupy(self, station_id: int) -> None:
        self._station(station_id).start_working()

    def vacate(self, station_id: int) -> None:
        self._station(station_id).stop_working()

    def vacant_station(self) -> int:
        """Zero-based position of the first vacant station, or the station count if none."""
        return next(
            (pos for pos, station in enumerate(self._stations) if station.available),
            len(self._stations),
        )

    def has_vacant_station(self) -> bool:
        return any(station.available for station in self._stations)

    def total_stations(self) -> int:
        return len(self._stations)