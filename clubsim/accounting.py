"""Revenue bookkeeping per station."""

from typing import Optional


class AccountingSystem:
    """Revenue per station, charged per started hour of use."""

    def __init__(self, num_stations: int) -> None:
        self._revenue = [0] * num_stations

    @staticmethod
    def _index(station_id: int) -> int:
        if station_id <= 0:
            raise ValueError(f"invalid station id: {station_id}")
        return station_id - 1

    def account(self, station_id: int, duration: int, price: int) -> None:
        """Charge ``price`` for every started hour within ``duration`` minutes."""
        hours, minutes = divmod(abs(duration), 60)
        if minutes > 0:
            hours += 1
        self._revenue[self._index(station_id)] += hours * price

    def reset(self, station_id: Optional[int] = None) -> None:
        """Clear one station's revenue, or every station's when none is given."""
        if station_id is None:
            self._revenue = [0] * len(self._revenue)
        else:
            self._revenue[self._index(station_id)] = 0

    def revenue(self, station_id: int) -> int:
        return self._revenue[self._index(station_id)]