"""Helper factories for server tests."""

import queue
from collections.abc import Iterator
from datetime import date, time

from navfix.nmea.types import Coordinate, RmcData, RmcStatusOfFix


class ControlledRMCReader:
    """Stand-in for ``RMCReader`` fed from a queue; ``None`` ends iteration."""

    def __init__(self) -> None:
        self.message_queue: queue.Queue[RmcData | None] = queue.Queue()
        self.cancelled = False

    def __enter__(self) -> "ControlledRMCReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.cancelled = True
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[RmcData]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


def make_rmc(has_position: bool = True, valid: bool = True) -> RmcData:
    position = None
    if has_position:
        position = Coordinate(latitude_degrees=45.0, longitude_degrees=-9.0)
    return RmcData(
        fix_time=time(12, 0, 0, 500000),
        fix_date=date(2025, 3, 1),
        status_of_fix=RmcStatusOfFix.AUTONOMOUS if valid else RmcStatusOfFix.INVALID,
        position=position,
        speed_over_ground=10.0 if has_position else None,
        true_course=54.7 if has_position else None,
    )
