"""
Passenger request model

A request walks through three stages:
1. Waiting  - passenger stands at floor_src until the car stops there
2. Riding   - passenger boarded and wants to reach floor_dest
3. Serviced - passenger alighted at floor_dest (terminal)

Two reserved shapes signal maintenance windows:
- start: floor_src == floor_dest == MAINTENANCE_START_FLOOR
- end:   floor_src == floor_dest == MAINTENANCE_END_FLOOR
"""

from dataclasses import dataclass, field
from typing import Optional

MAINTENANCE_START_FLOOR = -1
MAINTENANCE_END_FLOOR = 0


@dataclass(eq=False)
class Request:
    """
    One passenger journey.

    Attributes:
        time: Tick at which the request is submitted
        floor_src: Floor where the passenger waits
        floor_dest: Floor the passenger wants to reach
        picked_up: True once the passenger boarded
        serviced: True once the passenger alighted at floor_dest
        pickup_time: Tick of boarding (None while waiting)
        arrive_time: Tick of alighting (None until serviced)
    """
    time: int
    floor_src: int
    floor_dest: int
    picked_up: bool = field(default=False)
    serviced: bool = field(default=False)
    pickup_time: Optional[int] = field(default=None)
    arrive_time: Optional[int] = field(default=None)

    def __post_init__(self):
        if self.time < 0:
            raise ValueError(f"Request time must be non-negative, got {self.time}")
        if self.floor_src == self.floor_dest and not self.is_maintenance:
            raise ValueError(
                f"Request source and destination must differ (floor {self.floor_src})"
            )

    @property
    def is_going_up(self) -> bool:
        return self.floor_dest >= self.floor_src

    @property
    def is_maintenance_start(self) -> bool:
        return self.floor_src == MAINTENANCE_START_FLOOR and self.floor_dest == MAINTENANCE_START_FLOOR

    @property
    def is_maintenance_end(self) -> bool:
        return self.floor_src == MAINTENANCE_END_FLOOR and self.floor_dest == MAINTENANCE_END_FLOOR

    @property
    def is_maintenance(self) -> bool:
        return self.is_maintenance_start or self.is_maintenance_end

    @property
    def requested_floor(self) -> Optional[int]:
        """
        Floor the car has to visit next for this request.

        Returns:
            floor_dest while riding, floor_src while waiting, None once serviced
        """
        if self.serviced:
            return None
        if self.picked_up:
            return self.floor_dest
        return self.floor_src

    def board(self, tick: int):
        """Passenger enters the car at floor_src."""
        if self.picked_up:
            return
        self.picked_up = True
        self.pickup_time = tick

    def complete(self, tick: int):
        """Passenger leaves the car at floor_dest."""
        if not self.picked_up:
            raise ValueError(f"Cannot service a request that was never picked up: {self}")
        self.serviced = True
        self.arrive_time = tick

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'floor_src': self.floor_src,
            'floor_dest': self.floor_dest,
            'picked_up': self.picked_up,
            'serviced': self.serviced,
            'pickup_time': self.pickup_time,
            'arrive_time': self.arrive_time,
        }
