"""
Single-elevator tick simulation controller
"""

import logging
from typing import List

from .ledger import active_requests
from .request import Request
from .states import Direction, ElevatorState, next_decision

logger = logging.getLogger(__name__)


class ElevatorSim:
    """
    Owns the car's floor, direction, clock and active state.

    The request list is borrowed from the caller, never copied: the state
    machine updates the caller's Request objects in place, so results can be
    read from the same list after a run.

    Floors are numbered 1..num_floors. The car starts at floor 1, stopped, at
    tick 0.
    """

    def __init__(self, num_floors: int, requests: List[Request]):
        """
        Args:
            num_floors: Number of floors served (>= 1)
            requests: Every request of the run, ordered as the caller likes;
                order breaks ties when picking the closest floor

        Raises:
            ValueError: If num_floors < 1 or a request names a floor outside
                the building
        """
        if num_floors < 1:
            raise ValueError(f"num_floors must be at least 1, got {num_floors}")
        for request in requests:
            if request.is_maintenance:
                continue
            for floor in (request.floor_src, request.floor_dest):
                if not 1 <= floor <= num_floors:
                    raise ValueError(
                        f"Request floor {floor} outside building (1..{num_floors}): {request}"
                    )

        self._num_floors = num_floors
        self._current_floor = 1
        self.current_direction = Direction.STOPPED
        self.time = 0
        self.requests = requests
        self._state = ElevatorState.STOPPED

    @property
    def num_floors(self) -> int:
        return self._num_floors

    @property
    def current_floor(self) -> int:
        return self._current_floor

    @current_floor.setter
    def current_floor(self, floor: int):
        if not 1 <= floor <= self._num_floors:
            raise ValueError(f"Floor {floor} outside building (1..{self._num_floors})")
        self._current_floor = floor

    @property
    def state(self) -> ElevatorState:
        return self._state

    def change_state(self, new_state: ElevatorState):
        """Replace the active state; the previous one has no further effect."""
        logger.debug("t=%d floor %d: %s -> %s", self.time, self._current_floor, self._state.value, new_state.value)
        self._state = new_state

    def active_requests(self) -> List[Request]:
        return active_requests(self.requests, self.time)

    def step(self):
        """Advance the simulation by exactly one tick."""
        next_decision(self)

    def simulate(self, len_sim: int):
        """
        Run len_sim decisions, one per tick.

        Args:
            len_sim: Number of ticks to simulate (0 leaves everything untouched)
        """
        if len_sim < 0:
            raise ValueError(f"len_sim cannot be negative, got {len_sim}")
        logger.info("Simulating %d ticks from t=%d (%d floors, %d requests)",
                    len_sim, self.time, self._num_floors, len(self.requests))
        for _ in range(len_sim):
            self.step()
        logger.info("Simulation paused at t=%d on floor %d (%s)", self.time, self._current_floor, self._state.value)

    def snapshot(self) -> dict:
        """Pollable view of the controller, e.g. for a renderer or a status message."""
        requests = self.active_requests()
        return {
            'time': self.time,
            'num_floors': self._num_floors,
            'current_floor': self._current_floor,
            'direction': self.current_direction.value,
            'state': self._state.value,
            'waiting': sum(1 for r in requests if not r.picked_up),
            'riding': sum(1 for r in requests if r.picked_up),
            'serviced': sum(1 for r in self.requests if r.serviced),
        }
