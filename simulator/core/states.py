"""
Elevator motion states and per-tick decision logic

Exactly one of STOPPED, UP, DOWN is active at a time. Each decision:
1. rebuilds the active request set from the ledger
2. serves the current floor
3. optionally switches state and moves the car one floor
4. advances the clock by one tick
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .ledger import active_requests, closest_requested_floor, request_on_path, serve_current_floor

if TYPE_CHECKING:
    from .elevator_sim import ElevatorSim

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Direction the car is currently travelling"""
    STOPPED = "STOPPED"
    UP = "UP"
    DOWN = "DOWN"


class ElevatorState(Enum):
    """Active decision state of the controller"""
    STOPPED = "Stopped"
    UP = "MovingUp"
    DOWN = "MovingDown"

    @property
    def direction(self) -> Direction:
        return _STATE_DIRECTIONS[self]


_STATE_DIRECTIONS = {
    ElevatorState.STOPPED: Direction.STOPPED,
    ElevatorState.UP: Direction.UP,
    ElevatorState.DOWN: Direction.DOWN,
}


def _move(sim: 'ElevatorSim', new_state: ElevatorState):
    """Switch to a moving state, take one floor in its direction and sync the direction."""
    if sim.state is not new_state:
        sim.change_state(new_state)
    step = 1 if new_state is ElevatorState.UP else -1
    sim.current_floor = sim.current_floor + step
    sim.current_direction = sim.state.direction


def decide_stopped(sim: 'ElevatorSim'):
    requests = active_requests(sim.requests, sim.time)
    if requests:
        requests, _ = serve_current_floor(requests, sim.current_floor, sim.time)
        target = closest_requested_floor(requests, sim.current_floor, sim.num_floors)
        if target is not None:
            # A tie with the current floor goes down
            if target > sim.current_floor:
                _move(sim, ElevatorState.UP)
            else:
                _move(sim, ElevatorState.DOWN)
    sim.time += 1


def _decide_moving(sim: 'ElevatorSim', upward: bool):
    requests = active_requests(sim.requests, sim.time)
    if not requests:
        sim.change_state(ElevatorState.STOPPED)
        sim.current_direction = Direction.STOPPED
        sim.time += 1
        return

    served = False
    # Dwell ticks skip the floor service: the car leaves right after a stop
    if sim.current_direction is not Direction.STOPPED:
        requests, served = serve_current_floor(requests, sim.current_floor, sim.time)

    if served:
        sim.current_direction = Direction.STOPPED
    else:
        ahead = ElevatorState.UP if upward else ElevatorState.DOWN
        behind = ElevatorState.DOWN if upward else ElevatorState.UP
        if request_on_path(requests, sim.current_floor, upward):
            _move(sim, ahead)
        else:
            _move(sim, behind)
    sim.time += 1


def decide_up(sim: 'ElevatorSim'):
    _decide_moving(sim, upward=True)


def decide_down(sim: 'ElevatorSim'):
    _decide_moving(sim, upward=False)


_DECISIONS = {
    ElevatorState.STOPPED: decide_stopped,
    ElevatorState.UP: decide_up,
    ElevatorState.DOWN: decide_down,
}


def next_decision(sim: 'ElevatorSim'):
    """Run the active state's decision for one tick."""
    _DECISIONS[sim.state](sim)
