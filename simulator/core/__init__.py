"""Core simulation entities"""

from .request import Request
from .states import Direction, ElevatorState
from .elevator_sim import ElevatorSim
from .entity import Entity
from .elevator_process import ElevatorProcess

__all__ = [
    'Request',
    'Direction',
    'ElevatorState',
    'ElevatorSim',
    'Entity',
    'ElevatorProcess',
]
