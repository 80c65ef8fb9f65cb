"""
Elevator Simulator - tick-based single-car engine

This package provides the request model, the Stopped/Up/Down decision
state machine, the simulation controller and a SimPy driver for it.
"""

__version__ = "0.1.0"

from .core.request import Request, MAINTENANCE_START_FLOOR, MAINTENANCE_END_FLOOR
from .core.states import Direction, ElevatorState
from .core.elevator_sim import ElevatorSim
from .core.entity import Entity
from .core.elevator_process import ElevatorProcess

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'Request',
    'MAINTENANCE_START_FLOOR',
    'MAINTENANCE_END_FLOOR',
    'Direction',
    'ElevatorState',
    'ElevatorSim',
    'Entity',
    'ElevatorProcess',
    'MessageBroker',
    'RealtimeEnvironment',
]
