"""
Elevator System Analyzer

Statistical analysis and reporting for simulation runs.

Components:
- Statistics: Status-message recorder (trajectory, event log, travel diagram)
- SimulationStatistics: Per-request metrics with "God's view"
"""

__version__ = "0.1.0"

from .statistics import Statistics
from .simulation_statistics import SimulationStatistics

__all__ = ['Statistics', 'SimulationStatistics']
