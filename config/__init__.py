"""
Configuration management package

Provides scenario configuration classes and the YAML loader.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    RequestConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'RequestConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
