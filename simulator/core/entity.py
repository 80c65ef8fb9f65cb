import itertools
import logging
from abc import ABC, abstractmethod
from typing import Optional

import simpy

logger = logging.getLogger(__name__)


class Entity(ABC):
    """
    Abstract base class for entities running as SimPy processes.

    The process is started from the constructor, so subclasses must set up
    everything run() needs before calling super().__init__().
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: Optional[str] = None):
        """
        Initialize the entity.

        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID if omitted.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"

        # Concrete classes define their own state values
        self.state: str = "initial_state"

        self._process = self.env.process(self.run())

        logger.debug('%.2f: Entity "%s" (%s, ID:%d) created.',
                     self.env.now, self.name, self.__class__.__name__, self.entity_id)

    @abstractmethod
    def run(self):
        """
        Generator driving the entity inside the SimPy environment.

        Use yield to wait for events and advance simulation time.
        """

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: Target state name.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._log_state_change(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _log_state_change(self, old_state: str, new_state: str):
        logger.info('%.2f: Entity "%s" (%s, ID:%d) state transition: %s -> %s',
                    self.env.now, self.name, self.__class__.__name__, self.entity_id,
                    old_state, new_state)

    @property
    def process(self) -> simpy.Process:
        """SimPy process of this entity, e.g. for interrupting it."""
        return self._process
