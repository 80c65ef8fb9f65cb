import simpy

from .entity import Entity
from .elevator_sim import ElevatorSim
from ..infrastructure.message_broker import MessageBroker


class ElevatorProcess(Entity):
    """
    Runs an ElevatorSim inside a SimPy environment, one decision per time unit.

    Each tick the process broadcasts the controller snapshot under
    'elevator/<name>/status', so listeners on the broadcast pipe (statistics,
    renderers) see the car without touching the controller directly.

    The controller clock and env.now stay aligned when both start at 0:
    env.run(until=N) performs exactly N decisions, like sim.simulate(N).
    """
    TICK = 1

    def __init__(self, env: simpy.Environment, name: str, broker: MessageBroker, sim: ElevatorSim):
        self.broker = broker
        self.sim = sim
        self.status_topic = f"elevator/{name}/status"
        super().__init__(env, name)
        self.state = sim.state.value

    def run(self):
        # Initial position before the first decision
        self._publish_status()
        while True:
            self.sim.step()
            self.set_state(self.sim.state.value)
            self._publish_status()
            yield self.env.timeout(self.TICK)

    def _publish_status(self):
        message = self.sim.snapshot()
        message['elevator_name'] = self.name
        self.broker.broadcast(self.status_topic, message)
