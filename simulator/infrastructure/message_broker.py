import logging

import simpy

logger = logging.getLogger(__name__)


class MessageBroker:
    """
    Mediates communication between components within the simulation.

    Publishers tag each message with a topic and put it on one broadcast
    pipe; listeners (the statistics recorder, a renderer) consume the pipe and
    dispatch on the topic themselves.
    """
    def __init__(self, env: simpy.Environment):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
        """
        self.env = env
        self.broadcast_pipe = simpy.Store(self.env)

    def broadcast(self, topic: str, message):
        """
        Publish a message under the given topic on the broadcast pipe
        """
        logger.debug("%.2f [Broker] Broadcast on '%s': %s", self.env.now, topic, message)
        return self.broadcast_pipe.put({'topic': topic, 'message': message})

    def get_broadcast_pipe(self) -> simpy.Store:
        """
        Global broadcast pipe, consumed by the statistics recorder
        """
        return self.broadcast_pipe
