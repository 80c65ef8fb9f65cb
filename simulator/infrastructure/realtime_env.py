"""
SimPy environment paced against wall-clock time.

Lets a renderer poll the controller while ticks elapse at a watchable rate.
"""

import time

import simpy


class RealtimeEnvironment(simpy.Environment):
    """
    SimPy environment with real-time synchronization.

    Args:
        speed_factor (float): Simulated ticks per real second
            - 1.0 = one tick per second
            - 4.0 = four ticks per second
            - 0.0 = no delay (plain SimPy behaviour)
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        super().__init__(initial_time=initial_time)
        self.speed_factor = speed_factor
        self.real_start_time = time.time()
        self.sim_start_time = self.now

    def step(self):
        """
        Process the next event, then sleep until wall-clock time catches up
        with the simulated time.
        """
        result = super().step()

        if self.speed_factor > 0:
            sim_elapsed = self.now - self.sim_start_time
            target_real_time = self.real_start_time + (sim_elapsed / self.speed_factor)
            sleep_time = target_real_time - time.time()
            if sleep_time > 0:
                time.sleep(sleep_time)

        return result
