import logging
import sys

import simpy

# Configuration
from config import load_simulation_config

# Simulator components
from simulator.core.elevator_sim import ElevatorSim
from simulator.core.elevator_process import ElevatorProcess
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics

DEFAULT_SCENARIO = "scenarios/simulation/two_passengers.yaml"


def run_simulation(sim_config_path=DEFAULT_SCENARIO, event_log_path=None, plot_path=None):
    """
    Set up and run one scenario

    Args:
        sim_config_path: Path to simulation configuration YAML file
        event_log_path: Optional JSON Lines output for the event log
        plot_path: Optional PNG output for the trajectory diagram

    Returns:
        The ElevatorSim after the run; its requests carry the results
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")
    if sim_config.name:
        print(f"Scenario: {sim_config.name}")

    num_floors = sim_config.building.num_floors
    duration = sim_config.duration

    print("\n--- Simulation Setup ---")
    if sim_config.realtime_factor > 0:
        env = RealtimeEnvironment(speed_factor=sim_config.realtime_factor)
        print(f"Realtime pacing: {sim_config.realtime_factor} ticks per second")
    else:
        env = simpy.Environment()
    broker = MessageBroker(env)

    sim_stats = SimulationStatistics(env, broker.get_broadcast_pipe())
    env.process(sim_stats.start_listening())
    sim_stats.set_simulation_metadata(sim_config.to_dict())

    requests = sim_config.build_requests()
    sim_stats.register_requests(requests)

    sim = ElevatorSim(num_floors, requests)
    ElevatorProcess(env, sim_config.elevator_name, broker, sim)

    print(f"Floors: 1..{num_floors}  Requests: {len(requests)}  Duration: {duration} ticks")
    print("\n--- Running Simulation ---")
    env.run(until=duration)

    print(f"\n--- Results at tick {sim.time} (floor {sim.current_floor}, {sim.state.value}) ---")
    for idx, request in enumerate(requests, start=1):
        if request.is_maintenance:
            label = "maintenance start" if request.is_maintenance_start else "maintenance end"
            print(f"  #{idx}: t={request.time} {label} (not acted upon)")
        elif request.serviced:
            print(f"  #{idx}: t={request.time} {request.floor_src}F -> {request.floor_dest}F "
                  f"boarded at {request.pickup_time}, arrived at {request.arrive_time}")
        else:
            status = "riding" if request.picked_up else "waiting"
            print(f"  #{idx}: t={request.time} {request.floor_src}F -> {request.floor_dest}F "
                  f"not serviced ({status})")

    sim_stats.print_request_metrics_summary()

    if event_log_path:
        sim_stats.save_event_log(event_log_path)
    if plot_path:
        sim_stats.plot_trajectory_diagram(plot_path)

    return sim


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    sim_config_path = argv[0] if len(argv) > 0 else DEFAULT_SCENARIO
    event_log_path = argv[1] if len(argv) > 1 else None
    plot_path = argv[2] if len(argv) > 2 else None
    run_simulation(sim_config_path, event_log_path=event_log_path, plot_path=plot_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
