"""
SimPy driver tests: ElevatorProcess, MessageBroker and RealtimeEnvironment.
"""

import pytest
import simpy

from analyzer.statistics import Statistics
from simulator.core.elevator_process import ElevatorProcess
from simulator.core.elevator_sim import ElevatorSim
from simulator.core.states import ElevatorState
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment


def _run_process(env, num_floors, ledger, until):
    broker = MessageBroker(env)
    sim = ElevatorSim(num_floors, ledger)
    process = ElevatorProcess(env, "Elevator_1", broker, sim)
    env.run(until=until)
    return sim, process, broker


def test_process_matches_direct_simulation(make_requests):
    triples = ((2, 4, 1), (3, 2, 5), (12, 5, 1))
    driven = make_requests(*triples)
    direct = make_requests(*triples)

    sim, _, _ = _run_process(simpy.Environment(), 8, driven, 25)
    ElevatorSim(8, direct).simulate(25)

    assert [r.arrive_time for r in driven] == [13, 8, 23]
    assert [r.arrive_time for r in driven] == [r.arrive_time for r in direct]
    assert sim.time == 25


def test_process_broadcasts_one_status_per_tick(make_requests):
    env = simpy.Environment()
    _, _, broker = _run_process(env, 7, make_requests((2, 3, 1)), 10)

    items = broker.get_broadcast_pipe().items
    # Initial position plus one message per decision
    assert len(items) == 11
    assert all(item['topic'] == "elevator/Elevator_1/status" for item in items)
    messages = [item['message'] for item in items]
    assert messages[0]['time'] == 0
    assert messages[0]['current_floor'] == 1
    assert messages[-1]['time'] == 10
    assert all(m['elevator_name'] == "Elevator_1" for m in messages)


def test_long_run_leaves_no_status_backlog(make_requests):
    env = simpy.Environment()
    broker = MessageBroker(env)
    statistics = Statistics(env, broker.get_broadcast_pipe())
    env.process(statistics.start_listening())
    ledger = make_requests((2, 3, 1), (40, 6, 2))
    ElevatorProcess(env, "Elevator_1", broker, ElevatorSim(7, ledger))

    env.run(until=1000)

    assert len(broker.get_broadcast_pipe().items) == 0
    statuses = [e for e in statistics.event_log if e["type"] == "elevator_status"]
    assert len(statuses) == 1001
    assert statuses[-1]["data"]["tick"] == 1000
    assert all(r.serviced for r in ledger)


def test_process_tracks_controller_state(make_requests):
    env = simpy.Environment()
    sim, process, _ = _run_process(env, 7, make_requests((2, 3, 1)), 3)

    assert sim.state is ElevatorState.UP
    assert process.get_state() == "MovingUp"
    assert process.name == "Elevator_1"
    assert isinstance(process.process, simpy.Process)


def test_process_can_resume(make_requests):
    env = simpy.Environment()
    broker = MessageBroker(env)
    ledger = make_requests((2, 3, 5), (2, 6, 1))
    sim = ElevatorSim(7, ledger)
    ElevatorProcess(env, "Elevator_1", broker, sim)

    env.run(until=8)
    assert ledger[0].arrive_time == 7
    assert not ledger[1].serviced

    env.run(until=20)
    assert ledger[1].arrive_time == 15
    assert sim.time == 20


def test_broker_broadcast_reaches_listener():
    env = simpy.Environment()
    broker = MessageBroker(env)
    received = []

    def listener():
        data = yield broker.get_broadcast_pipe().get()
        received.append((env.now, data))

    env.process(listener())
    broker.broadcast("test/topic", {'value': 1})
    env.run()

    assert received == [(0, {'topic': "test/topic", 'message': {'value': 1}})]
    assert broker.get_broadcast_pipe().items == []


def test_realtime_environment_without_delay(make_requests):
    env = RealtimeEnvironment(speed_factor=0.0)
    ledger = make_requests((2, 3, 1))
    _run_process(env, 7, ledger, 10)
    assert ledger[0].arrive_time == 7


def test_realtime_environment_fast_pacing(make_requests):
    env = RealtimeEnvironment(speed_factor=1000.0)
    ledger = make_requests((2, 3, 1))
    _run_process(env, 7, ledger, 10)
    assert ledger[0].arrive_time == 7


def test_realtime_environment_rejects_negative_speed():
    env = RealtimeEnvironment(speed_factor=2.0)
    assert env.speed_factor == 2.0
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-0.1)
