"""
Simulation Configuration

Describes one scenario: the building, the timestamped request list and how
long to run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from simulator.core.request import Request


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 7

    def __post_init__(self):
        if self.num_floors < 1:
            raise ValueError("num_floors must be at least 1")


@dataclass
class RequestConfig:
    """One scheduled passenger request"""
    time: int
    floor_src: int
    floor_dest: int

    def __post_init__(self):
        if self.time < 0:
            raise ValueError("request time cannot be negative")

    def to_request(self) -> Request:
        return Request(self.time, self.floor_src, self.floor_dest)


@dataclass
class SimulationConfig:
    """
    Complete scenario configuration

    duration is the number of ticks to simulate; realtime_factor paces ticks
    per real second (0.0 = as fast as possible).
    """
    building: BuildingConfig
    requests: List[RequestConfig] = field(default_factory=list)
    duration: int = 20
    realtime_factor: float = 0.0
    name: Optional[str] = None
    elevator_name: str = "Elevator_1"

    def __post_init__(self):
        if self.duration < 0:
            raise ValueError("duration cannot be negative")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 7)
        )

        # Each entry is either a mapping or a [time, src, dest] triple
        requests = []
        for entry in sim_data.get('requests') or []:
            if isinstance(entry, dict):
                requests.append(RequestConfig(
                    time=entry['time'],
                    floor_src=entry['floor_src'],
                    floor_dest=entry['floor_dest']
                ))
            else:
                time, floor_src, floor_dest = entry
                requests.append(RequestConfig(time=time, floor_src=floor_src, floor_dest=floor_dest))

        return cls(
            building=building,
            requests=requests,
            duration=sim_data.get('duration', 20),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            name=sim_data.get('name'),
            elevator_name=sim_data.get('elevator_name', 'Elevator_1')
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'requests': [
                    {
                        'time': r.time,
                        'floor_src': r.floor_src,
                        'floor_dest': r.floor_dest
                    }
                    for r in self.requests
                ],
                'duration': self.duration,
                'realtime_factor': self.realtime_factor,
                'elevator_name': self.elevator_name
            }
        }

        if self.name is not None:
            result['simulation']['name'] = self.name

        return result

    def validate(self):
        """Validate configuration consistency"""
        for idx, r in enumerate(self.requests):
            # Request() rejects src == dest; floors are checked here
            request = r.to_request()
            if request.is_maintenance:
                continue
            for floor in (r.floor_src, r.floor_dest):
                if not 1 <= floor <= self.building.num_floors:
                    raise ValueError(
                        f"requests[{idx}] floor {floor} outside building (1..{self.building.num_floors})"
                    )

    def build_requests(self) -> List[Request]:
        """Fresh Request objects for one run, in configuration order"""
        return [r.to_request() for r in self.requests]
