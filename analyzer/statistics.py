import json
import logging
import re
from datetime import datetime

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


class Statistics:
    """
    Independent "recorder" listening on the broker's broadcast pipe.

    Records each elevator's trajectory and state changes from its status
    messages, and keeps every event in JSON Lines form for offline playback.
    """
    STATUS_TOPIC = re.compile(r'elevator/(.*?)/status')

    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.elevator_trajectories = {}  # {elevator_name: [(tick, floor), ...]}
        self.state_history = {}          # {elevator_name: [(tick, state), ...]}

        # Latest status per elevator, for polling
        self.current_elevator_states = {}

        # JSON Lines event log for offline playback
        self.event_log = []
        self.simulation_metadata = {}

    def _add_event_log(self, event_type, event_data):
        """
        Add an event to the JSON Lines log.

        Args:
            event_type (str): Type of event (e.g., 'elevator_status')
            event_data (dict): Event-specific data
        """
        event = {
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        }
        self.event_log.append(event)

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Scenario configuration
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """
        SimPy process consuming every broadcast message.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})

            status_match = self.STATUS_TOPIC.fullmatch(topic)
            if status_match:
                self._record_status(status_match.group(1), message)
            else:
                self._add_event_log('message', {'topic': topic, 'message': message})

    def _record_status(self, elevator_name, message):
        tick = message.get('time')
        floor = message.get('current_floor')
        state = message.get('state')

        trajectory = self.elevator_trajectories.setdefault(elevator_name, [])
        if not trajectory or trajectory[-1] != (tick, floor):
            trajectory.append((tick, floor))

        states = self.state_history.setdefault(elevator_name, [])
        if not states or states[-1][1] != state:
            states.append((tick, state))

        self.current_elevator_states[elevator_name] = dict(message)

        self._add_event_log('elevator_status', {
            'elevator': elevator_name,
            'tick': tick,
            'floor': floor,
            'direction': message.get('direction'),
            'state': state,
            'waiting': message.get('waiting', 0),
            'riding': message.get('riding', 0),
            'serviced': message.get('serviced', 0)
        })

    def get_trajectory(self, elevator_name):
        return list(self.elevator_trajectories.get(elevator_name, []))

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """
        Draw the travel diagram (floor over ticks) after the simulation ends.

        Args:
            output_filename: PNG path; None skips saving
            show: Open an interactive window as well

        Returns:
            The output filename, or None when nothing was saved
        """
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        fig, ax = plt.subplots(figsize=(14, 8))

        elevator_colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd', '#8c564b']
        for idx, name in enumerate(sorted(self.elevator_trajectories)):
            trajectory = self.elevator_trajectories[name]
            if not trajectory:
                continue
            ticks, floors = zip(*sorted(trajectory, key=lambda x: x[0]))
            color = elevator_colors[idx % len(elevator_colors)]
            ax.step(ticks, floors, where='post', label=name, linewidth=2.5, color=color, alpha=0.8)

        self._annotate_diagram(ax)

        ax.set_title("Elevator Trajectory Diagram (Travel Diagram)")
        ax.set_xlabel("Time (tick)")
        ax.set_ylabel("Floor")
        ax.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for trajectory in self.elevator_trajectories.values() for _, floor in trajectory]
        if all_floors:
            ax.set_yticks(range(int(min(all_floors)), int(max(all_floors)) + 1))

        if ax.get_legend_handles_labels()[0]:
            ax.legend(loc='upper right', fontsize=10)

        saved = None
        if output_filename is not None:
            fig.savefig(output_filename, dpi=150, bbox_inches='tight')
            print(f"Trajectory diagram saved to: {output_filename}")
            saved = output_filename

        if show:
            plt.show()
        plt.close(fig)
        return saved

    def _annotate_diagram(self, ax):
        """Hook for subclasses to draw extra markers on the travel diagram."""

    def _extra_log_records(self):
        """Hook for subclasses to append end-of-run records to the event log."""
        return []

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            # Metadata goes first
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

            # Final records after the timeline
            for record in self._extra_log_records():
                f.write(json.dumps(record, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
