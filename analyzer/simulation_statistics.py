import numpy as np

from .statistics import Statistics


def _summarize(values):
    """count/mean/min/max/p95 of a list of tick durations, None when empty"""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return None
    return {
        'count': int(arr.size),
        'mean': float(arr.mean()),
        'min': float(arr.min()),
        'max': float(arr.max()),
        'p95': float(np.percentile(arr, 95)),
    }


class SimulationStatistics(Statistics):
    """
    Simulator-only statistics with "God's view" access.

    Reads the Request objects of the ledger directly, so it can report
    per-request waiting, riding and journey times. A real car would not
    know when a passenger started waiting.
    """
    def __init__(self, env, broadcast_pipe):
        super().__init__(env, broadcast_pipe)
        self.requests = []

    def register_request(self, request):
        """Track one ledger request (maintenance sentinels are ignored)."""
        if request.is_maintenance:
            return
        self.requests.append(request)

    def register_requests(self, requests):
        for request in requests:
            self.register_request(request)

    def get_request_metrics(self):
        """
        Aggregate per-request metrics, in ticks.

        Returns:
            dict with total/serviced/unserviced counts and summaries for
            waiting_time (submission -> boarding), riding_time (boarding ->
            arrival) and journey_time (submission -> arrival)
        """
        waiting_times = []
        riding_times = []
        journey_times = []

        for request in self.requests:
            if request.pickup_time is not None:
                waiting_times.append(request.pickup_time - request.time)
            if request.arrive_time is not None:
                journey_times.append(request.arrive_time - request.time)
                if request.pickup_time is not None:
                    riding_times.append(request.arrive_time - request.pickup_time)

        serviced = sum(1 for r in self.requests if r.serviced)
        return {
            'total': len(self.requests),
            'serviced': serviced,
            'unserviced': len(self.requests) - serviced,
            'waiting_time': _summarize(waiting_times),
            'riding_time': _summarize(riding_times),
            'journey_time': _summarize(journey_times),
        }

    def print_request_metrics_summary(self):
        """
        Print the per-request metrics report.
        """
        metrics = self.get_request_metrics()

        print("\n" + "="*80)
        print("   REQUEST METRICS SUMMARY (SIMULATION ONLY)")
        print("="*80)
        print(f"Requests: {metrics['total']}  Serviced: {metrics['serviced']}  Unserviced: {metrics['unserviced']}")

        for key, title in (('waiting_time', 'Waiting Time (Submission to Boarding)'),
                           ('riding_time', 'Riding Time'),
                           ('journey_time', 'Total Journey Time')):
            summary = metrics[key]
            if summary is None:
                continue
            print(f"\n{title}:")
            print(f"  Count:   {summary['count']:>6} requests")
            print(f"  Average: {summary['mean']:>6.2f} ticks")
            print(f"  Min:     {summary['min']:>6.2f} ticks")
            print(f"  Max:     {summary['max']:>6.2f} ticks")
            print(f"  P95:     {summary['p95']:>6.2f} ticks")

        print("="*80)
        return metrics

    def _annotate_diagram(self, ax):
        pickups = [(r.pickup_time, r.floor_src) for r in self.requests if r.pickup_time is not None]
        arrivals = [(r.arrive_time, r.floor_dest) for r in self.requests if r.arrive_time is not None]
        if pickups:
            ticks, floors = zip(*pickups)
            ax.scatter(ticks, floors, marker='^', s=120, color='green', zorder=5, label='Boarding')
        if arrivals:
            ticks, floors = zip(*arrivals)
            ax.scatter(ticks, floors, marker='x', s=120, color='red', zorder=5, label='Arrival')

    def _extra_log_records(self):
        # Final outcome of every tracked request
        return [
            {"time": self.env.now, "type": "request", "data": request.to_dict()}
            for request in self.requests
        ]
