import sys
from pathlib import Path

import matplotlib
import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

matplotlib.use("Agg")

from simulator.core.request import Request  # noqa: E402


@pytest.fixture
def scenario_root():
    return project_root / "scenarios" / "simulation"


@pytest.fixture
def make_requests():
    """Build a fresh ledger from (time, src, dest) triples."""
    def _make(*triples):
        return [Request(time, src, dest) for time, src, dest in triples]
    return _make
