"""
Request ledger helpers

The ledger is the caller-owned list of every request of the run. These helpers
derive the per-tick working set from it and apply boarding/alighting at the
car's floor. Nothing here caches: flags change during a tick, so the active
set is rebuilt from the ledger on every decision.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .request import Request

logger = logging.getLogger(__name__)


def active_requests(requests: Sequence[Request], tick: int) -> List[Request]:
    """
    Requests already submitted and not yet serviced, in ledger order.

    Maintenance sentinels are never active: they carry no floor the car
    could travel to.

    Args:
        requests: The full ledger
        tick: Current simulation tick

    Returns:
        New list holding the active requests
    """
    return [
        request for request in requests
        if request.time <= tick and not request.serviced and not request.is_maintenance
    ]


def serve_current_floor(requests: Sequence[Request], floor: int, tick: int) -> Tuple[List[Request], bool]:
    """
    Board waiting passengers and drop off riding passengers at floor.

    A request boarded during this call is not dropped off in the same call.

    Args:
        requests: Active requests
        floor: Floor the car is at
        tick: Current simulation tick

    Returns:
        (remaining, served): the active requests minus the completed ones, and
        whether at least one passenger boarded or alighted
    """
    remaining = []
    served = False
    for request in requests:
        if request.floor_src == floor and not request.picked_up:
            request.board(tick)
            served = True
            logger.debug("t=%d boarded at floor %d: %d -> %d", tick, floor, request.floor_src, request.floor_dest)
        elif request.floor_dest == floor and request.picked_up:
            request.complete(tick)
            served = True
            logger.debug("t=%d arrived at floor %d (submitted t=%d)", tick, floor, request.time)
            continue
        remaining.append(request)
    return remaining, served


def closest_requested_floor(requests: Sequence[Request], floor: int, num_floors: int) -> Optional[int]:
    """
    Requested floor nearest to floor; the first minimal distance wins.

    Returns:
        The closest requested floor, or None when no request has one
    """
    # Larger than any real distance inside the building
    min_dist = floor + num_floors
    closest = None
    for request in requests:
        target = request.requested_floor
        if target is None:
            continue
        dist = abs(target - floor)
        if dist < min_dist:
            min_dist = dist
            closest = target
    return closest


def request_on_path(requests: Sequence[Request], floor: int, upward: bool) -> bool:
    """
    Whether any request still needs the car strictly beyond floor in the
    travel direction: a waiting passenger's source or a rider's destination.
    """
    for request in requests:
        target = request.floor_dest if request.picked_up else request.floor_src
        if upward and target > floor:
            return True
        if not upward and target < floor:
            return True
    return False
