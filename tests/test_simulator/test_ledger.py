"""
Ledger helper tests: active filter, floor service, closest floor, path look-ahead.
"""

from simulator.core.ledger import (
    active_requests,
    closest_requested_floor,
    request_on_path,
    serve_current_floor,
)
from simulator.core.request import Request


def test_active_requests_filters_future_and_serviced(make_requests):
    ledger = make_requests((0, 1, 3), (5, 2, 4), (1, 6, 2))
    ledger[0].board(0)
    ledger[0].complete(2)

    assert active_requests(ledger, 0) == []
    assert active_requests(ledger, 1) == [ledger[2]]
    assert active_requests(ledger, 5) == [ledger[1], ledger[2]]


def test_active_requests_keeps_ledger_order(make_requests):
    ledger = make_requests((3, 5, 1), (0, 2, 4), (1, 6, 2))
    assert active_requests(ledger, 3) == ledger


def test_active_requests_skips_maintenance_sentinels():
    ledger = [Request(0, -1, -1), Request(0, 2, 3), Request(0, 0, 0)]
    assert active_requests(ledger, 10) == [ledger[1]]


def test_serve_boards_waiting_passengers(make_requests):
    ledger = make_requests((0, 3, 1), (0, 3, 6), (0, 4, 1))

    remaining, served = serve_current_floor(ledger, 3, 5)

    assert served
    assert remaining == ledger
    assert ledger[0].picked_up and ledger[1].picked_up
    assert ledger[0].pickup_time == 5
    assert not ledger[2].picked_up


def test_serve_drops_off_riders_and_removes_them(make_requests):
    ledger = make_requests((0, 1, 3), (0, 2, 3), (0, 1, 5))
    for request in ledger:
        request.board(1)

    remaining, served = serve_current_floor(ledger, 3, 8)

    assert served
    assert remaining == [ledger[2]]
    assert ledger[0].serviced and ledger[0].arrive_time == 8
    assert ledger[1].serviced and ledger[1].arrive_time == 8
    assert not ledger[2].serviced


def test_serve_adjacent_removals_do_not_skip(make_requests):
    ledger = make_requests((0, 1, 4), (0, 2, 4), (0, 3, 4), (0, 4, 1))
    for request in ledger[:3]:
        request.board(0)

    remaining, served = serve_current_floor(ledger, 4, 9)

    assert served
    assert all(r.serviced for r in ledger[:3])
    # The waiting passenger at 4F boards in the same pass
    assert remaining == [ledger[3]]
    assert ledger[3].picked_up


def test_serve_does_not_drop_off_waiting_passenger(make_requests):
    ledger = make_requests((0, 5, 3))

    remaining, served = serve_current_floor(ledger, 3, 4)

    assert not served
    assert remaining == ledger
    assert not ledger[0].picked_up


def test_serve_nothing_at_floor(make_requests):
    ledger = make_requests((0, 2, 5))
    remaining, served = serve_current_floor(ledger, 4, 1)
    assert not served
    assert remaining == ledger


def test_closest_requested_floor_first_minimum_wins(make_requests):
    ledger = make_requests((0, 2, 7), (0, 6, 1), (0, 5, 1))
    # 2F and 6F are both two floors away from 4F; 2F comes first
    assert closest_requested_floor(ledger, 4, 7) == 2


def test_closest_requested_floor_uses_destination_for_riders(make_requests):
    ledger = make_requests((0, 1, 6), (0, 4, 1))
    ledger[0].board(0)
    assert closest_requested_floor(ledger, 1, 7) == 4
    assert closest_requested_floor(ledger, 6, 7) == 6


def test_closest_requested_floor_empty():
    assert closest_requested_floor([], 3, 7) is None


def test_request_on_path(make_requests):
    waiting_above, riding_below = make_requests((0, 6, 1), (0, 5, 2))
    riding_below.board(0)

    assert request_on_path([waiting_above], 3, upward=True)
    assert not request_on_path([waiting_above], 3, upward=False)
    assert request_on_path([riding_below], 3, upward=False)
    assert not request_on_path([riding_below], 3, upward=True)
    # Same floor is not strictly beyond
    assert not request_on_path([waiting_above], 6, upward=True)
    assert not request_on_path([], 3, upward=True)
