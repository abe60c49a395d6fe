"""
Tests for the search orchestration against an in-memory store.
"""

from datetime import date, datetime, timedelta

import pytest

from app.services import FlightSearchService
from app.services.search.records import PermittedRouteRecord

from .conftest import FailingRouteStore, FakeRouteStore, make_segment

DAY = date(2024, 1, 1)
MIDNIGHT = datetime(2024, 1, 1)


def permitted(direct=True, codes=()):
    return PermittedRouteRecord("S7", "UUS", "DME", direct, tuple(codes))


def search(store, **kwargs):
    params = dict(carrier="S7", origin="UUS", destination="DME", departure_from=DAY, departure_to=DAY)
    params.update(kwargs)
    return FlightSearchService(store).search(**params)


class TestFlightSearchService:

    def test_direct_route_single_segment(self):
        segment = make_segment("UUS", "DME", MIDNIGHT, hours=8, number="1001")
        store = FakeRouteStore(routes=[permitted()], segments=[segment])

        itineraries = search(store)

        assert len(itineraries) == 1
        itinerary = itineraries[0]
        assert itinerary.origin == "UUS"
        assert itinerary.destination == "DME"
        assert itinerary.departure_time == segment.std
        assert itinerary.arrival_time == segment.sta
        assert itinerary.stops == 0
        assert itinerary.total_duration_minutes == 480
        assert itinerary.segments[0].carrier == "S7"
        assert itinerary.segments[0].segment_number == "1001"

    def test_transfer_route_three_segments(self):
        leg1 = make_segment("UUS", "AAA", MIDNIGHT + timedelta(hours=6), number="1")
        leg2 = make_segment("AAA", "BBB", leg1.sta + timedelta(hours=10), number="2")
        leg3 = make_segment("BBB", "DME", leg2.sta + timedelta(hours=9), number="3")
        store = FakeRouteStore(routes=[permitted(direct=False, codes=["AAABBB"])], segments=[leg1, leg2, leg3])

        itineraries = search(store)

        assert len(itineraries) == 1
        assert [s.segment_number for s in itineraries[0].segments] == ["1", "2", "3"]
        assert itineraries[0].stops == 2
        assert itineraries[0].arrival_time == leg3.sta

    def test_short_connection_gives_no_itineraries(self):
        leg1 = make_segment("UUS", "AAA", MIDNIGHT, number="1")
        leg2 = make_segment("AAA", "BBB", leg1.sta + timedelta(hours=5), number="2")
        leg3 = make_segment("BBB", "DME", leg2.sta + timedelta(hours=9), number="3")
        store = FakeRouteStore(routes=[permitted(direct=False, codes=["AAABBB"])], segments=[leg1, leg2, leg3])

        assert search(store) == []

    def test_no_permitted_route_is_empty_without_segment_query(self):
        store = FakeRouteStore(segments=[make_segment("UUS", "DME", MIDNIGHT)])

        assert search(store) == []
        assert store.segment_queries == []

    def test_route_without_paths_is_empty_without_segment_query(self):
        store = FakeRouteStore(routes=[permitted(direct=False, codes=["OVBX"])])

        assert search(store) == []
        assert store.segment_queries == []

    def test_store_outage_is_raised_not_hidden(self):
        with pytest.raises(ConnectionError):
            search(FailingRouteStore(permitted()))

    def test_departure_to_includes_the_whole_day(self):
        late = make_segment("UUS", "DME", MIDNIGHT + timedelta(hours=23, minutes=30))
        next_day = make_segment("UUS", "DME", MIDNIGHT + timedelta(days=1), number="2")
        store = FakeRouteStore(routes=[permitted()], segments=[late, next_day])

        itineraries = search(store)

        assert [i.departure_time for i in itineraries] == [late.std]

    def test_max_transfers_filters_paths(self):
        direct = make_segment("UUS", "DME", MIDNIGHT, number="D")
        leg1 = make_segment("UUS", "OVB", MIDNIGHT, number="1")
        leg2 = make_segment("OVB", "DME", leg1.sta + timedelta(hours=9), number="2")
        store = FakeRouteStore(routes=[permitted(codes=["OVB"])], segments=[direct, leg1, leg2])

        assert len(search(store)) == 2
        only_direct = search(store, max_transfers=0)

        assert [i.stops for i in only_direct] == [0]
        _, airports, _, _ = store.segment_queries[-1]
        assert airports == {"UUS", "DME"}

    def test_repeated_search_gives_same_result(self):
        leg1 = make_segment("UUS", "OVB", MIDNIGHT, number="1")
        leg2 = make_segment("OVB", "DME", leg1.sta + timedelta(hours=9), number="2")
        store = FakeRouteStore(routes=[permitted(codes=["OVB"])], segments=[leg1, leg2])

        first = [i.model_dump() for i in search(store)]
        second = [i.model_dump() for i in search(store)]

        assert first == second
