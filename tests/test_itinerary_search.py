"""
Tests for the backtracking itinerary search.
"""

from datetime import datetime, timedelta

from app.services.search.helpers import index_segments_by_origin, is_valid_connection
from app.services.search.itinerary_search import ItinerarySearch, search_itineraries

from .conftest import make_segment

DAY_START = datetime(2024, 1, 1)
DAY_END = datetime(2024, 1, 1, 23, 59, 59, 999999)


def run(paths, segments, departure_from=DAY_START, departure_to=DAY_END):
    return search_itineraries(paths, index_segments_by_origin(segments), departure_from, departure_to)


class TestDirectPaths:

    def test_segment_departing_at_window_start_is_found(self):
        segment = make_segment("UUS", "DME", DAY_START)

        assert run([["UUS", "DME"]], [segment]) == [(segment,)]

    def test_window_bounds_are_inclusive(self):
        at_start = make_segment("UUS", "DME", DAY_START, number="1")
        at_end = make_segment("UUS", "DME", DAY_END, number="2")
        before = make_segment("UUS", "DME", DAY_START - timedelta(microseconds=1), number="3")
        after = make_segment("UUS", "DME", DAY_END + timedelta(microseconds=1), number="4")

        result = run([["UUS", "DME"]], [before, at_start, at_end, after])

        assert result == [(at_start,), (at_end,)]

    def test_wrong_destination_is_ignored(self):
        assert run([["UUS", "DME"]], [make_segment("UUS", "OVB", DAY_START)]) == []


class TestConnections:

    def test_three_leg_itinerary(self):
        leg1 = make_segment("UUS", "AAA", DAY_START + timedelta(hours=6), number="1")
        leg2 = make_segment("AAA", "BBB", leg1.sta + timedelta(hours=10), number="2")
        leg3 = make_segment("BBB", "DME", leg2.sta + timedelta(hours=9), number="3")

        result = run([["UUS", "AAA", "BBB", "DME"]], [leg3, leg2, leg1])

        assert result == [(leg1, leg2, leg3)]

    def test_short_connection_is_rejected(self):
        leg1 = make_segment("UUS", "AAA", DAY_START, number="1")
        leg2 = make_segment("AAA", "BBB", leg1.sta + timedelta(hours=5), number="2")
        leg3 = make_segment("BBB", "DME", leg2.sta + timedelta(hours=9), number="3")

        assert run([["UUS", "AAA", "BBB", "DME"]], [leg1, leg2, leg3]) == []

    def test_connection_bounds_are_inclusive(self):
        leg1 = make_segment("UUS", "OVB", DAY_START)
        exactly_min = make_segment("OVB", "DME", leg1.sta + timedelta(hours=8), number="min")
        exactly_max = make_segment("OVB", "DME", leg1.sta + timedelta(hours=48), number="max")
        too_short = make_segment("OVB", "DME", leg1.sta + timedelta(hours=8) - timedelta(minutes=1), number="short")
        too_long = make_segment("OVB", "DME", leg1.sta + timedelta(hours=48, minutes=1), number="long")

        result = run([["UUS", "OVB", "DME"]], [leg1, too_short, exactly_min, exactly_max, too_long])

        assert [chain[-1].segment_number for chain in result] == ["min", "max"]

    def test_connecting_leg_may_depart_outside_the_window(self):
        leg1 = make_segment("UUS", "OVB", DAY_END - timedelta(hours=3))
        leg2 = make_segment("OVB", "DME", leg1.sta + timedelta(hours=20), number="2")

        assert run([["UUS", "OVB", "DME"]], [leg1, leg2]) == [(leg1, leg2)]

    def test_every_combination_is_emitted_depth_first(self):
        first_a = make_segment("UUS", "OVB", DAY_START, number="A")
        first_b = make_segment("UUS", "OVB", DAY_START + timedelta(hours=1), number="B")
        second_x = make_segment("OVB", "DME", DAY_START + timedelta(hours=12), number="X")
        second_y = make_segment("OVB", "DME", DAY_START + timedelta(hours=20), number="Y")

        result = run([["UUS", "OVB", "DME"]], [first_a, first_b, second_x, second_y])

        assert [tuple(s.segment_number for s in chain) for chain in result] == [
            ("A", "X"), ("A", "Y"), ("B", "X"), ("B", "Y"),
        ]

    def test_sibling_branches_do_not_share_chains(self):
        first = make_segment("UUS", "OVB", DAY_START, number="1")
        second_x = make_segment("OVB", "KHV", DAY_START + timedelta(hours=12), number="X")
        second_y = make_segment("OVB", "KHV", DAY_START + timedelta(hours=14), number="Y")
        third = make_segment("KHV", "DME", DAY_START + timedelta(hours=30), number="3")

        result = run([["UUS", "OVB", "KHV", "DME"]], [first, second_x, second_y, third])

        assert result == [(first, second_x, third), (first, second_y, third)]


class TestPaths:

    def test_results_grouped_by_path_in_input_order(self):
        direct = make_segment("UUS", "DME", DAY_START + timedelta(hours=12), number="D")
        leg1 = make_segment("UUS", "OVB", DAY_START, number="1")
        leg2 = make_segment("OVB", "DME", leg1.sta + timedelta(hours=9), number="2")
        segments = [direct, leg1, leg2]

        result = run([["UUS", "OVB", "DME"], ["UUS", "DME"]], segments)

        assert result == [(leg1, leg2), (direct,)]

    def test_short_path_contributes_nothing(self):
        segment = make_segment("UUS", "DME", DAY_START)

        assert run([["UUS"], []], [segment]) == []

    def test_path_without_seed_does_not_abort_other_paths(self):
        segment = make_segment("UUS", "DME", DAY_START)

        result = run([["KHV", "OVB", "DME"], ["UUS", "DME"]], [segment])

        assert result == [(segment,)]

    def test_custom_connection_policy(self):
        leg1 = make_segment("UUS", "OVB", DAY_START)
        leg2 = make_segment("OVB", "DME", leg1.sta + timedelta(hours=2), number="2")
        segments_by_origin = index_segments_by_origin([leg1, leg2])

        search = ItinerarySearch(segments_by_origin, DAY_START, DAY_END, min_connection=60, max_connection=180)

        assert search.search([["UUS", "OVB", "DME"]]) == [(leg1, leg2)]


class TestProperties:

    def _schedule(self):
        segments = []
        for day in range(3):
            base = DAY_START + timedelta(days=day)
            for hour in (0, 6, 12, 18):
                segments.append(make_segment("UUS", "OVB", base + timedelta(hours=hour), number=f"U{day}{hour}"))
                segments.append(make_segment("OVB", "KHV", base + timedelta(hours=hour + 1), number=f"O{day}{hour}"))
                segments.append(make_segment("KHV", "DME", base + timedelta(hours=hour + 3), number=f"K{day}{hour}"))
        return segments

    def test_every_itinerary_satisfies_the_constraints(self):
        departure_to = DAY_START + timedelta(days=1)
        result = run([["UUS", "OVB", "KHV", "DME"], ["UUS", "OVB", "DME"]], self._schedule(),
                     departure_to=departure_to)

        assert result
        for chain in result:
            assert DAY_START <= chain[0].std <= departure_to
            for previous, current in zip(chain, chain[1:]):
                assert previous.destination_iata == current.origin_iata
                assert timedelta(hours=8) <= current.std - previous.sta <= timedelta(hours=48)

    def test_search_is_idempotent(self):
        segments_by_origin = index_segments_by_origin(self._schedule())
        search = ItinerarySearch(segments_by_origin, DAY_START, DAY_END)
        paths = [["UUS", "OVB", "KHV", "DME"]]

        assert search.search(paths) == search.search(paths)


def test_is_valid_connection_uses_minutes():
    arriving = make_segment("UUS", "OVB", DAY_START)
    departing = make_segment("OVB", "DME", arriving.sta + timedelta(minutes=90))

    assert is_valid_connection(arriving, departing, 90, 90)
    assert not is_valid_connection(arriving, departing, 91, 120)
    assert not is_valid_connection(arriving, departing, 30, 89)
