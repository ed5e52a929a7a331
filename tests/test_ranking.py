"""
Tests for listing_processor/ranking.py - hosts by listing count.
"""

import numpy as np
import pandas as pd
import pytest

from listing_processor.ranking import group_hosts, rank_hosts
from listing_processor.records import read_listings


def _as_tuples(entries):
    return [(e.host_id, e.host_name, e.count) for e in entries]


class TestRankHosts:
    """Test ordering, limits and name attribution."""

    def test_worked_example(self, scenario_listings):
        assert _as_tuples(rank_hosts(scenario_listings, limit=10)) == [(1, "A", 2), (2, "B", 1)]

    def test_default_limit_is_ten(self):
        df = pd.DataFrame({"host_id": list(range(1, 16)), "host_name": [f"h{i}" for i in range(1, 16)]})
        assert len(rank_hosts(df)) == 10

    def test_limit_truncates(self, scenario_listings):
        assert _as_tuples(rank_hosts(scenario_listings, limit=1)) == [(1, "A", 2)]

    def test_fewer_hosts_than_limit_is_not_padded(self, scenario_listings):
        assert len(rank_hosts(scenario_listings, limit=50)) == 2

    def test_ties_keep_first_appearance_order(self):
        df = pd.DataFrame({
            "host_id": [30, 20, 30, 20, 10, 10, 10],
            "host_name": ["C", "B", "C", "B", "A", "A", "A"],
        })
        assert _as_tuples(rank_hosts(df)) == [(10, "A", 3), (30, "C", 2), (20, "B", 2)]

    def test_first_seen_name_wins(self):
        df = pd.DataFrame({"host_id": [5, 5, 5], "host_name": ["Sam", "Samuel", "S."]})
        assert _as_tuples(rank_hosts(df)) == [(5, "Sam", 3)]

    def test_ids_are_not_normalised(self):
        df = pd.DataFrame({"host_id": [7, "7", 7], "host_name": ["x", "y", "x"]}, dtype=object)
        assert _as_tuples(rank_hosts(df)) == [(7, "x", 2), ("7", "y", 1)]

    def test_bool_int_and_float_ids_stay_apart(self):
        """True, 1 and 1.0 compare equal in Python but are different ids."""
        df = pd.DataFrame({"host_id": [1, True, 1.0, 1], "host_name": ["A", "B", "C", "A"]}, dtype=object)
        entries = rank_hosts(df)
        assert _as_tuples(entries) == [(1, "A", 2), (True, "B", 1), (1.0, "C", 1)]
        assert [type(e.host_id) for e in entries] == [int, bool, float]

    def test_bool_int_and_float_ids_from_csv(self, tmp_path):
        path = tmp_path / "hosts.csv"
        path.write_text("host_id,host_name\n1,A\ntrue,B\n1.0,C\n", encoding="utf-8")
        entries = rank_hosts(read_listings(path))
        assert [(e.host_name, e.count) for e in entries] == [("A", 1), ("B", 1), ("C", 1)]

    def test_missing_ids_share_one_group(self):
        df = pd.DataFrame({"host_id": [np.nan, 4, None], "host_name": ["?", "D", "??"]}, dtype=object)
        assert _as_tuples(rank_hosts(df)) == [(None, "?", 2), (4, "D", 1)]

    def test_empty_frame(self, scenario_listings):
        assert rank_hosts(scenario_listings.iloc[0:0]) == []

    @pytest.mark.parametrize("limit", [1, 2, 3, 10])
    def test_counts_never_exceed_listing_total(self, messy_listings, limit):
        entries = rank_hosts(messy_listings, limit=limit)
        counts = [e.count for e in entries]
        assert len(entries) <= limit
        assert counts == sorted(counts, reverse=True)
        assert sum(counts) <= len(messy_listings)
        if limit >= len(group_hosts(messy_listings)):
            assert sum(counts) == len(messy_listings)


class TestGroupHosts:
    """The grouping map is read-only."""

    def test_mapping_cannot_be_modified(self, scenario_listings):
        groups = group_hosts(scenario_listings)
        assert list(groups.values()) == [(1, "A", 2), (2, "B", 1)]
        with pytest.raises(TypeError):
            groups[3] = (3, "C", 1)
