"""
Tests for MatchFilter query serialization.
"""

from riot_api import MatchFilter, QueueType


class TestMatchFilter:
    """Test cases for MatchFilter.query_params."""

    def test_empty(self):
        assert MatchFilter().query_params() == ""

    def test_parameter_order(self):
        """Test lists repeat their key and scalars follow in fixed order."""
        match_filter = MatchFilter(
            champions=[1, 2],
            queues=[QueueType.RANKED_SOLO_5X5],
            seasons=[13],
            end_time=2000,
            begin_time=1000,
            end_index=100,
            begin_index=0,
        )

        assert match_filter.query_params() == (
            "champion=1&champion=2&queue=420&season=13"
            "&endTime=2000&beginTime=1000&endIndex=100&beginIndex=0"
        )

    def test_zero_values_are_kept(self):
        """Test an index of zero is still serialized."""
        assert MatchFilter(begin_index=0).query_params() == "beginIndex=0"
