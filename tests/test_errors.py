"""
Tests for the error taxonomy.
"""

import pytest

from riot_api import errors
from riot_api.errors import (
    STATUS_TO_ERROR,
    EndOfStream,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
    UnknownStatusError,
    error_for_status,
)


class TestErrorForStatus:
    """Test cases for mapping status codes to errors."""

    @pytest.mark.parametrize("status_code", sorted(STATUS_TO_ERROR))
    def test_known_status(self, status_code):
        """Test every table entry builds its class with the status code."""
        error_class, message = STATUS_TO_ERROR[status_code]
        error = error_for_status(status_code)

        assert type(error) is error_class
        assert error.status_code == status_code
        assert error.message == message
        assert isinstance(error, RiotAPIError)

    def test_not_found(self):
        assert error_for_status(404) == NotFoundError("not found", status_code=404)

    def test_service_unavailable(self):
        assert error_for_status(503) == ServiceUnavailableError(
            "service unavailable", status_code=503
        )

    def test_unknown_status(self):
        """Test statuses missing from the table keep their raw code."""
        error = error_for_status(999)

        assert isinstance(error, UnknownStatusError)
        assert error.status_code == 999
        assert error.message == errors.UNKNOWN_ERROR_REASON == "unknown error reason"


class TestRiotAPIError:
    """Test cases for RiotAPIError behavior."""

    def test_equality(self):
        """Test errors compare by class, status code and message."""
        assert NotFoundError("not found", 404) == NotFoundError("not found", 404)
        assert NotFoundError("not found", 404) != NotFoundError("gone", 404)
        assert NotFoundError("not found", 404) != RiotAPIError("not found", 404)

    def test_hashable(self):
        assert len({NotFoundError("not found", 404), NotFoundError("not found", 404)}) == 1

    def test_str(self):
        assert str(NotFoundError("not found", 404)) == "Riot API Error 404: not found"
        assert str(RiotAPIError("boom")) == "Riot API Error: boom"
        assert (
            str(RateLimitError("rate limit exceeded", 429, retry_after=5))
            == "Rate Limit Error 429: rate limit exceeded (Retry after: 5s)"
        )

    def test_end_of_stream_is_not_an_api_error(self):
        assert not isinstance(EndOfStream(), RiotAPIError)
        assert EndOfStream() == EndOfStream()
