"""
Unit tests for fee calculation.
"""

import pytest

from movie_rental.domain.models import Movie, MovieKind
from movie_rental.services.errors import InvalidKindError
from movie_rental.services.fee_service import (
    base_fee,
    late_fee,
    total_fee,
    total_fees,
)


class TestBaseFee:
    """Test the flat fee schedule."""

    def test_digital_base_fee(self):
        assert base_fee(MovieKind.DIGITAL) == 5.0

    def test_physical_base_fee(self):
        assert base_fee(MovieKind.PHYSICAL) == 10.0

    def test_accepts_kind_value(self):
        assert base_fee("physical") == 10.0

    def test_unknown_kind(self):
        with pytest.raises(InvalidKindError):
            base_fee("vhs")


class TestTotalFee:
    """Test the late surcharge past the grace period."""

    @pytest.mark.parametrize("days", [0, 1, 2, 3])
    def test_no_surcharge_within_grace_period(self, days):
        assert total_fee(MovieKind.DIGITAL, days) == 5.0
        assert total_fee(MovieKind.PHYSICAL, days) == 10.0

    @pytest.mark.parametrize("days", [4, 5, 10, 30])
    def test_surcharge_after_grace_period(self, days):
        expected_late = (days - 3) * 2.0
        assert total_fee(MovieKind.DIGITAL, days) == 5.0 + expected_late
        assert total_fee(MovieKind.PHYSICAL, days) == 10.0 + expected_late

    def test_late_fee_alone(self):
        assert late_fee(3) == 0.0
        assert late_fee(4) == 2.0

    def test_five_days_digital(self):
        assert total_fee(MovieKind.DIGITAL, 5) == 9.0


class TestTotalFees:
    """Test summing fees across several movies."""

    def test_empty(self):
        assert total_fees([]) == 0.0

    def test_mixed_movies(self):
        movies = [
            Movie(title="A", kind=MovieKind.DIGITAL, is_rented=True, days_rented=0),
            Movie(title="B", kind=MovieKind.PHYSICAL, is_rented=True, days_rented=6),
        ]
        assert total_fees(movies) == 5.0 + 10.0 + 6.0
