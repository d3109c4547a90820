"""Tests for break-even, total ROI and the ROI timeline."""

import math

import pytest

from models import InvalidInputError
from analytics.analysis import (
    RoiTimeline,
    break_even_years,
    never_breaks_even,
    roi_timeline,
    total_roi_pct,
)


class TestBreakEvenYears:
    """Tests for the break-even year and its 'never' sentinel."""

    def test_positive_income(self):
        assert break_even_years(1_000_000, 10_000) == pytest.approx(1_000_000 / 120_000)

    def test_zero_income_never_breaks_even(self):
        years = break_even_years(1_000_000, 0)
        assert years == math.inf
        assert never_breaks_even(years)

    def test_negative_income_never_breaks_even(self):
        assert never_breaks_even(break_even_years(1_000_000, -500))

    def test_finite_result_is_distinguishable(self):
        assert not never_breaks_even(break_even_years(1_000_000, 5_000))


class TestTotalRoi:
    """Tests for appreciation-adjusted ROI."""

    def test_no_growth_no_income(self):
        assert total_roi_pct(1_000_000, 0, 10, 0) == 0

    def test_appreciation_only(self):
        assert total_roi_pct(1_000_000, 10, 1, 0) == pytest.approx(10.0)

    def test_compounds(self):
        assert total_roi_pct(1_000_000, 10, 2, 0) == pytest.approx(21.0)

    def test_income_only(self):
        # 5,000 * 12 * 10 = 600,000 on 1,000,000
        assert total_roi_pct(1_000_000, 0, 10, 5_000) == pytest.approx(60.0)

    def test_negative_income_drags(self):
        assert total_roi_pct(1_000_000, 3, 10, -2_000) < total_roi_pct(1_000_000, 3, 10, 0)

    @pytest.mark.parametrize("price", [0, -1])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(InvalidInputError):
            total_roi_pct(price, 3, 10, 1_000)


class TestRoiTimeline:
    """Tests for the (year, roi %) series."""

    def test_years_one_to_horizon(self):
        timeline = roi_timeline(5_000_000, 3, 1_000)
        assert [year for year, _ in timeline] == list(range(1, 11))
        assert len(timeline) == 10

    def test_matches_total_roi(self):
        timeline = roi_timeline(5_000_000, 3, -6_000, horizon_years=5)
        for year, roi in timeline:
            assert roi == total_roi_pct(5_000_000, 3, year, -6_000)

    def test_restartable(self):
        timeline = roi_timeline(5_000_000, 3, 1_000)
        assert list(timeline) == list(timeline)

    def test_lazy(self):
        it = iter(RoiTimeline(5_000_000, 3, 1_000, horizon_years=3))
        assert next(it)[0] == 1
        assert next(it)[0] == 2

    def test_rejects_non_positive_price(self):
        with pytest.raises(InvalidInputError):
            roi_timeline(0, 3, 1_000)
