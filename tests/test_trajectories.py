"""Tests for chart data frames."""

import pytest

from analytics.simulation import calculate
from analytics.trajectories import (
    cost_breakdown_dataframe,
    income_expense_dataframe,
    roi_timeline_dataframe,
)


class TestCostBreakdown:
    def test_mortgage(self, default_inputs):
        df = cost_breakdown_dataframe(default_inputs, calculate(default_inputs))
        assert list(df["Category"]) == ["Down Payment", "Stamp Duty"]
        assert list(df["Amount"]) == [1_500_000, 112_500]

    def test_cash(self, cash_inputs):
        df = cost_breakdown_dataframe(cash_inputs, calculate(cash_inputs))
        assert list(df["Category"]) == ["Property Price", "Stamp Duty"]
        assert df["Amount"].sum() == calculate(cash_inputs).total_upfront_cost


class TestIncomeExpense:
    def test_mortgage_has_mortgage_row(self, default_inputs):
        res = calculate(default_inputs)
        df = income_expense_dataframe(default_inputs, res)
        assert list(df["Category"]) == [
            "Rental Income",
            "Expenses",
            "Management Fee",
            "Rates",
            "Mortgage",
        ]
        assert df["Amount"].iloc[-1] == pytest.approx(res.monthly_financing_payment)

    def test_cash_has_no_mortgage_row(self, cash_inputs):
        df = income_expense_dataframe(cash_inputs, calculate(cash_inputs))
        assert "Mortgage" not in list(df["Category"])
        assert df.loc[df["Category"] == "Rates", "Amount"].iloc[0] == 417


class TestRoiTimelineFrame:
    def test_ten_years(self, default_inputs):
        res = calculate(default_inputs)
        df = roi_timeline_dataframe(default_inputs, res)
        assert list(df["Year"]) == list(range(1, 11))
        assert df["ROI (%)"].iloc[-1] == pytest.approx(res.total_roi_pct)

    def test_follows_horizon(self, default_inputs):
        res = calculate(default_inputs, horizon_years=25)
        assert len(roi_timeline_dataframe(default_inputs, res)) == 25
