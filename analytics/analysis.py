import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from config import ROI_HORIZON_YEARS
from models import InvalidInputError, never_breaks_even  # noqa: F401


def break_even_years(total_cost: float, net_monthly_income: float) -> float:
    """Years of net cash flow needed to recoup `total_cost`; math.inf if never."""
    if net_monthly_income <= 0:
        return math.inf
    return total_cost / (net_monthly_income * 12)


def total_roi_pct(
    initial_price: float,
    appreciation_pct: float,
    years: float,
    net_monthly_income: float,
) -> float:
    """Capital gain from compounding appreciation plus cumulative net income,
    as % of the initial price."""
    if initial_price <= 0:
        raise InvalidInputError([f"initial_price must be > 0 (got {initial_price})"])
    final_price = initial_price * (1 + appreciation_pct / 100.0) ** years
    total_income = net_monthly_income * 12 * years
    return ((final_price + total_income - initial_price) / initial_price) * 100.0


@dataclass(frozen=True)
class RoiTimeline:
    """(year, roi %) for years 1..horizon_years. Each iteration starts over."""

    initial_price: float
    appreciation_pct: float
    net_monthly_income: float
    horizon_years: int = ROI_HORIZON_YEARS

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        for year in range(1, self.horizon_years + 1):
            yield year, total_roi_pct(
                self.initial_price,
                self.appreciation_pct,
                year,
                self.net_monthly_income,
            )

    def __len__(self) -> int:
        return max(0, self.horizon_years)


def roi_timeline(
    initial_price: float,
    appreciation_pct: float,
    net_monthly_income: float,
    horizon_years: int = ROI_HORIZON_YEARS,
) -> RoiTimeline:
    if initial_price <= 0:
        raise InvalidInputError([f"initial_price must be > 0 (got {initial_price})"])
    return RoiTimeline(initial_price, appreciation_pct, net_monthly_income, horizon_years)
