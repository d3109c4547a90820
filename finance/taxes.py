import math
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal
from typing import Optional, Tuple

from config import AUTO_RATES_ANNUAL_RATE
from models import BuyerType, StampDutyInfo


@dataclass(frozen=True)
class DutyBand:
    upper: float  # inclusive
    base: float
    rate: float
    excess_over: Optional[float]  # None: rate applies to the whole price
    marginal_rate_pct: float
    description: str

    def duty(self, price: float) -> float:
        if self.excess_over is None:
            return self.base + self.rate * price
        return self.base + self.rate * (price - self.excess_over)

    def exact_duty(self, price: Decimal) -> Decimal:
        base, rate = Decimal(str(self.base)), Decimal(str(self.rate))
        if self.excess_over is None:
            return base + rate * price
        return base + rate * (price - Decimal(str(self.excess_over)))


# Ad Valorem Duty – SCALE 2 (effective 26 Feb 2025).
# The "base + 10% of excess" rows are marginal relief between the flat-% rows.
AVD_SCALE2_BANDS: Tuple[DutyBand, ...] = (
    DutyBand(4_000_000, 100.0, 0.0, None, 0.0, "Fixed HK$ 100"),
    DutyBand(4_323_780, 100.0, 0.20, 4_000_000, 20.0, "HK$ 100 + 20% of excess over HK$ 4M"),
    DutyBand(4_500_000, 0.0, 0.015, None, 1.5, "1.5% of purchase price"),
    DutyBand(4_935_480, 67_500.0, 0.10, 4_500_000, 10.0, "HK$ 67,500 + 10% of excess over HK$ 4.5M"),
    DutyBand(6_000_000, 0.0, 0.0225, None, 2.25, "2.25% of purchase price"),
    DutyBand(6_642_860, 135_000.0, 0.10, 6_000_000, 10.0, "HK$ 135,000 + 10% of excess over HK$ 6M"),
    DutyBand(9_000_000, 0.0, 0.03, None, 3.0, "3% of purchase price"),
    DutyBand(10_080_000, 270_000.0, 0.10, 9_000_000, 10.0, "HK$ 270,000 + 10% of excess over HK$ 9M"),
    DutyBand(20_000_000, 0.0, 0.0375, None, 3.75, "3.75% of purchase price"),
    DutyBand(math.inf, 750_000.0, 0.10, 20_000_000, 10.0, "HK$ 750,000 + 10% of excess over HK$ 20M"),
)


def avd_band(price: float) -> DutyBand:
    for band in AVD_SCALE2_BANDS:
        if price <= band.upper:
            return band
    return AVD_SCALE2_BANDS[-1]


def hk_avd_scale2(price: float) -> int:
    """
    Hong Kong Ad Valorem Duty on a residential purchase, Scale 2.

    Tiers:
      ≤ 4,000,000                         : $100
      4,000,000 – 4,323,780               : $100 + 20% of excess over 4,000,000
      4,323,780 – 4,500,000               : 1.5% of price
      4,500,000 – 4,935,480               : $67,500 + 10% of excess over 4,500,000
      4,935,480 – 6,000,000               : 2.25% of price
      6,000,000 – 6,642,860               : $135,000 + 10% of excess over 6,000,000
      6,642,860 – 9,000,000               : 3.00% of price
      9,000,000 – 10,080,000              : $270,000 + 10% of excess over 9,000,000
      10,080,000 – 20,000,000             : 3.75% of price
      > 20,000,000                        : $750,000 + 10% of excess over 20,000,000

    Notes:
      - BSD/SSD/NRSD no longer apply to new purchases after 28 Feb 2024, so
        residency does not change the amount.

    Returns: duty in whole HK$, rounded UP per IRD rule.
    """
    # Decimal of the shortest repr: 0.20 * 100000 stays 20000, not 20000.000000000004
    x = Decimal(str(price))
    duty = avd_band(float(price)).exact_duty(x)
    return int(duty.to_integral_value(rounding=ROUND_CEILING))


def stamp_duty_rate_info(price: float) -> Tuple[float, str]:
    """(marginal rate %, band description) of the band the price falls in."""
    band = avd_band(float(price))
    return band.marginal_rate_pct, band.description


def is_refund_eligible(buyer_type: BuyerType, is_first_home: bool) -> bool:
    # HKPR first-home buyers may reclaim if the original home is sold within 12 months
    return BuyerType(buyer_type) is BuyerType.PERMANENT_RESIDENT and bool(is_first_home)


def stamp_duty(
    price: float,
    buyer_type: BuyerType = BuyerType.PERMANENT_RESIDENT,
    is_first_home: bool = False,
    manual_override: float = 0.0,
) -> StampDutyInfo:
    """Schedule duty, or `manual_override` when it is > 0.

    Band metadata always describes the schedule band of `price`, whichever
    amount ends up being used.
    """
    band = avd_band(float(price))
    amount = manual_override if manual_override > 0 else hk_avd_scale2(price)
    return StampDutyInfo(
        amount=amount,
        marginal_rate_pct=band.marginal_rate_pct,
        band_description=band.description,
        refund_eligible=is_refund_eligible(buyer_type, is_first_home),
        band_upper_bound=None if math.isinf(band.upper) else float(band.upper),
    )


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def hk_rates_monthly_estimate(actual_price: float) -> int:
    """
    Monthly Rates estimate from property value: 0.1% of price per year, spread
    over 12 months, rounded half-up to the nearest HK$.

    Not an official assessment (Rates are levied on rateable value); use a
    manual figure for precise cash planning.
    """
    return round_half_up(actual_price * AUTO_RATES_ANNUAL_RATE / 12.0)


def resolve_monthly_rates(monthly_rates: float, actual_price: float) -> float:
    if monthly_rates > 0:
        return float(monthly_rates)
    return float(hk_rates_monthly_estimate(actual_price))
