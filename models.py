import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import List, Optional

from config import DEFAULT_VALUES


class PaymentType(str, Enum):
    CASH = "cash"
    MORTGAGE = "mortgage"


class BuyerType(str, Enum):
    PERMANENT_RESIDENT = "hkpr"
    NON_PERMANENT_RESIDENT = "non-hkpr"


class DownPaymentType(str, Enum):
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class InvalidInputError(ValueError):
    """Raised before any computation when an input cannot produce a defined result."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("invalid input: " + "; ".join(self.errors))


def never_breaks_even(years: float) -> bool:
    """True only for the +inf break-even sentinel."""
    return math.isinf(years) and years > 0


@dataclass(frozen=True)
class PropertyInput:
    payment_type: PaymentType
    buyer_type: BuyerType
    is_first_home: bool
    price_units: float  # 萬 (10,000 HKD blocks)
    monthly_rental: float
    monthly_expenses: float
    monthly_management_fee: float
    monthly_rates: float  # 0 = auto-estimate
    annual_interest_rate_pct: float
    mortgage_term_years: int
    down_payment: float
    down_payment_type: DownPaymentType
    annual_appreciation_rate_pct: float
    manual_stamp_duty: float = 0.0  # <= 0 = auto

    def __post_init__(self):
        # accept plain strings from forms / JSON
        object.__setattr__(self, "payment_type", PaymentType(self.payment_type))
        object.__setattr__(self, "buyer_type", BuyerType(self.buyer_type))
        object.__setattr__(
            self, "down_payment_type", DownPaymentType(self.down_payment_type)
        )

    @classmethod
    def default(cls, **overrides) -> "PropertyInput":
        return cls(**{**DEFAULT_VALUES, **overrides})

    def to_dict(self) -> dict:
        d = asdict(self)
        d["payment_type"] = self.payment_type.value
        d["buyer_type"] = self.buyer_type.value
        d["down_payment_type"] = self.down_payment_type.value
        return d


@dataclass(frozen=True)
class StampDutyInfo:
    amount: float
    marginal_rate_pct: float
    band_description: str
    refund_eligible: bool
    band_upper_bound: Optional[float] = None  # None for the open top band


@dataclass(frozen=True)
class CalculationResult:
    actual_price: float
    total_upfront_cost: float
    monthly_financing_payment: float
    monthly_rates: float
    monthly_income: float
    net_monthly_income: float
    gross_yield_pct: float
    net_yield_pct: float
    total_roi_pct: float
    break_even_years: float  # math.inf = never breaks even
    stamp_duty: StampDutyInfo
    horizon_years: int
    annual_yield_pct: Optional[float] = None  # None = undefined
    payback_years: Optional[float] = None  # None = undefined

    @property
    def never_breaks_even(self) -> bool:
        return never_breaks_even(self.break_even_years)

    def to_dict(self) -> dict:
        """Strict-JSON view: infinite break-even becomes None plus a flag."""
        d = asdict(self)
        d["never_breaks_even"] = self.never_breaks_even
        if self.never_breaks_even:
            d["break_even_years"] = None
        return d
