import logging
import math
from typing import Optional, Tuple

from config import PRICE_UNIT, ROI_HORIZON_YEARS
from models import CalculationResult, InvalidInputError, PaymentType, PropertyInput
from finance.mortgage import down_payment_amount, loan_amount, monthly_payment
from finance.taxes import resolve_monthly_rates, stamp_duty
from analytics.analysis import break_even_years, total_roi_pct

logger = logging.getLogger(__name__)

NON_NEGATIVE_FIELDS = (
    "monthly_rental",
    "monthly_expenses",
    "monthly_management_fee",
    "monthly_rates",
    "down_payment",
    "manual_stamp_duty",
)
NUMERIC_FIELDS = (
    "price_units",
    *NON_NEGATIVE_FIELDS,
    "annual_interest_rate_pct",
    "mortgage_term_years",
    "annual_appreciation_rate_pct",
)


def actual_price(price_units: float) -> float:
    """萬 -> HKD."""
    return price_units * PRICE_UNIT


def validate_inputs(inputs: PropertyInput, horizon_years: int = ROI_HORIZON_YEARS) -> None:
    """Raise InvalidInputError listing every field that cannot be computed with."""
    errors = []
    # NaN passes every sign check below; inf passes the lower bounds
    for name in NUMERIC_FIELDS:
        value = getattr(inputs, name)
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number (got {value})")
    if not math.isfinite(horizon_years):
        errors.append(f"horizon_years must be a finite number (got {horizon_years})")
    if errors:
        logger.warning("Rejected property input: %s", "; ".join(errors))
        raise InvalidInputError(errors)

    if inputs.price_units <= 0:
        errors.append(f"price_units must be > 0 (got {inputs.price_units})")
    for name in NON_NEGATIVE_FIELDS:
        value = getattr(inputs, name)
        if value < 0:
            errors.append(f"{name} must be >= 0 (got {value})")
    if inputs.payment_type is PaymentType.MORTGAGE:
        if inputs.annual_interest_rate_pct < 0:
            errors.append(
                f"annual_interest_rate_pct must be >= 0 (got {inputs.annual_interest_rate_pct})"
            )
        if inputs.mortgage_term_years <= 0:
            errors.append(
                f"mortgage_term_years must be > 0 (got {inputs.mortgage_term_years})"
            )
    if horizon_years <= 0:
        errors.append(f"horizon_years must be > 0 (got {horizon_years})")

    if errors:
        logger.warning("Rejected property input: %s", "; ".join(errors))
        raise InvalidInputError(errors)


def annual_yield_and_payback(
    total_cost: float, net_monthly_income: float
) -> Tuple[Optional[float], Optional[float]]:
    """(annual yield %, payback years) on the upfront cost; None where undefined.

    calculate() never reaches a zero cost basis (duty is always > 0), but the
    guard keeps inf/nan out of the result for any other caller.
    """
    if total_cost == 0:
        logger.warning("Total upfront cost is 0; annual yield and payback undefined")
        return None, None
    annual_yield = (net_monthly_income * 12 / total_cost) * 100.0
    payback = total_cost / (net_monthly_income * 12) if net_monthly_income != 0 else None
    return annual_yield, payback


def calculate(
    inputs: PropertyInput, horizon_years: int = ROI_HORIZON_YEARS
) -> CalculationResult:
    """Full result for one input snapshot. Pure: same input, same output."""
    validate_inputs(inputs, horizon_years)

    price = actual_price(inputs.price_units)
    duty = stamp_duty(
        price,
        inputs.buyer_type,
        inputs.is_first_home,
        manual_override=inputs.manual_stamp_duty,
    )
    rates = resolve_monthly_rates(inputs.monthly_rates, price)

    if inputs.payment_type is PaymentType.CASH:
        financing = 0.0
        total_cost = price + duty.amount
    else:
        deposit = down_payment_amount(price, inputs.down_payment, inputs.down_payment_type)
        loan = loan_amount(price, deposit)
        financing = monthly_payment(
            loan, inputs.annual_interest_rate_pct, inputs.mortgage_term_years
        )
        total_cost = deposit + duty.amount
        logger.debug(
            "Mortgage: deposit=%.2f loan=%.2f payment=%.2f", deposit, loan, financing
        )

    outgoings = (
        inputs.monthly_expenses + inputs.monthly_management_fee + rates + financing
    )
    net_monthly = inputs.monthly_rental - outgoings

    gross_yield = (inputs.monthly_rental * 12 / price) * 100.0
    net_yield = (net_monthly * 12 / price) * 100.0
    roi = total_roi_pct(
        price, inputs.annual_appreciation_rate_pct, horizon_years, net_monthly
    )
    break_even = break_even_years(total_cost, net_monthly)

    annual_yield, payback = annual_yield_and_payback(total_cost, net_monthly)

    logger.debug(
        "price=%.0f duty=%.0f rates=%.0f total_cost=%.2f net_monthly=%.2f",
        price,
        duty.amount,
        rates,
        total_cost,
        net_monthly,
    )

    return CalculationResult(
        actual_price=price,
        total_upfront_cost=total_cost,
        monthly_financing_payment=financing,
        monthly_rates=rates,
        monthly_income=inputs.monthly_rental,
        net_monthly_income=net_monthly,
        gross_yield_pct=gross_yield,
        net_yield_pct=net_yield,
        total_roi_pct=roi,
        break_even_years=break_even,
        stamp_duty=duty,
        horizon_years=horizon_years,
        annual_yield_pct=annual_yield,
        payback_years=payback,
    )
