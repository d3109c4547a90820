from models import DownPaymentType, InvalidInputError


def monthly_payment(principal: float, annual_rate_pct: float, years: int) -> float:
    n = years * 12
    if n <= 0:
        raise InvalidInputError([f"mortgage_term_years must be > 0 (got {years})"])
    r = annual_rate_pct / 100.0 / 12.0
    if abs(r) < 1e-12:
        return principal / n
    pow_ = (1 + r) ** n
    return principal * (r * pow_) / (pow_ - 1)


def down_payment_amount(
    actual_price: float, down_payment: float, down_payment_type: DownPaymentType
) -> float:
    """Percentage of price or a literal HKD amount. Not clamped: anything above
    the price simply yields a negative loan."""
    if DownPaymentType(down_payment_type) is DownPaymentType.PERCENTAGE:
        return actual_price * (down_payment / 100.0)
    return float(down_payment)


def loan_amount(actual_price: float, deposit: float) -> float:
    return actual_price - deposit
