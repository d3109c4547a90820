PRICE_UNIT = 10_000  # price inputs are quoted in 萬 (10,000 HKD)
ROI_HORIZON_YEARS = 10
AUTO_RATES_ANNUAL_RATE = 0.001  # rates estimate: 0.1% of price per year

DEFAULT_VALUES = {
    "payment_type": "mortgage",
    "buyer_type": "hkpr",
    "is_first_home": False,
    "price_units": 500.0,  # 500萬 = 5,000,000 HKD
    "monthly_rental": 15000.0,
    "monthly_expenses": 3000.0,
    "monthly_management_fee": 2000.0,
    "monthly_rates": 0.0,  # 0 = auto
    "annual_interest_rate_pct": 3.5,  # percentage
    "mortgage_term_years": 30,
    "down_payment": 30.0,
    "down_payment_type": "percentage",
    "annual_appreciation_rate_pct": 3.0,  # percentage
    "manual_stamp_duty": 0.0,  # 0 = auto
}
