import pandas as pd

from models import CalculationResult, PaymentType, PropertyInput
from finance.mortgage import down_payment_amount
from analytics.analysis import roi_timeline


def cost_breakdown_dataframe(inputs: PropertyInput, res: CalculationResult) -> pd.DataFrame:
    """Upfront cost split for the pie chart: price (cash) or deposit (mortgage) plus duty."""
    if inputs.payment_type is PaymentType.CASH:
        first = ("Property Price", res.actual_price)
    else:
        first = (
            "Down Payment",
            down_payment_amount(
                res.actual_price, inputs.down_payment, inputs.down_payment_type
            ),
        )
    return pd.DataFrame(
        {
            "Category": [first[0], "Stamp Duty"],
            "Amount": [first[1], res.stamp_duty.amount],
        }
    )


def income_expense_dataframe(inputs: PropertyInput, res: CalculationResult) -> pd.DataFrame:
    """Monthly rent against each monthly outgoing; Mortgage row only when financed."""
    categories = ["Rental Income", "Expenses", "Management Fee", "Rates"]
    amounts = [
        inputs.monthly_rental,
        inputs.monthly_expenses,
        inputs.monthly_management_fee,
        res.monthly_rates,
    ]
    if inputs.payment_type is PaymentType.MORTGAGE:
        categories.append("Mortgage")
        amounts.append(res.monthly_financing_payment)
    return pd.DataFrame({"Category": categories, "Amount": amounts})


def roi_timeline_dataframe(inputs: PropertyInput, res: CalculationResult) -> pd.DataFrame:
    """
    Total ROI (appreciation + cumulative net income, % of price) at each year
    1..res.horizon_years, holding the current net monthly income fixed.
    """
    timeline = roi_timeline(
        res.actual_price,
        inputs.annual_appreciation_rate_pct,
        res.net_monthly_income,
        res.horizon_years,
    )
    years = []
    roi_vals = []
    for year, roi in timeline:
        years.append(year)
        roi_vals.append(roi)
    return pd.DataFrame({"Year": years, "ROI (%)": roi_vals})
