"""
Monthly Payment Breakdown

Converts the loan payment and the ownership costs around it into a
monthly PITI (principal, interest, taxes, insurance) estimate.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyBreakdown:
    """Monthly cost components, in currency units per month."""

    principal_and_interest: float
    property_tax: float
    insurance: float
    hoa: float
    extra_principal: float
    total: float


def to_monthly(amount_per_period: float, periods_per_year: int) -> float:
    """
    Spread a per-period amount evenly across twelve months.

    This is a cash-flow rate, not a schedule: a biweekly borrower actually
    pays three times in two months of each year, which is averaged away
    here.
    """
    return amount_per_period * periods_per_year / 12


def calculate_monthly_breakdown(
    periodic_payment: float,
    periods_per_year: int,
    extra_per_period: float,
    home_value: float,
    property_tax_rate: float,
    yearly_insurance: float,
    monthly_hoa: float,
) -> MonthlyBreakdown:
    """
    Calculate the monthly PITI breakdown.

    Args:
        periodic_payment: Scheduled principal and interest payment per period
        periods_per_year: Payments per year
        extra_per_period: Extra principal paid every period
        home_value: Assessed home value
        property_tax_rate: Annual property tax as percent of home value
        yearly_insurance: Annual homeowner's insurance premium
        monthly_hoa: Monthly HOA dues

    Returns:
        MonthlyBreakdown with each component and the total
    """
    principal_and_interest = to_monthly(periodic_payment, periods_per_year)
    extra_principal = to_monthly(extra_per_period, periods_per_year)

    property_tax = home_value * (property_tax_rate / 100) / 12
    insurance = yearly_insurance / 12

    total = (
        principal_and_interest
        + property_tax
        + insurance
        + monthly_hoa
        + extra_principal
    )

    return MonthlyBreakdown(
        principal_and_interest=principal_and_interest,
        property_tax=property_tax,
        insurance=insurance,
        hoa=monthly_hoa,
        extra_principal=extra_principal,
        total=total,
    )
