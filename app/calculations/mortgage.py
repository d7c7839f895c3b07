"""
Mortgage Calculation Pipeline

Runs payment, schedule and breakdown calculations for one set of loan
parameters and packages the results for display and export.
"""

import logging
from dataclasses import dataclass
from typing import List, Dict

from app.calculations.amortization import (
    MAX_PERIODS,
    AmortizationRow,
    LoanSummary,
    calculate_periodic_payment,
    estimate_payoff_date,
    generate_schedule,
    summarize_schedule,
)
from app.calculations.loan import LoanParameters, PaymentFrequency
from app.calculations.piti import MonthlyBreakdown, calculate_monthly_breakdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MortgageResult:
    """Everything computed for one set of loan parameters."""

    payment_frequency: PaymentFrequency
    frequency_label: str
    periodic_payment: float
    breakdown: MonthlyBreakdown
    summary: LoanSummary
    schedule: List[AmortizationRow]


def principal_interest_split(summary: LoanSummary) -> List[Dict]:
    """Lifetime principal vs. interest, for a pie chart."""
    return [
        {"name": "Principal", "value": summary.total_principal},
        {"name": "Total Interest", "value": summary.total_interest},
    ]


def balance_series(schedule: List[AmortizationRow]) -> List[Dict]:
    """Year-end balance and interest paid to date, for a line chart."""
    return [
        {
            "year": row.year,
            "balance": row.remaining,
            "total_interest": row.cumulative_interest,
        }
        for row in schedule
    ]


def calculate_mortgage(params: LoanParameters) -> MortgageResult:
    """
    Calculate payment, schedule, totals and monthly breakdown for a loan.

    Every call starts from scratch; nothing is carried between calls.
    """
    periods_per_year = params.periods_per_year
    rate_per_period = params.rate_per_period
    total_periods = params.total_periods

    if total_periods > MAX_PERIODS:
        logger.warning(
            f"Schedule truncated to {MAX_PERIODS} periods "
            f"(requested {total_periods})"
        )

    payment = calculate_periodic_payment(
        params.loan_amount, rate_per_period, total_periods
    )

    schedule = generate_schedule(
        loan_amount=params.loan_amount,
        rate_per_period=rate_per_period,
        total_periods=total_periods,
        periods_per_year=periods_per_year,
        periodic_payment=payment,
        extra_per_period=params.extra_payment_per_period,
    )

    number_of_payments = sum(row.payments for row in schedule)
    payoff_date = estimate_payoff_date(
        params.first_payment_date, params.payment_frequency, number_of_payments
    )
    summary = summarize_schedule(
        schedule, params.loan_amount, payment, payoff_date=payoff_date
    )

    breakdown = calculate_monthly_breakdown(
        periodic_payment=payment,
        periods_per_year=periods_per_year,
        extra_per_period=params.extra_payment_per_period,
        home_value=params.home_value,
        property_tax_rate=params.property_tax_rate,
        yearly_insurance=params.yearly_insurance,
        monthly_hoa=params.monthly_hoa,
    )

    logger.debug(
        f"Calculated {PaymentFrequency(params.payment_frequency).value} loan of "
        f"{params.loan_amount:.2f}: payment {payment:.2f}, "
        f"{len(schedule)} years, {number_of_payments} payments"
    )

    return MortgageResult(
        payment_frequency=PaymentFrequency(params.payment_frequency),
        frequency_label=params.frequency_label,
        periodic_payment=payment,
        breakdown=breakdown,
        summary=summary,
        schedule=schedule,
    )
