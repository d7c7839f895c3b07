"""
Loan Amortization Calculations

Implements the fixed periodic payment, the period-by-period amortization
schedule rolled up into yearly rows, and the totals derived from it.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from app.calculations.loan import PaymentFrequency

# Balances at or below this are treated as paid off
BALANCE_EPSILON = 0.01

# 100 years of weekly payments
MAX_PERIODS = 5200


@dataclass(frozen=True)
class AmortizationRow:
    """One year of the schedule."""

    year: int
    principal: float
    interest: float
    remaining: float
    cumulative_principal: float
    cumulative_interest: float
    payments: int


@dataclass(frozen=True)
class LoanSummary:
    """Lifetime totals for a schedule."""

    periodic_payment: float
    total_principal: float
    total_interest: float
    total_payment: float
    number_of_payments: int
    payoff_year: int
    payoff_date: Optional[date] = None


@dataclass
class _YearBucket:
    principal: float = 0.0
    interest: float = 0.0
    remaining: float = 0.0
    payments: int = 0


def calculate_periodic_payment(
    loan_amount: float, rate_per_period: float, total_periods: int
) -> float:
    """
    Calculate the fixed payment per period.

    Matches Excel's PMT() function.

    Args:
        loan_amount: Loan principal amount
        rate_per_period: Interest rate per period as decimal
            (e.g., 0.05 / 12 for 5% paid monthly)
        total_periods: Total number of payments

    Returns:
        Payment per period (positive number), 0 for an empty loan
    """
    if loan_amount <= 0:
        return 0.0
    if total_periods <= 0:
        return 0.0

    if rate_per_period == 0:
        return loan_amount / total_periods

    # r / (1 - (1+r)^-n), finite for any term and any rate > 0
    discount = -math.expm1(-total_periods * math.log1p(rate_per_period))
    payment = loan_amount * rate_per_period / discount

    return payment


def generate_schedule(
    loan_amount: float,
    rate_per_period: float,
    total_periods: int,
    periods_per_year: int,
    periodic_payment: float,
    extra_per_period: float = 0.0,
    max_periods: int = MAX_PERIODS,
) -> List[AmortizationRow]:
    """
    Generate the amortization schedule aggregated by year.

    Each period pays interest on the balance at the start of the period;
    whatever is left of the payment, plus the extra payment, goes to
    principal. The final payment is cut down to the remaining balance, and
    the schedule stops as soon as the loan is paid off.

    Args:
        loan_amount: Loan principal amount
        rate_per_period: Interest rate per period as decimal
        total_periods: Number of periods in the loan term
        periods_per_year: Payments per year (12 for monthly)
        periodic_payment: Scheduled payment per period
        extra_per_period: Additional principal paid every period
        max_periods: Hard ceiling on simulated periods

    Returns:
        Yearly rows, ascending by year. Empty for a degenerate loan.
    """
    if loan_amount <= 0 or total_periods <= 0 or periods_per_year <= 0:
        return []

    periods = min(int(total_periods), max_periods)
    buckets = [_YearBucket() for _ in range(math.ceil(periods / periods_per_year))]
    balance = loan_amount

    for period in range(1, periods + 1):
        if balance <= BALANCE_EPSILON:
            break

        interest = 0.0 if rate_per_period == 0 else balance * rate_per_period
        principal = periodic_payment - interest + extra_per_period

        # Final payment only covers what is left
        if principal > balance + interest:
            principal = balance

        balance = max(0.0, balance - principal)

        bucket = buckets[math.ceil(period / periods_per_year) - 1]
        bucket.principal += principal
        bucket.interest += interest
        bucket.remaining = balance
        bucket.payments += 1

        if balance <= BALANCE_EPSILON:
            break

    schedule = []
    cumulative_principal = 0.0
    cumulative_interest = 0.0

    for index, bucket in enumerate(buckets):
        if bucket.payments == 0:
            break
        cumulative_principal += bucket.principal
        cumulative_interest += bucket.interest
        schedule.append(
            AmortizationRow(
                year=index + 1,
                principal=bucket.principal,
                interest=bucket.interest,
                remaining=bucket.remaining,
                cumulative_principal=cumulative_principal,
                cumulative_interest=cumulative_interest,
                payments=bucket.payments,
            )
        )

    return schedule


def estimate_payoff_date(
    first_payment_date: Optional[date],
    frequency: PaymentFrequency,
    number_of_payments: int,
) -> Optional[date]:
    """
    Date of the last payment, counting from the first payment date.

    Semimonthly payments fall on the first payment day and 15 days later
    in every month.
    """
    if first_payment_date is None or number_of_payments <= 0:
        return None

    steps = number_of_payments - 1
    frequency = PaymentFrequency(frequency)

    if frequency == PaymentFrequency.monthly:
        return first_payment_date + relativedelta(months=steps)
    if frequency == PaymentFrequency.biweekly:
        return first_payment_date + relativedelta(weeks=2 * steps)
    if frequency == PaymentFrequency.weekly:
        return first_payment_date + relativedelta(weeks=steps)

    months, half = divmod(steps, 2)
    return first_payment_date + relativedelta(months=months, days=15 * half)


def summarize_schedule(
    schedule: List[AmortizationRow],
    loan_amount: float,
    periodic_payment: float,
    payoff_date: Optional[date] = None,
) -> LoanSummary:
    """
    Calculate lifetime totals from a schedule.

    An empty schedule still owes the original loan amount as principal.
    """
    last_row = schedule[-1] if schedule else None

    total_interest = last_row.cumulative_interest if last_row else 0.0
    total_principal = last_row.cumulative_principal if last_row else loan_amount

    return LoanSummary(
        periodic_payment=periodic_payment,
        total_principal=total_principal,
        total_interest=total_interest,
        total_payment=total_principal + total_interest,
        number_of_payments=sum(row.payments for row in schedule),
        payoff_year=last_row.year if last_row else 0,
        payoff_date=payoff_date,
    )
