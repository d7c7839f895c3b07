"""
Loan Parameters

Input model for the mortgage calculator and the payment frequencies it
supports.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class PaymentFrequency(str, Enum):
    """How often a payment is made."""

    monthly = "monthly"
    biweekly = "biweekly"
    weekly = "weekly"
    semimonthly = "semimonthly"


PERIODS_PER_YEAR = {
    PaymentFrequency.monthly: 12,
    PaymentFrequency.biweekly: 26,
    PaymentFrequency.weekly: 52,
    PaymentFrequency.semimonthly: 24,
}

FREQUENCY_LABEL = {
    PaymentFrequency.monthly: "per month",
    PaymentFrequency.biweekly: "every 2 weeks",
    PaymentFrequency.weekly: "per week",
    PaymentFrequency.semimonthly: "twice per month",
}


@dataclass(frozen=True)
class LoanParameters:
    """
    Everything needed to price one fixed-rate loan.

    Rates are annual percentages (5.0 for 5%), not decimals.
    """

    loan_amount: float = 300000.0
    interest_rate: float = 5.0
    loan_term_years: int = 30
    payment_frequency: PaymentFrequency = PaymentFrequency.monthly
    extra_payment_per_period: float = 0.0

    # PITI inputs
    home_value: float = 300000.0
    property_tax_rate: float = 1.8
    yearly_insurance: float = 1000.0
    monthly_hoa: float = 0.0

    first_payment_date: Optional[date] = None

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[PaymentFrequency(self.payment_frequency)]

    @property
    def rate_per_period(self) -> float:
        return self.interest_rate / 100 / self.periods_per_year

    @property
    def total_periods(self) -> int:
        return self.loan_term_years * self.periods_per_year

    @property
    def frequency_label(self) -> str:
        return FREQUENCY_LABEL[PaymentFrequency(self.payment_frequency)]
