"""
Mortgage calculation API endpoints.

These endpoints accept loan inputs and return calculated results.
Called on every form change, so degenerate inputs (zero amount, zero
term) return zeros and empty schedules instead of errors.
"""

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from app.calculations.loan import (
    FREQUENCY_LABEL,
    PERIODS_PER_YEAR,
    LoanParameters,
    PaymentFrequency,
)
from app.calculations.mortgage import (
    balance_series,
    calculate_mortgage,
    principal_interest_split,
)
from app.config import get_settings
from app.services.export import CSV_FILENAME, render_print_view, schedule_to_csv

router = APIRouter()


class MortgageInput(BaseModel):
    """Input for mortgage calculation. Rates are annual percentages."""

    # Loan
    loan_amount: float = 300000.0
    interest_rate: float = 5.0
    loan_term_years: int = 30
    payment_frequency: PaymentFrequency = PaymentFrequency.monthly
    extra_payment_per_period: float = 0.0
    first_payment_date: Optional[date] = None

    # PITI
    home_value: float = 300000.0
    property_tax_rate: float = 1.8
    yearly_insurance: float = 1000.0
    monthly_hoa: float = 0.0

    def to_params(self) -> LoanParameters:
        return LoanParameters(
            loan_amount=self.loan_amount,
            interest_rate=self.interest_rate,
            loan_term_years=self.loan_term_years,
            payment_frequency=self.payment_frequency,
            extra_payment_per_period=self.extra_payment_per_period,
            home_value=self.home_value,
            property_tax_rate=self.property_tax_rate,
            yearly_insurance=self.yearly_insurance,
            monthly_hoa=self.monthly_hoa,
            first_payment_date=self.first_payment_date,
        )


class AmortizationRowOut(BaseModel):
    """One year of the amortization schedule."""

    year: int
    principal: float
    interest: float
    remaining: float
    cumulative_principal: float
    cumulative_interest: float
    payments: int


class LoanSummaryOut(BaseModel):
    """Lifetime loan totals."""

    periodic_payment: float
    total_principal: float
    total_interest: float
    total_payment: float
    number_of_payments: int
    payoff_year: int
    payoff_date: Optional[date] = None


class MonthlyBreakdownOut(BaseModel):
    """Monthly-equivalent PITI components."""

    principal_and_interest: float
    property_tax: float
    insurance: float
    hoa: float
    extra_principal: float
    total: float


class ChartData(BaseModel):
    """Series for the principal/interest pie and the balance line chart."""

    principal_vs_interest: List[dict]
    balance_over_time: List[dict]


class MortgageResponse(BaseModel):
    """Full calculation result."""

    payment_frequency: PaymentFrequency
    frequency_label: str
    periodic_payment: float
    breakdown: MonthlyBreakdownOut
    summary: LoanSummaryOut
    schedule: List[AmortizationRowOut]
    schedule_preview: List[AmortizationRowOut]
    chart: ChartData


class PaymentResponse(BaseModel):
    """Periodic payment only."""

    payment_frequency: PaymentFrequency
    frequency_label: str
    periods_per_year: int
    total_periods: int
    periodic_payment: float


class AmortizationResponse(BaseModel):
    """Schedule rows with totals."""

    schedule: List[AmortizationRowOut]
    summary: LoanSummaryOut


class FrequencyOut(BaseModel):
    """Supported payment frequency."""

    value: PaymentFrequency
    periods_per_year: int
    label: str


@router.post("/mortgage", response_model=MortgageResponse)
async def calculate_mortgage_endpoint(inputs: MortgageInput):
    """Calculate payment, schedule, totals and monthly breakdown."""
    settings = get_settings()
    result = calculate_mortgage(inputs.to_params())

    schedule = [AmortizationRowOut(**asdict(row)) for row in result.schedule]

    return MortgageResponse(
        payment_frequency=result.payment_frequency,
        frequency_label=result.frequency_label,
        periodic_payment=result.periodic_payment,
        breakdown=MonthlyBreakdownOut(**asdict(result.breakdown)),
        summary=LoanSummaryOut(**asdict(result.summary)),
        schedule=schedule,
        schedule_preview=schedule[: settings.schedule_preview_rows],
        chart=ChartData(
            principal_vs_interest=principal_interest_split(result.summary),
            balance_over_time=balance_series(result.schedule),
        ),
    )


@router.post("/payment", response_model=PaymentResponse)
async def calculate_payment_endpoint(inputs: MortgageInput):
    """Calculate the fixed payment per period."""
    params = inputs.to_params()
    result = calculate_mortgage(params)

    return PaymentResponse(
        payment_frequency=result.payment_frequency,
        frequency_label=result.frequency_label,
        periods_per_year=params.periods_per_year,
        total_periods=params.total_periods,
        periodic_payment=result.periodic_payment,
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: MortgageInput):
    """Generate the yearly amortization schedule."""
    result = calculate_mortgage(inputs.to_params())

    return AmortizationResponse(
        schedule=[AmortizationRowOut(**asdict(row)) for row in result.schedule],
        summary=LoanSummaryOut(**asdict(result.summary)),
    )


@router.post("/breakdown", response_model=MonthlyBreakdownOut)
async def calculate_breakdown(inputs: MortgageInput):
    """Calculate the monthly PITI breakdown."""
    result = calculate_mortgage(inputs.to_params())
    return MonthlyBreakdownOut(**asdict(result.breakdown))


@router.post("/amortization/csv")
async def export_amortization_csv(inputs: MortgageInput):
    """Download the schedule as CSV."""
    result = calculate_mortgage(inputs.to_params())

    return Response(
        content=schedule_to_csv(result.schedule),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.post("/amortization/print", response_class=HTMLResponse)
async def export_amortization_print(inputs: MortgageInput):
    """Render the schedule as a printable HTML page."""
    result = calculate_mortgage(inputs.to_params())
    return HTMLResponse(content=render_print_view(result))


@router.get("/frequencies", response_model=List[FrequencyOut])
async def list_frequencies():
    """List supported payment frequencies."""
    return [
        FrequencyOut(
            value=frequency,
            periods_per_year=PERIODS_PER_YEAR[frequency],
            label=FREQUENCY_LABEL[frequency],
        )
        for frequency in PaymentFrequency
    ]
