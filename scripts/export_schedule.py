"""
Print a mortgage summary and write its amortization schedule as CSV.

Usage:
    python scripts/export_schedule.py --loan-amount 300000 --rate 5 --term 30
    python scripts/export_schedule.py --frequency biweekly --extra 100 -o schedule.csv
"""
import argparse
import sys
import os
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.calculations.loan import LoanParameters, PaymentFrequency
from app.calculations.mortgage import calculate_mortgage
from app.services.export import format_currency, schedule_to_csv


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--loan-amount", type=float, default=300000.0)
    parser.add_argument("--rate", type=float, default=5.0, help="Annual rate in percent")
    parser.add_argument("--term", type=int, default=30, help="Loan term in years")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in PaymentFrequency],
        default=PaymentFrequency.monthly.value,
    )
    parser.add_argument("--extra", type=float, default=0.0, help="Extra principal per period")
    parser.add_argument("--home-value", type=float, default=300000.0)
    parser.add_argument("--tax-rate", type=float, default=1.8, help="Annual property tax in percent")
    parser.add_argument("--insurance", type=float, default=1000.0, help="Yearly insurance")
    parser.add_argument("--hoa", type=float, default=0.0, help="Monthly HOA dues")
    parser.add_argument("--first-payment", type=date.fromisoformat, default=None)
    parser.add_argument("-o", "--output", help="CSV file to write (stdout if omitted)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    params = LoanParameters(
        loan_amount=args.loan_amount,
        interest_rate=args.rate,
        loan_term_years=args.term,
        payment_frequency=PaymentFrequency(args.frequency),
        extra_payment_per_period=args.extra,
        home_value=args.home_value,
        property_tax_rate=args.tax_rate,
        yearly_insurance=args.insurance,
        monthly_hoa=args.hoa,
        first_payment_date=args.first_payment,
    )
    result = calculate_mortgage(params)
    summary = result.summary
    breakdown = result.breakdown

    csv_content = schedule_to_csv(result.schedule)
    if not args.output:
        sys.stdout.write(csv_content)
        return

    with open(args.output, "w", newline="") as f:
        f.write(csv_content)

    print(f"Payment {result.frequency_label}: {format_currency(result.periodic_payment)}")
    print(f"Estimated monthly PITI: {format_currency(breakdown.total)}")
    print(f"  Principal & interest: {format_currency(breakdown.principal_and_interest)}")
    print(f"  Property taxes:       {format_currency(breakdown.property_tax)}")
    print(f"  Home insurance:       {format_currency(breakdown.insurance)}")
    print(f"  HOA:                  {format_currency(breakdown.hoa)}")
    print(f"  Extra principal:      {format_currency(breakdown.extra_principal)}")
    print(f"Total interest: {format_currency(summary.total_interest)}")
    print(f"Total of payments: {format_currency(summary.total_payment)}")
    print(f"Paid off in year {summary.payoff_year} after {summary.number_of_payments} payments")
    if summary.payoff_date:
        print(f"Estimated payoff: {summary.payoff_date.strftime('%b. %Y')}")
    print(f"Wrote {len(result.schedule)} rows to {args.output}")


if __name__ == "__main__":
    main()
