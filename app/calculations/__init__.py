"""
Mortgage Calculation Engine

Payment, amortization and PITI calculations. All functions are pure:
the same inputs always produce the same results.
"""

from app.calculations import loan, amortization, piti, mortgage

__all__ = ["loan", "amortization", "piti", "mortgage"]
