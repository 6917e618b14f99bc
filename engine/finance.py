"""Financial calculations for loan amortization and debt coverage"""
import logging
from typing import Optional

from .capital import initial_investment
from .models import AssumptionSet, FinancingSummary, FinancingType, LoanYear

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = 1e-6


def monthly_payment(principal: float, apr: float, term_years: int) -> float:
    """Calculate monthly payment for an amortizing loan (apr as a fraction)"""
    r = apr / 12.0
    n = term_years * 12
    if n <= 0:
        return 0.0
    if r == 0:
        return principal / n
    return principal * (r * (1 + r)**n) / ((1 + r)**n - 1)


def annual_amortization_schedule(principal: float, apr: float, term_years: int,
                                 payment: float) -> list[LoanYear]:
    """
    Generate a yearly amortization schedule

    Interest for each year is the opening balance times the annual rate;
    principal is twelve monthly payments less that interest. Whatever
    balance remains in the final contractual year is retired with the last
    principal payment, so the loan closes at zero.
    """
    schedule = []
    bal = principal
    annual_payment = payment * 12.0

    for year in range(1, term_years + 1):
        interest = bal * apr
        principal_pay = min(bal, max(0.0, annual_payment - interest))
        settlement = 0.0
        if year == term_years:
            settlement = bal - principal_pay
            principal_pay = bal
        closing = max(0.0, bal - principal_pay)
        if closing < BALANCE_TOLERANCE:
            closing = 0.0
        schedule.append(LoanYear(
            year=year,
            opening_balance=bal,
            payment=annual_payment,
            interest=interest,
            principal=principal_pay,
            closing_balance=closing,
            settlement=settlement,
        ))
        bal = closing

    return schedule


def build_financing(a: AssumptionSet) -> FinancingSummary:
    """Equity/debt split, level monthly payment and yearly loan schedule"""
    invest = initial_investment(a)

    if not a.is_loan_financed:
        return FinancingSummary(
            financing_type=FinancingType(a.financing_type),
            initial_investment=invest,
            equity_invested=invest,
            loan_amount=0.0,
            monthly_payment=0.0,
            monthly_rate=0.0,
        )

    apr = a.loan_interest_rate / 100.0
    term = int(a.loan_term_years)
    equity = invest - a.loan_amount
    if equity <= 0:
        logger.warning("Loan of %.2f covers the full investment of %.2f; equity invested is %.2f",
                       a.loan_amount, invest, equity)

    if term <= 0:
        logger.warning("Loan term is zero years; loan of %.2f is not amortized", a.loan_amount)
        return FinancingSummary(
            financing_type=FinancingType.LOAN,
            initial_investment=invest,
            equity_invested=equity,
            loan_amount=a.loan_amount,
            monthly_payment=0.0,
            monthly_rate=apr / 12.0,
        )

    pmt = monthly_payment(a.loan_amount, apr, term)
    schedule = annual_amortization_schedule(a.loan_amount, apr, term, pmt)
    logger.debug("Loan %.2f at %.2f%% over %d years: monthly payment %.2f",
                 a.loan_amount, a.loan_interest_rate, term, pmt)

    return FinancingSummary(
        financing_type=FinancingType.LOAN,
        initial_investment=invest,
        equity_invested=equity,
        loan_amount=a.loan_amount,
        monthly_payment=pmt,
        monthly_rate=apr / 12.0,
        schedule=tuple(schedule),
    )


def dscr(ebitda: float, debt_service: float) -> Optional[float]:
    """Debt Service Coverage Ratio, None when there is no debt service"""
    return (ebitda / debt_service) if debt_service > 1e-9 else None
