"""Annual income statement, cash flow and balance sheet for years 0-5"""
import logging
from dataclasses import dataclass

from config.default_params import MONTHS_IN_YEAR, PROJECTION_YEARS
from .models import AnnualPeriod, AssumptionSet, FinancingSummary
from .projections import annual_depreciation, grow, margin_pct, round_units

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearCarry:
    """State handed from one year-end to the next"""
    cash: float
    retained_earnings: float
    loan_balance: float
    working_capital: float
    cumulative_fcf: float


def inflate(base: float, annual_rate_pct: float, year: int) -> float:
    """Apply annual inflation; year 1 is uninflated"""
    return base * (1.0 + annual_rate_pct / 100.0) ** (year - 1)


def opening_year(a: AssumptionSet, fin: FinancingSummary) -> tuple[AnnualPeriod, YearCarry]:
    """Year 0: the investment outflow and the loan drawn"""
    loan = fin.loan_amount if a.is_loan_financed else 0.0
    equity = fin.equity_invested
    period = AnnualPeriod(
        year=0,
        free_cash_flow=-equity,
        cumulative_free_cash_flow=-equity,
        cash_balance=equity,
        working_capital=0.0,
        net_fixed_assets=fin.initial_investment,
        loan_balance=loan,
        retained_earnings=0.0,
        equity=equity,
    )
    carry = YearCarry(
        cash=equity,
        retained_earnings=0.0,
        loan_balance=loan,
        working_capital=0.0,
        cumulative_fcf=-equity,
    )
    return period, carry


def advance_year(a: AssumptionSet, fin: FinancingSummary, year: int,
                 carry: YearCarry) -> tuple[AnnualPeriod, YearCarry]:
    """
    Project one operating year from the prior year-end carry

    Volumes compound annually from the base (year 1 = base), costs inflate
    per class, and cash, retained earnings, loan balance and working
    capital roll forward from ``carry``.
    """
    # --- Volumes & revenue ---
    subs = round_units(grow(a.student_subscribers, a.subscriber_growth_rate, year - 1))
    dels = round_units(grow(a.deliveries_per_month, a.delivery_growth_rate, year - 1))
    p2ps = round_units(grow(a.p2p_transfers_per_month, a.p2p_growth_rate, year - 1))

    sub_rev = subs * a.yearly_sub_fee
    del_rev = dels * a.price_per_delivery * MONTHS_IN_YEAR
    p2p_rev = p2ps * a.price_per_transfer * MONTHS_IN_YEAR
    revenue = sub_rev + del_rev + p2p_rev

    # --- Costs (inflated per class) ---
    rent = inflate(a.monthly_rent() * MONTHS_IN_YEAR, a.rent_inflation_rate, year)
    maint = inflate(a.monthly_maintenance() * MONTHS_IN_YEAR, a.general_inflation_rate, year)
    elec = inflate(a.monthly_electricity() * MONTHS_IN_YEAR, a.general_inflation_rate, year)
    staff = inflate(a.monthly_staff() * MONTHS_IN_YEAR, a.salary_inflation_rate, year)
    fixed = inflate(a.monthly_fixed() * MONTHS_IN_YEAR, a.general_inflation_rate, year)
    cogs = (dels * a.courier_cost_per_delivery + p2ps * a.courier_cost_per_transfer) * MONTHS_IN_YEAR

    opex = rent + maint + elec + staff + fixed + cogs
    gross_profit = revenue - cogs
    ebitda = revenue - opex

    # --- Depreciation ---
    annual_dep = annual_depreciation(a, fin.initial_investment)
    dep = annual_dep if year <= a.depreciation_years else 0.0
    ebit = ebitda - dep

    # --- Debt ---
    entry = fin.entry_for(year)
    interest = entry.interest if entry else 0.0
    principal = entry.principal if entry else 0.0
    loan_payment = interest + principal
    loan_balance = max(0.0, carry.loan_balance - principal)

    # --- Tax & net income ---
    ebt = ebit - interest
    tax = max(0.0, ebt * a.tax_rate / 100.0)
    net_income = ebt - tax

    # --- Cash flow ---
    wc = revenue * a.working_capital_percent / 100.0
    wc_change = wc - carry.working_capital
    fcf = net_income + dep - wc_change - principal
    cash = carry.cash + fcf
    cumulative_fcf = carry.cumulative_fcf + fcf

    # --- Balance sheet ---
    accumulated_dep = annual_dep * min(year, a.depreciation_years)
    ppe_net = fin.initial_investment - accumulated_dep
    total_assets = cash + wc + ppe_net
    retained = carry.retained_earnings + net_income
    equity = fin.equity_invested + retained

    period = AnnualPeriod(
        year=year,
        free_cash_flow=fcf,
        cumulative_free_cash_flow=cumulative_fcf,
        cash_balance=cash,
        working_capital=wc,
        net_fixed_assets=ppe_net,
        loan_balance=loan_balance,
        retained_earnings=retained,
        equity=equity,
        subscribers=subs,
        deliveries_per_month=dels,
        transfers_per_month=p2ps,
        subscription_revenue=sub_rev,
        delivery_revenue=del_rev,
        transfer_revenue=p2p_rev,
        revenue=revenue,
        cogs=cogs,
        rent=rent,
        maintenance=maint,
        electricity=elec,
        staff=staff,
        fixed=fixed,
        gross_profit=gross_profit,
        opex=opex,
        ebitda=ebitda,
        depreciation=dep,
        ebit=ebit,
        interest=interest,
        ebt=ebt,
        tax=tax,
        net_income=net_income,
        working_capital_change=wc_change,
        loan_payment=loan_payment,
        principal=principal,
        total_assets=total_assets,
        roe=(net_income / equity) * 100.0 if equity > 0 else 0.0,
        roa=(net_income / total_assets) * 100.0 if total_assets > 0 else 0.0,
        debt_to_equity=loan_balance / equity if equity > 0 else 0.0,
        gross_margin=margin_pct(gross_profit, revenue),
        ebitda_margin=margin_pct(ebitda, revenue),
        net_margin=margin_pct(net_income, revenue),
    )
    next_carry = YearCarry(
        cash=cash,
        retained_earnings=retained,
        loan_balance=loan_balance,
        working_capital=wc,
        cumulative_fcf=cumulative_fcf,
    )
    return period, next_carry


def build_annual_projection(a: AssumptionSet, fin: FinancingSummary,
                            years: int = PROJECTION_YEARS) -> list[AnnualPeriod]:
    """Fold the year carry forward from year 0 through ``years``"""
    period, carry = opening_year(a, fin)
    rows = [period]
    for year in range(1, years + 1):
        period, carry = advance_year(a, fin, year, carry)
        rows.append(period)

    logger.debug("Annual projection: year %d revenue %.2f, cumulative FCF %.2f",
                 rows[-1].year, rows[-1].revenue or 0.0, rows[-1].cumulative_free_cash_flow)
    return rows


def operating_years(annual: list[AnnualPeriod]) -> list[AnnualPeriod]:
    """Years 1..N, dropping the investment year"""
    return [p for p in annual if not p.is_investment_year]
