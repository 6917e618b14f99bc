"""Year-1 monthly projection with monthly-compounded volume growth"""
import math

from config.default_params import MONTHS_IN_YEAR
from .models import AssumptionSet, FinancingSummary, MonthlyPeriod


def round_units(x: float) -> int:
    """Round a projected volume half-up to whole units"""
    return int(math.floor(x + 0.5))


def grow(base: float, rate_pct: float, periods: int, periods_per_year: int = 1) -> float:
    """Compound a base value at an annual % rate split over periods_per_year"""
    return base * (1.0 + rate_pct / 100.0 / periods_per_year) ** periods


def margin_pct(amount: float, revenue: float) -> float:
    """Amount as % of revenue, 0 when there is no revenue"""
    return (amount / revenue) * 100.0 if revenue > 0 else 0.0


def annual_depreciation(a: AssumptionSet, invest: float) -> float:
    """Straight-line charge per year, 0 when no depreciation period is set"""
    return invest / a.depreciation_years if a.depreciation_years > 0 else 0.0


def build_monthly_projection(a: AssumptionSet, fin: FinancingSummary) -> list[MonthlyPeriod]:
    """
    Build the 12-month year-1 projection

    Month 1 uses the base volumes; each later month compounds at the
    stream's annual growth rate / 12. Fixed costs are not inflated within
    year 1.
    """
    rent = a.monthly_rent()
    maint = a.monthly_maintenance()
    elec = a.monthly_electricity()
    staff = a.monthly_staff()
    fixed = a.monthly_fixed()

    dep = annual_depreciation(a, fin.initial_investment) / 12.0
    # Interest follows the payment x monthly rate convention
    interest = fin.monthly_payment * fin.monthly_rate if a.is_loan_financed else 0.0
    tax_rate = a.tax_rate / 100.0

    rows = []
    for month in range(1, MONTHS_IN_YEAR + 1):
        t = month - 1
        subs = round_units(grow(a.student_subscribers, a.subscriber_growth_rate, t, MONTHS_IN_YEAR))
        dels = round_units(grow(a.deliveries_per_month, a.delivery_growth_rate, t, MONTHS_IN_YEAR))
        p2ps = round_units(grow(a.p2p_transfers_per_month, a.p2p_growth_rate, t, MONTHS_IN_YEAR))

        sub_rev = subs * a.yearly_sub_fee / 12.0
        del_rev = dels * a.price_per_delivery
        p2p_rev = p2ps * a.price_per_transfer
        revenue = sub_rev + del_rev + p2p_rev

        cogs = dels * a.courier_cost_per_delivery + p2ps * a.courier_cost_per_transfer
        opex = rent + maint + elec + staff + fixed + cogs
        gross_profit = revenue - cogs
        ebitda = revenue - opex
        ebit = ebitda - dep
        tax = max(0.0, (ebit - interest) * tax_rate)
        net_income = ebit - interest - tax

        rows.append(MonthlyPeriod(
            month=month,
            subscribers=subs,
            deliveries=dels,
            transfers=p2ps,
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
            tax=tax,
            net_income=net_income,
            gross_margin=margin_pct(gross_profit, revenue),
            ebitda_margin=margin_pct(ebitda, revenue),
            net_margin=margin_pct(net_income, revenue),
        ))

    return rows


def summarize_year_one(months: list[MonthlyPeriod]) -> dict:
    """Roll the monthly rows up to year-1 totals"""
    def roll(key):
        return sum(getattr(m, key) for m in months)

    revenue = roll("revenue")
    ebitda = roll("ebitda")
    net_income = roll("net_income")
    # First month with non-negative EBITDA
    break_even_month = next((m.month for m in months if m.ebitda >= 0), None)

    return {
        "revenue": revenue,
        "subscription_revenue": roll("subscription_revenue"),
        "delivery_revenue": roll("delivery_revenue"),
        "transfer_revenue": roll("transfer_revenue"),
        "cogs": roll("cogs"),
        "opex": roll("opex"),
        "ebitda": ebitda,
        "net_income": net_income,
        "ebitda_margin": margin_pct(ebitda, revenue),
        "net_margin": margin_pct(net_income, revenue),
        "break_even_month": break_even_month,
    }
