"""Test the annual statements (years 0-5) and the year carry"""
from engine.finance import build_financing
from engine.models import AssumptionSet, FinancingType
from engine.statements import (
    advance_year, build_annual_projection, inflate, opening_year, operating_years
)

FLAT = dict(subscriber_growth_rate=0, delivery_growth_rate=0, p2p_growth_rate=0,
            rent_inflation_rate=0, salary_inflation_rate=0, general_inflation_rate=0)


def base_cfg(**overrides):
    return AssumptionSet(**overrides)


def annual_for(a):
    return build_annual_projection(a, build_financing(a))


def test_six_years_with_investment_year_first():
    annual = annual_for(base_cfg())
    assert [p.year for p in annual] == [0, 1, 2, 3, 4, 5]
    assert annual[0].is_investment_year
    assert len(operating_years(annual)) == 5


def test_year_zero_has_no_operating_figures():
    y0 = annual_for(base_cfg())[0]
    for name in ('revenue', 'opex', 'ebitda', 'net_income', 'depreciation',
                 'interest', 'tax', 'subscribers', 'roe', 'total_assets'):
        assert getattr(y0, name) is None, name
    assert y0.free_cash_flow == -600_000
    assert y0.cumulative_free_cash_flow == -600_000
    assert y0.cash_balance == 600_000
    assert y0.net_fixed_assets == 600_000
    assert y0.loan_balance == 0.0


def test_year_one_revenue_and_costs():
    y1 = annual_for(base_cfg())[1]
    assert y1.subscribers == 500
    assert abs(y1.subscription_revenue - 75_000) < 1e-6
    assert abs(y1.delivery_revenue - 84_000) < 1e-6
    assert abs(y1.transfer_revenue - 28_800) < 1e-6
    assert abs(y1.revenue - 187_800) < 1e-6

    assert abs(y1.rent - 156_000) < 1e-6
    assert abs(y1.maintenance - 108_000) < 1e-6
    assert abs(y1.electricity - 22_800) < 1e-6
    assert abs(y1.staff - 126_000) < 1e-6
    assert abs(y1.fixed - 42_000) < 1e-6
    assert abs(y1.cogs - 52_200) < 1e-6
    assert abs(y1.opex - 507_000) < 1e-6


def test_annual_growth_and_inflation():
    annual = annual_for(base_cfg())
    y3 = annual[3]
    assert y3.deliveries_per_month == round(2000 * 1.05 ** 2)
    assert abs(y3.rent - 156_000 * 1.03 ** 2) < 1e-6
    assert abs(y3.staff - 126_000 * 1.03 ** 2) < 1e-6
    assert abs(y3.maintenance - 108_000 * 1.02 ** 2) < 1e-6


def test_inflate_year_one_uninflated():
    assert inflate(100, 5, 1) == 100
    assert abs(inflate(100, 10, 3) - 121) < 1e-9


def test_flat_rates_give_identical_operating_years():
    annual = annual_for(base_cfg(**FLAT))
    years = operating_years(annual)
    for p in years[1:]:
        assert p.revenue == years[0].revenue
        assert p.opex == years[0].opex
        assert p.ebitda == years[0].ebitda
        assert p.net_income == years[0].net_income
    # Working capital builds once in year 1
    for p in years[2:]:
        assert p.working_capital_change == 0.0
        assert p.free_cash_flow == years[1].free_cash_flow


def test_carry_rolls_forward():
    annual = annual_for(base_cfg())
    for prev, cur in zip(annual, annual[1:]):
        assert abs(cur.cash_balance - (prev.cash_balance + cur.free_cash_flow)) < 1e-6
        assert abs(cur.cumulative_free_cash_flow -
                   (prev.cumulative_free_cash_flow + cur.free_cash_flow)) < 1e-6
        assert abs(cur.retained_earnings - (prev.retained_earnings + cur.net_income)) < 1e-6
        assert abs(cur.working_capital_change - (cur.working_capital - prev.working_capital)) < 1e-6


def test_advance_year_from_explicit_carry():
    a = base_cfg()
    fin = build_financing(a)
    _, carry = opening_year(a, fin)
    period, nxt = advance_year(a, fin, 1, carry)
    assert abs(period.working_capital - 187_800 * 0.05) < 1e-6
    assert abs(period.working_capital_change - period.working_capital) < 1e-9
    assert nxt.cash == period.cash_balance
    assert nxt.cumulative_fcf == period.cumulative_free_cash_flow


def test_free_cash_flow_identity():
    for p in operating_years(annual_for(base_cfg())):
        expected = p.net_income + p.depreciation - p.working_capital_change - p.principal
        assert abs(p.free_cash_flow - expected) < 1e-6


def test_depreciation_stops_after_period():
    annual = annual_for(base_cfg(depreciation_years=3))
    assert abs(annual[3].depreciation - 200_000) < 1e-6
    assert annual[4].depreciation == 0.0
    assert annual[5].depreciation == 0.0
    assert abs(annual[3].net_fixed_assets) < 1e-6
    assert abs(annual[5].net_fixed_assets) < 1e-6


def test_equity_is_invested_plus_retained():
    a = base_cfg()
    for p in operating_years(annual_for(a)):
        assert abs(p.equity - (600_000 + p.retained_earnings)) < 1e-6


def test_loan_repaid_over_term():
    a = base_cfg(financing_type=FinancingType.LOAN, loan_amount=300_000,
                 loan_interest_rate=7, loan_term_years=5)
    annual = annual_for(a)
    assert annual[0].loan_balance == 300_000
    assert annual[0].free_cash_flow == -300_000
    assert abs(annual[1].interest - 21_000) < 1e-6
    assert abs(sum(p.principal for p in operating_years(annual)) - 300_000) < 1e-6
    assert annual[5].loan_balance == 0.0


def test_short_loan_then_debt_free_years():
    a = base_cfg(financing_type=FinancingType.LOAN, loan_amount=300_000,
                 loan_interest_rate=7, loan_term_years=3)
    annual = annual_for(a)
    assert annual[3].loan_balance == 0.0
    for p in annual[4:]:
        assert p.interest == 0.0
        assert p.principal == 0.0
        assert p.loan_payment == 0.0


def test_loss_years_pay_no_tax():
    for p in operating_years(annual_for(base_cfg())):
        assert p.ebt < 0
        assert p.tax == 0.0


def test_cumulative_fcf_rises_when_profitable():
    annual = annual_for(base_cfg(price_per_delivery=40))
    cums = [p.cumulative_free_cash_flow for p in annual]
    assert all(b > a for a, b in zip(cums, cums[1:]))
