"""Test the year-1 monthly projection"""
from engine.finance import build_financing
from engine.models import AssumptionSet, FinancingType
from engine.projections import (
    build_monthly_projection, grow, margin_pct, round_units, summarize_year_one
)


def base_cfg(**overrides):
    return AssumptionSet(**overrides)


def months_for(a):
    return build_monthly_projection(a, build_financing(a))


def test_round_units_half_up():
    assert round_units(2.5) == 3
    assert round_units(2.4999) == 2
    assert round_units(3.5) == 4
    assert round_units(0.0) == 0


def test_grow_monthly_split():
    assert grow(100, 12, 0, 12) == 100
    assert abs(grow(100, 12, 1, 12) - 101.0) < 1e-9
    assert abs(grow(100, 10, 2) - 121.0) < 1e-9


def test_twelve_months_with_base_volumes_in_month_one():
    months = months_for(base_cfg())
    assert [m.month for m in months] == list(range(1, 13))

    m1 = months[0]
    assert m1.subscribers == 500
    assert m1.deliveries == 2000
    assert m1.transfers == 300
    assert abs(m1.subscription_revenue - 500 * 150 / 12) < 1e-9
    assert abs(m1.delivery_revenue - 2000 * 3.5) < 1e-9
    assert abs(m1.transfer_revenue - 300 * 8) < 1e-9


def test_monthly_growth_compounds_at_rate_over_twelve():
    months = months_for(base_cfg())
    for m in months:
        t = m.month - 1
        assert m.deliveries == round_units(2000 * (1 + 0.05 / 12) ** t)
        assert m.subscribers == round_units(500 * (1 + 0.03 / 12) ** t)
        assert m.transfers == round_units(300 * (1 + 0.04 / 12) ** t)


def test_flat_rates_give_identical_months():
    a = base_cfg(subscriber_growth_rate=0, delivery_growth_rate=0, p2p_growth_rate=0)
    months = months_for(a)
    first = months[0]
    for m in months[1:]:
        assert m.revenue == first.revenue
        assert m.opex == first.opex
        assert m.net_income == first.net_income


def test_monthly_identities():
    for m in months_for(base_cfg()):
        assert abs(m.revenue - (m.subscription_revenue + m.delivery_revenue + m.transfer_revenue)) < 1e-9
        assert abs(m.opex - (m.rent + m.maintenance + m.electricity + m.staff + m.fixed + m.cogs)) < 1e-9
        assert abs(m.ebitda - (m.revenue - m.opex)) < 1e-9
        assert abs(m.ebit - (m.ebitda - m.depreciation)) < 1e-9
        assert abs(m.net_income - (m.ebit - m.interest - m.tax)) < 1e-9


def test_fixed_costs_not_inflated_in_year_one():
    months = months_for(base_cfg())
    assert len({m.rent for m in months}) == 1
    assert months[0].rent == 13_000
    assert months[0].staff == 10_500
    assert months[0].fixed == 3_500


def test_monthly_depreciation_is_annual_over_twelve():
    months = months_for(base_cfg())
    assert abs(months[0].depreciation - 600_000 / 7 / 12) < 1e-9


def test_no_depreciation_period_means_no_depreciation():
    months = months_for(base_cfg(depreciation_years=0))
    assert all(m.depreciation == 0.0 for m in months)


def test_tax_floor_at_zero_on_losses():
    months = months_for(base_cfg())
    # Default network runs at a loss in year 1
    assert all(m.ebit < 0 for m in months)
    assert all(m.tax == 0.0 for m in months)


def test_tax_on_profit():
    a = base_cfg(price_per_delivery=40)
    months = months_for(a)
    m = months[0]
    assert m.ebit > 0
    assert abs(m.tax - m.ebit * 0.25) < 1e-9


def test_interest_uses_payment_times_monthly_rate():
    a = base_cfg(financing_type=FinancingType.LOAN, loan_amount=300_000,
                 loan_interest_rate=7, loan_term_years=5)
    fin = build_financing(a)
    months = build_monthly_projection(a, fin)
    expected = fin.monthly_payment * 0.07 / 12
    assert all(abs(m.interest - expected) < 1e-9 for m in months)


def test_equity_financing_has_no_interest():
    assert all(m.interest == 0.0 for m in months_for(base_cfg()))


def test_margins_zero_without_revenue():
    assert margin_pct(100, 0) == 0.0
    a = base_cfg(student_subscribers=0, deliveries_per_month=0, p2p_transfers_per_month=0)
    for m in months_for(a):
        assert m.revenue == 0.0
        assert m.gross_margin == 0.0
        assert m.ebitda_margin == 0.0
        assert m.net_margin == 0.0


def test_summarize_year_one_totals():
    months = months_for(base_cfg())
    y1 = summarize_year_one(months)
    assert abs(y1['revenue'] - sum(m.revenue for m in months)) < 1e-6
    assert abs(y1['net_income'] - sum(m.net_income for m in months)) < 1e-6
    assert y1['break_even_month'] is None


def test_summarize_year_one_break_even_month():
    months = months_for(base_cfg(price_per_delivery=40))
    assert summarize_year_one(months)['break_even_month'] == 1
