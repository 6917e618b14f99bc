"""Test monthly break-even and unit economics"""
from engine.breakeven import blended_unit_figures, break_even, fixed_monthly_cost, unit_economics
from engine.models import AssumptionSet


def test_fixed_monthly_cost():
    # rent 13,000 + maintenance 9,000 + electricity 1,900 + staff 10,500 + software/insurance 3,500
    assert abs(fixed_monthly_cost(AssumptionSet()) - 37_900) < 1e-9


def test_blended_figures_are_volume_weighted():
    var_per_unit, rev_per_unit = blended_unit_figures(AssumptionSet())
    assert abs(var_per_unit - (1.5 * 2000 + 4.5 * 300) / 2300) < 1e-12
    assert abs(rev_per_unit - (3.5 * 2000 + 8.0 * 300) / 2300) < 1e-12


def test_break_even_units_and_revenue():
    be = break_even(AssumptionSet())
    assert be.defined
    cm = (9400 - 4350) / 2300
    assert abs(be.contribution_margin - cm) < 1e-12
    assert abs(be.break_even_units - 37_900 / cm) < 1e-6
    assert abs(be.break_even_revenue - 37_900 * 9400 / 5050) < 1e-6


def test_break_even_undefined_when_courier_costs_exceed_price():
    be = break_even(AssumptionSet(courier_cost_per_delivery=5.0, courier_cost_per_transfer=9.0))
    assert not be.defined
    assert be.contribution_margin < 0
    assert be.break_even_units == 0.0
    assert be.break_even_revenue == 0.0


def test_break_even_undefined_without_volume():
    be = break_even(AssumptionSet(deliveries_per_month=0, p2p_transfers_per_month=0))
    assert not be.defined
    assert be.revenue_per_unit == 0.0


def test_unit_economics():
    ue = unit_economics(AssumptionSet())
    assert abs(ue.delivery_margin - 2.0) < 1e-12
    assert abs(ue.transfer_margin - 3.5) < 1e-12
    assert abs(ue.subscription_revenue_per_subscriber - 12.5) < 1e-12
    assert abs(ue.contribution_margin_ratio - 5050 / 9400 * 100) < 1e-9


def test_unit_economics_without_volume():
    ue = unit_economics(AssumptionSet(deliveries_per_month=0, p2p_transfers_per_month=0))
    assert ue.contribution_margin_ratio == 0.0
