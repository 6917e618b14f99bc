"""Steady-state break-even and unit economics"""
import logging
from dataclasses import dataclass

from .models import AssumptionSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreakEvenResult:
    """Monthly break-even on base (year-1, uninflated) figures"""
    fixed_monthly_cost: float
    variable_cost_per_unit: float
    revenue_per_unit: float
    contribution_margin: float
    break_even_units: float       # deliveries + transfers per month
    break_even_revenue: float     # per month
    defined: bool                 # False when contribution margin <= 0


@dataclass(frozen=True)
class UnitEconomics:
    delivery_margin: float                 # price - courier cost
    transfer_margin: float
    subscription_revenue_per_subscriber: float  # per month
    contribution_margin_ratio: float       # % of blended revenue per unit


def fixed_monthly_cost(a: AssumptionSet) -> float:
    """Rent, maintenance, electricity, staff, software and insurance"""
    return (a.monthly_rent() + a.monthly_maintenance() + a.monthly_electricity() +
            a.monthly_staff() + a.monthly_fixed())


def blended_unit_figures(a: AssumptionSet) -> tuple[float, float]:
    """Volume-weighted (variable cost, revenue) per delivery/transfer unit"""
    total_units = a.deliveries_per_month + a.p2p_transfers_per_month
    if total_units <= 0:
        return 0.0, 0.0
    var_per_unit = (a.courier_cost_per_delivery * a.deliveries_per_month +
                    a.courier_cost_per_transfer * a.p2p_transfers_per_month) / total_units
    rev_per_unit = (a.price_per_delivery * a.deliveries_per_month +
                    a.price_per_transfer * a.p2p_transfers_per_month) / total_units
    return var_per_unit, rev_per_unit


def break_even(a: AssumptionSet) -> BreakEvenResult:
    fixed = fixed_monthly_cost(a)
    var_per_unit, rev_per_unit = blended_unit_figures(a)
    cm = rev_per_unit - var_per_unit

    if cm <= 0:
        logger.warning("Contribution margin %.4f is not positive; break-even is undefined", cm)
        units = 0.0
    else:
        units = fixed / cm

    return BreakEvenResult(
        fixed_monthly_cost=fixed,
        variable_cost_per_unit=var_per_unit,
        revenue_per_unit=rev_per_unit,
        contribution_margin=cm,
        break_even_units=units,
        break_even_revenue=units * rev_per_unit,
        defined=cm > 0,
    )


def unit_economics(a: AssumptionSet) -> UnitEconomics:
    var_per_unit, rev_per_unit = blended_unit_figures(a)
    cm = rev_per_unit - var_per_unit
    return UnitEconomics(
        delivery_margin=a.price_per_delivery - a.courier_cost_per_delivery,
        transfer_margin=a.price_per_transfer - a.courier_cost_per_transfer,
        subscription_revenue_per_subscriber=a.yearly_sub_fee / 12.0,
        contribution_margin_ratio=(cm / rev_per_unit) * 100.0 if rev_per_unit > 0 else 0.0,
    )
