"""Named scenario presets derived from a base assumption set"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from config.default_params import SCENARIO_PRESETS
from .assumptions import AssumptionError
from .compute import compute
from .models import AssumptionSet, SolverSettings
from .valuation import IrrStatus, PaybackStatus


@dataclass(frozen=True)
class ScenarioResult:
    name: str
    year5_revenue: float
    year5_net_income: float
    npv: float
    irr: Optional[float]
    irr_status: IrrStatus
    payback_years: Optional[float]
    payback_status: PaybackStatus


def build_scenario(a: AssumptionSet, name: str) -> AssumptionSet:
    """Apply a preset's growth, price and courier-cost multipliers"""
    if name not in SCENARIO_PRESETS:
        raise AssumptionError(f"Unknown scenario {name!r}; expected one of {list(SCENARIO_PRESETS)}")
    p = SCENARIO_PRESETS[name]
    return replace(
        a,
        subscriber_growth_rate=a.subscriber_growth_rate * p['growth'],
        delivery_growth_rate=a.delivery_growth_rate * p['growth'],
        p2p_growth_rate=a.p2p_growth_rate * p['growth'],
        yearly_sub_fee=a.yearly_sub_fee * p['price'],
        price_per_delivery=a.price_per_delivery * p['price'],
        price_per_transfer=a.price_per_transfer * p['price'],
        courier_cost_per_delivery=a.courier_cost_per_delivery * p['courier_cost'],
        courier_cost_per_transfer=a.courier_cost_per_transfer * p['courier_cost'],
    )


def run_scenarios(a: AssumptionSet, names: Iterable[str] = None,
                  settings: SolverSettings = None) -> list[ScenarioResult]:
    """Run the model once per preset"""
    rows = []
    for name in (names or SCENARIO_PRESETS):
        res = compute(build_scenario(a, name), settings)
        last = res.annual[-1]
        v = res.valuation
        rows.append(ScenarioResult(
            name=name,
            year5_revenue=last.revenue,
            year5_net_income=last.net_income,
            npv=v.npv,
            irr=v.irr,
            irr_status=v.irr_status,
            payback_years=v.payback_years,
            payback_status=v.payback_status,
        ))
    return rows
