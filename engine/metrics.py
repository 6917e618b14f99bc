from dataclasses import dataclass
from typing import Optional, Sequence

from .finance import dscr
from .models import AnnualPeriod, AssumptionSet, MonthlyPeriod
from .statements import operating_years


@dataclass(frozen=True)
class KpiSummary:
    revenue_cagr: float            # %, year 1 -> final year
    avg_ebitda_margin: float       # %, years 1..N
    avg_net_margin: float
    locker_utilization: float      # %, month-12 deliveries / commercial compartments
    drop_box_utilization: float    # %, month-12 transfers / drop-box compartments
    min_dscr: Optional[float]      # None when there is no debt service


def revenue_cagr(first: float, last: float, periods: int) -> float:
    """Compound annual growth rate in %, 0 when undefined"""
    if first <= 0 or last <= 0 or periods <= 0:
        return 0.0
    return ((last / first) ** (1.0 / periods) - 1.0) * 100.0


def utilization_pct(volume: float, capacity: float) -> float:
    """Monthly volume against compartment capacity"""
    return (volume / capacity) * 100.0 if capacity > 0 else 0.0


def compute_kpis(a: AssumptionSet, monthly: Sequence[MonthlyPeriod],
                 annual: Sequence[AnnualPeriod]) -> KpiSummary:
    years = operating_years(annual)
    n = len(years)
    last_month = monthly[-1] if monthly else None

    coverage = [dscr(p.ebitda, p.loan_payment) for p in years]
    coverage = [c for c in coverage if c is not None]

    return KpiSummary(
        revenue_cagr=revenue_cagr(years[0].revenue, years[-1].revenue, n - 1) if n else 0.0,
        avg_ebitda_margin=sum(p.ebitda_margin for p in years) / n if n else 0.0,
        avg_net_margin=sum(p.net_margin for p in years) / n if n else 0.0,
        locker_utilization=utilization_pct(
            last_month.deliveries if last_month else 0,
            a.num_commercial_lockers * a.compartments_per_commercial_locker),
        drop_box_utilization=utilization_pct(
            last_month.transfers if last_month else 0,
            a.num_drop_boxes * a.compartments_per_drop_box),
        min_dscr=min(coverage) if coverage else None,
    )
