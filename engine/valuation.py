"""Investment valuation: NPV, IRR and payback period"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .models import AnnualPeriod, SolverSettings
from .statements import operating_years

logger = logging.getLogger(__name__)


class IrrStatus(str, Enum):
    CONVERGED = "converged"
    NOT_CONVERGED = "not_converged"
    UNDEFINED = "undefined"


class PaybackStatus(str, Enum):
    REACHED = "reached"
    NOT_REACHED = "not_reached"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class IrrResult:
    rate: Optional[float]     # fraction; last estimate when not converged
    status: IrrStatus
    iterations: int

    @property
    def converged(self) -> bool:
        return self.status == IrrStatus.CONVERGED


@dataclass(frozen=True)
class PaybackResult:
    years: Optional[float]
    status: PaybackStatus


@dataclass(frozen=True)
class ValuationResult:
    npv: float
    irr: Optional[float]
    irr_status: IrrStatus
    irr_iterations: int
    payback_years: Optional[float]
    payback_status: PaybackStatus
    cumulative_fcf_5y: float
    cumulative_net_income_5y: float

    @property
    def irr_converged(self) -> bool:
        return self.irr_status == IrrStatus.CONVERGED


def npv(rate: float, equity_invested: float, cash_flows: Sequence[float]) -> float:
    """-equity + sum of FCF_y / (1 + rate)^y for y = 1..N"""
    total = -equity_invested
    for y, cf in enumerate(cash_flows, start=1):
        total += cf / (1.0 + rate) ** y
    return total


def irr(equity_invested: float, cash_flows: Sequence[float],
        settings: SolverSettings = None) -> IrrResult:
    """
    Solve NPV(r) = 0 with Newton-Raphson and a forward-difference derivative.

    Starts at ``settings.irr_seed`` and stops as soon as |NPV(r)| falls below
    ``settings.npv_tolerance``. After ``settings.max_iterations`` steps the last
    estimate is returned flagged NOT_CONVERGED. A flat derivative or an
    iterate at or below -100% also ends the search as NOT_CONVERGED.

    IRR is UNDEFINED when nothing was invested (equity <= 0).
    """
    settings = settings or SolverSettings()
    if equity_invested <= 0:
        return IrrResult(rate=None, status=IrrStatus.UNDEFINED, iterations=0)

    h = settings.derivative_step
    r = settings.irr_seed
    try:
        for i in range(settings.max_iterations):
            f = npv(r, equity_invested, cash_flows)
            if abs(f) < settings.npv_tolerance:
                return IrrResult(rate=r, status=IrrStatus.CONVERGED, iterations=i)

            derivative = (npv(r + h, equity_invested, cash_flows) - f) / h
            if abs(derivative) <= h:
                logger.warning("IRR derivative vanished at r=%.6f after %d iterations", r, i)
                return IrrResult(rate=r, status=IrrStatus.NOT_CONVERGED, iterations=i)

            next_r = r - f / derivative
            if next_r <= -1.0:
                logger.warning("IRR iterate left the domain (r=%.6f) after %d iterations", next_r, i + 1)
                return IrrResult(rate=r, status=IrrStatus.NOT_CONVERGED, iterations=i + 1)
            r = next_r

        # The cap may land exactly on a root
        if abs(npv(r, equity_invested, cash_flows)) < settings.npv_tolerance:
            return IrrResult(rate=r, status=IrrStatus.CONVERGED, iterations=settings.max_iterations)
    except (OverflowError, ZeroDivisionError):
        logger.warning("IRR discount factors out of range at r=%.6g", r)
        return IrrResult(rate=r, status=IrrStatus.NOT_CONVERGED, iterations=settings.max_iterations)

    logger.warning("IRR did not converge in %d iterations; last estimate %.6f",
                   settings.max_iterations, r)
    return IrrResult(rate=r, status=IrrStatus.NOT_CONVERGED, iterations=settings.max_iterations)


def payback_period(annual: Sequence[AnnualPeriod]) -> PaybackResult:
    """
    Years until cumulative FCF turns non-negative, interpolated linearly
    within the crossing year. Only operating years (i >= 1) can pay back.
    """
    for i in range(1, len(annual)):
        if annual[i].cumulative_free_cash_flow >= 0:
            fcf = annual[i].free_cash_flow
            if fcf == 0:
                return PaybackResult(years=None, status=PaybackStatus.UNDEFINED)
            prev_cum = annual[i - 1].cumulative_free_cash_flow
            return PaybackResult(years=(i - 1) + (-prev_cum / fcf), status=PaybackStatus.REACHED)

    return PaybackResult(years=None, status=PaybackStatus.NOT_REACHED)


def value_projection(annual: Sequence[AnnualPeriod], equity_invested: float,
                     discount_rate_pct: float, settings: SolverSettings = None) -> ValuationResult:
    """Valuation metrics for an annual projection (years 0..N)"""
    years = operating_years(annual)
    cash_flows = [p.free_cash_flow for p in years]

    irr_res = irr(equity_invested, cash_flows, settings)
    pb = payback_period(annual)

    return ValuationResult(
        npv=npv(discount_rate_pct / 100.0, equity_invested, cash_flows),
        irr=irr_res.rate,
        irr_status=irr_res.status,
        irr_iterations=irr_res.iterations,
        payback_years=pb.years,
        payback_status=pb.status,
        cumulative_fcf_5y=sum(cash_flows),
        cumulative_net_income_5y=sum(p.net_income for p in years),
    )
