import logging

from .assumptions import validate_assumptions
from .breakeven import break_even, unit_economics
from .capacity import plan_infrastructure
from .capital import calculate_capital_plan
from .finance import build_financing
from .metrics import compute_kpis
from .models import AssumptionSet, ModelResult, SolverSettings
from .projections import build_monthly_projection
from .statements import build_annual_projection
from .valuation import IrrStatus, PaybackStatus, value_projection

logger = logging.getLogger(__name__)


def compute(a: AssumptionSet, settings: SolverSettings = None, validate: bool = True) -> ModelResult:
    """
    Run the full model for one assumption set

    Args:
        a: Assumption set (validated here unless validate=False)
        settings: IRR solver tolerances; defaults when omitted

    Returns:
        ModelResult with financing, monthly and annual projections,
        valuation, break-even, unit economics, KPIs and capacity plan
    """
    if validate:
        validate_assumptions(a)

    fin = build_financing(a)
    capital = calculate_capital_plan(a, fin)
    monthly = build_monthly_projection(a, fin)
    annual = build_annual_projection(a, fin)

    valuation = value_projection(annual, fin.equity_invested, a.discount_rate, settings)
    be = break_even(a)
    capacity = plan_infrastructure(a)

    warnings = []
    if valuation.irr_status == IrrStatus.NOT_CONVERGED:
        warnings.append("IRR did not converge; showing best estimate")
    elif valuation.irr_status == IrrStatus.UNDEFINED:
        warnings.append("IRR undefined: no equity invested")
    if valuation.payback_status == PaybackStatus.UNDEFINED:
        warnings.append("Payback undefined: zero free cash flow in the crossing year")
    if not be.defined:
        warnings.append("Break-even undefined: contribution margin is not positive")
    warnings.extend(capacity.warnings)

    logger.debug("Model run for %r: NPV %.2f, IRR %s (%s)",
                 a.company_name, valuation.npv, valuation.irr, valuation.irr_status.value)

    return ModelResult(
        assumptions=a,
        capital=capital,
        financing=fin,
        monthly=tuple(monthly),
        annual=tuple(annual),
        valuation=valuation,
        break_even=be,
        unit_economics=unit_economics(a),
        kpis=compute_kpis(a, monthly, annual),
        capacity=capacity,
        warnings=tuple(warnings),
    )
