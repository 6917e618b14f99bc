"""Capital expenditure and sources & uses calculation"""
from dataclasses import dataclass

from .models import AssumptionSet, FinancingSummary


@dataclass(frozen=True)
class CapitalPlan:
    """Capital plan with balanced sources and uses"""
    # Uses
    student_lockers_equipment: float
    student_lockers_installation: float
    commercial_lockers_equipment: float
    commercial_lockers_installation: float
    drop_boxes_equipment: float
    drop_boxes_installation: float
    total_uses: float

    # Sources
    owner_equity: float
    loan: float
    total_sources: float

    # Validation
    balanced: bool
    difference: float

    @property
    def initial_investment(self) -> float:
        return self.total_uses

    def by_class(self) -> dict:
        """Equipment + installation per facility class"""
        return {
            'Student lockers': self.student_lockers_equipment + self.student_lockers_installation,
            'Commercial lockers': self.commercial_lockers_equipment + self.commercial_lockers_installation,
            'Drop boxes': self.drop_boxes_equipment + self.drop_boxes_installation,
        }


def initial_investment(a: AssumptionSet) -> float:
    """Sum over facility classes of count x (unit cost + installation)"""
    return (
        a.num_student_lockers * (a.student_locker_cost_per_unit + a.installation_per_student_locker) +
        a.num_commercial_lockers * (a.commercial_locker_cost_per_unit + a.installation_per_commercial_locker) +
        a.num_drop_boxes * (a.drop_box_cost_per_unit + a.installation_per_drop_box)
    )


def calculate_capital_plan(a: AssumptionSet, fin: FinancingSummary) -> CapitalPlan:
    """
    Calculate the capital plan for the locker network

    Uses are priced per facility class here; sources are the equity and
    loan from the financing split. The plan is balanced when the two agree
    within a dollar.

    Args:
        a: Assumption set
        fin: Financing split from build_financing

    Returns:
        Capital plan with per-class uses and equity/loan sources
    """
    student_eq = a.num_student_lockers * a.student_locker_cost_per_unit
    student_inst = a.num_student_lockers * a.installation_per_student_locker
    commercial_eq = a.num_commercial_lockers * a.commercial_locker_cost_per_unit
    commercial_inst = a.num_commercial_lockers * a.installation_per_commercial_locker
    drop_eq = a.num_drop_boxes * a.drop_box_cost_per_unit
    drop_inst = a.num_drop_boxes * a.installation_per_drop_box

    total_uses = student_eq + student_inst + commercial_eq + commercial_inst + drop_eq + drop_inst

    loan = fin.loan_amount
    owner_equity = fin.equity_invested
    total_sources = owner_equity + loan

    difference = abs(total_sources - total_uses)
    balanced = difference < 1.0

    return CapitalPlan(
        # Uses
        student_lockers_equipment=student_eq,
        student_lockers_installation=student_inst,
        commercial_lockers_equipment=commercial_eq,
        commercial_lockers_installation=commercial_inst,
        drop_boxes_equipment=drop_eq,
        drop_boxes_installation=drop_inst,
        total_uses=total_uses,
        # Sources
        owner_equity=owner_equity,
        loan=loan,
        total_sources=total_sources,
        # Validation
        balanced=balanced,
        difference=difference
    )
