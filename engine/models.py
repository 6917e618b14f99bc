from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config.default_params import DEFAULT_ASSUMPTIONS as _D, SOLVER_DEFAULTS


class FinancingType(str, Enum):
    EQUITY = "equity"
    LOAN = "loan"


@dataclass(frozen=True)
class AssumptionSet:
    """Flat input configuration for one model run.

    Percent fields (growth, inflation, discount, tax, working capital, loan
    rate, utilization, buffer) are stored in percent and converted to
    fractions inside the engine.
    """
    company_name: str = _D['company_name']  # display only

    # Student lockers
    num_student_lockers: int = _D['num_student_lockers']
    student_locker_cost_per_unit: float = _D['student_locker_cost_per_unit']
    installation_per_student_locker: float = _D['installation_per_student_locker']
    rent_per_student_locker_month: float = _D['rent_per_student_locker_month']
    maintenance_per_student_locker_month: float = _D['maintenance_per_student_locker_month']
    electricity_per_student_locker_month: float = _D['electricity_per_student_locker_month']
    compartments_per_student_locker: int = _D['compartments_per_student_locker']

    # Commercial lockers
    num_commercial_lockers: int = _D['num_commercial_lockers']
    commercial_locker_cost_per_unit: float = _D['commercial_locker_cost_per_unit']
    installation_per_commercial_locker: float = _D['installation_per_commercial_locker']
    rent_per_commercial_locker_month: float = _D['rent_per_commercial_locker_month']
    maintenance_per_commercial_locker_month: float = _D['maintenance_per_commercial_locker_month']
    electricity_per_commercial_locker_month: float = _D['electricity_per_commercial_locker_month']
    compartments_per_commercial_locker: int = _D['compartments_per_commercial_locker']

    # Drop boxes
    num_drop_boxes: int = _D['num_drop_boxes']
    drop_box_cost_per_unit: float = _D['drop_box_cost_per_unit']
    installation_per_drop_box: float = _D['installation_per_drop_box']
    rent_per_drop_box_month: float = _D['rent_per_drop_box_month']
    maintenance_per_drop_box_month: float = _D['maintenance_per_drop_box_month']
    electricity_per_drop_box_month: float = _D['electricity_per_drop_box_month']
    compartments_per_drop_box: int = _D['compartments_per_drop_box']

    # Starting volumes and prices
    student_subscribers: float = _D['student_subscribers']
    yearly_sub_fee: float = _D['yearly_sub_fee']
    deliveries_per_month: float = _D['deliveries_per_month']
    price_per_delivery: float = _D['price_per_delivery']
    p2p_transfers_per_month: float = _D['p2p_transfers_per_month']
    price_per_transfer: float = _D['price_per_transfer']

    # Growth, % per year (monthly pass uses rate/12)
    subscriber_growth_rate: float = _D['subscriber_growth_rate']
    delivery_growth_rate: float = _D['delivery_growth_rate']
    p2p_growth_rate: float = _D['p2p_growth_rate']

    courier_cost_per_delivery: float = _D['courier_cost_per_delivery']
    courier_cost_per_transfer: float = _D['courier_cost_per_transfer']

    # Inflation, % per year
    rent_inflation_rate: float = _D['rent_inflation_rate']
    salary_inflation_rate: float = _D['salary_inflation_rate']
    general_inflation_rate: float = _D['general_inflation_rate']

    # Fixed monthly costs
    software_license_month: float = _D['software_license_month']
    insurance_month: float = _D['insurance_month']
    num_staff: int = _D['num_staff']
    avg_salary_per_staff: float = _D['avg_salary_per_staff']

    # Financial
    discount_rate: float = _D['discount_rate']
    tax_rate: float = _D['tax_rate']
    depreciation_years: int = _D['depreciation_years']
    working_capital_percent: float = _D['working_capital_percent']

    # Financing
    financing_type: FinancingType = FinancingType(_D['financing_type'])
    loan_amount: float = _D['loan_amount']
    loan_interest_rate: float = _D['loan_interest_rate']
    loan_term_years: int = _D['loan_term_years']

    # Capacity planning
    target_daily_deliveries: float = _D['target_daily_deliveries']
    target_student_subscribers: float = _D['target_student_subscribers']
    target_daily_p2p_transfers: float = _D['target_daily_p2p_transfers']
    target_utilization: float = _D['target_utilization']
    capacity_buffer: float = _D['capacity_buffer']
    hold_time_hours_commercial: float = _D['hold_time_hours_commercial']
    hold_time_hours_student: float = _D['hold_time_hours_student']
    hold_time_hours_drop_box: float = _D['hold_time_hours_drop_box']

    @property
    def is_loan_financed(self) -> bool:
        return self.financing_type == FinancingType.LOAN and self.loan_amount > 0

    def monthly_rent(self) -> float:
        return (self.num_student_lockers * self.rent_per_student_locker_month +
                self.num_commercial_lockers * self.rent_per_commercial_locker_month +
                self.num_drop_boxes * self.rent_per_drop_box_month)

    def monthly_maintenance(self) -> float:
        return (self.num_student_lockers * self.maintenance_per_student_locker_month +
                self.num_commercial_lockers * self.maintenance_per_commercial_locker_month +
                self.num_drop_boxes * self.maintenance_per_drop_box_month)

    def monthly_electricity(self) -> float:
        return (self.num_student_lockers * self.electricity_per_student_locker_month +
                self.num_commercial_lockers * self.electricity_per_commercial_locker_month +
                self.num_drop_boxes * self.electricity_per_drop_box_month)

    def monthly_staff(self) -> float:
        return self.num_staff * self.avg_salary_per_staff

    def monthly_fixed(self) -> float:
        """Software license plus insurance"""
        return self.software_license_month + self.insurance_month


@dataclass(frozen=True)
class SolverSettings:
    irr_seed: float = SOLVER_DEFAULTS['irr_seed']
    derivative_step: float = SOLVER_DEFAULTS['derivative_step']
    npv_tolerance: float = SOLVER_DEFAULTS['npv_tolerance']
    max_iterations: int = SOLVER_DEFAULTS['max_iterations']


@dataclass(frozen=True)
class LoanYear:
    year: int
    opening_balance: float
    payment: float          # 12 x monthly payment
    interest: float
    principal: float        # includes settlement
    closing_balance: float
    settlement: float = 0.0  # residual balance retired in the final year


@dataclass(frozen=True)
class FinancingSummary:
    financing_type: FinancingType
    initial_investment: float
    equity_invested: float
    loan_amount: float        # 0 when equity financed
    monthly_payment: float
    monthly_rate: float       # fraction
    schedule: tuple = ()      # tuple[LoanYear, ...]

    def entry_for(self, year: int) -> Optional[LoanYear]:
        """Schedule entry for a contractual year, None outside the term"""
        if 1 <= year <= len(self.schedule):
            return self.schedule[year - 1]
        return None


@dataclass(frozen=True)
class MonthlyPeriod:
    month: int
    subscribers: int
    deliveries: int
    transfers: int
    subscription_revenue: float
    delivery_revenue: float
    transfer_revenue: float
    revenue: float
    cogs: float
    rent: float
    maintenance: float
    electricity: float
    staff: float
    fixed: float
    gross_profit: float
    opex: float               # all costs incl. COGS
    ebitda: float
    depreciation: float
    ebit: float
    interest: float
    tax: float
    net_income: float
    gross_margin: float       # % of revenue
    ebitda_margin: float
    net_margin: float


@dataclass(frozen=True)
class AnnualPeriod:
    """Year-end record. Year 0 leaves every operating field as None."""
    year: int
    free_cash_flow: float
    cumulative_free_cash_flow: float
    cash_balance: float
    working_capital: float
    net_fixed_assets: float
    loan_balance: float
    retained_earnings: float
    equity: float

    subscribers: Optional[int] = None
    deliveries_per_month: Optional[int] = None
    transfers_per_month: Optional[int] = None
    subscription_revenue: Optional[float] = None
    delivery_revenue: Optional[float] = None
    transfer_revenue: Optional[float] = None
    revenue: Optional[float] = None
    cogs: Optional[float] = None
    rent: Optional[float] = None
    maintenance: Optional[float] = None
    electricity: Optional[float] = None
    staff: Optional[float] = None
    fixed: Optional[float] = None
    gross_profit: Optional[float] = None
    opex: Optional[float] = None
    ebitda: Optional[float] = None
    depreciation: Optional[float] = None
    ebit: Optional[float] = None
    interest: Optional[float] = None
    ebt: Optional[float] = None
    tax: Optional[float] = None
    net_income: Optional[float] = None
    working_capital_change: Optional[float] = None
    loan_payment: Optional[float] = None
    principal: Optional[float] = None
    total_assets: Optional[float] = None
    roe: Optional[float] = None           # %
    roa: Optional[float] = None           # %
    debt_to_equity: Optional[float] = None
    gross_margin: Optional[float] = None  # %
    ebitda_margin: Optional[float] = None
    net_margin: Optional[float] = None

    @property
    def is_investment_year(self) -> bool:
        return self.year == 0


@dataclass(frozen=True)
class ModelResult:
    assumptions: AssumptionSet
    capital: object           # CapitalPlan
    financing: FinancingSummary
    monthly: tuple            # tuple[MonthlyPeriod, ...]
    annual: tuple             # tuple[AnnualPeriod, ...], years 0-5
    valuation: object         # ValuationResult
    break_even: object        # BreakEvenResult
    unit_economics: object    # UnitEconomics
    kpis: object              # KpiSummary
    capacity: object          # CapacityPlan
    warnings: tuple = ()
