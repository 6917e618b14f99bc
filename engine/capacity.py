"""Infrastructure plan: units needed per facility class for target throughput"""
import math
from dataclasses import dataclass

from .models import AssumptionSet

DAYS_PER_MONTH = 30.0


@dataclass(frozen=True)
class ClassCapacity:
    """Capacity requirement for one facility class"""
    facility_class: str
    daily_throughput: float          # parcels/day
    hold_time_hours: float
    occupied_compartments: float     # concurrent at steady state
    required_compartments: float     # after utilization target and buffer
    compartments_per_unit: int
    required_units: int
    configured_units: int

    @property
    def shortfall(self) -> int:
        """Units still to deploy (negative = surplus)"""
        return self.required_units - self.configured_units


@dataclass(frozen=True)
class CapacityPlan:
    student_lockers: ClassCapacity
    commercial_lockers: ClassCapacity
    drop_boxes: ClassCapacity
    warnings: tuple = ()

    def classes(self) -> list[ClassCapacity]:
        return [self.student_lockers, self.commercial_lockers, self.drop_boxes]


def size_class(name: str, daily_throughput: float, hold_time_hours: float,
               compartments_per_unit: int, configured_units: int,
               target_utilization_pct: float, buffer_pct: float) -> ClassCapacity:
    """
    Size one facility class

    Parcels arriving per day stay for the hold time, so the steady-state
    occupancy is throughput x hold_time / 24. That occupancy must fit within
    the target utilization, plus the capacity buffer.
    """
    occupied = daily_throughput * hold_time_hours / 24.0
    utilization = target_utilization_pct / 100.0
    if utilization > 0:
        required = occupied / utilization * (1.0 + buffer_pct / 100.0)
    else:
        required = 0.0
    units = math.ceil(required / compartments_per_unit) if compartments_per_unit > 0 else 0
    return ClassCapacity(
        facility_class=name,
        daily_throughput=daily_throughput,
        hold_time_hours=hold_time_hours,
        occupied_compartments=occupied,
        required_compartments=required,
        compartments_per_unit=compartments_per_unit,
        required_units=units,
        configured_units=configured_units,
    )


def plan_infrastructure(a: AssumptionSet) -> CapacityPlan:
    """Compare target throughput against the configured network"""
    student = size_class(
        "Student lockers",
        # one parcel per subscriber per month
        a.target_student_subscribers / DAYS_PER_MONTH,
        a.hold_time_hours_student,
        a.compartments_per_student_locker,
        a.num_student_lockers,
        a.target_utilization,
        a.capacity_buffer,
    )
    commercial = size_class(
        "Commercial lockers",
        a.target_daily_deliveries,
        a.hold_time_hours_commercial,
        a.compartments_per_commercial_locker,
        a.num_commercial_lockers,
        a.target_utilization,
        a.capacity_buffer,
    )
    drop = size_class(
        "Drop boxes",
        a.target_daily_p2p_transfers,
        a.hold_time_hours_drop_box,
        a.compartments_per_drop_box,
        a.num_drop_boxes,
        a.target_utilization,
        a.capacity_buffer,
    )

    warnings = []
    if a.target_utilization <= 0:
        warnings.append("Target utilization is 0%; capacity requirements not computed")
    for c in (student, commercial, drop):
        if c.compartments_per_unit <= 0 and c.daily_throughput > 0:
            warnings.append(f"{c.facility_class}: compartments per unit is 0")
        elif c.shortfall > 0:
            warnings.append(f"{c.facility_class}: {c.shortfall} more units needed for target throughput")

    return CapacityPlan(
        student_lockers=student,
        commercial_lockers=commercial,
        drop_boxes=drop,
        warnings=tuple(warnings),
    )
