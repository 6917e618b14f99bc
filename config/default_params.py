"""Default parameters for the parcel locker financial model."""

PROJECTION_YEARS = 5
MONTHS_IN_YEAR = 12

# Baseline assumption set (percent fields are in percent, not fractions)
DEFAULT_ASSUMPTIONS = {
    'company_name': 'Parcel Locker Co.',
    # Student lockers
    'num_student_lockers': 30,
    'student_locker_cost_per_unit': 8000,
    'installation_per_student_locker': 2000,
    'rent_per_student_locker_month': 200,
    'maintenance_per_student_locker_month': 150,
    'electricity_per_student_locker_month': 30,
    'compartments_per_student_locker': 40,
    # Commercial lockers
    'num_commercial_lockers': 20,
    'commercial_locker_cost_per_unit': 8000,
    'installation_per_commercial_locker': 2000,
    'rent_per_commercial_locker_month': 200,
    'maintenance_per_commercial_locker_month': 150,
    'electricity_per_commercial_locker_month': 30,
    'compartments_per_commercial_locker': 40,
    # Drop boxes
    'num_drop_boxes': 20,
    'drop_box_cost_per_unit': 4000,
    'installation_per_drop_box': 1000,
    'rent_per_drop_box_month': 150,
    'maintenance_per_drop_box_month': 75,
    'electricity_per_drop_box_month': 20,
    'compartments_per_drop_box': 20,
    # Volumes and prices
    'student_subscribers': 500,
    'yearly_sub_fee': 150,
    'deliveries_per_month': 2000,
    'price_per_delivery': 3.50,
    'p2p_transfers_per_month': 300,
    'price_per_transfer': 8,
    # Growth (% per year)
    'subscriber_growth_rate': 3,
    'delivery_growth_rate': 5,
    'p2p_growth_rate': 4,
    # Courier costs
    'courier_cost_per_delivery': 1.50,
    'courier_cost_per_transfer': 4.50,
    # Inflation (% per year)
    'rent_inflation_rate': 3,
    'salary_inflation_rate': 3,
    'general_inflation_rate': 2,
    # Fixed monthly costs
    'software_license_month': 2000,
    'insurance_month': 1500,
    'num_staff': 3,
    'avg_salary_per_staff': 3500,
    # Financial
    'discount_rate': 10,
    'tax_rate': 25,
    'depreciation_years': 7,
    'working_capital_percent': 5,
    # Financing
    'financing_type': 'equity',
    'loan_amount': 0,
    'loan_interest_rate': 7,
    'loan_term_years': 5,
    # Capacity planning
    'target_daily_deliveries': 10000,
    'target_student_subscribers': 5000,
    'target_daily_p2p_transfers': 500,
    'target_utilization': 80,
    'capacity_buffer': 10,
    'hold_time_hours_commercial': 24,
    'hold_time_hours_student': 48,
    'hold_time_hours_drop_box': 12,
}

# Newton-Raphson IRR solver
SOLVER_DEFAULTS = {
    'irr_seed': 0.10,
    'derivative_step': 0.001,
    'npv_tolerance': 0.01,
    'max_iterations': 20,
}

# Multipliers applied to the base assumption set
SCENARIO_PRESETS = {
    'Conservative': {
        'growth': 0.5,
        'price': 0.9,
        'courier_cost': 1.1,
    },
    'Base': {
        'growth': 1.0,
        'price': 1.0,
        'courier_cost': 1.0,
    },
    'Optimistic': {
        'growth': 1.5,
        'price': 1.1,
        'courier_cost': 0.95,
    },
}

# camelCase input names written by earlier saved-model files
INPUT_ALIASES = {
    'companyName': 'company_name',
    'numStudentLockers': 'num_student_lockers',
    'studentLockerCostPerUnit': 'student_locker_cost_per_unit',
    'installationPerStudentLocker': 'installation_per_student_locker',
    'rentPerStudentLockerMonth': 'rent_per_student_locker_month',
    'maintenancePerStudentLockerMonth': 'maintenance_per_student_locker_month',
    'electricityPerStudentLockerMonth': 'electricity_per_student_locker_month',
    'compartmentsPerStudentLocker': 'compartments_per_student_locker',
    'numCommercialLockers': 'num_commercial_lockers',
    'commercialLockerCostPerUnit': 'commercial_locker_cost_per_unit',
    'installationPerCommercialLocker': 'installation_per_commercial_locker',
    'rentPerCommercialLockerMonth': 'rent_per_commercial_locker_month',
    'maintenancePerCommercialLockerMonth': 'maintenance_per_commercial_locker_month',
    'electricityPerCommercialLockerMonth': 'electricity_per_commercial_locker_month',
    'compartmentsPerCommercialLocker': 'compartments_per_commercial_locker',
    'numDropBoxes': 'num_drop_boxes',
    'dropBoxCostPerUnit': 'drop_box_cost_per_unit',
    'installationPerDropBox': 'installation_per_drop_box',
    'rentPerDropBoxMonth': 'rent_per_drop_box_month',
    'maintenancePerDropBoxMonth': 'maintenance_per_drop_box_month',
    'electricityPerDropBoxMonth': 'electricity_per_drop_box_month',
    'compartmentsPerDropBox': 'compartments_per_drop_box',
    'studentSubscribers': 'student_subscribers',
    'yearlySubFee': 'yearly_sub_fee',
    'deliveriesPerMonth': 'deliveries_per_month',
    'pricePerDelivery': 'price_per_delivery',
    'p2pTransfersPerMonth': 'p2p_transfers_per_month',
    'pricePerTransfer': 'price_per_transfer',
    'subscriberGrowthRate': 'subscriber_growth_rate',
    'deliveryGrowthRate': 'delivery_growth_rate',
    'p2pGrowthRate': 'p2p_growth_rate',
    'courierCostPerDelivery': 'courier_cost_per_delivery',
    'courierCostPerTransfer': 'courier_cost_per_transfer',
    'rentInflationRate': 'rent_inflation_rate',
    'salaryInflationRate': 'salary_inflation_rate',
    'generalInflationRate': 'general_inflation_rate',
    'softwareLicenseMonth': 'software_license_month',
    'insuranceMonth': 'insurance_month',
    'numStaff': 'num_staff',
    'avgSalaryPerStaff': 'avg_salary_per_staff',
    'discountRate': 'discount_rate',
    'taxRate': 'tax_rate',
    'depreciationYears': 'depreciation_years',
    'workingCapitalPercent': 'working_capital_percent',
    'financingType': 'financing_type',
    'loanAmount': 'loan_amount',
    'loanInterestRate': 'loan_interest_rate',
    'loanTermYears': 'loan_term_years',
    'targetDailyDeliveries': 'target_daily_deliveries',
    'targetStudentSubscribers': 'target_student_subscribers',
    'targetDailyP2PTransfers': 'target_daily_p2p_transfers',
    'targetUtilization': 'target_utilization',
    'capacityBuffer': 'capacity_buffer',
    'avgHoldTimeHoursCommercial': 'hold_time_hours_commercial',
    'avgHoldTimeHoursStudent': 'hold_time_hours_student',
    'avgHoldTimeHoursDropBox': 'hold_time_hours_drop_box',
}
