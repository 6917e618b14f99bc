"""Sidebar assumption inputs with save / load / clear."""

from dataclasses import fields

import streamlit as st

from engine.assumptions import (
    AssumptionError, assumptions_from_dict, assumptions_to_dict, cleared_assumptions
)
from engine.models import AssumptionSet, FinancingType
from utils.persistence import PersistenceError, dumps_assumptions, loads_assumptions, suggested_filename


INPUT_SECTIONS = [
    ("🎓 Student Lockers", [
        ('num_student_lockers', "Number of lockers"),
        ('student_locker_cost_per_unit', "Cost per unit ($)"),
        ('installation_per_student_locker', "Installation per unit ($)"),
        ('rent_per_student_locker_month', "Rent per unit / month ($)"),
        ('maintenance_per_student_locker_month', "Maintenance per unit / month ($)"),
        ('electricity_per_student_locker_month', "Electricity per unit / month ($)"),
        ('student_subscribers', "Starting subscribers"),
        ('yearly_sub_fee', "Yearly subscription fee ($)"),
        ('subscriber_growth_rate', "Subscriber growth (%/yr)"),
    ]),
    ("📦 Commercial Lockers", [
        ('num_commercial_lockers', "Number of lockers"),
        ('commercial_locker_cost_per_unit', "Cost per unit ($)"),
        ('installation_per_commercial_locker', "Installation per unit ($)"),
        ('rent_per_commercial_locker_month', "Rent per unit / month ($)"),
        ('maintenance_per_commercial_locker_month', "Maintenance per unit / month ($)"),
        ('electricity_per_commercial_locker_month', "Electricity per unit / month ($)"),
        ('deliveries_per_month', "Deliveries / month"),
        ('price_per_delivery', "Price per delivery ($)"),
        ('delivery_growth_rate', "Delivery growth (%/yr)"),
        ('courier_cost_per_delivery', "Courier cost per delivery ($)"),
    ]),
    ("🔁 Drop Boxes", [
        ('num_drop_boxes', "Number of drop boxes"),
        ('drop_box_cost_per_unit', "Cost per unit ($)"),
        ('installation_per_drop_box', "Installation per unit ($)"),
        ('rent_per_drop_box_month', "Rent per unit / month ($)"),
        ('maintenance_per_drop_box_month', "Maintenance per unit / month ($)"),
        ('electricity_per_drop_box_month', "Electricity per unit / month ($)"),
        ('p2p_transfers_per_month', "P2P transfers / month"),
        ('price_per_transfer', "Price per transfer ($)"),
        ('p2p_growth_rate', "Transfer growth (%/yr)"),
        ('courier_cost_per_transfer', "Courier cost per transfer ($)"),
    ]),
    ("🏢 Operating Costs", [
        ('num_staff', "Staff"),
        ('avg_salary_per_staff', "Salary per staff / month ($)"),
        ('software_license_month', "Software license / month ($)"),
        ('insurance_month', "Insurance / month ($)"),
        ('rent_inflation_rate', "Rent inflation (%/yr)"),
        ('salary_inflation_rate', "Salary inflation (%/yr)"),
        ('general_inflation_rate', "General inflation (%/yr)"),
    ]),
    ("💰 Financial", [
        ('discount_rate', "Discount rate (%)"),
        ('tax_rate', "Tax rate (%)"),
        ('depreciation_years', "Depreciation period (years)"),
        ('working_capital_percent', "Working capital (% of revenue)"),
    ]),
    ("📐 Capacity Planning", [
        ('target_daily_deliveries', "Target daily deliveries"),
        ('target_student_subscribers', "Target student subscribers"),
        ('target_daily_p2p_transfers', "Target daily P2P transfers"),
        ('target_utilization', "Target utilization (%)"),
        ('capacity_buffer', "Capacity buffer (%)"),
        ('compartments_per_student_locker', "Compartments per student locker"),
        ('compartments_per_commercial_locker', "Compartments per commercial locker"),
        ('compartments_per_drop_box', "Compartments per drop box"),
        ('hold_time_hours_student', "Hold time, student (h)"),
        ('hold_time_hours_commercial', "Hold time, commercial (h)"),
        ('hold_time_hours_drop_box', "Hold time, drop box (h)"),
    ]),
]

FIELD_TYPES = {f.name: f.type for f in fields(AssumptionSet)}

LOAN_FIELDS = [
    ('loan_amount', "Loan amount ($)"),
    ('loan_interest_rate', "Interest rate (%/yr)"),
    ('loan_term_years', "Term (years)"),
]


def _seed_session(a: AssumptionSet):
    """Overwrite every widget value from an assumption set"""
    for name, value in assumptions_to_dict(a).items():
        if FIELD_TYPES[name] is float:
            value = float(value)
        st.session_state[f"in_{name}"] = value


def _number_input(name: str, label: str, disabled: bool = False):
    key = f"in_{name}"
    if FIELD_TYPES[name] is int:
        return st.sidebar.number_input(label, min_value=0, step=1, key=key, disabled=disabled)
    return st.sidebar.number_input(label, min_value=0.0, step=1.0, key=key, disabled=disabled)


def _file_controls():
    st.sidebar.subheader("💾 Model File")
    current = st.session_state.get('assumptions', AssumptionSet())
    st.sidebar.download_button(
        "Save Model",
        data=dumps_assumptions(current).encode("utf-8"),
        file_name=suggested_filename(current),
        mime="application/json"
    )

    uploaded = st.sidebar.file_uploader("Load Model", type=["json"])
    if uploaded is not None and st.session_state.get('loaded_file') != uploaded.name:
        try:
            loaded = loads_assumptions(uploaded.getvalue().decode("utf-8"))
        except (PersistenceError, UnicodeDecodeError) as exc:
            # Prior inputs stay in place
            st.sidebar.error(str(exc))
        else:
            st.session_state['pending_inputs'] = loaded
            st.session_state['loaded_file'] = uploaded.name
            st.rerun()

    if st.sidebar.button("Clear All Fields"):
        st.session_state['pending_inputs'] = cleared_assumptions()
        st.rerun()


def render_assumptions_sidebar() -> AssumptionSet:
    """Render sidebar inputs and return the validated assumption set."""
    # Widget values can only be replaced before the widgets are drawn
    pending = st.session_state.pop('pending_inputs', None)
    if pending is not None:
        _seed_session(pending)
    elif 'in_company_name' not in st.session_state:
        _seed_session(AssumptionSet())

    st.sidebar.header("⚙️ Assumptions")
    st.sidebar.text_input("Company name", key="in_company_name")

    for title, section in INPUT_SECTIONS:
        st.sidebar.subheader(title)
        for name, label in section:
            _number_input(name, label)

    st.sidebar.subheader("🏦 Financing")
    st.sidebar.selectbox("Financing type", [t.value for t in FinancingType], key="in_financing_type")
    # Always drawn so the loan terms survive switching to equity and back
    equity_only = st.session_state["in_financing_type"] != FinancingType.LOAN.value
    for name, label in LOAN_FIELDS:
        _number_input(name, label, disabled=equity_only)

    raw = {name: st.session_state[f"in_{name}"] for name in FIELD_TYPES
           if f"in_{name}" in st.session_state}
    try:
        a = assumptions_from_dict(raw, base=st.session_state.get('assumptions', AssumptionSet()))
    except AssumptionError as exc:
        st.sidebar.error(str(exc))
        a = st.session_state.get('assumptions', AssumptionSet())
    st.session_state['assumptions'] = a

    _file_controls()
    return a
