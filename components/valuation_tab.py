"""Valuation, break-even, capacity and scenario comparison tab."""

import pandas as pd
import streamlit as st

from engine.models import ModelResult
from engine.valuation import IrrStatus, PaybackStatus


def format_irr(irr, status) -> str:
    if status == IrrStatus.UNDEFINED or irr is None:
        return "n/a"
    text = f"{irr * 100:.1f}%"
    if status == IrrStatus.NOT_CONVERGED:
        text += " (not converged)"
    return text


def format_payback(years, status) -> str:
    if status == PaybackStatus.REACHED:
        return f"{years:.1f} years"
    if status == PaybackStatus.NOT_REACHED:
        return "Not reached"
    return "Undefined"


def render_valuation_tab(res: ModelResult, scenarios):
    """Render the valuation tab with precomputed scenario rows."""
    v = res.valuation
    fin = res.financing

    st.subheader("💵 Investment")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Initial Investment", f"${fin.initial_investment:,.0f}")
    with c2:
        st.metric("Equity Invested", f"${fin.equity_invested:,.0f}")
    with c3:
        st.metric("Monthly Loan Payment", f"${fin.monthly_payment:,.2f}")

    with st.expander("Capital by facility class"):
        st.table(pd.DataFrame(
            [(k, f"${val:,.0f}") for k, val in res.capital.by_class().items()],
            columns=["Facility class", "Capex"]
        ))

    st.subheader("📊 Valuation")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("NPV", f"${v.npv:,.0f}")
        st.caption(f"at {res.assumptions.discount_rate:.1f}% discount rate")
    with c2:
        st.metric("IRR", format_irr(v.irr, v.irr_status))
    with c3:
        st.metric("Payback", format_payback(v.payback_years, v.payback_status))
    with c4:
        st.metric("5-Year Cumulative FCF", f"${v.cumulative_fcf_5y:,.0f}")

    st.subheader("⚖️ Break-Even (monthly)")
    be = res.break_even
    ue = res.unit_economics
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Fixed Costs / Month", f"${be.fixed_monthly_cost:,.0f}")
    with c2:
        st.metric("Contribution / Unit", f"${be.contribution_margin:,.2f}")
        st.caption(f"{ue.contribution_margin_ratio:.1f}% of revenue per unit")
    with c3:
        st.metric("Break-Even Units", f"{be.break_even_units:,.0f}" if be.defined else "Undefined")
    with c4:
        st.metric("Break-Even Revenue", f"${be.break_even_revenue:,.0f}" if be.defined else "Undefined")

    st.subheader("🔑 KPIs")
    k = res.kpis
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Revenue CAGR", f"{k.revenue_cagr:.1f}%")
    with c2:
        st.metric("Avg EBITDA Margin", f"{k.avg_ebitda_margin:.1f}%")
    with c3:
        st.metric("Locker Utilization", f"{k.locker_utilization:.0f}%")
    with c4:
        st.metric("Drop Box Utilization", f"{k.drop_box_utilization:.0f}%")
    if k.min_dscr is not None:
        st.caption(f"Minimum DSCR over the loan term: {k.min_dscr:.2f}")

    st.subheader("📐 Infrastructure Plan")
    st.dataframe(pd.DataFrame([
        {
            "Facility class": c.facility_class,
            "Daily throughput": round(c.daily_throughput, 1),
            "Compartments needed": round(c.required_compartments, 1),
            "Units needed": c.required_units,
            "Units configured": c.configured_units,
            "Shortfall": c.shortfall,
        }
        for c in res.capacity.classes()
    ]), use_container_width=True, hide_index=True)

    st.subheader("🎯 Scenarios")
    st.dataframe(pd.DataFrame([
        {
            "Scenario": s.name,
            "Y5 Revenue": f"${s.year5_revenue:,.0f}",
            "Y5 Net Income": f"${s.year5_net_income:,.0f}",
            "NPV": f"${s.npv:,.0f}",
            "IRR": format_irr(s.irr, s.irr_status),
            "Payback": format_payback(s.payback_years, s.payback_status),
        }
        for s in scenarios
    ]), use_container_width=True, hide_index=True)
