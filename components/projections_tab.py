"""Projections tab component: year-1 monthly and 5-year annual statements."""

from datetime import datetime

import streamlit as st

from engine.models import ModelResult
from engine.projections import summarize_year_one
from utils.tables import (
    annual_frame, frame_to_csv, loan_schedule_frame, make_model_excel, monthly_frame
)
from utils.visualizations import (
    create_cumulative_fcf_chart,
    create_monthly_pnl_chart,
    create_revenue_mix_chart
)


def render_projections_tab(res: ModelResult):
    """Render the projections tab."""
    df_monthly = monthly_frame(res)
    df_annual = annual_frame(res)
    y1 = summarize_year_one(res.monthly)

    st.subheader("📅 Year 1 (Monthly)")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Y1 Revenue", f"${y1['revenue']:,.0f}")
    with c2:
        st.metric("Y1 EBITDA", f"${y1['ebitda']:,.0f}")
        st.caption(f"{y1['ebitda_margin']:.1f}% margin")
    with c3:
        st.metric("Y1 Net Income", f"${y1['net_income']:,.0f}")
    with c4:
        be_month = y1['break_even_month']
        st.metric("First EBITDA-Positive Month", f"Month {be_month}" if be_month else "Not in Y1")

    st.plotly_chart(create_monthly_pnl_chart(df_monthly), use_container_width=True)
    st.dataframe(df_monthly, use_container_width=True, hide_index=True)

    st.subheader("📈 Years 0–5 (Annual)")
    st.plotly_chart(create_revenue_mix_chart(res.annual), use_container_width=True)
    st.plotly_chart(create_cumulative_fcf_chart(df_annual), use_container_width=True)
    st.dataframe(df_annual, use_container_width=True, hide_index=True)

    if res.financing.schedule:
        st.subheader("🏦 Loan Schedule")
        st.caption(f"Monthly payment ${res.financing.monthly_payment:,.2f}")
        st.dataframe(loan_schedule_frame(res), use_container_width=True, hide_index=True)

    st.markdown("#### ⬇️ Downloads")
    stamp = datetime.now().strftime('%Y%m%d')
    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "Monthly Y1 (CSV)",
            data=frame_to_csv(df_monthly),
            file_name=f"Monthly_Y1_{stamp}.csv",
            mime="text/csv"
        )
    with col2:
        st.download_button(
            "Annual (CSV)",
            data=frame_to_csv(df_annual),
            file_name=f"Annual_{stamp}.csv",
            mime="text/csv"
        )
    with col3:
        st.download_button(
            "Full Model (Excel)",
            data=make_model_excel(res),
            file_name=f"Projections_{stamp}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
