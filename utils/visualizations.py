"""Visualization utilities for the financial model."""

import plotly.graph_objects as go
import pandas as pd


def create_monthly_pnl_chart(monthly_df: pd.DataFrame):
    """Create year-1 monthly revenue, costs and net income chart."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=monthly_df['Month'],
        y=monthly_df['Revenue'],
        mode='lines+markers',
        name='Revenue',
        line=dict(color='green', width=2)
    ))
    costs = monthly_df['Revenue'] - monthly_df['EBITDA']
    fig.add_trace(go.Scatter(
        x=monthly_df['Month'],
        y=costs,
        mode='lines+markers',
        name='Total Costs',
        line=dict(color='red', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=monthly_df['Month'],
        y=monthly_df['Net Income'],
        mode='lines+markers',
        name='Net Income',
        line=dict(color='blue', width=2)
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    fig.update_layout(
        title='Year 1 Monthly Projection',
        xaxis_title='Month',
        yaxis_title='Amount ($)',
        height=400
    )
    return fig


def create_revenue_mix_chart(annual_periods):
    """Create stacked revenue-by-stream chart for operating years."""
    years = pd.DataFrame([
        {'year': p.year,
         'subscription_revenue': p.subscription_revenue,
         'delivery_revenue': p.delivery_revenue,
         'transfer_revenue': p.transfer_revenue}
        for p in annual_periods if p.year > 0
    ])
    fig = go.Figure()
    for col, name, color in (
        ('subscription_revenue', 'Subscriptions', 'purple'),
        ('delivery_revenue', 'Deliveries', 'green'),
        ('transfer_revenue', 'P2P Transfers', 'orange'),
    ):
        fig.add_trace(go.Bar(
            x=years['year'],
            y=years[col],
            name=name,
            marker_color=color
        ))
    fig.update_layout(
        barmode='stack',
        title='Revenue by Stream',
        xaxis_title='Year',
        yaxis_title='Revenue ($)',
        height=400
    )
    return fig


def create_cumulative_fcf_chart(annual_df: pd.DataFrame):
    """Create free cash flow bars with the cumulative line."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=annual_df['Year'],
        y=annual_df['Free Cash Flow'],
        name='Free Cash Flow',
        marker_color='steelblue'
    ))
    fig.add_trace(go.Scatter(
        x=annual_df['Year'],
        y=annual_df['Cumulative FCF'],
        mode='lines+markers',
        name='Cumulative FCF',
        line=dict(color='black', width=2)
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray", annotation_text="Payback")
    fig.update_layout(
        title='Free Cash Flow and Payback',
        xaxis_title='Year',
        yaxis_title='Amount ($)',
        height=400
    )
    return fig
