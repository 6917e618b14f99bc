"""Tabular views and file exports of a model run."""

from dataclasses import asdict
from io import BytesIO

import pandas as pd

from engine.models import ModelResult


MONTHLY_COLUMNS = {
    'month': 'Month',
    'subscribers': 'Subscribers',
    'deliveries': 'Deliveries',
    'transfers': 'P2P Transfers',
    'subscription_revenue': 'Subscription Revenue',
    'delivery_revenue': 'Delivery Revenue',
    'transfer_revenue': 'Transfer Revenue',
    'revenue': 'Revenue',
    'cogs': 'COGS',
    'gross_profit': 'Gross Profit',
    'rent': 'Rent',
    'maintenance': 'Maintenance',
    'electricity': 'Electricity',
    'staff': 'Staff',
    'fixed': 'Software & Insurance',
    'ebitda': 'EBITDA',
    'depreciation': 'Depreciation',
    'ebit': 'EBIT',
    'interest': 'Interest',
    'tax': 'Tax',
    'net_income': 'Net Income',
    'gross_margin': 'Gross Margin %',
    'ebitda_margin': 'EBITDA Margin %',
    'net_margin': 'Net Margin %',
}

ANNUAL_COLUMNS = {
    'year': 'Year',
    'subscribers': 'Subscribers',
    'deliveries_per_month': 'Deliveries / Month',
    'transfers_per_month': 'P2P Transfers / Month',
    'revenue': 'Revenue',
    'cogs': 'COGS',
    'gross_profit': 'Gross Profit',
    'opex': 'Total Costs',
    'ebitda': 'EBITDA',
    'depreciation': 'Depreciation',
    'ebit': 'EBIT',
    'interest': 'Interest',
    'tax': 'Tax',
    'net_income': 'Net Income',
    'working_capital': 'Working Capital',
    'working_capital_change': 'Change in Working Capital',
    'principal': 'Principal Repaid',
    'free_cash_flow': 'Free Cash Flow',
    'cumulative_free_cash_flow': 'Cumulative FCF',
    'cash_balance': 'Cash',
    'net_fixed_assets': 'Net Fixed Assets',
    'total_assets': 'Total Assets',
    'loan_balance': 'Loan Balance',
    'retained_earnings': 'Retained Earnings',
    'equity': 'Equity',
    'roe': 'ROE %',
    'roa': 'ROA %',
    'debt_to_equity': 'Debt / Equity',
}


def monthly_frame(res: ModelResult) -> pd.DataFrame:
    df = pd.DataFrame([asdict(m) for m in res.monthly])
    return df[list(MONTHLY_COLUMNS)].rename(columns=MONTHLY_COLUMNS)


def annual_frame(res: ModelResult) -> pd.DataFrame:
    # Year 0 operating fields stay empty (None -> NaN)
    df = pd.DataFrame([asdict(p) for p in res.annual])
    return df[list(ANNUAL_COLUMNS)].rename(columns=ANNUAL_COLUMNS)


def loan_schedule_frame(res: ModelResult) -> pd.DataFrame:
    cols = ['year', 'opening_balance', 'payment', 'interest', 'principal',
            'settlement', 'closing_balance']
    rows = [asdict(e) for e in res.financing.schedule]
    return pd.DataFrame(rows, columns=cols).rename(columns=lambda c: c.replace('_', ' ').title())


def valuation_frame(res: ModelResult) -> pd.DataFrame:
    v = res.valuation
    be = res.break_even
    rows = [
        ('Initial Investment', res.financing.initial_investment),
        ('Equity Invested', res.financing.equity_invested),
        ('Monthly Loan Payment', res.financing.monthly_payment),
        ('NPV', v.npv),
        ('IRR', v.irr),
        ('IRR Status', v.irr_status.value),
        ('Payback (years)', v.payback_years),
        ('Payback Status', v.payback_status.value),
        ('5-Year Cumulative FCF', v.cumulative_fcf_5y),
        ('5-Year Cumulative Net Income', v.cumulative_net_income_5y),
        ('Break-Even Units / Month', be.break_even_units if be.defined else None),
        ('Break-Even Revenue / Month', be.break_even_revenue if be.defined else None),
    ]
    return pd.DataFrame(rows, columns=['Metric', 'Value'])


def frame_to_csv(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode('utf-8')


def make_model_excel(res: ModelResult) -> bytes:
    """Workbook with Monthly (Y1), Annual, Loan Schedule and Valuation sheets."""
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine='xlsxwriter') as xw:
        monthly_frame(res).to_excel(xw, index=False, sheet_name='Monthly (Y1)')
        annual_frame(res).to_excel(xw, index=False, sheet_name='Annual')
        loan_schedule_frame(res).to_excel(xw, index=False, sheet_name='Loan Schedule')
        valuation_frame(res).to_excel(xw, index=False, sheet_name='Valuation')
    bio.seek(0)
    return bio.read()
