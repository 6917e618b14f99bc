"""Test tabular views, CSV/Excel exports and charts"""
from io import BytesIO

import pandas as pd
from openpyxl import load_workbook

from engine.compute import compute
from engine.models import AssumptionSet, FinancingType
from utils.tables import (
    annual_frame, frame_to_csv, loan_schedule_frame, make_model_excel, monthly_frame, valuation_frame
)
from utils.visualizations import (
    create_cumulative_fcf_chart, create_monthly_pnl_chart, create_revenue_mix_chart
)


def loan_result():
    return compute(AssumptionSet(financing_type=FinancingType.LOAN, loan_amount=300_000,
                                 loan_interest_rate=7, loan_term_years=5))


def test_monthly_frame():
    df = monthly_frame(compute(AssumptionSet()))
    assert len(df) == 12
    assert list(df['Month']) == list(range(1, 13))
    assert 'Net Income' in df.columns


def test_annual_frame_leaves_year_zero_blank():
    df = annual_frame(compute(AssumptionSet()))
    assert list(df['Year']) == [0, 1, 2, 3, 4, 5]
    assert pd.isna(df.loc[0, 'Revenue'])
    assert df.loc[0, 'Free Cash Flow'] == -600_000
    assert abs(df.loc[1, 'Revenue'] - 187_800) < 1e-6


def test_loan_schedule_frame():
    df = loan_schedule_frame(loan_result())
    assert list(df.columns) == ['Year', 'Opening Balance', 'Payment', 'Interest',
                                'Principal', 'Settlement', 'Closing Balance']
    assert len(df) == 5
    assert df['Closing Balance'].iloc[-1] == 0.0


def test_loan_schedule_frame_empty_for_equity():
    df = loan_schedule_frame(compute(AssumptionSet()))
    assert df.empty
    assert 'Closing Balance' in df.columns


def test_valuation_frame():
    df = valuation_frame(compute(AssumptionSet()))
    metrics = dict(zip(df['Metric'], df['Value']))
    assert metrics['Initial Investment'] == 600_000
    assert metrics['Payback Status'] == 'not_reached'


def test_csv_export():
    data = frame_to_csv(monthly_frame(compute(AssumptionSet())))
    assert data.decode('utf-8').startswith('Month,')


def test_excel_workbook_sheets():
    wb = load_workbook(BytesIO(make_model_excel(loan_result())))
    assert wb.sheetnames == ['Monthly (Y1)', 'Annual', 'Loan Schedule', 'Valuation']
    ws = wb['Annual']
    assert ws.max_row == 7  # header + years 0-5
    assert ws['A1'].value == 'Year'
    assert wb['Loan Schedule'].max_row == 6


def test_charts_build():
    res = compute(AssumptionSet())
    assert len(create_monthly_pnl_chart(monthly_frame(res)).data) == 3
    assert len(create_revenue_mix_chart(res.annual).data) == 3
    assert len(create_cumulative_fcf_chart(annual_frame(res)).data) == 2
