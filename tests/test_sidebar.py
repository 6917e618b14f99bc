"""Test the assumptions sidebar in a headless Streamlit run"""
from streamlit.testing.v1 import AppTest


def sidebar_script():
    from components.assumptions_sidebar import render_assumptions_sidebar
    render_assumptions_sidebar()


def run_sidebar():
    at = AppTest.from_function(sidebar_script, default_timeout=30)
    at.run()
    return at


def test_loan_inputs_disabled_under_equity():
    at = run_sidebar()
    assert not at.exception
    assert at.number_input(key="in_loan_amount").disabled


def test_loan_terms_survive_switching_financing_type():
    at = run_sidebar()
    at.selectbox(key="in_financing_type").set_value("loan").run()
    at.number_input(key="in_loan_amount").set_value(250000.0).run()
    at.number_input(key="in_loan_term_years").set_value(8).run()

    at.selectbox(key="in_financing_type").set_value("equity").run()
    at.selectbox(key="in_financing_type").set_value("loan").run()

    assert not at.exception
    assert at.number_input(key="in_loan_amount").value == 250000.0
    assert at.number_input(key="in_loan_term_years").value == 8
    assert not at.number_input(key="in_loan_amount").disabled
    assert at.session_state['assumptions'].loan_amount == 250000.0
