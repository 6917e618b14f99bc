"""Test saving and loading assumption sets"""
import json
from datetime import datetime, timezone

import pytest

from engine.models import AssumptionSet, FinancingType
from utils.persistence import (
    PersistenceError, dumps_assumptions, load_assumptions, loads_assumptions,
    save_assumptions, suggested_filename
)


def test_round_trip():
    a = AssumptionSet(company_name='North Campus', financing_type=FinancingType.LOAN,
                      loan_amount=250_000, num_staff=4, price_per_transfer=9.25)
    assert loads_assumptions(dumps_assumptions(a)) == a


def test_document_shape():
    doc = json.loads(dumps_assumptions(AssumptionSet()))
    assert list(doc) == ['inputs']
    assert doc['inputs']['financing_type'] == 'equity'
    assert doc['inputs']['num_student_lockers'] == 30


def test_file_round_trip(tmp_path):
    path = tmp_path / 'model.json'
    a = AssumptionSet(yearly_sub_fee=180)
    save_assumptions(a, path)
    assert load_assumptions(path) == a


def test_missing_fields_take_defaults_and_unknown_are_ignored():
    a = loads_assumptions('{"inputs": {"num_staff": 5, "num_vans": 8}}')
    assert a.num_staff == 5
    assert a.tax_rate == AssumptionSet().tax_rate


@pytest.mark.parametrize("text", [
    'not json',
    '[]',
    '{"settings": {}}',
    '{"inputs": 3}',
    '{"inputs": {"tax_rate": "abc"}}',
    '{"inputs": {"loan_amount": -1}}',
])
def test_malformed_documents_rejected(text):
    with pytest.raises(PersistenceError):
        loads_assumptions(text)


def test_suggested_filename():
    when = datetime(2024, 1, 1, tzinfo=timezone.utc)
    a = AssumptionSet(company_name='Acme  Lockers Inc')
    assert suggested_filename(a, when) == 'Acme-Lockers-Inc-1704067200000.json'
    assert suggested_filename(AssumptionSet(company_name='  '), when) == 'model-1704067200000.json'


def test_camel_case_document_loads():
    """Files from the earlier camelCase format keep their values"""
    text = json.dumps({'inputs': {
        'companyName': 'Campus Drop',
        'numStudentLockers': 10,
        'financingType': 'loan',
        'loanAmount': 100000,
        'taxRate': 30,
        'targetDailyP2PTransfers': 250,
        'avgHoldTimeHoursCommercial': 36,
        'capacityBufferStudent': 15,
    }})
    a = loads_assumptions(text)
    assert a.company_name == 'Campus Drop'
    assert a.num_student_lockers == 10
    assert a.financing_type == FinancingType.LOAN
    assert a.loan_amount == 100_000
    assert a.tax_rate == 30
    assert a.target_daily_p2p_transfers == 250
    assert a.hold_time_hours_commercial == 36
    assert a.num_commercial_lockers == AssumptionSet().num_commercial_lockers


def test_document_with_no_recognized_fields_rejected():
    with pytest.raises(PersistenceError):
        loads_assumptions('{"inputs": {"numCourts": 4, "leaguePrice": 150}}')


def test_empty_inputs_load_defaults():
    assert loads_assumptions('{"inputs": {}}') == AssumptionSet()
