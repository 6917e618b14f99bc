"""Save and load assumption sets as JSON documents of shape {"inputs": {...}}"""

import json
import logging
import re
from datetime import datetime

from engine.assumptions import AssumptionError, assumptions_from_dict, assumptions_to_dict
from engine.models import AssumptionSet

logger = logging.getLogger(__name__)


class PersistenceError(ValueError):
    """Raised when a saved model cannot be loaded; caller state is untouched"""


def dumps_assumptions(assumptions: AssumptionSet) -> str:
    """Serialize an assumption set to the saved-model JSON format."""
    return json.dumps({'inputs': assumptions_to_dict(assumptions)}, indent=2)


def loads_assumptions(text, base: AssumptionSet = None) -> AssumptionSet:
    """
    Parse a saved-model document.

    Field names may be snake_case or the camelCase names of earlier files.
    Missing fields take defaults and unknown fields are ignored. Malformed
    JSON, a missing ``inputs`` object, inputs with no recognized field or
    invalid values raise PersistenceError; nothing is partially applied.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"Error loading file: not valid JSON ({exc})") from exc

    if not isinstance(data, dict) or not isinstance(data.get('inputs'), dict):
        raise PersistenceError("Error loading file: expected an object with an 'inputs' mapping")

    try:
        return assumptions_from_dict(data['inputs'], base=base, require_known=True)
    except AssumptionError as exc:
        raise PersistenceError(f"Error loading file: {exc}") from exc


def save_assumptions(assumptions: AssumptionSet, path) -> None:
    with open(path, 'w', encoding='utf-8') as fh:
        fh.write(dumps_assumptions(assumptions))
    logger.info("Saved assumptions to %s", path)


def load_assumptions(path, base: AssumptionSet = None) -> AssumptionSet:
    with open(path, 'r', encoding='utf-8') as fh:
        text = fh.read()
    return loads_assumptions(text, base=base)


def suggested_filename(assumptions: AssumptionSet, when: datetime = None) -> str:
    """<company-name>-<epoch millis>.json"""
    when = when or datetime.now()
    stem = re.sub(r'\s+', '-', assumptions.company_name.strip()) or 'model'
    return f"{stem}-{int(when.timestamp() * 1000)}.json"
