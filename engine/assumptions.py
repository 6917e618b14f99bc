"""Input boundary: validation, default merging and the clear-all reset"""
import logging
from dataclasses import asdict, fields, replace

from config.default_params import INPUT_ALIASES
from .models import AssumptionSet, FinancingType

logger = logging.getLogger(__name__)

LABEL_FIELDS = ("company_name",)
ENUM_FIELDS = ("financing_type",)


class AssumptionError(ValueError):
    """Raised when an assumption set cannot be used by the engine"""


def numeric_field_names() -> list[str]:
    return [f.name for f in fields(AssumptionSet)
            if f.name not in LABEL_FIELDS and f.name not in ENUM_FIELDS]


def _field_types() -> dict:
    return {f.name: f.type for f in fields(AssumptionSet)}


def _coerce_number(name: str, value, kind):
    if isinstance(value, bool):
        raise AssumptionError(f"{name}: expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise AssumptionError(f"{name}: expected a number, got {value!r}") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise AssumptionError(f"{name}: must be finite, got {value!r}")
    if kind is int:
        if number != int(number):
            raise AssumptionError(f"{name}: expected a whole number, got {value!r}")
        return int(number)
    return number


def _coerce_financing_type(value) -> FinancingType:
    try:
        return FinancingType(value)
    except ValueError:
        raise AssumptionError(
            f"financing_type: expected one of "
            f"{[t.value for t in FinancingType]}, got {value!r}"
        ) from None


def validate_assumptions(assumptions: AssumptionSet) -> AssumptionSet:
    """
    Check an assumption set before it reaches the engine.

    Every numeric field must be finite and non-negative and the financing
    type must be a known value. Returns the same object so calls can be
    chained.

    Raises:
        AssumptionError: listing every invalid field
    """
    if not isinstance(assumptions.financing_type, FinancingType):
        _coerce_financing_type(assumptions.financing_type)

    problems = []
    for name in numeric_field_names():
        value = getattr(assumptions, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            problems.append(f"{name}: expected a number, got {value!r}")
        elif value != value or value in (float("inf"), float("-inf")):
            problems.append(f"{name}: must be finite")
        elif value < 0:
            problems.append(f"{name}: must be non-negative, got {value}")

    if problems:
        raise AssumptionError("; ".join(problems))
    return assumptions


def canonical_inputs(data: dict) -> tuple[dict, list]:
    """
    Map input keys to field names, accepting the camelCase aliases.

    Returns the recognized ``{field: value}`` mapping and the sorted list of
    keys that match no field. A snake_case key wins over its alias.
    """
    types = _field_types()
    known, unknown = {}, []
    for key, value in data.items():
        name = key if key in types else INPUT_ALIASES.get(key)
        if name is None:
            unknown.append(key)
        elif key == name or name not in data:
            known[name] = value
    return known, sorted(unknown)


def assumptions_from_dict(data: dict, base: AssumptionSet = None,
                          require_known: bool = False) -> AssumptionSet:
    """
    Build an AssumptionSet from a flat mapping merged over defaults.

    Keys may be field names or their camelCase aliases. Unknown keys are
    ignored (and logged); missing keys fall back to ``base`` (the documented
    defaults when omitted). Numeric strings are coerced. The result is
    validated.

    With ``require_known``, a non-empty mapping that contains no recognized
    key is rejected instead of silently yielding ``base``.
    """
    if not isinstance(data, dict):
        raise AssumptionError(f"expected a mapping of inputs, got {type(data).__name__}")

    base = base or AssumptionSet()
    types = _field_types()
    known, unknown = canonical_inputs(data)
    if unknown:
        logger.warning("Ignoring unknown assumption fields: %s", ", ".join(unknown))
    if require_known and data and not known:
        raise AssumptionError("none of the input fields are recognized")

    updates = {}
    for name, value in known.items():
        if name in LABEL_FIELDS:
            updates[name] = "" if value is None else str(value)
        elif name in ENUM_FIELDS:
            updates[name] = _coerce_financing_type(value)
        else:
            updates[name] = _coerce_number(name, value, types[name])

    return validate_assumptions(replace(base, **updates))


def assumptions_to_dict(assumptions: AssumptionSet) -> dict:
    """Flat, JSON-ready mapping of every field"""
    data = asdict(assumptions)
    data["financing_type"] = FinancingType(assumptions.financing_type).value
    return data


def cleared_assumptions() -> AssumptionSet:
    """Zero every numeric field, reset financing to equity and blank the label"""
    types = _field_types()
    zeros = {name: (0 if types[name] is int else 0.0)
             for name in numeric_field_names()}
    return AssumptionSet(company_name="", financing_type=FinancingType.EQUITY, **zeros)
