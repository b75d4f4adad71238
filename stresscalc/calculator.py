from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
import logging

from stresscalc.model import StressType, field_specs
from stresscalc.units import UnitSystem, convert_to_base, stress_unit, unit_options
from stresscalc.validation import ValidationError, validate
from stresscalc.formulas import StressResult, evaluate

logger = logging.getLogger(__name__)

CALCULATION_FIELD = "calculation"
CALCULATION_ERROR_MESSAGE = "An error occurred during calculation. Please check your inputs."

@dataclass(frozen=True)
class CalculationOutcome:
    result: Optional[StressResult] = None
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.result is not None and not self.errors

def default_units(stress_type, system) -> Dict[str, str]:
    """First unit token per convertible field."""
    out: Dict[str, str] = {}
    for spec in field_specs(stress_type):
        if spec.quantity is not None:
            out[spec.name] = unit_options(system, spec.quantity)[0]
    return out

def to_base_inputs(stress_type, raw_inputs: Mapping[str, str], units: Mapping[str, str], system) -> Dict[str, float]:
    """Parse validated strings and convert each to the base unit of its quantity."""
    base: Dict[str, float] = {}
    for spec in field_specs(stress_type):
        value = float(str(raw_inputs[spec.name]).strip())
        if spec.quantity is None:
            base[spec.name] = value
            continue
        unit = units.get(spec.name) or unit_options(system, spec.quantity)[0]
        base[spec.name] = convert_to_base(spec.quantity, value, unit, system)
    return base

def calculate(
    stress_type,
    raw_inputs: Mapping[str, str],
    units: Optional[Mapping[str, str]] = None,
    system=UnitSystem.METRIC,
) -> CalculationOutcome:
    """Validate -> convert to base units -> evaluate.

    Returns either a result or the field errors, never both.
    """
    st = StressType(stress_type)
    errors = validate(st, raw_inputs)
    if errors:
        logger.debug("%s stress: %d validation error(s)", st.value, len(errors))
        return CalculationOutcome(errors=errors)

    try:
        base = to_base_inputs(st, raw_inputs, units or {}, system)
        result = evaluate(st, base, stress_unit(system))
    except Exception:
        logger.exception("Calculation failed for %s stress (system=%s, units=%s)", st.value, system, dict(units or {}))
        return CalculationOutcome(errors=[ValidationError(CALCULATION_FIELD, CALCULATION_ERROR_MESSAGE)])

    logger.debug("%s stress = %r %s", st.value, result.value, result.unit)
    return CalculationOutcome(result=result)
