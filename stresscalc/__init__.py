from stresscalc.units import (
    UnitSystem,
    Quantity,
    Units,
    UnknownUnitError,
    unit_options,
    base_unit,
    stress_unit,
    convert_to_base,
    convert_from_base,
    convert_between_systems,
)
from stresscalc.model import StressType, FieldSpec, field_specs, required_fields
from stresscalc.validation import ValidationError, validate
from stresscalc.formulas import StressResult, evaluate, format_stress_value, formula_explanation
from stresscalc.calculator import CalculationOutcome, calculate, default_units

__all__ = [
    "UnitSystem",
    "Quantity",
    "Units",
    "UnknownUnitError",
    "unit_options",
    "base_unit",
    "stress_unit",
    "convert_to_base",
    "convert_from_base",
    "convert_between_systems",
    "StressType",
    "FieldSpec",
    "field_specs",
    "required_fields",
    "ValidationError",
    "validate",
    "StressResult",
    "evaluate",
    "format_stress_value",
    "formula_explanation",
    "CalculationOutcome",
    "calculate",
    "default_units",
]
