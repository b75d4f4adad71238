from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
import math

from stresscalc.model import StressType, field_specs

@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str

def parse_number(value: Optional[str]) -> Optional[float]:
    """Finite float from a raw input string, or None."""
    if value is None:
        return None
    text = str(value).strip()
    if "_" in text:
        return None  # float() accepts digit separators, user input does not
    try:
        num = float(text)
    except ValueError:
        return None
    if not math.isfinite(num):
        return None
    return num

def validate_positive_number(value: Optional[str], field: str, label: Optional[str] = None) -> Optional[ValidationError]:
    label = label or field
    num = parse_number(value)
    if num is None:
        return ValidationError(field, f"{label} must be a valid number")
    if num <= 0:
        return ValidationError(field, f"{label} must be greater than zero")
    return None

def validate_number(value: Optional[str], field: str, label: Optional[str] = None) -> Optional[ValidationError]:
    """Any finite number, zero and negatives included (temperature changes)."""
    if parse_number(value) is None:
        return ValidationError(field, f"{label or field} must be a valid number")
    return None

def validate_range(value: Optional[str], field: str, lo: float, hi: float, label: Optional[str] = None) -> Optional[ValidationError]:
    label = label or field
    num = parse_number(value)
    if num is None:
        return ValidationError(field, f"{label} must be a valid number")
    if num < lo or num > hi:
        return ValidationError(field, f"{label} must be between {lo:g} and {hi:g}")
    return None

def is_empty(value: Optional[str]) -> bool:
    return not value or not value.strip()

def validate_required_fields(inputs: Mapping[str, str], fields: List[str]) -> List[ValidationError]:
    """Plain presence check; not used by the stress validators."""
    return [ValidationError(f, f"{f} is required") for f in fields if is_empty(inputs.get(f))]

def validate(stress_type, raw_inputs: Mapping[str, str]) -> List[ValidationError]:
    """Check every required field of the stress type and return all failures.

    An empty list means the inputs may be converted and evaluated.
    """
    errors: List[ValidationError] = []
    for spec in field_specs(stress_type):
        raw = raw_inputs.get(spec.name)
        if spec.positive:
            err = validate_positive_number(raw, spec.name, spec.label)
        else:
            err = validate_number(raw, spec.name, spec.label)
        if err is not None:
            errors.append(err)
    return errors

def errors_by_field(errors: List[ValidationError]) -> Dict[str, str]:
    """First message per field, for rendering next to the widget."""
    out: Dict[str, str] = {}
    for e in errors:
        out.setdefault(e.field, e.message)
    return out
