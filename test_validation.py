from stresscalc.model import StressType, required_fields
from stresscalc.validation import (
    ValidationError, validate, validate_range, validate_required_fields, is_empty, errors_by_field,
)

VALID = {
    StressType.NORMAL: {"force": "1000", "area": "10"},
    StressType.SHEAR: {"shearForce": "500", "area": "2.5"},
    StressType.BENDING: {"moment": "10", "distance": "0.05", "momentOfInertia": "1e-6"},
    StressType.TORSIONAL: {"torque": "20", "radius": "0.02", "polarMomentOfInertia": "2.5e-7"},
    StressType.THERMAL: {"elasticModulus": "200e9", "thermalExpansion": "1.2e-5", "temperatureChange": "50"},
}

def test_valid_inputs_have_no_errors():
    for st, inputs in VALID.items():
        assert validate(st, inputs) == []

def test_all_empty_gives_one_error_per_field():
    for st in StressType:
        errors = validate(st, {})
        assert [e.field for e in errors] == required_fields(st)
        assert all(e.message.endswith("must be a valid number") for e in errors)

def test_whitespace_is_not_a_number():
    errors = validate(StressType.NORMAL, {"force": "   ", "area": "1"})
    assert errors == [ValidationError("force", "Force must be a valid number")]

def test_non_finite_is_not_a_number():
    for bad in ("nan", "inf", "-inf", "abc", "1,5"):
        errors = validate(StressType.NORMAL, {"force": bad, "area": "1"})
        assert [e.field for e in errors] == ["force"]

def test_positivity_enforced_per_field():
    for st, inputs in VALID.items():
        for name in required_fields(st):
            if name == "temperatureChange":
                continue
            for bad in ("0", "-5"):
                errors = validate(st, {**inputs, name: bad})
                assert len(errors) == 1
                assert errors[0].field == name
                assert errors[0].message.endswith("must be greater than zero")

def test_temperature_change_accepts_zero_and_negative():
    for t in ("0", "-30", " -1.5e2 "):
        assert validate(StressType.THERMAL, {**VALID[StressType.THERMAL], "temperatureChange": t}) == []
    errors = validate(StressType.THERMAL, {**VALID[StressType.THERMAL], "temperatureChange": "x"})
    assert errors == [ValidationError("temperatureChange", "Temperature Change must be a valid number")]

def test_not_fail_fast():
    errors = validate(StressType.BENDING, {"moment": "-1", "distance": "", "momentOfInertia": "0"})
    assert [(e.field, e.message) for e in errors] == [
        ("moment", "Bending Moment must be greater than zero"),
        ("distance", "Distance from Neutral Axis must be a valid number"),
        ("momentOfInertia", "Moment of Inertia must be greater than zero"),
    ]

def test_range_and_required_helpers():
    assert validate_range("5", "x", 0, 10) is None
    assert validate_range("11", "x", 0, 10, label="X").message == "X must be between 0 and 10"
    assert is_empty("  ") and is_empty("") and not is_empty("0")
    errors = validate_required_fields({"a": "1", "b": " "}, ["a", "b", "c"])
    assert [e.message for e in errors] == ["b is required", "c is required"]

def test_errors_by_field_keeps_first():
    errs = [ValidationError("a", "one"), ValidationError("a", "two"), ValidationError("b", "three")]
    assert errors_by_field(errs) == {"a": "one", "b": "three"}

def test_digit_separators_rejected():
    errors = validate(StressType.NORMAL, {"force": "1_000", "area": "1"})
    assert errors == [ValidationError("force", "Force must be a valid number")]
