import numpy as np
from stresscalc.units import UnitSystem, Quantity, convert_from_base, unit_options
from stresscalc.model import StressType
from stresscalc.formulas import format_stress_value
from stresscalc.calculator import calculate, default_units, CALCULATION_FIELD, CALCULATION_ERROR_MESSAGE

def test_normal_end_to_end():
    out = calculate(StressType.NORMAL, {"force": "1000", "area": "10"}, {"force": "N", "area": "mm²"}, UnitSystem.METRIC)
    assert out.ok
    assert np.isclose(out.result.value, 1e8, rtol=1e-12)
    assert np.isclose(out.result.inputs["area"], 1e-5, rtol=1e-12)
    assert format_stress_value(out.result.value, out.result.unit) == "100.000 MPa"

def test_thermal_end_to_end():
    raw = {"elasticModulus": "200000000000", "thermalExpansion": "1.2e-5", "temperatureChange": "50"}
    out = calculate("thermal", raw, {"temperatureChange": "°C"}, "metric")
    assert out.ok
    assert format_stress_value(out.result.value, out.result.unit) == "120.000 MPa"

def test_imperial_uses_psi():
    out = calculate(StressType.SHEAR, {"shearForce": "2", "area": "1"}, {"shearForce": "kip", "area": "in²"}, UnitSystem.IMPERIAL)
    assert out.result.unit == "psi"
    assert out.result.value == 2000.0

def test_validation_blocks_evaluation():
    out = calculate(StressType.NORMAL, {"force": "-1", "area": ""}, {}, UnitSystem.METRIC)
    assert not out.ok
    assert out.result is None
    assert [e.field for e in out.errors] == ["force", "area"]

def test_unknown_unit_becomes_calculation_error():
    out = calculate(StressType.NORMAL, {"force": "1", "area": "1"}, {"force": "lbf"}, UnitSystem.METRIC)
    assert out.result is None
    assert len(out.errors) == 1
    assert out.errors[0].field == CALCULATION_FIELD
    assert out.errors[0].message == CALCULATION_ERROR_MESSAGE

def test_missing_units_default_to_first_option():
    assert default_units(StressType.BENDING, UnitSystem.METRIC) == {"moment": "N⋅mm", "distance": "mm", "momentOfInertia": "mm⁴"}
    out = calculate(StressType.NORMAL, {"force": "1", "area": "1"}, None, UnitSystem.METRIC)
    assert np.isclose(out.result.value, 1e6, rtol=1e-12)

def test_result_independent_of_unit_choice():
    # same physical bending case expressed in every unit combination
    base = {"moment": 1500.0, "distance": 0.04, "momentOfInertia": 3.2e-6}
    qty = {"moment": Quantity.MOMENT, "distance": Quantity.LENGTH, "momentOfInertia": Quantity.INERTIA}
    expected = 1500.0 * 0.04 / 3.2e-6
    for mu in unit_options(UnitSystem.METRIC, Quantity.MOMENT):
        for lu in unit_options(UnitSystem.METRIC, Quantity.LENGTH):
            for iu in unit_options(UnitSystem.METRIC, Quantity.INERTIA):
                units = {"moment": mu, "distance": lu, "momentOfInertia": iu}
                raw = {k: repr(convert_from_base(qty[k], v, units[k], UnitSystem.METRIC)) for k, v in base.items()}
                out = calculate(StressType.BENDING, raw, units, UnitSystem.METRIC)
                assert np.isclose(out.result.value, expected, rtol=1e-9)

def test_fahrenheit_and_rankine_agree():
    raw_f = {"elasticModulus": "29e6", "thermalExpansion": "6.5e-6", "temperatureChange": "90"}
    raw_r = {**raw_f, "temperatureChange": "50"}
    a = calculate(StressType.THERMAL, raw_f, {"temperatureChange": "°F"}, UnitSystem.IMPERIAL)
    b = calculate(StressType.THERMAL, raw_r, {"temperatureChange": "°R"}, UnitSystem.IMPERIAL)
    assert np.isclose(a.result.value, b.result.value, rtol=1e-12)
