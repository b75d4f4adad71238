from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Mapping, Union
import logging
import math
import numpy as np

from stresscalc.model import StressType

logger = logging.getLogger(__name__)

class _InputRecord:
    """camelCase field name <-> value mapping shared by the input records."""

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]):
        names = [f.name for f in fields(cls)]
        missing = [n for n in names if n not in values]
        if missing:
            raise ValueError(f"Missing inputs for {cls.__name__}: {', '.join(missing)}")
        return cls(**{n: float(values[n]) for n in names})

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

@dataclass(frozen=True)
class NormalStressInputs(_InputRecord):
    force: float
    area: float

@dataclass(frozen=True)
class ShearStressInputs(_InputRecord):
    shearForce: float
    area: float

@dataclass(frozen=True)
class BendingStressInputs(_InputRecord):
    moment: float
    distance: float
    momentOfInertia: float

@dataclass(frozen=True)
class TorsionalStressInputs(_InputRecord):
    torque: float
    radius: float
    polarMomentOfInertia: float

@dataclass(frozen=True)
class ThermalStressInputs(_InputRecord):
    elasticModulus: float
    thermalExpansion: float
    temperatureChange: float

StressInputs = Union[
    NormalStressInputs,
    ShearStressInputs,
    BendingStressInputs,
    TorsionalStressInputs,
    ThermalStressInputs,
]

INPUT_TYPES = {
    StressType.NORMAL: NormalStressInputs,
    StressType.SHEAR: ShearStressInputs,
    StressType.BENDING: BendingStressInputs,
    StressType.TORSIONAL: TorsionalStressInputs,
    StressType.THERMAL: ThermalStressInputs,
}

FORMULAS: Dict[StressType, str] = {
    StressType.NORMAL: "σ = F/A",
    StressType.SHEAR: "τ = F/A",
    StressType.BENDING: "σ = M×y/I",
    StressType.TORSIONAL: "τ = T×r/J",
    StressType.THERMAL: "σ = E×α×ΔT",
}

_EXPLANATIONS: Dict[StressType, str] = {
    StressType.NORMAL: "Normal stress equals force divided by cross-sectional area",
    StressType.SHEAR: "Shear stress equals shear force divided by cross-sectional area",
    StressType.BENDING: "Bending stress equals moment times distance from neutral axis divided by moment of inertia",
    StressType.TORSIONAL: "Torsional stress equals torque times radius divided by polar moment of inertia",
    StressType.THERMAL: "Thermal stress equals elastic modulus times thermal expansion coefficient times temperature change",
}

@dataclass(frozen=True)
class StressResult:
    value: float
    unit: str
    formula: str
    inputs: Dict[str, float]

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self.value))

def _div(num: float, den: float) -> float:
    # IEEE semantics: x/0 -> inf, 0/0 -> nan, no exception
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(num), np.float64(den)))

def _result(stress_type: StressType, value: float, unit: str, inputs: StressInputs) -> StressResult:
    return StressResult(value=value, unit=unit, formula=FORMULAS[stress_type], inputs=inputs.as_dict())

def calculate_normal_stress(inputs: NormalStressInputs, unit: str) -> StressResult:
    return _result(StressType.NORMAL, _div(inputs.force, inputs.area), unit, inputs)

def calculate_shear_stress(inputs: ShearStressInputs, unit: str) -> StressResult:
    return _result(StressType.SHEAR, _div(inputs.shearForce, inputs.area), unit, inputs)

def calculate_bending_stress(inputs: BendingStressInputs, unit: str) -> StressResult:
    return _result(StressType.BENDING, _div(inputs.moment * inputs.distance, inputs.momentOfInertia), unit, inputs)

def calculate_torsional_stress(inputs: TorsionalStressInputs, unit: str) -> StressResult:
    return _result(StressType.TORSIONAL, _div(inputs.torque * inputs.radius, inputs.polarMomentOfInertia), unit, inputs)

def calculate_thermal_stress(inputs: ThermalStressInputs, unit: str) -> StressResult:
    value = inputs.elasticModulus * inputs.thermalExpansion * inputs.temperatureChange
    return _result(StressType.THERMAL, float(value), unit, inputs)

_CALCULATORS = {
    StressType.NORMAL: calculate_normal_stress,
    StressType.SHEAR: calculate_shear_stress,
    StressType.BENDING: calculate_bending_stress,
    StressType.TORSIONAL: calculate_torsional_stress,
    StressType.THERMAL: calculate_thermal_stress,
}

def evaluate(stress_type, inputs: Union[StressInputs, Mapping[str, float]], unit: str) -> StressResult:
    """Apply the closed-form formula of a stress type to base-unit inputs.

    No positivity re-check is done here: a zero area or inertia yields inf/nan
    in StressResult.value rather than an exception.
    """
    st = StressType(stress_type)
    if isinstance(inputs, Mapping):
        inputs = INPUT_TYPES[st].from_mapping(inputs)
    elif not isinstance(inputs, INPUT_TYPES[st]):
        raise ValueError(f"{type(inputs).__name__} cannot be evaluated as {st.value} stress.")
    res = _CALCULATORS[st](inputs, unit)
    if not res.is_finite:
        logger.warning("Degenerate %s stress inputs %s -> %r", st.value, res.inputs, res.value)
    return res

def formula_explanation(stress_type) -> str:
    st = StressType(stress_type)
    return f"{FORMULAS[st]} - {_EXPLANATIONS[st]}"

_THOUSANDTH = Decimal("0.001")

def _fixed3(x: float) -> str:
    """Three decimals, exact ties rounded away from zero (not to even)."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if abs(x) >= 1e21:
        return repr(x)
    if x == 0:
        x = 0.0  # no "-0.000"
    return str(Decimal(x).quantize(_THOUSANDTH, rounding=ROUND_HALF_UP))

def format_stress_value(value: float, unit: str) -> str:
    """Scale by the largest of G/M/k that fits, always 3 decimals."""
    a = abs(value)
    if a >= 1e9:
        return f"{_fixed3(value / 1e9)} G{unit}"
    if a >= 1e6:
        return f"{_fixed3(value / 1e6)} M{unit}"
    if a >= 1e3:
        return f"{_fixed3(value / 1e3)} k{unit}"
    return f"{_fixed3(value)} {unit}"

def format_number(value: float) -> str:
    a = abs(value)
    if a >= 1e6:
        return f"{value:.3e}"
    if a >= 1000:
        return f"{value:.1f}"
    if a >= 1:
        return f"{value:.3f}"
    return f"{value:.3e}"
