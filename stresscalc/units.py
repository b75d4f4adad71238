from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)

class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

class Quantity(str, Enum):
    STRESS = "stress"
    FORCE = "force"
    AREA = "area"
    LENGTH = "length"
    MOMENT = "moment"
    INERTIA = "inertia"
    TEMPERATURE = "temperature"  # temperature change, never an absolute point

class UnknownUnitError(ValueError):
    pass

SYSTEM_NAMES: Dict[UnitSystem, str] = {
    UnitSystem.METRIC: "Metric (SI)",
    UnitSystem.IMPERIAL: "Imperial (US)",
}

# Multiplier to the base unit of each quantity, listed in display order.
# Base units: metric N, m², m, N⋅m, m⁴, K; imperial lbf, in², in, lbf⋅in, in⁴, °R.
_TABLES: Dict[UnitSystem, Dict[Quantity, List[Tuple[str, float]]]] = {
    UnitSystem.METRIC: {
        Quantity.STRESS: [("Pa", 1.0), ("kPa", 1e3), ("MPa", 1e6), ("GPa", 1e9)],
        Quantity.FORCE: [("N", 1.0), ("kN", 1e3), ("MN", 1e6)],
        Quantity.AREA: [("mm²", 1e-6), ("cm²", 1e-4), ("m²", 1.0)],
        Quantity.LENGTH: [("mm", 1e-3), ("cm", 1e-2), ("m", 1.0)],
        Quantity.MOMENT: [("N⋅mm", 1e-3), ("N⋅cm", 1e-2), ("N⋅m", 1.0), ("kN⋅m", 1e3)],
        Quantity.INERTIA: [("mm⁴", 1e-12), ("cm⁴", 1e-8), ("m⁴", 1.0)],
        Quantity.TEMPERATURE: [("°C", 1.0), ("K", 1.0)],
    },
    UnitSystem.IMPERIAL: {
        Quantity.STRESS: [("psi", 1.0), ("ksi", 1e3), ("Msi", 1e6)],
        Quantity.FORCE: [("lbf", 1.0), ("kip", 1000.0)],
        Quantity.AREA: [("in²", 1.0), ("ft²", 144.0)],
        Quantity.LENGTH: [("in", 1.0), ("ft", 12.0)],
        Quantity.MOMENT: [("lbf⋅in", 1.0), ("lbf⋅ft", 12.0), ("kip⋅in", 1000.0), ("kip⋅ft", 12000.0)],
        Quantity.INERTIA: [("in⁴", 1.0), ("ft⁴", 20736.0)],
        # slope only: a 1 °F change is a 5/9 K change, no 459.67 offset
        Quantity.TEMPERATURE: [("°F", 5.0 / 9.0), ("°R", 1.0)],
    },
}

_BASE_UNITS: Dict[UnitSystem, Dict[Quantity, str]] = {
    UnitSystem.METRIC: {
        Quantity.STRESS: "Pa",
        Quantity.FORCE: "N",
        Quantity.AREA: "m²",
        Quantity.LENGTH: "m",
        Quantity.MOMENT: "N⋅m",
        Quantity.INERTIA: "m⁴",
        Quantity.TEMPERATURE: "K",
    },
    UnitSystem.IMPERIAL: {
        Quantity.STRESS: "psi",
        Quantity.FORCE: "lbf",
        Quantity.AREA: "in²",
        Quantity.LENGTH: "in",
        Quantity.MOMENT: "lbf⋅in",
        Quantity.INERTIA: "in⁴",
        Quantity.TEMPERATURE: "°R",
    },
}

# metric base -> imperial base, one factor per quantity
PA_PER_PSI = 6894.76
N_PER_LBF = 4.448
IN2_PER_M2 = 1550.0
IN_PER_M = 39.37

@dataclass(frozen=True)
class Units:
    system: UnitSystem

    @property
    def name(self) -> str:
        return SYSTEM_NAMES[self.system]

    @property
    def force(self) -> str:
        return base_unit(self.system, Quantity.FORCE)

    @property
    def area(self) -> str:
        return base_unit(self.system, Quantity.AREA)

    @property
    def length(self) -> str:
        return base_unit(self.system, Quantity.LENGTH)

    @property
    def moment(self) -> str:
        return base_unit(self.system, Quantity.MOMENT)

    @property
    def inertia(self) -> str:
        return base_unit(self.system, Quantity.INERTIA)

    @property
    def temperature(self) -> str:
        return base_unit(self.system, Quantity.TEMPERATURE)

    @property
    def stress(self) -> str:
        return stress_unit(self.system)

def _table(system, quantity) -> List[Tuple[str, float]]:
    try:
        return _TABLES[UnitSystem(system)][Quantity(quantity)]
    except ValueError:
        raise UnknownUnitError(f"Unknown unit system or quantity: {system!r}, {quantity!r}") from None

def _multiplier(quantity, unit: str, system) -> float:
    for token, factor in _table(system, quantity):
        if token == unit:
            return factor
    raise UnknownUnitError(f"Unknown {Quantity(quantity).value} unit for {UnitSystem(system).value}: {unit!r}")

def unit_options(system, quantity) -> List[str]:
    """Unit tokens for a quantity in display order (first is the usual choice)."""
    return [token for token, _ in _table(system, quantity)]

def base_unit(system, quantity) -> str:
    _table(system, quantity)
    return _BASE_UNITS[UnitSystem(system)][Quantity(quantity)]

def stress_unit(system) -> str:
    return base_unit(system, Quantity.STRESS)

def convert_to_base(quantity, value: float, unit: str, system) -> float:
    """Linear conversion value_base = value * multiplier.

    Stress is an output quantity only and is rejected here.
    """
    if quantity == Quantity.STRESS:
        raise ValueError("Stress is a derived quantity and is not converted as an input.")
    out = float(value) * _multiplier(quantity, unit, system)
    logger.debug("convert_to_base %s %r %s -> %r", Quantity(quantity).value, value, unit, out)
    return out

def convert_from_base(quantity, value: float, unit: str, system) -> float:
    if quantity == Quantity.STRESS:
        raise ValueError("Stress is a derived quantity and is not converted as an input.")
    return float(value) / _multiplier(quantity, unit, system)

_BETWEEN_SYSTEMS: Dict[Quantity, float] = {
    Quantity.STRESS: 1.0 / PA_PER_PSI,
    Quantity.FORCE: 1.0 / N_PER_LBF,
    Quantity.AREA: IN2_PER_M2,
    Quantity.LENGTH: IN_PER_M,
}

def convert_between_systems(value: float, src, dst, quantity) -> float:
    """Base unit of one system -> base unit of the other (display/comparison only)."""
    src = UnitSystem(src)
    dst = UnitSystem(dst)
    if src == dst:
        return float(value)
    try:
        f = _BETWEEN_SYSTEMS[Quantity(quantity)]
    except (KeyError, ValueError):
        raise ValueError("Unsupported unit conversion.") from None
    if src == UnitSystem.METRIC:
        return float(value) * f
    return float(value) / f
