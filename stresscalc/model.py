from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from stresscalc.units import Quantity

class StressType(str, Enum):
    NORMAL = "normal"
    SHEAR = "shear"
    BENDING = "bending"
    TORSIONAL = "torsional"
    THERMAL = "thermal"

@dataclass(frozen=True)
class FieldSpec:
    name: str                       # input key, also the key in StressResult.inputs
    label: str                      # human label used in messages
    quantity: Optional[Quantity]    # None: entered directly in base units
    positive: bool = True           # False: any finite number accepted

FIELD_SPECS: Dict[StressType, Tuple[FieldSpec, ...]] = {
    StressType.NORMAL: (
        FieldSpec("force", "Force", Quantity.FORCE),
        FieldSpec("area", "Area", Quantity.AREA),
    ),
    StressType.SHEAR: (
        FieldSpec("shearForce", "Shear Force", Quantity.FORCE),
        FieldSpec("area", "Area", Quantity.AREA),
    ),
    StressType.BENDING: (
        FieldSpec("moment", "Bending Moment", Quantity.MOMENT),
        FieldSpec("distance", "Distance from Neutral Axis", Quantity.LENGTH),
        FieldSpec("momentOfInertia", "Moment of Inertia", Quantity.INERTIA),
    ),
    StressType.TORSIONAL: (
        FieldSpec("torque", "Torque", Quantity.MOMENT),
        FieldSpec("radius", "Radius", Quantity.LENGTH),
        FieldSpec("polarMomentOfInertia", "Polar Moment of Inertia", Quantity.INERTIA),
    ),
    StressType.THERMAL: (
        # E in the base stress unit (Pa / psi), alpha per degree
        FieldSpec("elasticModulus", "Elastic Modulus", None),
        FieldSpec("thermalExpansion", "Thermal Expansion Coefficient", None),
        FieldSpec("temperatureChange", "Temperature Change", Quantity.TEMPERATURE, positive=False),
    ),
}

def field_specs(stress_type) -> Tuple[FieldSpec, ...]:
    return FIELD_SPECS[StressType(stress_type)]

def required_fields(stress_type) -> List[str]:
    return [f.name for f in field_specs(stress_type)]
