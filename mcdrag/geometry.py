"""
Projectile Geometry
===================
Geometric descriptor consumed by the McDRAG drag model.

All lengths are in calibers (multiples of the reference diameter) and all
diameters except the reference diameter are ratios to it:

  reference_diameter : body diameter (mm)
  body_length        : total length, nose tip to base
  nose_length        : ogive / nose section length
  head_shape         : RT/R headshape parameter (0 = tangent ogive,
                       1 = cone)
  boattail_length    : boattail taper length (0 = flat base)
  base_diameter      : base diameter / reference diameter
  meplat_diameter    : flat nose-tip diameter / reference diameter
  band_diameter      : rotating band diameter / reference diameter
  cg_location        : centre of gravity from the nose (informational)

Geometry is NOT validated on construction. A nonsensical descriptor (for
example a zero nose length) is accepted and silently degrades the drag
estimate instead of raising.

Reference: McCoy, R.L. "MC DRAG - A Computer Program for Estimating the
Drag Coefficients of Projectiles", BRL-MR-02977 (1981)
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Union


class BoundaryLayer(Enum):
    """
    Boundary-layer assumption over the nose and the afterbody.

    The value is the McDRAG input code (nose/afterbody).
    """
    LAMINAR_LAMINAR = 'L/L'
    LAMINAR_TURBULENT = 'L/T'
    TURBULENT_TURBULENT = 'T/T'

    @classmethod
    def from_code(cls, code: Union[str, 'BoundaryLayer']) -> 'BoundaryLayer':
        """
        Parse a McDRAG boundary-layer code such as 'L/T' or 'tt'.

        Raises
        ------
        ValueError
            If the code is not one of L/L, L/T or T/T.
        """
        if isinstance(code, cls):
            return code

        normalized = str(code).strip().upper().replace('/', '')
        for member in cls:
            if member.value.replace('/', '') == normalized:
                return member

        raise ValueError(
            f"Unknown boundary layer code '{code}'. "
            f"Available: {[member.value for member in cls]}"
        )


@dataclass(frozen=True)
class ProjectileGeometry:
    """
    Immutable McDRAG projectile description.
    """
    reference_diameter: float    # mm
    body_length: float           # calibers
    nose_length: float           # calibers
    head_shape: float            # RT/R
    boattail_length: float       # calibers
    base_diameter: float         # ratio to reference diameter
    meplat_diameter: float       # ratio to reference diameter
    band_diameter: float         # ratio to reference diameter
    cg_location: float           # calibers from nose
    boundary_layer: BoundaryLayer

    @property
    def afterbody_length(self) -> float:
        """Length behind the nose (cylinder + boattail), calibers."""
        return self.body_length - self.nose_length

    @property
    def cylinder_length(self) -> float:
        """Parallel body length between nose and boattail, calibers."""
        return self.body_length - self.nose_length - self.boattail_length

    @property
    def reference_area(self) -> float:
        """Cross-sectional reference area (mm²)."""
        return np.pi * (self.reference_diameter / 2) ** 2


# ══════════════════════════════════════════════════════════════════════════
#  Reference rounds
# ══════════════════════════════════════════════════════════════════════════

# 5.56mm ball round used for the worked example in McCoy (1981), Fig. 26
REFERENCE_5_56MM = ProjectileGeometry(
    reference_diameter=5.7,
    body_length=5.48,
    nose_length=3.0,
    head_shape=0.5,
    boattail_length=1.0,
    base_diameter=0.754,
    meplat_diameter=0.0,
    band_diameter=1.0,
    cg_location=3.34,
    boundary_layer=BoundaryLayer.LAMINAR_TURBULENT,
)

PRESET_GEOMETRIES = {
    'reference_5_56mm': REFERENCE_5_56MM,
}
