"""
McDRAG Projectile Drag Estimator
================================
Semi-empirical zero-yaw drag coefficient of axisymmetric projectiles
(bullets and shells) versus Mach number, following McCoy's McDRAG
program. Total drag is the sum of:
  - Head (nose wave) drag
  - Skin friction
  - Rotating band drag
  - Boattail drag
  - Base drag

Includes a reference round and a validation routine against the
published McDRAG sample output.
"""

from .geometry import (
    BoundaryLayer, ProjectileGeometry,
    PRESET_GEOMETRIES, REFERENCE_5_56MM,
)
from .drag_model import (
    DragModel, DragComponents, clamp_mach,
    MACH_MIN, MACH_MAX,
)
from .validation import (
    validate_against_reference, run_all_validations,
    ValidationResult, REFERENCE_FIG26,
)

__version__ = "1.0.0"
__all__ = [
    'BoundaryLayer', 'ProjectileGeometry',
    'PRESET_GEOMETRIES', 'REFERENCE_5_56MM',
    'DragModel', 'DragComponents', 'clamp_mach',
    'MACH_MIN', 'MACH_MAX',
    'validate_against_reference', 'run_all_validations',
    'ValidationResult', 'REFERENCE_FIG26',
]
