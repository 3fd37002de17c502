"""
Validation Against Published Data
===================================
Compares McDRAG output against the drag tables published with the
original program:
  - McCoy, R.L. "MC DRAG - A Computer Program for Estimating the Drag
    Coefficients of Projectiles", BRL-MR-02977 (1981), Fig. 26

Standard reference projectile:
  - 5.56mm ball (ogive + boat-tail)
  - Diameter: 5.7 mm, length 5.48 cal, nose 3.0 cal, boattail 1.0 cal
  - Boundary layer: laminar nose, turbulent afterbody

The published table gives CD0 to three decimals, so a point matches when
the model value rounded half-up to three decimals equals the table.
"""

import math

import numpy as np
from dataclasses import dataclass
from typing import Dict, List

from .drag_model import DragModel
from .geometry import REFERENCE_5_56MM


# ══════════════════════════════════════════════════════════════════════════
#  Reference data: McDRAG sample output (McCoy 1981, Fig. 26)
# ══════════════════════════════════════════════════════════════════════════

REFERENCE_FIG26 = {
    'name': '5.56mm Ball (McDRAG Fig. 26)',
    'geometry': REFERENCE_5_56MM,
    'table': [
        # (Mach, CD0)
        (0.5,   0.112),
        (0.6,   0.111),
        (0.7,   0.111),
        (0.8,   0.112),
        (0.85,  0.113),
        (0.9,   0.118),
        (0.925, 0.135),
        (0.95,  0.158),
        (0.975, 0.198),
        (1.0,   0.281),
        (1.1,   0.313),
        (1.2,   0.316),
        (1.3,   0.308),
        (1.4,   0.297),
        (1.5,   0.286),
        (1.6,   0.276),
        (1.7,   0.267),
        (1.8,   0.258),
        (2.0,   0.242),
        (2.2,   0.228),
        (2.5,   0.209),
        (3.0,   0.183),
        (3.5,   0.162),
        (4.0,   0.145),
    ],
}

ALL_REFERENCES = [REFERENCE_FIG26]


def round_half_up(value: float, decimals: int = 3) -> float:
    """Round to a fixed number of decimals, ties away from zero."""
    scale = 10 ** decimals
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


@dataclass
class ValidationResult:
    """Result of one validation comparison."""
    mach: float
    ref_cd: float       # published CD0
    model_cd: float     # McDRAG CD0
    rounded_cd: float   # model CD0 at the table's precision
    abs_error: float
    error_pct: float    # % error

    @property
    def matches(self) -> bool:
        return self.rounded_cd == self.ref_cd


def validate_against_reference(reference: dict,
                               verbose: bool = True) -> List[ValidationResult]:
    """
    Evaluate the model at each tabulated Mach number and compare
    against the published reference data.

    Returns list of ValidationResult for each Mach number.
    """
    model = DragModel(reference['geometry'])

    results = []

    if verbose:
        geometry = reference['geometry']
        print(f"\n{'='*60}")
        print(f"  VALIDATION: {reference['name']}")
        print(f"  Diameter: {geometry.reference_diameter} mm | "
              f"Length: {geometry.body_length} cal | "
              f"BL: {model.boundary_layer.value}")
        print(f"{'='*60}")
        print(f"{'Mach':>6} {'Ref CD0':>9} {'Model CD0':>10} {'Rounded':>9} "
              f"{'Err %':>7} {'':>3}")
        print("-" * 60)

    for mach, ref_cd in reference['table']:
        cd = model.coefficient(mach)
        rounded = round_half_up(cd, 3)

        vr = ValidationResult(
            mach=mach,
            ref_cd=ref_cd,
            model_cd=cd,
            rounded_cd=rounded,
            abs_error=abs(cd - ref_cd),
            error_pct=100.0 * (cd - ref_cd) / ref_cd,
        )
        results.append(vr)

        if verbose:
            flag = "ok" if vr.matches else "!!"
            print(f"{mach:>6.3f} {ref_cd:>9.3f} {cd:>10.5f} {rounded:>9.3f} "
                  f"{vr.error_pct:>+7.2f} {flag:>3}")

    if verbose:
        mean_err = np.mean([abs(r.error_pct) for r in results])
        n_match = sum(r.matches for r in results)
        print("-" * 60)
        print(f"  Mean absolute error: {mean_err:.2f}% | "
              f"Matching points: {n_match}/{len(results)}")
        status = "✓ PASS" if n_match == len(results) else "✗ MISMATCH"
        print(f"  Status: {status}")
        print(f"{'='*60}\n")

    return results


def run_all_validations(verbose: bool = True) -> Dict[str, List[ValidationResult]]:
    """Run validation against all available reference datasets."""
    all_results = {}
    for ref_data in ALL_REFERENCES:
        results = validate_against_reference(ref_data, verbose=verbose)
        all_results[ref_data['name']] = results
    return all_results


if __name__ == "__main__":
    run_all_validations(verbose=True)
