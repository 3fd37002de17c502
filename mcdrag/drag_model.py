"""
McDRAG Drag Model
=================
Zero-yaw drag coefficient (Cd) of an axisymmetric projectile as a function
of Mach number, from the semi-empirical McDRAG correlations.

The total drag is built from five components:
  - Head (nose wave) drag        CDH   (c2)
  - Skin friction drag           CDSF  (c3)
  - Rotating band drag           CDBND (c4)
  - Boattail drag                CDBT  (c5)
  - Base drag                    CDB   (c6)

Each component is a closed-form fit with branches at fixed Mach numbers
(0.85, 0.91, 0.95, 1.0, 1.1, 1.41). The fits are only validated for
Mach 0.5–5.0, so `coefficient` clamps into that range while
`raw_coefficient` extrapolates.

Non-finite component values (zero nose length, a negative base raised to
a fractional power, ...) are replaced by zero before summation. Malformed
geometry therefore degrades the estimate silently instead of raising.

Reference: McCoy, R.L. "MC DRAG - A Computer Program for Estimating the
Drag Coefficients of Projectiles", BRL-MR-02977 (1981)
"""

import logging

import numpy as np
from dataclasses import dataclass

from .geometry import BoundaryLayer, ProjectileGeometry, PRESET_GEOMETRIES


logger = logging.getLogger(__name__)


# ── Validated Mach range ──────────────────────────────────────────────────
MACH_MIN = 0.5
MACH_MAX = 5.0


def clamp_mach(mach: float) -> float:
    """Restrict a Mach number to the validated range [MACH_MIN, MACH_MAX]."""
    return min(max(mach, MACH_MIN), MACH_MAX)


@dataclass(frozen=True)
class DragComponents:
    """Drag breakdown at one Mach number (all values already sanitized)."""
    mach: float
    head: float                  # CDH, nose wave drag
    skin_friction: float         # CDSF
    band: float                  # CDBND, rotating band
    boattail: float              # CDBT
    base: float                  # CDB
    base_pressure_ratio: float   # PB/P (raw, may be non-finite)
    total: float                 # CD0


def _sanitize(name: str, value, mach) -> float:
    if np.isfinite(value):
        return float(value)
    logger.debug("%s drag is non-finite (%r) at Mach %r, using 0.0",
                 name, value, float(mach))
    return 0.0


def _boattail_taper(t2, l3):
    """Conical boattail term shared by the subsonic and low-supersonic fits."""
    t3 = 2.0 * t2 * t2 + t2 * t2 * t2
    e1 = np.exp(-2.0 * l3)
    b4 = 1.0 - e1 + 2.0 * t2 * (e1 * (l3 + 0.5) - 0.5)
    return 2.0 * t3 * b4


# ══════════════════════════════════════════════════════════════════════════
#  Drag model
# ══════════════════════════════════════════════════════════════════════════

class DragModel:
    """
    McDRAG drag coefficient model for a fixed projectile geometry.

    The model is stateless: every evaluation is a pure function of the
    geometry and the Mach number, so one instance can be shared freely.
    """

    def __init__(self, geometry: ProjectileGeometry):
        """
        Parameters
        ----------
        geometry : ProjectileGeometry
            Projectile description. Not validated.
        """
        self._geometry = geometry
        self._boundary_layer = BoundaryLayer.from_code(geometry.boundary_layer)

    @property
    def geometry(self) -> ProjectileGeometry:
        return self._geometry

    @property
    def boundary_layer(self) -> BoundaryLayer:
        """Boundary layer resolved from the geometry (codes accepted)."""
        return self._boundary_layer

    @classmethod
    def from_preset(cls, key: str) -> 'DragModel':
        """Build a model for one of the PRESET_GEOMETRIES reference rounds."""
        if key not in PRESET_GEOMETRIES:
            raise ValueError(
                f"Unknown preset '{key}'. "
                f"Available: {list(PRESET_GEOMETRIES.keys())}"
            )
        return cls(PRESET_GEOMETRIES[key])

    def __repr__(self) -> str:
        return f"DragModel({self.geometry!r})"

    # ── Public evaluation API ─────────────────────────────────────────────

    def coefficient(self, mach: float) -> float:
        """Drag coefficient with Mach clamped to [MACH_MIN, MACH_MAX]."""
        return self.raw_coefficient(clamp_mach(mach))

    def raw_coefficient(self, mach: float) -> float:
        """Drag coefficient at any Mach number (no clamping)."""
        return self.components(mach).total

    def coefficient_array(self, machs, clamp: bool = True) -> np.ndarray:
        """Vectorized Cd lookup, preserving the input shape."""
        machs = np.asarray(machs, dtype=float)
        evaluate = self.coefficient if clamp else self.raw_coefficient
        cd_vals = np.fromiter((evaluate(m) for m in machs.ravel()),
                              dtype=float, count=machs.size)
        return cd_vals.reshape(machs.shape)

    def components(self, mach: float, clamp: bool = False) -> DragComponents:
        """
        Evaluate every drag component at the given Mach number.

        Parameters
        ----------
        mach : float
            Mach number.
        clamp : bool
            Restrict `mach` to the validated range first.

        Returns
        -------
        DragComponents
            Sanitized components and their sum.
        """
        if clamp:
            mach = clamp_mach(mach)

        # float64 scalars give inf/nan on domain errors instead of raising
        g = self.geometry
        mach = np.float64(mach)
        d1 = np.float64(g.reference_diameter)
        l1 = np.float64(g.body_length)
        l2 = np.float64(g.nose_length)
        r1 = np.float64(g.head_shape)
        l3 = np.float64(g.boattail_length)
        d2 = np.float64(g.base_diameter)
        d3 = np.float64(g.meplat_diameter)
        d4 = np.float64(g.band_diameter)

        with np.errstate(all='ignore'):
            # ── Shared geometry: nose slope and wetted areas ──────────────
            t1 = (1.0 - d3) / l2
            m2 = mach * mach
            d5 = 1.0 + (0.333 + 0.02 / (l2 * l2)) * r1
            s1 = 1.5708 * l2 * d5 * (1.0 + 1.0 / (8.0 * l2 * l2))
            s2 = 3.1416 * (l1 - l2)
            s3 = s1 + s2

            # ── Skin friction ─────────────────────────────────────────────
            r2 = 23296.3 * mach * l1 * d1
            r3 = 0.4343 * np.log(r2)
            c7 = (1.328 / np.sqrt(r2)) * np.power(1.0 + 0.12 * m2, -0.12)
            c8 = (0.455 / np.power(r3, 2.58)) * np.power(1.0 + 0.21 * m2, -0.32)
            c9, c10 = self._surface_friction(c7, c8, s3)
            c3 = (c9 * s1 + c10 * s2) / s3

            # ── Meplat (blunt nose) pressure drag ─────────────────────────
            c15 = (m2 - 1.0) / (2.4 * m2)
            if mach > 1.0:
                p5 = np.power(1.2 * m2, 3.5) * np.power(6.0 / (7.0 * m2 - 1.0), 2.5)
            else:
                p5 = np.power(1.0 + 0.2 * m2, 3.5)
            c16 = (1.122 * (p5 - 1.0) * d3) ** 2 / m2

            if mach <= 0.91:
                c18 = 0.0
            elif mach >= 1.41:
                c18 = 0.85 * c16
            else:
                c18 = (0.254 + 2.88 * c15) * c16

            # ── Base drag ─────────────────────────────────────────────────
            if mach < 1.0:
                p2 = 1.0 / (1.0 + 0.1875 * m2 + 0.0531 * m2 ** 2)
            else:
                p2 = 1.0 / (1.0 + 0.2477 * m2 + 0.0345 * m2 ** 2)
            p4 = ((1.0 + 9.000001e-02 * m2 * (1.0 - np.exp(l2 - l1)))
                  * (1.0 + 0.25 * m2 * (1.0 - d2)))
            p1 = p2 * p4
            if p1 >= 0.0:
                c6 = 1.4286 * (1.0 - p1) * (d2 * d2) / m2
            else:
                c6 = 0.0

            # ── Rotating band ─────────────────────────────────────────────
            if mach < 0.95:
                c4 = np.power(mach, 12.5) * (d4 - 1.0)
            else:
                c4 = (0.21 + 0.28 / m2) * (d4 - 1.0)

            # ── Head wave drag and boattail drag ──────────────────────────
            if mach > 1.0:
                b2 = m2 - 1.0
                b = np.sqrt(b2)
                z = b
                s4 = 1.0 + 0.368 * np.power(t1, 1.85)
                if mach < s4:
                    # detached bow shock
                    z = np.sqrt(s4 * s4 - 1.0)

                c11 = 0.7156 - 0.5313 * r1 + 0.595 * r1 * r1
                c12 = 0.0796 + 0.0779 * r1
                c13 = 1.587 + 0.049 * r1
                c14 = 0.1122 + 0.1658 * r1
                r4 = 1.0 / (z * z)
                c17 = (c11 - c12 * (t1 * t1)) * r4 * np.power(t1 * z, c13 + c14 * t1)
                c2 = c17 + c18

                if l3 <= 0.0:
                    c5 = 0.0
                else:
                    t2 = (1.0 - d2) / (2.0 * l3)
                    if mach <= 1.1:
                        c5 = _boattail_taper(t2, l3) * (1.774 - 9.3 * c15)
                    else:
                        b3 = 0.85 / b
                        a12 = ((5.0 * t1) / (6.0 * b) + (0.5 * t1) * (0.5 * t1)
                               - (0.7435 / m2) * np.power(t1 * mach, 1.6))
                        a11 = (1.0 - (0.6 * r1) / mach) * a12
                        e2 = np.exp((-1.1952 / mach) * (l1 - l2 - l3))
                        x3 = ((2.4 * m2 * m2 - 4.0 * b2) * (t2 * t2)) / (2.0 * b2 * b2)
                        a1 = a11 * e2 - x3 + (2.0 * t2) / b
                        r5 = 1.0 / b3
                        e3 = np.exp(-b3 * l3)
                        a2 = 1.0 - e3 + 2.0 * t2 * (e3 * (l3 + r5) - r5)
                        c5 = 4.0 * a1 * t2 * a2 * r5
            else:
                if l3 <= 0.0 or mach <= 0.85:
                    c5 = 0.0
                else:
                    t2 = (1.0 - d2) / (2.0 * l3)
                    c5 = _boattail_taper(t2, l3) * (1.0 / (0.564 + 1250.0 * c15 * c15))

                x2 = np.power(1.0 + 0.552 * np.power(t1, 0.8), -0.5)
                if mach <= x2:
                    # no nose wave drag below x2
                    c2 = c18
                else:
                    c17 = 0.368 * np.power(t1, 1.8) + 1.6 * t1 * c15
                    c2 = c17 + c18

            head = _sanitize('head', c2, mach)
            skin_friction = _sanitize('skin friction', c3, mach)
            band = _sanitize('band', c4, mach)
            boattail = _sanitize('boattail', c5, mach)
            base = _sanitize('base', c6, mach)

        return DragComponents(
            mach=float(mach),
            head=head,
            skin_friction=skin_friction,
            band=band,
            boattail=boattail,
            base=base,
            base_pressure_ratio=float(p1),
            total=head + skin_friction + band + boattail + base,
        )

    def _surface_friction(self, laminar, turbulent, wetted_area):
        """
        Pick the nose and afterbody friction coefficients for the
        boundary-layer assumption, scaled to the total wetted area.
        """
        layer = self._boundary_layer
        if layer is BoundaryLayer.LAMINAR_LAMINAR:
            nose, afterbody = laminar, laminar
        elif layer is BoundaryLayer.LAMINAR_TURBULENT:
            nose, afterbody = laminar, turbulent
        else:  # TURBULENT_TURBULENT
            nose, afterbody = turbulent, turbulent

        scale = 1.2732 * wetted_area
        return scale * nose, scale * afterbody
