"""
Engineering constants for the roll-hoop and beam calculators.

This module centralizes the literal numbers both calculators work from.
Always include units in constant names (_MM, _DEG, _N_PER_MM2).

Constants are grouped by category:
- Roll hoop: heights to hole, plan-view leg layout, tube sizes, thresholds
- Beam: unit conversions, materials, serviceability
"""

from typing import Dict

MM_PER_INCH: float = 25.4

# =============================================================================
# Roll Hoop - Height To Hole
# =============================================================================

# Vertical distance from the angle measurement point to the body hole (mm)
OUTER_LEG_HEIGHT_TO_HOLE_MM: float = 240.0
INNER_LEG_HEIGHT_TO_HOLE_MM: float = 310.0
REAR_LEG_HEIGHT_TO_HOLE_MM: float = 270.0

# =============================================================================
# Roll Hoop - Leg Layout (plan view)
# =============================================================================

# Centre to centre distance between the outer and inner (front) legs
FRONT_LEG_SPACING_MM: float = 305.0

# Distance from the rear leg to the line joining the two front legs
REAR_LEG_OFFSET_MM: float = 178.798

FRONT_LEG_DIAMETER_MM: float = 2.0 * MM_PER_INCH   # 2" tube
REAR_LEG_DIAMETER_MM: float = 1.5 * MM_PER_INCH    # 1.5" tube

# Labels sit diameter / divisor to the right of the plumb hole
LABEL_OFFSET_DIVISOR: float = 1.5

# =============================================================================
# Roll Hoop - Validation Thresholds
# =============================================================================

# Angles are measured from horizontal, so a vertical leg reads +-90
VERTICAL_ANGLE_DEG: float = 90.0

# Below this the leg leans further than it stands: almost certainly misread
SHALLOW_ANGLE_WARNING_DEG: float = 45.0

# =============================================================================
# Beam - Unit Conversions
# =============================================================================

CM4_TO_MM4: float = 10000.0
CM3_TO_MM3: float = 1000.0
KG_TO_N: float = 9.81              # Standard gravity, rounded as on site
KN_PER_M_TO_N_PER_MM: float = 1.0  # 1 kN/m == 1 N/mm

# =============================================================================
# Beam - Materials
# =============================================================================

# Modulus of elasticity (E), N/mm2
STEEL_MODULUS_N_PER_MM2: float = 200000.0
TIMBER_MODULUS_N_PER_MM2: float = 11000.0  # C24 softwood, E0,mean

MODULUS_OF_ELASTICITY_N_PER_MM2: Dict[str, float] = {
    "steel": STEEL_MODULUS_N_PER_MM2,
    "timber": TIMBER_MODULUS_N_PER_MM2,
}

DEFAULT_TIMBER_GRADE: str = "C24"

# =============================================================================
# Beam - Serviceability
# =============================================================================

# Allowable deflection = span / ratio
ALLOWABLE_DEFLECTION_RATIO: float = 350.0

UNSAFE_DEFLECTION_BANNER: str = "***** WARNING ----- UNSAFE DEFLECTION ----- WARNING *****"
