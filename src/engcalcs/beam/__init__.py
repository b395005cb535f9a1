"""
Beam Deflection Calculator - simply supported steel and timber beams.

Example:
    >>> from engcalcs.beam import get_section, point_load_calc, kg_to_newtons
    >>>
    >>> result = point_load_calc(get_section("UB127x76x13"), kg_to_newtons(1000), 2500)
    >>> result.is_deflection_safe
    True
"""

from .sections import (
    UniversalBeam,
    TimberSection,
    UNIVERSAL_BEAMS,
    STANDARD_TIMBER_SIZES_MM,
    get_section,
    list_sections,
)

from .core import (
    BeamResult,
    kg_to_newtons,
    kn_per_m_to_n_per_mm,
    modulus_of_elasticity,
    point_load_deflection,
    udl_deflection,
    allowable_deflection,
    beam_calc,
    point_load_calc,
    udl_calc,
)

from .output import (
    pretty_print,
    to_summary,
    to_json,
)

__all__ = [
    # Sections
    "UniversalBeam",
    "TimberSection",
    "UNIVERSAL_BEAMS",
    "STANDARD_TIMBER_SIZES_MM",
    "get_section",
    "list_sections",

    # Calculations
    "BeamResult",
    "kg_to_newtons",
    "kn_per_m_to_n_per_mm",
    "modulus_of_elasticity",
    "point_load_deflection",
    "udl_deflection",
    "allowable_deflection",
    "beam_calc",
    "point_load_calc",
    "udl_calc",

    # Output formatters
    "pretty_print",
    "to_summary",
    "to_json",
]
