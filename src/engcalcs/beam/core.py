"""
Beam Deflection Calculator - Core Calculations

Simply supported beam, span L, under a central point load F and/or a
uniformly distributed load w. Loads are superposed:

    deflection = F·L³ / (48·E·I) + 5·w·L⁴ / (384·E·I)
    moment     = F·L / 4 + w·L² / 8
    stress     = y·M / I          (y = extreme fibre distance)
    reaction   = F / 2 + w·L / 2

Deflection is safe when it stays below L / ratio (350 by default).

Units: N, mm, N/mm (w), N/mm² (E, stress), mm⁴ (I).
"""

import logging
from typing import Union

from pydantic import BaseModel

from ..constants import (
    ALLOWABLE_DEFLECTION_RATIO,
    KG_TO_N,
    KN_PER_M_TO_N_PER_MM,
    MODULUS_OF_ELASTICITY_N_PER_MM2,
)
from ..enums import Material
from .sections import Section

logger = logging.getLogger(__name__)


class BeamResult(BaseModel):
    """Results of one beam calculation."""
    section_name: str
    material: Material
    length_mm: float
    point_load_n: float
    udl_n_per_mm: float
    modulus_n_per_mm2: float
    moment_of_inertia_mm4: float
    neutral_axis_distance_mm: float
    support_force_n: float
    max_moment_nmm: float
    max_stress_n_per_mm2: float
    max_deflection_mm: float
    deflection_ratio: float
    safe_deflection_limit_mm: float
    is_deflection_safe: bool


def kg_to_newtons(mass_kg: float) -> float:
    """Weight of a mass in newtons (g = 9.81)."""
    return mass_kg * KG_TO_N


def kn_per_m_to_n_per_mm(load_kn_per_m: float) -> float:
    return load_kn_per_m * KN_PER_M_TO_N_PER_MM


def modulus_of_elasticity(material: Union[Material, str]) -> float:
    """E for a material (N/mm²)."""
    if isinstance(material, str):
        material = Material(material.lower())
    return MODULUS_OF_ELASTICITY_N_PER_MM2[material.value]


def point_load_deflection(
    point_load_n: float,
    length_mm: float,
    modulus_n_per_mm2: float,
    moment_of_inertia_mm4: float
) -> float:
    """Midspan deflection under a central point load: F·L³ / (48·E·I)"""
    return point_load_n * length_mm ** 3 / (48 * modulus_n_per_mm2 * moment_of_inertia_mm4)


def udl_deflection(
    udl_n_per_mm: float,
    length_mm: float,
    modulus_n_per_mm2: float,
    moment_of_inertia_mm4: float
) -> float:
    """Midspan deflection under a uniform load: 5·w·L⁴ / (384·E·I)"""
    return 5 * udl_n_per_mm * length_mm ** 4 / (384 * modulus_n_per_mm2 * moment_of_inertia_mm4)


def allowable_deflection(length_mm: float, ratio: float = ALLOWABLE_DEFLECTION_RATIO) -> float:
    """Serviceability limit L / ratio (mm)"""
    return length_mm / ratio


def beam_calc(
    section: Section,
    length_mm: float,
    point_load_n: float = 0.0,
    udl_n_per_mm: float = 0.0,
    material: Union[Material, str, None] = None,
    ratio: float = ALLOWABLE_DEFLECTION_RATIO
) -> BeamResult:
    """
    Calculate deflection, stress and reactions of a simply supported beam.

    Args:
        section: UniversalBeam or TimberSection
        length_mm: Span between supports (mm)
        point_load_n: Central point load (N)
        udl_n_per_mm: Uniformly distributed load (N/mm, same as kN/m)
        material: Beam material (default: the section's own material)
        ratio: Allowable deflection ratio, limit = L / ratio

    Returns:
        BeamResult

    Raises:
        ValueError: If length or ratio is not positive, or a load is negative
    """
    if length_mm <= 0:
        raise ValueError(f"Beam length must be positive, got {length_mm}")
    if ratio <= 0:
        raise ValueError(f"Deflection ratio must be positive, got {ratio}")
    if point_load_n < 0 or udl_n_per_mm < 0:
        raise ValueError("Loads must not be negative")

    if material is None:
        material = section.default_material
    elif isinstance(material, str):
        material = Material(material.lower())

    modulus = modulus_of_elasticity(material)
    inertia = section.moment_of_inertia_mm4
    y = section.neutral_axis_mm

    if point_load_n == 0 and udl_n_per_mm == 0:
        logger.warning(f"{section.name}: no load applied")

    deflection = (
        point_load_deflection(point_load_n, length_mm, modulus, inertia)
        + udl_deflection(udl_n_per_mm, length_mm, modulus, inertia)
    )
    moment = point_load_n * length_mm / 4 + udl_n_per_mm * length_mm ** 2 / 8
    limit = allowable_deflection(length_mm, ratio)

    result = BeamResult(
        section_name=section.name,
        material=material,
        length_mm=length_mm,
        point_load_n=point_load_n,
        udl_n_per_mm=udl_n_per_mm,
        modulus_n_per_mm2=modulus,
        moment_of_inertia_mm4=inertia,
        neutral_axis_distance_mm=y,
        support_force_n=point_load_n / 2 + udl_n_per_mm * length_mm / 2,
        max_moment_nmm=moment,
        max_stress_n_per_mm2=y * moment / inertia,
        max_deflection_mm=deflection,
        deflection_ratio=ratio,
        safe_deflection_limit_mm=limit,
        is_deflection_safe=limit > deflection,
    )

    logger.debug(
        f"{section.name} ({material.value}) L={length_mm}mm: "
        f"deflection {deflection:.3f}mm vs limit {limit:.3f}mm"
    )
    if not result.is_deflection_safe:
        logger.warning(f"{section.name}: deflection {deflection:.1f}mm exceeds L/{ratio:g} = {limit:.1f}mm")

    return result


def point_load_calc(
    section: Section,
    point_load_n: float,
    length_mm: float,
    material: Union[Material, str, None] = None,
    ratio: float = ALLOWABLE_DEFLECTION_RATIO
) -> BeamResult:
    """Beam with a single central point load."""
    return beam_calc(section, length_mm, point_load_n=point_load_n, material=material, ratio=ratio)


def udl_calc(
    section: Section,
    udl_n_per_mm: float,
    length_mm: float,
    material: Union[Material, str, None] = None,
    ratio: float = ALLOWABLE_DEFLECTION_RATIO
) -> BeamResult:
    """Beam with a uniformly distributed load only."""
    return beam_calc(section, length_mm, udl_n_per_mm=udl_n_per_mm, material=material, ratio=ratio)
