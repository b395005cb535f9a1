"""
Beam section library.

Universal beams carry their tabulated properties (cm units, as printed in
the section tables). Rectangular timber sections compute theirs from the
width and depth. Both expose the same mm-based properties for the
deflection formulas.
"""

import re
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import CM3_TO_MM3, CM4_TO_MM4, DEFAULT_TIMBER_GRADE
from ..enums import Material


class UniversalBeam(BaseModel):
    """Hot rolled steel universal beam (major axis bending)."""
    name: str
    height_mm: float
    width_mm: float
    thickness_mm: float        # Web thickness
    section_area_cm2: float
    weight_kg_per_m: float
    ix_cm4: float              # Second moment of area, major axis
    iy_cm4: float
    wx_cm3: float              # Elastic section modulus, major axis
    wy_cm3: float

    model_config = ConfigDict(extra='ignore', frozen=True)

    @property
    def default_material(self) -> Material:
        return Material.STEEL

    @property
    def moment_of_inertia_mm4(self) -> float:
        return self.ix_cm4 * CM4_TO_MM4

    @property
    def section_modulus_mm3(self) -> float:
        return self.wx_cm3 * CM3_TO_MM3

    @property
    def neutral_axis_mm(self) -> float:
        """Distance from the neutral axis to the extreme fibre."""
        return self.height_mm / 2


class TimberSection(BaseModel):
    """Rectangular sawn timber section, bending about the depth."""
    width_mm: float
    depth_mm: float
    grade: str = DEFAULT_TIMBER_GRADE

    model_config = ConfigDict(extra='ignore', frozen=True)

    @field_validator('width_mm', 'depth_mm')
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Section dimensions must be positive")
        return v

    @property
    def name(self) -> str:
        return f"{self.width_mm:g}x{self.depth_mm:g} {self.grade}"

    @property
    def height_mm(self) -> float:
        return self.depth_mm

    @property
    def default_material(self) -> Material:
        return Material.TIMBER

    @property
    def area_mm2(self) -> float:
        return self.width_mm * self.depth_mm

    @property
    def moment_of_inertia_mm4(self) -> float:
        """Ix = b*d^3/12"""
        return self.width_mm * self.depth_mm ** 3 / 12.0

    @property
    def section_modulus_mm3(self) -> float:
        """Zx = b*d^2/6"""
        return self.width_mm * self.depth_mm ** 2 / 6.0

    @property
    def neutral_axis_mm(self) -> float:
        return self.depth_mm / 2


Section = Union[UniversalBeam, TimberSection]


UNIVERSAL_BEAMS: Dict[str, UniversalBeam] = {
    beam.name: beam for beam in (
        UniversalBeam(
            name="UB127x76x13", height_mm=127, width_mm=76, thickness_mm=4,
            section_area_cm2=16.5, weight_kg_per_m=13,
            ix_cm4=473, iy_cm4=55.7, wx_cm3=74.5, wy_cm3=14.7,
        ),
        UniversalBeam(
            name="UB152x89x16", height_mm=152.4, width_mm=88.7, thickness_mm=4.5,
            section_area_cm2=20.3, weight_kg_per_m=16,
            ix_cm4=834, iy_cm4=89.6, wx_cm3=109.5, wy_cm3=20.2,
        ),
        UniversalBeam(
            name="UB305x127x42", height_mm=307.2, width_mm=124.3, thickness_mm=8,
            section_area_cm2=53.4, weight_kg_per_m=41.9,
            ix_cm4=8196, iy_cm4=388.8, wx_cm3=533.6, wy_cm3=62.6,
        ),
    )
}

# Common sawn sizes (width, depth), mm
STANDARD_TIMBER_SIZES_MM = [
    (47, 100), (47, 150), (47, 175), (47, 200), (47, 225),
    (63, 150), (63, 175), (63, 200), (63, 225),
    (75, 200), (75, 225),
]

_TIMBER_SIZE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*x\s*(\d+(?:\.\d+)?)\s*$", re.IGNORECASE)


def list_sections() -> List[str]:
    """Names accepted by get_section(), universal beams first."""
    return list(UNIVERSAL_BEAMS) + [f"{b}x{d}" for b, d in STANDARD_TIMBER_SIZES_MM]


def get_section(name: str) -> Section:
    """
    Look up a universal beam by name or parse a '<width>x<depth>' timber size.

    Raises:
        KeyError: If the name is neither
    """
    for ub_name, beam in UNIVERSAL_BEAMS.items():
        if ub_name.lower() == name.strip().lower():
            return beam

    match = _TIMBER_SIZE.match(name)
    if match:
        return TimberSection(width_mm=float(match.group(1)), depth_mm=float(match.group(2)))

    raise KeyError(
        f"Unknown section '{name}'. Use a universal beam "
        f"({', '.join(UNIVERSAL_BEAMS)}) or a timber size like '47x200'"
    )
