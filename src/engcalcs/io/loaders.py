"""
JSON input/output for roll-hoop measurements.

Defines the fixed-shape configuration tree (sides -> legs -> planes ->
angle measurements) and loads/saves complete hoop designs.

Uses Pydantic for automatic validation. Field names are snake_case; the
camelCase keys of older measurement files (frontToBack, outerLeg, ...) are
accepted on load.
"""

import json
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import Axis, Leg, Side
from ..constants import (
    FRONT_LEG_DIAMETER_MM,
    FRONT_LEG_SPACING_MM,
    INNER_LEG_HEIGHT_TO_HOLE_MM,
    OUTER_LEG_HEIGHT_TO_HOLE_MM,
    REAR_LEG_DIAMETER_MM,
    REAR_LEG_HEIGHT_TO_HOLE_MM,
    REAR_LEG_OFFSET_MM,
)
from .schema import SCHEMA_VERSION


class AngleMeasurement(BaseModel):
    """Measured leg angle and the offset resolved from it."""
    angle: float  # Degrees from horizontal, negative leans the other way
    absolute: Optional[float] = None  # mm, None until resolved

    model_config = ConfigDict(extra='ignore')


class Plane(BaseModel):
    """Angles of one leg in both horizontal axes."""
    front_to_back: AngleMeasurement = Field(alias='frontToBack')
    ns_to_os: AngleMeasurement = Field(alias='nsToOs')

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    def measurement(self, axis: Axis) -> AngleMeasurement:
        return getattr(self, axis.value)


class HoopSide(BaseModel):
    """The three legs of one side of the roll hoop."""
    outer_leg: Plane = Field(alias='outerLeg')
    inner_leg: Plane = Field(alias='innerLeg')
    rear_leg: Plane = Field(alias='rearLeg')

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    def plane(self, leg: Leg) -> Plane:
        return getattr(self, leg.value)


class HoopConfiguration(BaseModel):
    """Measurements for both sides of the vehicle."""
    nearside: HoopSide
    offside: HoopSide

    model_config = ConfigDict(extra='ignore')

    def side(self, side: Side) -> HoopSide:
        return getattr(self, side.value)


class HeightTable(BaseModel):
    """Height to hole for each leg (mm)."""
    outer_leg: float = Field(default=OUTER_LEG_HEIGHT_TO_HOLE_MM, alias='outerLeg')
    inner_leg: float = Field(default=INNER_LEG_HEIGHT_TO_HOLE_MM, alias='innerLeg')
    rear_leg: float = Field(default=REAR_LEG_HEIGHT_TO_HOLE_MM, alias='rearLeg')

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    @field_validator('outer_leg', 'inner_leg', 'rear_leg')
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError(f"height to hole must be positive, got {v}")
        return v

    def height(self, leg: Leg) -> float:
        return getattr(self, leg.value)


class HoopGeometry(BaseModel):
    """Plan-view layout of the plumb holes and leg tube sizes (mm)."""
    front_leg_spacing_mm: float = FRONT_LEG_SPACING_MM
    rear_leg_offset_mm: float = REAR_LEG_OFFSET_MM
    front_leg_diameter_mm: float = FRONT_LEG_DIAMETER_MM
    rear_leg_diameter_mm: float = REAR_LEG_DIAMETER_MM

    model_config = ConfigDict(extra='ignore')

    def leg_diameter(self, leg: Leg) -> float:
        if leg == Leg.REAR:
            return self.rear_leg_diameter_mm
        return self.front_leg_diameter_mm


class HoopDesign(BaseModel):
    """Complete input for one offset calculation."""
    name: Optional[str] = None
    configuration: HoopConfiguration
    heights: HeightTable = Field(default_factory=HeightTable)
    geometry: HoopGeometry = Field(default_factory=HoopGeometry)

    model_config = ConfigDict(extra='ignore')


def iter_measurements(
    configuration: HoopConfiguration
) -> Iterator[Tuple[Side, Leg, Axis, AngleMeasurement]]:
    """
    Yield every angle measurement in a fixed order.

    Order: nearside then offside; outer, inner, rear; front-to-back then
    nearside-to-offside.
    """
    for side in Side:
        hoop_side = configuration.side(side)
        for leg in Leg:
            plane = hoop_side.plane(leg)
            for axis in Axis:
                yield side, leg, axis, plane.measurement(axis)


def load_hoop_design_json(filepath: Union[str, Path]) -> HoopDesign:
    """
    Load a hoop design from a JSON file.

    The file may hold a full design (with 'configuration') or just the bare
    configuration tree ('nearside'/'offside'), in which case default heights
    and geometry are used.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON has neither shape
        ValidationError: If fields are missing or of the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Design file not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if 'configuration' not in data:
        if 'nearside' not in data or 'offside' not in data:
            raise ValueError(
                "Invalid hoop JSON - must contain 'configuration' or both "
                "'nearside' and 'offside' sections"
            )
        data = {'name': filepath.stem, 'configuration': data}

    return HoopDesign.model_validate(data)


def save_hoop_design_json(design: HoopDesign, filepath: Union[str, Path]) -> None:
    """Save a hoop design (resolved or not) to a JSON file."""
    filepath = Path(filepath)

    data = design.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
