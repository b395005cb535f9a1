"""
Roll Hoop Offset Calculator - Core Calculations

Converts the measured angle of each roll-hoop leg into the horizontal
distance between the plumb line and where the leg actually meets the body.

Each body hole sits a fixed height below the point where the angle is
measured. A leg standing at angle θ from horizontal therefore lands

    offset = height / tan(θ)

away from the plumb line. Vertical legs read ±90° and give no offset;
negative angles give negative offsets.
"""

import logging
from math import copysign, inf, isfinite, radians, tan
from typing import Optional

from ..enums import Axis, Leg, Side
from ..io import (
    AngleMeasurement,
    HeightTable,
    HoopConfiguration,
    HoopDesign,
    HoopSide,
    Plane,
    iter_measurements,
)

logger = logging.getLogger(__name__)

DEFAULT_HEIGHTS = HeightTable()


def angle_to_offset(angle_deg: float, height_mm: float) -> float:
    """
    Convert a leg angle to a horizontal offset at the body hole.

    Args:
        angle_deg: Leg angle from horizontal (degrees)
        height_mm: Height from the measurement point to the hole (mm)

    Returns:
        Offset from the plumb line (mm). Not rounded.

    The conversion never raises. An angle of exactly 0° gives a signed
    infinity. At ±90° tan() is about 1.6e16 rather than infinite, so the
    result is a tiny non-zero value (about 1.5e-14 mm for a 240 mm height).
    Use validate_configuration() to catch these inputs.
    """
    slope = tan(radians(angle_deg))
    if slope == 0.0:
        return copysign(inf, slope) * copysign(1.0, height_mm)
    return height_mm / slope


def _resolve_plane(plane: Plane, height_mm: float) -> Plane:
    return Plane(
        front_to_back=AngleMeasurement(
            angle=plane.front_to_back.angle,
            absolute=angle_to_offset(plane.front_to_back.angle, height_mm),
        ),
        ns_to_os=AngleMeasurement(
            angle=plane.ns_to_os.angle,
            absolute=angle_to_offset(plane.ns_to_os.angle, height_mm),
        ),
    )


def _resolve_side(side: HoopSide, heights: HeightTable) -> HoopSide:
    return HoopSide(
        outer_leg=_resolve_plane(side.outer_leg, heights.outer_leg),
        inner_leg=_resolve_plane(side.inner_leg, heights.inner_leg),
        rear_leg=_resolve_plane(side.rear_leg, heights.rear_leg),
    )


def resolve_offsets(
    configuration: HoopConfiguration,
    heights: Optional[HeightTable] = None
) -> HoopConfiguration:
    """
    Resolve every angle in a configuration into an absolute offset.

    Returns a new configuration; the one passed in is left untouched, so
    the same measurements can be resolved against several height tables.
    Existing 'absolute' values are ignored and recomputed.

    Args:
        configuration: Measured angles for both sides
        heights: Height to hole per leg (default: DEFAULT_HEIGHTS)

    Returns:
        HoopConfiguration with every 'absolute' populated
    """
    if heights is None:
        heights = DEFAULT_HEIGHTS

    resolved = HoopConfiguration(
        nearside=_resolve_side(configuration.nearside, heights),
        offside=_resolve_side(configuration.offside, heights),
    )

    for side, leg, axis, measurement in iter_measurements(resolved):
        logger.debug(
            f"{side.value} {leg.value} {axis.value}: "
            f"{measurement.angle}° -> {measurement.absolute} mm"
        )
        if not isfinite(measurement.absolute):
            logger.warning(
                f"{side.value} {leg.value} {axis.value}: angle {measurement.angle}° "
                f"gives a non-finite offset"
            )

    return resolved


def resolve_design(design: HoopDesign) -> HoopDesign:
    """Resolve a design against its own height table."""
    logger.info(f"Resolving offsets for {design.name or 'unnamed design'}")
    return design.model_copy(
        update={"configuration": resolve_offsets(design.configuration, design.heights)}
    )


def is_resolved(configuration: HoopConfiguration) -> bool:
    """True when every measurement has an absolute offset."""
    return all(
        measurement.absolute is not None
        for _, _, _, measurement in iter_measurements(configuration)
    )


def get_offset(
    configuration: HoopConfiguration,
    side: Side,
    leg: Leg,
    axis: Axis
) -> Optional[float]:
    """Look up one resolved offset (mm), or None if not yet resolved."""
    return configuration.side(side).plane(leg).measurement(axis).absolute
