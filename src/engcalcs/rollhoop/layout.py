"""
Plan-view layout of the roll-hoop body holes.

Places the three plumb holes of one hoop side and moves each by its
resolved offsets. Coordinates are in mm with the origin at the centre of
the leg triangle:

- x runs nearside to offside (ns_to_os offsets)
- y runs front to back (front_to_back offsets)

The outer and inner legs sit on the front line, the rear leg behind them
on the centreline.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..constants import LABEL_OFFSET_DIVISOR
from ..enums import Leg
from ..io import HoopGeometry, HoopSide

Point = Tuple[float, float]


@dataclass(frozen=True)
class LegLayout:
    """Where one leg should be and where it actually lands."""
    leg: Leg
    plumb: Point
    offset: Point
    radius_mm: float
    label_anchor: Point

    @property
    def dx_mm(self) -> float:
        return self.offset[0] - self.plumb[0]

    @property
    def dy_mm(self) -> float:
        return self.offset[1] - self.plumb[1]


@dataclass(frozen=True)
class SideLayout:
    """Layout of all three legs of one hoop side."""
    outer_leg: LegLayout
    inner_leg: LegLayout
    rear_leg: LegLayout

    def legs(self) -> Tuple[LegLayout, LegLayout, LegLayout]:
        return (self.outer_leg, self.inner_leg, self.rear_leg)


def plumb_positions(geometry: HoopGeometry) -> Dict[Leg, Point]:
    """Nominal (plumb) hole centre of each leg."""
    half_spacing = geometry.front_leg_spacing_mm / 2
    half_offset = geometry.rear_leg_offset_mm / 2
    return {
        Leg.OUTER: (-half_spacing, -half_offset),
        Leg.INNER: (half_spacing, -half_offset),
        Leg.REAR: (0.0, half_offset),
    }


def _layout_leg(side: HoopSide, leg: Leg, plumb: Point, geometry: HoopGeometry) -> LegLayout:
    plane = side.plane(leg)
    dx = plane.ns_to_os.absolute
    dy = plane.front_to_back.absolute
    if dx is None or dy is None:
        raise ValueError(
            f"{leg.value} has unresolved offsets - call resolve_offsets() first"
        )

    diameter = geometry.leg_diameter(leg)
    return LegLayout(
        leg=leg,
        plumb=plumb,
        offset=(plumb[0] + dx, plumb[1] + dy),
        radius_mm=diameter / 2,
        label_anchor=(plumb[0] + diameter / LABEL_OFFSET_DIVISOR, plumb[1]),
    )


def layout_side(side: HoopSide, geometry: Optional[HoopGeometry] = None) -> SideLayout:
    """
    Lay out one resolved hoop side.

    Args:
        side: Hoop side with resolved offsets
        geometry: Leg spacing and tube sizes (default: HoopGeometry())

    Raises:
        ValueError: If any offset on the side is unresolved
    """
    if geometry is None:
        geometry = HoopGeometry()

    plumbs = plumb_positions(geometry)
    return SideLayout(
        outer_leg=_layout_leg(side, Leg.OUTER, plumbs[Leg.OUTER], geometry),
        inner_leg=_layout_leg(side, Leg.INNER, plumbs[Leg.INNER], geometry),
        rear_leg=_layout_leg(side, Leg.REAR, plumbs[Leg.REAR], geometry),
    )
