"""
Plan-view plot of plumb holes and where the legs actually land.

matplotlib is imported inside the functions so the calculator can be used
without it.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..enums import Side
from ..io import HoopDesign, HoopGeometry, HoopSide
from .layout import layout_side
from .output import horizontal_label, vertical_label

logger = logging.getLogger(__name__)

HOLE_FACE = "#ffffff"
HOLE_EDGE = "#e0e0e0"
LEG_FACE = (50 / 255, 200 / 255, 200 / 255, 0.3)
LEG_EDGE = "#000000"
LABEL_COLOR = "#666666"
LABEL_FONT_SIZE = 9
LABEL_LINE_SPACING_MM = 18.0


def plot_side(
    side: HoopSide,
    geometry: Optional[HoopGeometry] = None,
    ax=None,
    title: Optional[str] = None
):
    """
    Draw one resolved hoop side.

    Plumb holes are drawn as white circles, the legs as translucent cyan
    circles at their offset positions, each with its direction labels.

    Args:
        side: Resolved hoop side
        geometry: Leg spacing and tube sizes (default: HoopGeometry())
        ax: matplotlib Axes to draw on (default: new figure)
        title: Optional axes title

    Returns:
        The matplotlib Axes
    """
    import matplotlib.pyplot as plt
    from matplotlib.patches import Circle

    if geometry is None:
        geometry = HoopGeometry()
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    layout = layout_side(side, geometry)

    for leg_layout in layout.legs():
        ax.add_patch(Circle(
            leg_layout.plumb, leg_layout.radius_mm,
            facecolor=HOLE_FACE, edgecolor=HOLE_EDGE, linewidth=1
        ))
        ax.add_patch(Circle(
            leg_layout.offset, leg_layout.radius_mm,
            facecolor=LEG_FACE, edgecolor=LEG_EDGE, linewidth=1
        ))

        x_text, y_text = leg_layout.label_anchor
        ax.text(x_text, y_text, horizontal_label(leg_layout.dx_mm),
                fontsize=LABEL_FONT_SIZE, color=LABEL_COLOR, va="center")
        ax.text(x_text, y_text + LABEL_LINE_SPACING_MM, vertical_label(leg_layout.dy_mm),
                fontsize=LABEL_FONT_SIZE, color=LABEL_COLOR, va="center")

    margin = geometry.front_leg_diameter_mm * 2
    half_width = geometry.front_leg_spacing_mm / 2 + margin
    half_height = geometry.rear_leg_offset_mm / 2 + margin
    ax.set_xlim(-half_width, half_width)
    # y grows rearward, so invert to keep the front at the top
    ax.set_ylim(half_height, -half_height)
    ax.set_aspect("equal")
    ax.set_xlabel("Nearside → offside (mm)")
    ax.set_ylabel("Front → back (mm)")
    if title:
        ax.set_title(title)

    return ax


def save_plot(design: HoopDesign, filepath: Union[str, Path], dpi: int = 150) -> Path:
    """Render nearside and offside next to each other and save to a file."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    filepath = Path(filepath)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    for ax, side in zip(axes, Side):
        plot_side(design.configuration.side(side), design.geometry, ax=ax, title=side.value.title())

    if design.name:
        fig.suptitle(f"Roll hoop body holes: {design.name}")
    fig.tight_layout()
    fig.savefig(filepath, dpi=dpi)
    plt.close(fig)

    logger.info(f"Saved hole plot to {filepath}")
    return filepath
