"""Static matplotlib rendering of the result strips (ECG grid card)"""
import io
from typing import Sequence

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from ...core import constants
from ...core.logging_config import get_logger
from .lead_strips import RenderedStrip, rgb_to_hex

logger = get_logger(__name__)

DPI = 100


def _draw_paper_grid(ax, strip: RenderedStrip) -> None:
    """Draw ECG-paper grid lines every GRID_SPACING_PX pixels"""
    x_min, x_max = strip.x_range()
    y_min, y_max = strip.scale.amplitude_range
    x_step = constants.GRID_SPACING_PX / strip.scale.x_px_per_sample
    y_step = constants.GRID_SPACING_PX / strip.scale.y_px_per_unit

    ax.set_xticks(np.arange(x_min, x_max + x_step / 2, x_step))
    ax.set_yticks(np.arange(y_min, y_max + y_step / 2, y_step))
    ax.tick_params(labelbottom=False, labelleft=False, length=0)
    ax.grid(True, color=rgb_to_hex(strip.grid_color), alpha=constants.GRID_ALPHA, linewidth=1)


def render_strips_figure(strips: Sequence[RenderedStrip]) -> Figure:
    """Lay the strips out top to bottom at their pixel heights

    Returns:
        matplotlib Figure sized in pixels at DPI
    """
    if not strips:
        return Figure(figsize=(constants.STRIP_WIDTH_PX / DPI, 0.1), dpi=DPI)

    width_px = strips[0].scale.width_px
    total_height = sum(strip.height_px for strip in strips)
    fig = Figure(figsize=(width_px / DPI, total_height / DPI), dpi=DPI, facecolor=rgb_to_hex(strips[0].background_color))

    top = total_height
    for strip in strips:
        bottom = top - strip.height_px
        ax = fig.add_axes([0.0, bottom / total_height, 1.0, strip.height_px / total_height])
        ax.set_facecolor('none')
        for spine in ax.spines.values():
            spine.set_visible(False)

        if strip.show_axis_grid:
            _draw_paper_grid(ax, strip)
        else:
            ax.set_xticks([])
            ax.set_yticks([])

        # Limits after ticks, set_ticks may widen the view
        ax.set_xlim(*strip.x_range())
        ax.set_ylim(*strip.scale.amplitude_range)

        if strip.point_count:
            ax.plot(strip.sample_axis(), strip.samples, color=strip.color_hex, lw=constants.ECG_LINE_WIDTH)

        ax.text(0.01, 0.95, strip.label, transform=ax.transAxes, va='top', ha='left',
                fontsize=10, fontweight='bold', color=constants.TEXT_COLOR)
        top = bottom

    return fig


def render_strips_png(strips: Sequence[RenderedStrip]) -> bytes:
    """Render the strips to PNG bytes"""
    fig = render_strips_figure(strips)
    canvas = FigureCanvasAgg(fig)
    buffer = io.BytesIO()
    canvas.print_png(buffer)
    logger.debug(f"Rendered {len(strips)} strips to PNG ({buffer.tell()} bytes)")
    return buffer.getvalue()
