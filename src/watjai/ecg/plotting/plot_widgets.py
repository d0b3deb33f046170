"""PyQtGraph plot widget creation for the three-lead result strip"""
import pyqtgraph as pg
from PyQt5.QtWidgets import QVBoxLayout, QWidget
from typing import List, Sequence, Tuple

from ...core import constants
from ...core.logging_config import get_logger
from .lead_strips import RenderedStrip

logger = get_logger(__name__)


def configure_strip_plot(plot_widget: pg.PlotWidget, strip: RenderedStrip) -> None:
    """Apply height, grid and the shared locked ranges to a plot widget"""
    plot_widget.setBackground(strip.background_color)
    plot_widget.setFixedHeight(strip.height_px)
    plot_widget.setMenuEnabled(False)
    plot_widget.setMouseEnabled(x=False, y=False)
    plot_widget.showGrid(x=strip.show_axis_grid, y=strip.show_axis_grid, alpha=constants.GRID_ALPHA)

    # Only the reference strip carries axes; grid lines use the axis pen color
    for axis_name in ('left', 'bottom'):
        plot_widget.showAxis(axis_name, strip.show_axis_grid)
        plot_widget.getAxis(axis_name).setPen(strip.grid_color)
        plot_widget.getAxis(axis_name).setTextPen(constants.TEXT_COLOR)

    x_min, x_max = strip.x_range()
    y_min, y_max = strip.scale.amplitude_range
    vb = plot_widget.getViewBox()
    vb.setRange(xRange=(x_min, x_max), yRange=(y_min, y_max), padding=0)
    # LOCK both axes so every strip keeps the shared scale
    vb.setLimits(xMin=x_min, xMax=x_max, yMin=y_min, yMax=y_max)

    plot_widget.setTitle(strip.label, color=constants.TEXT_COLOR, size='10pt')


def update_strip_data(data_line, strip: RenderedStrip) -> None:
    """Push a strip's sample window into its plot line"""
    data_line.setData(strip.sample_axis(), strip.samples)


def create_strip_stack(plot_area: QWidget, strips: Sequence[RenderedStrip]) -> Tuple[List[pg.PlotWidget], List]:
    """Create a vertical stack of PyQtGraph plot widgets, one per strip

    Args:
        plot_area: QWidget container for the plots
        strips: Rendered strips on one shared scale

    Returns:
        Tuple of (plot_widgets list, data_lines list)
    """
    layout = QVBoxLayout(plot_area)
    layout.setSpacing(constants.GRID_SPACING_PX // 2)
    plot_widgets = []
    data_lines = []

    for strip in strips:
        plot_widget = pg.PlotWidget()
        configure_strip_plot(plot_widget, strip)

        data_line = plot_widget.plot(pen=pg.mkPen(color=strip.color, width=constants.ECG_LINE_WIDTH))
        update_strip_data(data_line, strip)

        layout.addWidget(plot_widget)
        plot_widgets.append(plot_widget)
        data_lines.append(data_line)

    logger.debug(f"Created {len(plot_widgets)} strip plots")
    return plot_widgets, data_lines
