"""Lead strip layout and rendering"""
from .lead_strips import (
    RenderConfig,
    RenderScale,
    RenderedStrip,
    window_samples,
    build_lead_configs,
    compute_shared_scale,
    render_lead,
    render_leads,
)
from .strip_figure import render_strips_figure, render_strips_png

__all__ = [
    'RenderConfig',
    'RenderScale',
    'RenderedStrip',
    'window_samples',
    'build_lead_configs',
    'compute_shared_scale',
    'render_lead',
    'render_leads',
    'render_strips_figure',
    'render_strips_png',
]
