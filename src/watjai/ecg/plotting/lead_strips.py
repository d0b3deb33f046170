"""Three-lead strip layout: fixed windows on one shared scale

Every strip on a screen is drawn with the same px/sample and px/unit scale so
timing and amplitude line up across leads. Drawing itself is left to the
pyqtgraph and matplotlib adapters in this package.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ...config.settings import DisplaySettings
from ...core import constants
from ...core.exceptions import ECGConfigError
from ...core.logging_config import get_logger
from ...core.validation import ECGValidator, as_sample_array

logger = get_logger(__name__)

RGB = Tuple[int, int, int]


def rgb_to_hex(color: RGB) -> str:
    return '#{:02X}{:02X}{:02X}'.format(*color)


@dataclass(frozen=True)
class RenderConfig:
    """Visual settings for one lead strip"""
    label: str
    color: RGB
    show_axis_grid: bool
    height_px: int
    grid_color: RGB = (255, 0, 0)
    background_color: RGB = (255, 238, 238)


@dataclass(frozen=True)
class RenderScale:
    """Sample-to-pixel mapping shared by all strips on a screen"""
    x_px_per_sample: float
    y_px_per_unit: float
    window_size: int
    amplitude_range: Tuple[float, float]
    width_px: int

    @property
    def amplitude_center(self) -> float:
        low, high = self.amplitude_range
        return (low + high) / 2.0


@dataclass(frozen=True, eq=False)
class RenderedStrip:
    """Drawing descriptor for one lead"""
    label: str
    color: RGB
    height_px: int
    show_axis_grid: bool
    samples: np.ndarray
    scale: RenderScale
    grid_color: RGB = (255, 0, 0)
    background_color: RGB = (255, 238, 238)

    @property
    def point_count(self) -> int:
        return int(self.samples.size)

    @property
    def color_hex(self) -> str:
        return rgb_to_hex(self.color)

    def x_range(self) -> Tuple[float, float]:
        """Sample range spanning the strip width at the shared scale"""
        return 0.0, self.scale.width_px / self.scale.x_px_per_sample

    def sample_axis(self) -> np.ndarray:
        """Sample indices of the drawn window"""
        return np.arange(self.point_count)

    def pixel_points(self) -> Tuple[np.ndarray, np.ndarray]:
        """Pixel coordinates (x right, y down) centered on the strip midline"""
        xs = self.sample_axis() * self.scale.x_px_per_sample
        ys = self.height_px / 2.0 - (self.samples - self.scale.amplitude_center) * self.scale.y_px_per_unit
        return xs, ys


def window_samples(samples: Optional[Sequence[float]],
                   window_size: int = constants.WAVEFORM_WINDOW_SIZE) -> np.ndarray:
    """First window_size samples, or all of them when the lead is shorter

    No padding, resampling or interpolation. The result is a read-only copy
    so the caller's sequence is never shared with the view layer.
    """
    window = np.array(as_sample_array(samples)[:window_size], dtype=float)
    window.setflags(write=False)
    return window


def build_lead_configs(settings: Optional[DisplaySettings] = None) -> List[RenderConfig]:
    """One config per lead; only the reference lead gets the grid and the taller strip

    Raises:
        ECGConfigError: reference_index does not name one of the leads
    """
    settings = settings or DisplaySettings()
    if not 0 <= settings.reference_index < len(settings.leads):
        raise ECGConfigError(
            f"Reference index {settings.reference_index} is outside the {len(settings.leads)} configured leads"
        )
    color = ECGValidator.validate_color(settings.lead_color)
    grid_color = ECGValidator.validate_color(settings.grid_color)
    background_color = ECGValidator.validate_color(settings.background_color)

    configs = []
    for index, label in enumerate(settings.leads):
        is_reference = index == settings.reference_index
        configs.append(RenderConfig(
            label=label,
            color=color,
            show_axis_grid=is_reference,
            height_px=settings.reference_height_px if is_reference else settings.lead_height_px,
            grid_color=grid_color,
            background_color=background_color,
        ))
    return configs


def compute_shared_scale(leads: Sequence[Optional[Sequence[float]]],
                         configs: Sequence[RenderConfig],
                         window_size: int = constants.WAVEFORM_WINDOW_SIZE,
                         width_px: int = constants.STRIP_WIDTH_PX,
                         amplitude_range: Tuple[float, float] = constants.AMPLITUDE_RANGE) -> RenderScale:
    """Derive the one scale used by every strip on the screen

    Horizontal: strip width over the longest drawn window among the leads.
    Vertical: the shortest strip height over the fixed amplitude range, so
    the full range fits in every strip.
    """
    window_size = ECGValidator.validate_window_size(window_size)
    low, high = ECGValidator.validate_amplitude_range(amplitude_range)
    if not configs:
        raise ECGConfigError("At least one lead config is required to derive a scale")

    longest = max((min(as_sample_array(lead).size, window_size) for lead in leads), default=0)
    # All leads empty: nothing is drawn, keep the nominal window scale
    longest = longest or window_size
    shortest_height = min(config.height_px for config in configs)

    scale = RenderScale(
        x_px_per_sample=width_px / float(longest),
        y_px_per_unit=shortest_height / (high - low),
        window_size=window_size,
        amplitude_range=(low, high),
        width_px=width_px,
    )
    logger.debug(f"Shared strip scale: {scale}")
    return scale


def render_lead(samples: Optional[Sequence[float]], config: RenderConfig,
                scale: Optional[RenderScale] = None) -> RenderedStrip:
    """Describe how to draw one lead

    Args:
        samples: The lead's samples (only a bounded prefix is read)
        config: Label, color, grid and height for this lead
        scale: Shared screen scale; derived from this lead alone if omitted

    Returns:
        RenderedStrip; an empty lead yields a strip with zero points
    """
    if scale is None:
        scale = compute_shared_scale([samples], [config])

    window = window_samples(samples, scale.window_size)
    if window.size == 0:
        logger.debug(f"Lead {config.label} has no samples, drawing an empty strip")

    return RenderedStrip(
        label=config.label,
        color=config.color,
        height_px=config.height_px,
        show_axis_grid=config.show_axis_grid,
        samples=window,
        scale=scale,
        grid_color=config.grid_color,
        background_color=config.background_color,
    )


def render_leads(leads: Sequence[Optional[Sequence[float]]],
                 configs: Optional[Sequence[RenderConfig]] = None,
                 settings: Optional[DisplaySettings] = None) -> List[RenderedStrip]:
    """Render every lead of a screen on one shared scale"""
    settings = settings or DisplaySettings()
    configs = list(configs) if configs is not None else build_lead_configs(settings)

    if len(configs) != len(leads):
        raise ECGConfigError(f"Got {len(leads)} leads but {len(configs)} render configs")

    scale = compute_shared_scale(
        leads,
        configs,
        window_size=settings.window_size,
        width_px=settings.strip_width_px,
        amplitude_range=settings.amplitude_range,
    )
    return [render_lead(lead, config, scale) for lead, config in zip(leads, configs)]
