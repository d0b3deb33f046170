"""
Data validation utilities for ECG result presentation
"""

import math
import numpy as np
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Sequence, Tuple, Union
from matplotlib.colors import to_rgb

from .exceptions import ECGConfigError, ECGDataError, MissingFieldError


class ECGValidator:
    """Validation utilities for analysis payloads and display parameters"""

    @staticmethod
    def require_field(name: str, value: Any) -> Any:
        """Return value, raising MissingFieldError when it is absent"""
        if value is None:
            raise MissingFieldError(name)
        return value

    @staticmethod
    def validate_optional_number(name: str, value: Any) -> Optional[float]:
        """Coerce an optional numeric field to float"""
        if value is None:
            return None

        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise ECGDataError(f"{name} must be numeric, got {type(value).__name__}")

        return float(value)

    @staticmethod
    def validate_probabilities(value: Any) -> Optional[dict]:
        """Validate the per-class probability mapping"""
        if value is None:
            return None

        if not isinstance(value, Mapping):
            raise ECGDataError(f"probabilities must be a mapping, got {type(value).__name__}")

        return {
            str(name): ECGValidator.validate_optional_number(f"probabilities[{name}]", prob)
            for name, prob in value.items()
        }

    @staticmethod
    def validate_color(color: Union[str, Sequence[int]]) -> Tuple[int, int, int]:
        """Resolve a hex string or RGB triple to 0-255 integer RGB"""
        if isinstance(color, str):
            try:
                r, g, b = to_rgb(color)
            except ValueError:
                raise ECGConfigError(f"Invalid color '{color}'")
            return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))

        rgb = tuple(color)
        if len(rgb) != 3 or not all(isinstance(c, (int, np.integer)) and 0 <= c <= 255 for c in rgb):
            raise ECGConfigError(f"RGB color must be three integers in 0-255, got {color!r}")
        return int(rgb[0]), int(rgb[1]), int(rgb[2])

    @staticmethod
    def validate_height(height_px: int, name: str = "Strip height") -> int:
        """Validate a strip dimension in pixels"""
        if isinstance(height_px, bool) or not isinstance(height_px, int):
            raise ECGConfigError(f"{name} must be integer, got {type(height_px).__name__}")

        if height_px <= 0:
            raise ECGConfigError(f"{name} must be positive, got {height_px}")

        return height_px

    @staticmethod
    def validate_window_size(window_size: int) -> int:
        """Validate the number of samples drawn per lead"""
        if isinstance(window_size, bool) or not isinstance(window_size, int):
            raise ECGConfigError(f"Window size must be integer, got {type(window_size).__name__}")

        if window_size <= 0:
            raise ECGConfigError(f"Window size must be positive, got {window_size}")

        return window_size

    @staticmethod
    def validate_amplitude_range(amplitude_range: Sequence[float]) -> Tuple[float, float]:
        """Validate the fixed (low, high) amplitude range"""
        try:
            low, high = (float(v) for v in amplitude_range)
        except (TypeError, ValueError):
            raise ECGConfigError(f"Amplitude range must be two numbers, got {amplitude_range!r}")

        if not (np.isfinite(low) and np.isfinite(high)) or high <= low:
            raise ECGConfigError(f"Amplitude range must be finite and increasing, got ({low}, {high})")

        return low, high


def as_sample_array(samples: Optional[Sequence[float]]) -> np.ndarray:
    """View a lead's samples as a 1D float array without copying when possible"""
    if samples is None:
        return np.empty(0, dtype=float)

    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 1:
        raise ECGDataError(f"Waveform samples must be 1D, got {arr.ndim}D")

    return arr


def finite_or_none(value: Optional[float]) -> Optional[float]:
    """Treat NaN and infinities as absent"""
    if value is None or not math.isfinite(value):
        return None
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (72.5 -> 73)"""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
