"""Heart rate resolution from the analysis result"""
from typing import Optional

from ...core import constants
from ...core.validation import finite_or_none, round_half_up


def resolve_heart_rate(bpm: Optional[float], heart_rate: Optional[float],
                       default: int = constants.DEFAULT_HEART_RATE) -> int:
    """Pick the heart rate to display

    Args:
        bpm: Heart rate reported as ``bpm`` (preferred)
        heart_rate: Heart rate reported as ``heart_rate``
        default: Placeholder used when the analysis reports neither

    Returns:
        int: The first present source rounded half-up to whole BPM. NaN and
        infinite values count as absent. No averaging and no range validation.
    """
    for source in (bpm, heart_rate):
        source = finite_or_none(source)
        if source is not None:
            return round_half_up(source)
    return int(default)
