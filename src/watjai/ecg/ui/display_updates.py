"""Result metrics display update functions"""
from typing import Dict

from ...core.logging_config import get_logger
from ..metrics.normalizer import DisplayModel

logger = get_logger(__name__)


def format_result_metrics(display: DisplayModel) -> Dict[str, str]:
    """Text for the BPM, Rhythm and Quality metric boxes and the risk label

    Args:
        display: Normalized display model

    Returns:
        Dictionary of metric texts keyed by label name
    """
    return {
        'heart_rate': f"{display.heart_rate_bpm}",
        'rhythm': display.rhythm_label,
        'quality': f"{display.quality_percent}%",
        'risk': display.risk_tier.label,
    }


def update_result_metrics_display(metric_labels: Dict, display: DisplayModel) -> Dict[str, str]:
    """Write the display model into the metric label widgets

    Args:
        metric_labels: Dictionary of label widgets exposing setText (e.g. QLabel)
        display: Normalized display model

    Returns:
        The texts that were written, keyed by label name
    """
    texts = format_result_metrics(display)
    written = {}
    for key, text in texts.items():
        label = metric_labels.get(key) if metric_labels else None
        if label is None:
            continue
        label.setText(text)
        written[key] = text

    logger.debug(f"Updated result metric labels: {sorted(written)}")
    return written
