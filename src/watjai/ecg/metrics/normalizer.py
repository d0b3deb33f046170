"""Derivation of the results display model from an analysis result"""
from dataclasses import dataclass
from typing import Optional

from ...config.settings import ResultSettings
from ...core.logging_config import get_logger
from ...core.validation import ECGValidator, finite_or_none, round_half_up
from ..analysis_result import AnalysisResult
from .heart_rate import resolve_heart_rate
from .risk import RiskTier, resolve_risk_tier

logger = get_logger(__name__)


@dataclass(frozen=True)
class DisplayModel:
    """Fully populated metrics for one results screen"""
    heart_rate_bpm: int
    rhythm_label: str
    quality_percent: int
    risk_tier: RiskTier


def normalize_result(result: AnalysisResult, settings: Optional[ResultSettings] = None) -> DisplayModel:
    """Turn an analysis result into a display model

    Args:
        result: Analysis result from the session store (never mutated)
        settings: Fallback values and risk thresholds (defaults if omitted)

    Returns:
        DisplayModel with every field populated

    Raises:
        MissingFieldError: prediction or confidence is absent (or confidence
            is not finite)
    """
    settings = settings or ResultSettings()

    prediction = ECGValidator.require_field('prediction', result.prediction)
    confidence = ECGValidator.require_field('confidence', finite_or_none(result.confidence))

    heart_rate = resolve_heart_rate(result.bpm, result.heart_rate, default=settings.default_heart_rate)
    tier = resolve_risk_tier(
        prediction,
        confidence,
        result.risk_level,
        low_threshold=settings.low_risk_confidence,
        medium_threshold=settings.medium_risk_confidence,
        reference_prediction=settings.reference_prediction,
    )

    model = DisplayModel(
        heart_rate_bpm=heart_rate,
        rhythm_label=prediction,
        quality_percent=round_half_up(confidence),
        risk_tier=tier,
    )
    logger.debug(f"Normalized result: {model}")
    return model
