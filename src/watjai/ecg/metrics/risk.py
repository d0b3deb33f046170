"""Risk tier derivation for the heart risk assessment panel"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...core import constants
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class RiskTier(Enum):
    """Discrete risk tiers shown on the risk meter"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def label(self) -> str:
        return f"{self.value} Risk"

    @property
    def css_class(self) -> str:
        return f"{self.value.lower()}-risk"


# Accepted spellings after lower-casing and collapsing separators
_RISK_ALIASES = {
    "low": RiskTier.LOW,
    "low risk": RiskTier.LOW,
    "medium": RiskTier.MEDIUM,
    "medium risk": RiskTier.MEDIUM,
    "moderate": RiskTier.MEDIUM,
    "moderate risk": RiskTier.MEDIUM,
    "high": RiskTier.HIGH,
    "high risk": RiskTier.HIGH,
}


@dataclass(frozen=True)
class RiskMeter:
    """Presentation of one tier on the risk meter bar"""
    tier: RiskTier
    width_percent: int
    color: str
    css_class: str
    label: str


def normalize_risk_level(risk_level: Optional[str]) -> Optional[RiskTier]:
    """Map a service-provided risk string to a tier

    Returns None when the string is absent or blank. Spellings that are
    present but unrecognized resolve to HIGH.
    """
    if risk_level is None:
        return None

    key = re.sub(r"[\s_\-]+", " ", risk_level).strip().lower()
    if not key:
        return None

    tier = _RISK_ALIASES.get(key)
    if tier is None:
        logger.warning(f"Unrecognized risk level '{risk_level}', treating as {RiskTier.HIGH.label}")
        return RiskTier.HIGH
    return tier


def resolve_risk_tier(prediction: str, confidence: float, risk_level: Optional[str] = None,
                      low_threshold: float = constants.LOW_RISK_CONFIDENCE,
                      medium_threshold: float = constants.MEDIUM_RISK_CONFIDENCE,
                      reference_prediction: str = constants.REFERENCE_PREDICTION) -> RiskTier:
    """Resolve the risk tier, first matching rule wins

    1. An explicit risk level from the analysis service.
    2. Reference prediction with confidence above low_threshold: LOW.
    3. Reference prediction with confidence above medium_threshold: MEDIUM.
    4. Anything else: HIGH.

    Thresholds are exclusive, a tie falls to the stricter tier.
    """
    explicit = normalize_risk_level(risk_level)
    if explicit is not None:
        return explicit

    if prediction == reference_prediction:
        if confidence > low_threshold:
            return RiskTier.LOW
        if confidence > medium_threshold:
            return RiskTier.MEDIUM

    return RiskTier.HIGH


def risk_meter(tier: RiskTier) -> RiskMeter:
    """Meter width, color and labels for a tier"""
    return RiskMeter(
        tier=tier,
        width_percent=constants.RISK_METER_WIDTHS[tier.value],
        color=constants.RISK_METER_COLORS[tier.value],
        css_class=tier.css_class,
        label=tier.label,
    )
