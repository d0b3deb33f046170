"""Result metrics derivation modules"""
from .heart_rate import resolve_heart_rate
from .risk import RiskMeter, RiskTier, normalize_risk_level, resolve_risk_tier, risk_meter
from .normalizer import DisplayModel, normalize_result

__all__ = [
    'resolve_heart_rate',
    'RiskMeter',
    'RiskTier',
    'normalize_risk_level',
    'resolve_risk_tier',
    'risk_meter',
    'DisplayModel',
    'normalize_result',
]
