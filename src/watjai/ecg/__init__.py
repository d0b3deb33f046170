"""ECG result derivation and lead strip rendering"""
from .analysis_result import AnalysisResult
from .metrics import DisplayModel, RiskTier, normalize_result
from .plotting import RenderConfig, RenderedStrip, build_lead_configs, render_lead, render_leads

__all__ = [
    'AnalysisResult',
    'DisplayModel',
    'RiskTier',
    'normalize_result',
    'RenderConfig',
    'RenderedStrip',
    'build_lead_configs',
    'render_lead',
    'render_leads',
]
