"""
Assembly of the results screen from the current session.

Combines the normalized display model, the three lead strips, the risk meter
and the technical details. A missing or unusable result turns into a
`NoResultScreen` instead of partial metrics.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from ...config.settings import DisplaySettings, ResultSettings
from ...core import constants
from ...core.exceptions import MissingFieldError
from ...core.logging_config import get_logger
from ..analysis_result import AnalysisResult
from ..metrics.normalizer import DisplayModel, normalize_result
from ..metrics.risk import RiskMeter, risk_meter
from ..plotting.lead_strips import RenderedStrip, render_leads
from .technical_details import TechnicalDetails, build_technical_details

logger = get_logger(__name__)


@dataclass(frozen=True)
class NoResultScreen:
    """Shown while no valid analysis result is available"""
    title: str = constants.NO_RESULT_TITLE
    message: str = constants.NO_RESULT_MESSAGE
    has_history: bool = False
    reason: Optional[str] = None


@dataclass(frozen=True)
class ResultsScreen:
    """Everything the view needs to draw one results screen"""
    display: DisplayModel
    strips: Tuple[RenderedStrip, ...]
    risk_meter: RiskMeter
    details: TechnicalDetails


def build_results_screen(result: Union[AnalysisResult, Mapping[str, Any], None],
                         leads: Sequence[Optional[Sequence[float]]],
                         history: Sequence[Any] = (),
                         result_settings: Optional[ResultSettings] = None,
                         display_settings: Optional[DisplaySettings] = None
                         ) -> Union[ResultsScreen, NoResultScreen]:
    """Build the results screen for the current session

    Args:
        result: Analysis result, its raw session-store dict, or None if the
            analysis has not produced one yet
        leads: Sample sequences, one per configured lead
        history: Previous measurements; only its emptiness is used
        result_settings: Fallbacks and risk thresholds
        display_settings: Strip layout

    Returns:
        ResultsScreen, or NoResultScreen when there is no valid result
    """
    has_history = len(history) > 0

    if result is None:
        return NoResultScreen(has_history=has_history)

    if not isinstance(result, AnalysisResult):
        result = AnalysisResult.from_dict(result)

    try:
        display = normalize_result(result, result_settings)
    except MissingFieldError as e:
        logger.warning(f"Showing no-result screen: {e}")
        return NoResultScreen(has_history=has_history, reason=str(e))

    strips = render_leads(leads, settings=display_settings)
    return ResultsScreen(
        display=display,
        strips=tuple(strips),
        risk_meter=risk_meter(display.risk_tier),
        details=build_technical_details(result),
    )
