"""Technical details panel: class probabilities, spectrogram, processing info"""
import base64
import binascii
import io
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

import numpy as np
from matplotlib import image as mpimg

from ...core import constants
from ...core.logging_config import get_logger
from ...core.validation import finite_or_none
from ..analysis_result import AnalysisResult

logger = get_logger(__name__)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@dataclass(frozen=True)
class ClassProbability:
    """One row of the class probability list"""
    class_name: str
    probability: float
    percent_text: str
    bar_width_percent: float
    is_prediction: bool


@dataclass(frozen=True)
class TechnicalDetails:
    """Diagnostic metadata shown below the main results"""
    probabilities: Tuple[ClassProbability, ...]
    spectrogram_png: Optional[bytes]
    analysis_date: Optional[str]
    processing_time_text: Optional[str]


def class_probability_rows(result: AnalysisResult) -> List[ClassProbability]:
    """Probability rows, most likely class first

    Classes without a finite probability are left out of the list.
    """
    if not result.probabilities:
        return []

    present = []
    for name, prob in result.probabilities.items():
        if finite_or_none(prob) is None:
            logger.warning(constants.ERROR_MESSAGES["invalid_probability"].format(name, prob))
            continue
        present.append((name, prob))

    ranked = sorted(present, key=lambda item: item[1], reverse=True)
    return [
        ClassProbability(
            class_name=name,
            probability=prob,
            percent_text=f"{prob * 100:.2f}%",
            bar_width_percent=prob * 100,
            is_prediction=name == result.prediction,
        )
        for name, prob in ranked
    ]


def decode_spectrogram(spectrogram_base64: Optional[str]) -> Optional[bytes]:
    """Decode the base64 spectrogram to PNG bytes, None if absent or invalid"""
    if not spectrogram_base64:
        return None

    try:
        data = base64.b64decode(spectrogram_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(constants.ERROR_MESSAGES["invalid_spectrogram"].format(e))
        return None

    if not data.startswith(PNG_SIGNATURE):
        logger.warning(constants.ERROR_MESSAGES["invalid_spectrogram"].format("not a PNG image"))
        return None
    return data


def load_spectrogram_image(png_bytes: bytes) -> np.ndarray:
    """Load decoded spectrogram PNG bytes into an image array"""
    return mpimg.imread(io.BytesIO(png_bytes), format='png')


def format_analysis_date(timestamp_ms: Optional[float]) -> Optional[str]:
    """Local date/time string for an epoch-milliseconds timestamp, None if unusable"""
    if timestamp_ms is None:
        return None
    try:
        moment = datetime.fromtimestamp(timestamp_ms / 1000.0)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning(constants.ERROR_MESSAGES["invalid_timestamp"].format(timestamp_ms, e))
        return None
    return moment.strftime('%Y-%m-%d %H:%M:%S')


def format_processing_time(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    return f"{seconds:.2f} seconds"


def build_technical_details(result: AnalysisResult) -> TechnicalDetails:
    """Collect the diagnostic metadata of a result"""
    return TechnicalDetails(
        probabilities=tuple(class_probability_rows(result)),
        spectrogram_png=decode_spectrogram(result.spectrogram_base64),
        analysis_date=format_analysis_date(result.timestamp),
        processing_time_text=format_processing_time(result.processing_time),
    )
