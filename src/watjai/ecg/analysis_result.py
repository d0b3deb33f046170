"""
Analysis result handed over by the external analysis service.

The session store keeps the service response as a plain dict; `from_dict`
turns it into an immutable `AnalysisResult`. Required fields are allowed to be
absent here so that the normalizer can report them as `MissingFieldError`.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..core.exceptions import ECGDataError
from ..core.validation import ECGValidator


@dataclass(frozen=True)
class AnalysisResult:
    """Read-only view of one analysis response."""
    prediction: Optional[str] = None
    confidence: Optional[float] = None
    bpm: Optional[float] = None
    heart_rate: Optional[float] = None
    risk_level: Optional[str] = None
    probabilities: Optional[Mapping[str, float]] = None
    spectrogram_base64: Optional[str] = None
    processing_time: Optional[float] = None  # seconds
    timestamp: Optional[float] = None  # epoch milliseconds

    def __post_init__(self):
        if self.probabilities is not None and not isinstance(self.probabilities, MappingProxyType):
            object.__setattr__(self, 'probabilities', MappingProxyType(dict(self.probabilities)))

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AnalysisResult":
        """Build a result from the deserialized service response.

        Unknown keys are ignored. Numeric fields must be numbers when present.
        """
        if not isinstance(payload, Mapping):
            raise ECGDataError(f"Analysis payload must be a mapping, got {type(payload).__name__}")

        prediction = payload.get('prediction')
        if prediction is not None and not isinstance(prediction, str):
            raise ECGDataError(f"prediction must be a string, got {type(prediction).__name__}")

        risk_level = payload.get('risk_level')
        if risk_level is not None and not isinstance(risk_level, str):
            raise ECGDataError(f"risk_level must be a string, got {type(risk_level).__name__}")

        return cls(
            prediction=prediction,
            confidence=ECGValidator.validate_optional_number('confidence', payload.get('confidence')),
            bpm=ECGValidator.validate_optional_number('bpm', payload.get('bpm')),
            heart_rate=ECGValidator.validate_optional_number('heart_rate', payload.get('heart_rate')),
            risk_level=risk_level,
            probabilities=ECGValidator.validate_probabilities(payload.get('probabilities')),
            spectrogram_base64=payload.get('spectrogram_base64'),
            processing_time=ECGValidator.validate_optional_number(
                'processing_time', payload.get('processing_time')
            ),
            timestamp=ECGValidator.validate_optional_number('timestamp', payload.get('timestamp')),
        )
