"""
Unit tests for the result normalizer.

Tests for:
- Heart rate fallback chain
- Quality rounding (halves round up)
- Risk tier rules and boundaries
- Missing required fields
"""

import json

import pytest

from watjai.config.settings import ResultSettings
from watjai.core.exceptions import ECGDataError, MissingFieldError
from watjai.ecg.analysis_result import AnalysisResult
from watjai.ecg.metrics import DisplayModel, RiskTier, normalize_result


# =============================================================================
# HEART RATE TESTS
# =============================================================================

class TestHeartRate:
    """Tests for the heart rate fallback chain."""

    @pytest.mark.parametrize("bpm,heart_rate", [(74.4, 90.0), (61, None), (0, 80)])
    def test_bpm_wins_when_present(self, bpm, heart_rate):
        result = AnalysisResult(prediction="Normal", confidence=90, bpm=bpm, heart_rate=heart_rate)

        assert normalize_result(result).heart_rate_bpm == round(bpm)

    def test_heart_rate_used_without_bpm(self):
        result = AnalysisResult(prediction="Normal", confidence=90, heart_rate=88.6)

        assert normalize_result(result).heart_rate_bpm == 89

    def test_default_without_any_rate(self):
        result = AnalysisResult(prediction="Normal", confidence=90)

        assert normalize_result(result).heart_rate_bpm == 72

    def test_default_comes_from_settings(self):
        result = AnalysisResult(prediction="Normal", confidence=90)
        settings = ResultSettings(default_heart_rate=60)

        assert normalize_result(result, settings).heart_rate_bpm == 60

    def test_no_range_validation(self):
        result = AnalysisResult(prediction="VT", confidence=90, bpm=320)

        assert normalize_result(result).heart_rate_bpm == 320

    @pytest.mark.parametrize("bpm,expected", [(72.5, 73), (88.5, 89), (59.49, 59)])
    def test_half_bpm_rounds_up(self, bpm, expected):
        result = AnalysisResult(prediction="Normal", confidence=90, bpm=bpm)

        assert normalize_result(result).heart_rate_bpm == expected

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rate_falls_through(self, bad):
        assert normalize_result(
            AnalysisResult(prediction="Normal", confidence=90, bpm=bad, heart_rate=81)
        ).heart_rate_bpm == 81
        assert normalize_result(
            AnalysisResult(prediction="Normal", confidence=90, bpm=bad, heart_rate=bad)
        ).heart_rate_bpm == 72

    def test_non_finite_rate_from_json_payload(self):
        result = AnalysisResult.from_dict(json.loads('{"prediction": "Normal", "confidence": 90, "bpm": NaN}'))

        assert normalize_result(result).heart_rate_bpm == 72


# =============================================================================
# RISK TIER TESTS
# =============================================================================

class TestRiskTier:
    """Tests for the confidence-based risk rules."""

    @pytest.mark.parametrize("confidence,expected", [
        (95, RiskTier.LOW),
        (80.0001, RiskTier.LOW),
        (80, RiskTier.MEDIUM),
        (50.0001, RiskTier.MEDIUM),
        (50, RiskTier.HIGH),
        (10, RiskTier.HIGH),
    ])
    def test_normal_prediction_boundaries(self, confidence, expected):
        result = AnalysisResult(prediction="Normal", confidence=confidence)

        assert normalize_result(result).risk_tier == expected

    @pytest.mark.parametrize("prediction", ["AF", "Other", "normal", "Noisy"])
    def test_non_normal_is_always_high(self, prediction):
        result = AnalysisResult(prediction=prediction, confidence=99.9)

        assert normalize_result(result).risk_tier == RiskTier.HIGH

    @pytest.mark.parametrize("prediction,confidence", [("Normal", 99), ("Normal", 10), ("AF", 99)])
    @pytest.mark.parametrize("risk_level,expected", [
        ("Low Risk", RiskTier.LOW),
        ("Medium Risk", RiskTier.MEDIUM),
        ("High Risk", RiskTier.HIGH),
    ])
    def test_explicit_risk_level_always_wins(self, prediction, confidence, risk_level, expected):
        result = AnalysisResult(prediction=prediction, confidence=confidence, risk_level=risk_level)

        assert normalize_result(result).risk_tier == expected

    def test_custom_thresholds(self):
        settings = ResultSettings(low_risk_confidence=90, medium_risk_confidence=70)
        result = AnalysisResult(prediction="Normal", confidence=85)

        assert normalize_result(result, settings).risk_tier == RiskTier.MEDIUM


# =============================================================================
# DISPLAY MODEL TESTS
# =============================================================================

class TestDisplayModel:
    """Tests for the assembled display model."""

    def test_full_model(self, normal_result):
        model = normalize_result(normal_result)

        assert model == DisplayModel(
            heart_rate_bpm=74,
            rhythm_label="Normal",
            quality_percent=93,
            risk_tier=RiskTier.LOW,
        )

    def test_quality_is_rounded(self):
        result = AnalysisResult(prediction="Normal", confidence=80.0001)

        assert normalize_result(result).quality_percent == 80

    @pytest.mark.parametrize("confidence,expected", [(72.5, 73), (50.5, 51), (0.5, 1), (99.5, 100)])
    def test_quality_half_rounds_up(self, confidence, expected):
        result = AnalysisResult(prediction="Normal", confidence=confidence)

        assert normalize_result(result).quality_percent == expected

    def test_rhythm_label_is_verbatim(self):
        result = AnalysisResult(prediction="Sinus Tachycardia ", confidence=70)

        assert normalize_result(result).rhythm_label == "Sinus Tachycardia "

    def test_input_not_mutated(self, normal_result):
        before = (normal_result.bpm, normal_result.confidence, dict(normal_result.probabilities))

        normalize_result(normal_result)

        assert (normal_result.bpm, normal_result.confidence, dict(normal_result.probabilities)) == before


# =============================================================================
# MISSING FIELD TESTS
# =============================================================================

class TestMissingFields:
    """Required fields have no fallback."""

    def test_missing_prediction(self):
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_result(AnalysisResult(confidence=90, bpm=70))

        assert exc_info.value.field_name == "prediction"

    def test_missing_confidence(self):
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_result(AnalysisResult(prediction="Normal", bpm=70))

        assert exc_info.value.field_name == "confidence"

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_confidence_is_missing(self, bad):
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_result(AnalysisResult(prediction="Normal", confidence=bad, bpm=70))

        assert exc_info.value.field_name == "confidence"

    def test_missing_field_is_data_error(self):
        with pytest.raises(ECGDataError):
            normalize_result(AnalysisResult())
