"""
Unit tests for analysis result parsing and risk level normalization.
"""

import logging

import pytest

from watjai.core.exceptions import ECGDataError
from watjai.ecg.analysis_result import AnalysisResult
from watjai.ecg.metrics.risk import RiskTier, normalize_risk_level, risk_meter


class TestFromDict:
    """Tests for AnalysisResult.from_dict."""

    def test_parses_service_payload(self, result_payload):
        result = AnalysisResult.from_dict(result_payload)

        assert result.prediction == "AF"
        assert result.confidence == pytest.approx(67.2)
        assert result.bpm is None
        assert result.heart_rate == 118.0
        assert result.risk_level == "Medium Risk"
        assert result.probabilities["AF"] == pytest.approx(0.672)

    def test_missing_required_fields_are_kept_absent(self):
        result = AnalysisResult.from_dict({"bpm": 70})

        assert result.prediction is None
        assert result.confidence is None

    def test_rejects_non_mapping(self):
        with pytest.raises(ECGDataError):
            AnalysisResult.from_dict(["Normal", 90])

    @pytest.mark.parametrize("payload", [
        {"prediction": "Normal", "confidence": "90"},
        {"prediction": "Normal", "confidence": True},
        {"prediction": 1, "confidence": 90},
        {"prediction": "Normal", "confidence": 90, "probabilities": [0.9, 0.1]},
        {"prediction": "Normal", "confidence": 90, "risk_level": 2},
    ])
    def test_rejects_malformed_fields(self, payload):
        with pytest.raises(ECGDataError):
            AnalysisResult.from_dict(payload)

    def test_result_is_immutable(self, result_payload):
        result = AnalysisResult.from_dict(result_payload)

        with pytest.raises(AttributeError):
            result.confidence = 10
        with pytest.raises(TypeError):
            result.probabilities["AF"] = 1.0

    def test_payload_not_shared(self, result_payload):
        result = AnalysisResult.from_dict(result_payload)
        result_payload["probabilities"]["AF"] = 0.0

        assert result.probabilities["AF"] == pytest.approx(0.672)


class TestRiskLevelNormalization:
    """Tests for service-provided risk strings."""

    @pytest.mark.parametrize("risk_level,expected", [
        ("Low Risk", RiskTier.LOW),
        ("low", RiskTier.LOW),
        ("LOW_RISK", RiskTier.LOW),
        ("  medium-risk ", RiskTier.MEDIUM),
        ("Moderate", RiskTier.MEDIUM),
        ("HIGH RISK", RiskTier.HIGH),
    ])
    def test_spellings(self, risk_level, expected):
        assert normalize_risk_level(risk_level) == expected

    @pytest.mark.parametrize("risk_level", [None, "", "   "])
    def test_absent_or_blank(self, risk_level):
        assert normalize_risk_level(risk_level) is None

    def test_unknown_spelling_is_high(self, caplog):
        with caplog.at_level(logging.WARNING, logger="watjai"):
            assert normalize_risk_level("Critical") == RiskTier.HIGH

        assert "Critical" in caplog.text


class TestRiskMeter:
    """Tests for risk meter presentation."""

    @pytest.mark.parametrize("tier,width,css_class,label", [
        (RiskTier.LOW, 30, "low-risk", "Low Risk"),
        (RiskTier.MEDIUM, 60, "medium-risk", "Medium Risk"),
        (RiskTier.HIGH, 90, "high-risk", "High Risk"),
    ])
    def test_meter(self, tier, width, css_class, label):
        meter = risk_meter(tier)

        assert meter.width_percent == width
        assert meter.css_class == css_class
        assert meter.label == label
        assert meter.color.startswith('#')
