"""
pytest configuration and shared fixtures.

This module provides shared fixtures and configuration for all tests.
"""

import os
import sys

import numpy as np
import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to path for all tests
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from watjai.ecg.analysis_result import AnalysisResult  # noqa: E402


# =============================================================================
# RESULT FIXTURES
# =============================================================================

@pytest.fixture
def normal_result():
    """High-confidence Normal result with every optional field populated."""
    return AnalysisResult(
        prediction="Normal",
        confidence=92.6,
        bpm=74.4,
        heart_rate=90.0,
        probabilities={"Normal": 0.926, "AF": 0.05, "Other": 0.024},
        processing_time=1.2345,
        timestamp=1700000000000,
    )


@pytest.fixture
def result_payload():
    """Raw session-store dict as returned by the analysis service."""
    return {
        "prediction": "AF",
        "confidence": 67.2,
        "heart_rate": 118,
        "risk_level": "Medium Risk",
        "probabilities": {"Normal": 0.2, "AF": 0.672, "Other": 0.128},
        "processing_time": 0.5,
        "timestamp": 1700000000000,
        "model_version": "ignored",
    }


# =============================================================================
# WAVEFORM FIXTURES
# =============================================================================

@pytest.fixture
def uneven_leads():
    """Three leads of differing lengths (1000, 400, 50)."""
    rng = np.random.default_rng(42)
    return [
        rng.normal(0, 0.5, 1000),
        rng.normal(0, 0.5, 400),
        rng.normal(0, 0.5, 50),
    ]


class FakeLabel:
    """Stand-in for a QLabel that records the last text."""

    def __init__(self):
        self.text = None

    def setText(self, text):
        self.text = text


@pytest.fixture
def fake_labels():
    return {key: FakeLabel() for key in ('heart_rate', 'rhythm', 'quality', 'risk')}
