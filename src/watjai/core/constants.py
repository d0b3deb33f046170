"""
Constants and configuration values for ECG result presentation
"""

# ECG Lead Names (three-lead strip)
ECG_LEADS = ["I", "II", "III"]
REFERENCE_LEAD_INDEX = 0

# Heart Rate
DEFAULT_HEART_RATE = 72  # BPM, placeholder when the analysis reports none

# Risk Tier Thresholds (percent confidence, exclusive lower bounds)
REFERENCE_PREDICTION = "Normal"
LOW_RISK_CONFIDENCE = 80
MEDIUM_RISK_CONFIDENCE = 50

# Strip Window
WAVEFORM_WINDOW_SIZE = 400  # samples drawn per lead
AMPLITUDE_RANGE = (-2.0, 2.0)  # unitless, pre-scaled by the analysis service

# Strip Layout (pixels)
STRIP_WIDTH_PX = 800
REFERENCE_STRIP_HEIGHT_PX = 120
LEAD_STRIP_HEIGHT_PX = 100

# File Paths
CONFIG_FILE = "watjai_settings.json"

# Display Configuration
ECG_LINE_WIDTH = 1.0
LEAD_COLOR = '#000000'
GRID_COLOR = '#FF0000'
GRID_ALPHA = 0.1
GRID_SPACING_PX = 20
BACKGROUND_COLOR = '#FFEEEE'
TEXT_COLOR = '#000000'

# Risk Meter
RISK_METER_WIDTHS = {
    "Low": 30,
    "Medium": 60,
    "High": 90,
}
RISK_METER_COLORS = {
    "Low": '#4285F4',
    "Medium": '#FBBC05',
    "High": '#EA4335',
}

# Messages
ERROR_MESSAGES = {
    "missing_field": "Analysis result is missing required field: {}",
    "config_load_error": "Could not load config file {}: {}",
    "config_save_error": "Error saving config file: {}",
    "invalid_config": "Invalid configuration value: {}",
    "invalid_spectrogram": "Spectrogram payload could not be decoded: {}",
    "invalid_probability": "Skipping probability for class '{}': {!r} is not a finite number",
    "invalid_timestamp": "Analysis timestamp {!r} is out of range: {}",
}

NO_RESULT_TITLE = "No Analysis Results"
NO_RESULT_MESSAGE = "Please measure and analyze ECG first"

# Logging
LOG_ROTATION_SIZE = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5
