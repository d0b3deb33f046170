"""
Application settings and configuration management
"""

import copy
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core import constants
from ..core.exceptions import ECGConfigError
from ..core.logging_config import get_logger
from ..core.validation import ECGValidator

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResultSettings:
    """Fallback values and thresholds used to derive the display model"""
    default_heart_rate: int = constants.DEFAULT_HEART_RATE
    low_risk_confidence: float = constants.LOW_RISK_CONFIDENCE
    medium_risk_confidence: float = constants.MEDIUM_RISK_CONFIDENCE
    reference_prediction: str = constants.REFERENCE_PREDICTION


@dataclass(frozen=True)
class DisplaySettings:
    """Strip layout shared by every lead on one screen"""
    window_size: int = constants.WAVEFORM_WINDOW_SIZE
    strip_width_px: int = constants.STRIP_WIDTH_PX
    reference_height_px: int = constants.REFERENCE_STRIP_HEIGHT_PX
    lead_height_px: int = constants.LEAD_STRIP_HEIGHT_PX
    amplitude_range: Tuple[float, float] = constants.AMPLITUDE_RANGE
    leads: Tuple[str, ...] = tuple(constants.ECG_LEADS)
    reference_index: int = constants.REFERENCE_LEAD_INDEX
    lead_color: Tuple[int, int, int] = (0, 0, 0)
    grid_color: Tuple[int, int, int] = (255, 0, 0)
    background_color: Tuple[int, int, int] = (255, 238, 238)


class AppConfig:
    """Centralized configuration management for the results screen"""

    def __init__(self, config_file: Optional[str] = constants.CONFIG_FILE):
        self.config_file = config_file
        self._config = self._load_default_config()
        self._load_config()

    def _load_default_config(self) -> Dict[str, Any]:
        """Load default configuration values"""
        return {
            "results": {
                "default_heart_rate": constants.DEFAULT_HEART_RATE,
                "low_risk_confidence": constants.LOW_RISK_CONFIDENCE,
                "medium_risk_confidence": constants.MEDIUM_RISK_CONFIDENCE,
                "reference_prediction": constants.REFERENCE_PREDICTION
            },
            "display": {
                "window_size": constants.WAVEFORM_WINDOW_SIZE,
                "strip_width_px": constants.STRIP_WIDTH_PX,
                "reference_height_px": constants.REFERENCE_STRIP_HEIGHT_PX,
                "lead_height_px": constants.LEAD_STRIP_HEIGHT_PX,
                "amplitude_range": list(constants.AMPLITUDE_RANGE),
                "leads": list(constants.ECG_LEADS),
                "reference_index": constants.REFERENCE_LEAD_INDEX,
                "lead_color": constants.LEAD_COLOR,
                "grid_color": constants.GRID_COLOR,
                "background_color": constants.BACKGROUND_COLOR
            },
            "logging": {
                "level": "INFO",
                "file": None
            }
        }

    def _load_config(self) -> None:
        """Load configuration from file if it exists"""
        if self.config_file and os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                self._merge_config(file_config)
                logger.debug(f"Loaded settings from {self.config_file}")
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(constants.ERROR_MESSAGES["config_load_error"].format(self.config_file, e))

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with default configuration"""
        def merge_dict(default: Dict, override: Dict) -> Dict:
            for key, value in override.items():
                if key in default and isinstance(default[key], dict) and isinstance(value, dict):
                    merge_dict(default[key], value)
                else:
                    default[key] = value
            return default

        self._config = merge_dict(self._config, file_config)

    def save_config(self) -> bool:
        """Save current configuration to file"""
        if not self.config_file:
            return False
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2)
            return True
        except OSError as e:
            logger.error(constants.ERROR_MESSAGES["config_save_error"].format(e))
            return False

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'display.window_size')"""
        keys = key_path.split('.')
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        keys = key_path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    def as_dict(self) -> Dict[str, Any]:
        """Deep copy of the merged configuration"""
        return copy.deepcopy(self._config)

    def result_settings(self) -> ResultSettings:
        """Resolve the derivation thresholds"""
        section = self.get('results', {})
        try:
            low = float(section['low_risk_confidence'])
            medium = float(section['medium_risk_confidence'])
            default_hr = int(section['default_heart_rate'])
        except (KeyError, TypeError, ValueError) as e:
            raise ECGConfigError(constants.ERROR_MESSAGES["invalid_config"].format(e))

        if medium > low:
            raise ECGConfigError(
                constants.ERROR_MESSAGES["invalid_config"].format(
                    f"medium_risk_confidence {medium} exceeds low_risk_confidence {low}"
                )
            )

        return ResultSettings(
            default_heart_rate=default_hr,
            low_risk_confidence=low,
            medium_risk_confidence=medium,
            reference_prediction=str(section.get('reference_prediction', constants.REFERENCE_PREDICTION)),
        )

    def render_settings(self) -> DisplaySettings:
        """Resolve and validate the strip layout"""
        section = self.get('display', {})
        leads = tuple(str(lead) for lead in section.get('leads', constants.ECG_LEADS))
        reference_index = section.get('reference_index', constants.REFERENCE_LEAD_INDEX)

        if not leads:
            raise ECGConfigError(constants.ERROR_MESSAGES["invalid_config"].format("leads is empty"))
        if not isinstance(reference_index, int) or not 0 <= reference_index < len(leads):
            raise ECGConfigError(
                constants.ERROR_MESSAGES["invalid_config"].format(f"reference_index {reference_index!r}")
            )

        return DisplaySettings(
            window_size=ECGValidator.validate_window_size(section.get('window_size')),
            strip_width_px=ECGValidator.validate_height(section.get('strip_width_px'), name="Strip width"),
            reference_height_px=ECGValidator.validate_height(section.get('reference_height_px')),
            lead_height_px=ECGValidator.validate_height(section.get('lead_height_px')),
            amplitude_range=ECGValidator.validate_amplitude_range(section.get('amplitude_range')),
            leads=leads,
            reference_index=reference_index,
            lead_color=ECGValidator.validate_color(section.get('lead_color', constants.LEAD_COLOR)),
            grid_color=ECGValidator.validate_color(section.get('grid_color', constants.GRID_COLOR)),
            background_color=ECGValidator.validate_color(section.get('background_color', constants.BACKGROUND_COLOR)),
        )


# Global configuration instance, created on first use
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config
