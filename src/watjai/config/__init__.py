"""
Configuration module for the ECG results screen.
"""

from .settings import (
    AppConfig,
    DisplaySettings,
    ResultSettings,
    get_config,
)

__all__ = [
    'AppConfig',
    'DisplaySettings',
    'ResultSettings',
    'get_config',
]
