"""
Custom exceptions for ECG result presentation
"""

from .constants import ERROR_MESSAGES


class ECGError(Exception):
    """Base exception for ECG-related errors"""
    pass


class ECGDataError(ECGError):
    """Exception raised for malformed analysis data"""
    pass


class ECGConfigError(ECGError):
    """Exception raised for configuration-related errors"""
    pass


class MissingFieldError(ECGDataError):
    """Exception raised when a required analysis field is absent

    The rhythm label and the confidence must come from a real analysis,
    so there is no fallback for either of them.
    """

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(ERROR_MESSAGES["missing_field"].format(field_name))
