"""Core constants, errors, logging and validation shared by the results screen"""
from .exceptions import ECGError, ECGDataError, ECGConfigError, MissingFieldError
from .logging_config import ECGLogger, configure_logging, get_logger, log_function_call
from .validation import ECGValidator, as_sample_array, finite_or_none, round_half_up

__all__ = [
    'ECGError',
    'ECGDataError',
    'ECGConfigError',
    'MissingFieldError',
    'ECGLogger',
    'configure_logging',
    'get_logger',
    'log_function_call',
    'ECGValidator',
    'as_sample_array',
    'finite_or_none',
    'round_half_up',
]
