"""Results screen view glue"""
from .display_updates import format_result_metrics, update_result_metrics_display
from .technical_details import (
    ClassProbability,
    TechnicalDetails,
    build_technical_details,
    class_probability_rows,
    decode_spectrogram,
    load_spectrogram_image,
)
from .results_screen import NoResultScreen, ResultsScreen, build_results_screen

__all__ = [
    'format_result_metrics',
    'update_result_metrics_display',
    'ClassProbability',
    'TechnicalDetails',
    'build_technical_details',
    'class_probability_rows',
    'decode_spectrogram',
    'load_spectrogram_image',
    'NoResultScreen',
    'ResultsScreen',
    'build_results_screen',
]
