"""ECG helper utilities"""
from .helpers import generate_demo_leads, generate_demo_waveform

__all__ = ['generate_demo_leads', 'generate_demo_waveform']
