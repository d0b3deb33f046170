"""WATJAI ECG results: display model derivation and three-lead strip rendering"""

__version__ = "1.0.0"
