"""ECG helper functions for demo data"""
import numpy as np
from typing import Dict, Optional

from ...core import constants

# Lead-specific wave amplitudes (unitless, already scaled like service output)
LEAD_CHARACTERISTICS = {
    "I": {"p_amp": 0.1, "qrs_amp": 0.8, "t_amp": 0.2},
    "II": {"p_amp": 0.15, "qrs_amp": 1.2, "t_amp": 0.3},
    "III": {"p_amp": 0.05, "qrs_amp": 0.6, "t_amp": 0.15},
}


def generate_demo_waveform(duration_seconds: float = 4.0, sampling_rate: int = 250,
                           heart_rate: int = constants.DEFAULT_HEART_RATE, lead_name: str = "II",
                           noise_std: float = 0.01, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generate a PQRST-shaped demo waveform for one lead
    - duration_seconds: Length of waveform in seconds
    - sampling_rate: Samples per second (Hz)
    - heart_rate: Beats per minute
    - lead_name: Lead name for lead-specific amplitudes
    """
    total_samples = int(duration_seconds * sampling_rate)
    samples_per_beat = max(1, int(60.0 / heart_rate * sampling_rate))
    char = LEAD_CHARACTERISTICS.get(lead_name, LEAD_CHARACTERISTICS["II"])
    ecg = np.zeros(total_samples)

    # (offset s, duration s, amplitude, shape) per wave within one beat
    waves = (
        (0.0, 0.10, char["p_amp"], "hump"),
        (0.26, 0.08, char["qrs_amp"], "qrs"),
        (0.42, 0.18, char["t_amp"], "hump"),
    )

    for beat_start in range(0, total_samples, samples_per_beat):
        for offset, duration, amp, shape in waves:
            start = beat_start + int(offset * sampling_rate)
            end = min(start + int(duration * sampling_rate), total_samples)
            if start >= end:
                continue
            t = np.linspace(0, 1, end - start)
            if shape == "qrs":
                wave = amp * (np.sin(np.pi * t) * np.exp(-3 * t) - 0.1 * np.exp(-10 * t) - 0.3 * np.exp(-5 * t))
            else:
                wave = amp * np.sin(np.pi * t)
            ecg[start:end] += wave

    rng = rng or np.random.default_rng()
    return ecg + rng.normal(0, noise_std, total_samples)


def generate_demo_leads(duration_seconds: float = 4.0, sampling_rate: int = 250,
                        heart_rate: int = constants.DEFAULT_HEART_RATE,
                        seed: Optional[int] = None) -> Dict[str, np.ndarray]:
    """Demo waveforms for every strip lead, keyed by lead name"""
    rng = np.random.default_rng(seed)
    return {
        lead: generate_demo_waveform(duration_seconds, sampling_rate, heart_rate, lead, rng=rng)
        for lead in constants.ECG_LEADS
    }
