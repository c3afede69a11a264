"""Spectral analysis package.

Design principle:
  - The forward DFT is always delegated to a :class:`~spectrum_analyzer.analysis.transform.TransformProvider`.
  - Everything around it (signal synthesis, polar conversion, band filtering)
    is plain numpy on ``complex64`` / ``float32`` buffers.

Bin frequencies are derived from the explicit sample rate carried by
:class:`~spectrum_analyzer.models.config.AnalysisConfig`, never from a hidden constant.
"""

from .pipeline import band_mask, bin_frequencies, perform_fft_analysis, run_analysis, select_bins
from .signals import generate_input_data, sample_times
from .spectrum import calculate_magnitude, calculate_phase
from .transform import NumpyFFTProvider, TransformProvider
from spectrum_analyzer.models.waveforms import SignalType

__all__ = [
    "NumpyFFTProvider",
    "SignalType",
    "TransformProvider",
    "band_mask",
    "bin_frequencies",
    "calculate_magnitude",
    "calculate_phase",
    "generate_input_data",
    "perform_fft_analysis",
    "run_analysis",
    "sample_times",
    "select_bins",
]
