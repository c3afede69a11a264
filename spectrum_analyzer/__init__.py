"""Spectrum Analyzer -- magnitude/phase spectra of synthetic test signals.

This package provides tools for:
- Synthesizing real-valued test signals from a closed set of waveforms
- Running a forward DFT through an injectable transform provider
- Converting complex bins to magnitude and phase
- Filtering bins to a frequency band and reporting scaled results

Key principles:
- Explicit sample rate: bin-to-frequency mapping never relies on hidden constants
- Fail fast: invalid configuration raises before any transform is attempted
- Full traceability: every run keeps a leveled log of what happened

Main subpackages:
- analysis: Signal generation, spectrum conversion, transform providers, pipeline
- models: Data models (AnalysisConfig, SpectrumReport, sample buffers)
"""

from .analysis import (
    NumpyFFTProvider,
    SignalType,
    calculate_magnitude,
    calculate_phase,
    generate_input_data,
    perform_fft_analysis,
    run_analysis,
)
from .errors import InvalidArgument, TransformFailure
from .models import AnalysisConfig, BinRecord, SpectrumReport

__all__ = [
    "AnalysisConfig",
    "BinRecord",
    "InvalidArgument",
    "NumpyFFTProvider",
    "SignalType",
    "SpectrumReport",
    "TransformFailure",
    "calculate_magnitude",
    "calculate_phase",
    "generate_input_data",
    "perform_fft_analysis",
    "run_analysis",
]
