from .buffer import SAMPLE_DTYPE, VALUE_DTYPE, as_sample_buffer
from .config import AnalysisConfig
from .report import BinRecord, SpectrumReport
from .waveforms import (
    DEFAULT_SIGNAL_SETTINGS,
    SAMPLE_RATE_HZ,
    SIGNAL_AMPLITUDE,
    SIGNAL_FREQUENCY_HZ,
    SignalSettings,
    SignalType,
    resolve_signal_type,
)

__all__ = [
    "AnalysisConfig",
    "BinRecord",
    "DEFAULT_SIGNAL_SETTINGS",
    "SAMPLE_DTYPE",
    "SAMPLE_RATE_HZ",
    "SIGNAL_AMPLITUDE",
    "SIGNAL_FREQUENCY_HZ",
    "SignalSettings",
    "SignalType",
    "SpectrumReport",
    "VALUE_DTYPE",
    "as_sample_buffer",
    "resolve_signal_type",
]
