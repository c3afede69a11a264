"""Closed set of synthetic waveform families and their fixed synthesis constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from spectrum_analyzer.errors import InvalidArgument

# Sampling rate used both to synthesize signals and to map bins to frequencies.
SAMPLE_RATE_HZ = 1000.0
SIGNAL_FREQUENCY_HZ = 50.0
SIGNAL_AMPLITUDE = 1.0


class SignalType(IntEnum):
    """Waveform selector. Integer codes are stable (``1`` is sine)."""

    SINE = 1
    SQUARE = 2
    TRIANGLE = 3
    SAWTOOTH = 4
    COSINE = 5
    IMPULSE = 6


SignalTypeLike = Union[SignalType, int, str]


@dataclass(frozen=True)
class SignalSettings:
    """Synthesis constants for the signal generator.

    Attributes
    ----------
    sample_rate_hz:
        Sampling rate; sample ``i`` sits at ``t = i / sample_rate_hz``.
    frequency_hz:
        Fundamental frequency of the periodic waveforms.
    amplitude:
        Peak amplitude (impulse height for ``IMPULSE``).
    """

    sample_rate_hz: float = SAMPLE_RATE_HZ
    frequency_hz: float = SIGNAL_FREQUENCY_HZ
    amplitude: float = SIGNAL_AMPLITUDE


DEFAULT_SIGNAL_SETTINGS = SignalSettings()


def resolve_signal_type(signal_type: SignalTypeLike) -> SignalType:
    """Map an enum member, integer code or case-insensitive name to :class:`SignalType`.

    Raises
    ------
    InvalidArgument
        If the selector is not part of the closed set.
    """
    if isinstance(signal_type, SignalType):
        return signal_type
    if isinstance(signal_type, bool):
        raise InvalidArgument(f"Unknown signal type: {signal_type!r}")
    if isinstance(signal_type, int):
        try:
            return SignalType(signal_type)
        except ValueError as e:
            raise InvalidArgument(f"Unknown signal type code: {signal_type}") from e
    if isinstance(signal_type, str):
        key = signal_type.strip().upper()
        if key in SignalType.__members__:
            return SignalType[key]
        raise InvalidArgument(
            f"Unknown signal type name: {signal_type!r}. "
            f"Expected one of {[m.name.lower() for m in SignalType]}."
        )
    raise InvalidArgument(f"Unknown signal type: {signal_type!r}")
