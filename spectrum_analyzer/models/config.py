"""Analysis configuration -- bundles every parameter of one analysis run.

An AnalysisConfig groups the run parameters into one frozen dataclass.  It can be:

- Constructed directly (validated on construction)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from numbers import Integral, Real
from typing import Any, Dict

from spectrum_analyzer.errors import InvalidArgument

from .waveforms import SAMPLE_RATE_HZ, SignalType, SignalTypeLike, resolve_signal_type


def _finite(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise InvalidArgument(f"{name} must be finite, got {v}")
    return v


@dataclass(frozen=True)
class AnalysisConfig:
    """Frozen configuration for one analysis run.

    Required fields
    ---------------
    n : int
        Number of samples (and of DFT bins), must be > 0.
    signal_type : SignalType
        Waveform selector. Integer codes and names are resolved on construction.
    scale_factor : float
        Multiplier applied to every reported magnitude.
    min_frequency, max_frequency : float
        Inclusive frequency band in Hz. ``min_frequency <= max_frequency``.

    Optional fields
    ---------------
    display_phase : bool
        Also compute and report the phase of retained bins.
    sample_rate_hz : float
        Sampling rate used to map bin index to frequency, must be > 0.
    """

    n: int
    signal_type: SignalType
    scale_factor: float
    min_frequency: float
    max_frequency: float
    display_phase: bool = False
    sample_rate_hz: float = SAMPLE_RATE_HZ

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, Integral):
            raise InvalidArgument(f"n must be an integer, got {self.n!r}")
        if self.n <= 0:
            raise InvalidArgument(f"n must be > 0, got {self.n}")

        lo = _finite("min_frequency", self.min_frequency)
        hi = _finite("max_frequency", self.max_frequency)
        if lo > hi:
            raise InvalidArgument(f"min_frequency ({lo}) must be <= max_frequency ({hi})")

        fs = _finite("sample_rate_hz", self.sample_rate_hz)
        if fs <= 0.0:
            raise InvalidArgument(f"sample_rate_hz must be > 0, got {fs}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "n", int(self.n))
        object.__setattr__(self, "signal_type", resolve_signal_type(self.signal_type))
        object.__setattr__(self, "scale_factor", _finite("scale_factor", self.scale_factor))
        object.__setattr__(self, "min_frequency", lo)
        object.__setattr__(self, "max_frequency", hi)
        object.__setattr__(self, "display_phase", bool(self.display_phase))
        object.__setattr__(self, "sample_rate_hz", fs)

    @classmethod
    def create(
        cls,
        n: int,
        signal_type: SignalTypeLike,
        scale_factor: float,
        min_frequency: float,
        max_frequency: float,
        display_phase: bool = False,
        **overrides: Any,
    ) -> AnalysisConfig:
        """Build a config from the positional run parameters, accepting any signal selector."""
        return cls(
            n=n,
            signal_type=signal_type,  # type: ignore[arg-type]
            scale_factor=scale_factor,
            min_frequency=min_frequency,
            max_frequency=max_frequency,
            display_phase=display_phase,
            **overrides,
        )

    @property
    def nyquist_hz(self) -> float:
        return self.sample_rate_hz / 2.0

    @property
    def bin_spacing_hz(self) -> float:
        return self.sample_rate_hz / self.n

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (signal type by lowercase name)."""
        d = asdict(self)
        d["signal_type"] = self.signal_type.name.lower()
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> AnalysisConfig:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return cls(**dict(d))
