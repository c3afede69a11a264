"""Analysis pipeline: generate -> transform -> convert -> band filter -> report.

Ordering (per run)
------------------
1) Validate the configuration (fails before any transform is attempted).
2) Synthesize the input buffer for the selected waveform.
3) Forward DFT through the injected :class:`TransformProvider`.
4) Magnitude of every bin; phase only when requested.
5) Map bin index to signed frequency using the explicit sample rate.
6) Keep bins with ``min_frequency <= f <= max_frequency``.
7) Scale retained magnitudes by ``scale_factor`` (float64).

Bin ``k`` maps to ``k * fs / n`` for ``k < ceil(n/2)`` and to the negative
frequency ``(k - n) * fs / n`` above (the :func:`numpy.fft.fftfreq` layout).
For even ``n`` the Nyquist bin ``n/2`` stands for both ``+fs/2`` and ``-fs/2``:
it is kept when either lies in the band and reported with the matching sign.
Reported bins keep ascending bin-index order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple

import numpy as np

from spectrum_analyzer.errors import InvalidArgument, TransformFailure
from spectrum_analyzer.models.config import AnalysisConfig
from spectrum_analyzer.models.report import SpectrumReport
from spectrum_analyzer.models.waveforms import (
    DEFAULT_SIGNAL_SETTINGS,
    SAMPLE_RATE_HZ,
    SignalTypeLike,
)
from spectrum_analyzer.run_log import RunLog

from .signals import generate_input_data
from .spectrum import calculate_magnitude, calculate_phase
from .transform import NumpyFFTProvider, TransformProvider


def bin_frequencies(n: int, sample_rate_hz: float = SAMPLE_RATE_HZ) -> np.ndarray:
    """Signed frequency (Hz) of each of the ``n`` DFT bins."""
    if n <= 0:
        raise InvalidArgument(f"n must be > 0, got {n}")
    if sample_rate_hz <= 0.0:
        raise InvalidArgument(f"sample_rate_hz must be > 0, got {sample_rate_hz}")
    n = int(n)
    k = np.arange(n)
    k[k >= (n + 1) // 2] -= n
    return k * float(sample_rate_hz) / n


def band_mask(freqs: np.ndarray, min_frequency: float, max_frequency: float) -> np.ndarray:
    """Boolean mask of bins inside the inclusive band."""
    f = np.asarray(freqs, dtype=np.float64)
    return (f >= float(min_frequency)) & (f <= float(max_frequency))


def select_bins(
    n: int,
    sample_rate_hz: float,
    min_frequency: float,
    max_frequency: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Indices and frequencies of the bins inside the inclusive band, in bin order."""
    freqs = bin_frequencies(n, sample_rate_hz)
    keep = band_mask(freqs, min_frequency, max_frequency)
    if n % 2 == 0:
        k = n // 2
        pos = -freqs[k]
        if float(min_frequency) <= pos <= float(max_frequency):
            keep[k] = True
            freqs[k] = pos
    idx = np.flatnonzero(keep)
    return idx, freqs[idx]


def _forward(transform: TransformProvider, buffer: np.ndarray) -> np.ndarray:
    n = buffer.size
    try:
        spec = transform.forward_transform(buffer)
    except TransformFailure:
        raise
    except Exception as e:
        raise TransformFailure(f"{type(transform).__name__} failed: {e}") from e

    if spec is None:
        raise TransformFailure(f"{type(transform).__name__} returned no data")
    spec = np.asarray(spec)
    if spec.ndim != 1 or spec.size != n:
        raise TransformFailure(
            f"{type(transform).__name__} returned shape {spec.shape}, expected ({n},)"
        )
    if not np.issubdtype(spec.dtype, np.number):
        raise TransformFailure(
            f"{type(transform).__name__} returned non-numeric dtype {spec.dtype}"
        )
    return spec


def run_analysis(
    config: AnalysisConfig,
    *,
    transform: Optional[TransformProvider] = None,
    log: Optional[RunLog] = None,
) -> SpectrumReport:
    """Execute one analysis run for a validated :class:`AnalysisConfig`.

    Parameters
    ----------
    config:
        Run parameters. Validation already happened on construction.
    transform:
        Forward DFT provider. Defaults to :class:`NumpyFFTProvider`.
    log:
        Optional run log receiving one entry per stage. Warnings are also
        returned in ``SpectrumReport.warnings``, with or without a log.

    Raises
    ------
    TransformFailure
        If the provider raises or returns a buffer of the wrong length or dtype.
    """
    if transform is None:
        transform = NumpyFFTProvider()
    if log is None:
        log = RunLog()
    warnings: list[str] = []

    cfg = config
    settings = replace(DEFAULT_SIGNAL_SETTINGS, sample_rate_hz=cfg.sample_rate_hz)

    buffer = generate_input_data(cfg.n, cfg.signal_type, settings=settings)
    log.info(f"generated {cfg.n} {cfg.signal_type.name.lower()} samples at {cfg.sample_rate_hz:g} Hz")

    try:
        spec = _forward(transform, buffer)
    except TransformFailure as e:
        log.error(f"transform failed: {e}")
        raise
    log.info(f"forward transform via {type(transform).__name__}")

    magnitude = calculate_magnitude(spec)
    phase = calculate_phase(spec) if cfg.display_phase else None

    idx, freqs = select_bins(cfg.n, cfg.sample_rate_hz, cfg.min_frequency, cfg.max_frequency)

    if cfg.max_frequency > cfg.nyquist_hz or cfg.min_frequency < -cfg.nyquist_hz:
        warnings.append(
            f"band [{cfg.min_frequency:g}, {cfg.max_frequency:g}] Hz extends beyond "
            f"Nyquist ({cfg.nyquist_hz:g} Hz)"
        )
    if idx.size == 0:
        warnings.append(
            f"no bins in band [{cfg.min_frequency:g}, {cfg.max_frequency:g}] Hz "
            f"(bin spacing {cfg.bin_spacing_hz:g} Hz)"
        )

    mag_out = magnitude[idx].astype(np.float64) * cfg.scale_factor
    n_bad = int(np.count_nonzero(~np.isfinite(mag_out)))
    if n_bad:
        warnings.append(f"{n_bad} retained bin(s) have non-finite magnitude")

    for w in warnings:
        log.warning(w)
    log.info(f"retained {idx.size} of {cfg.n} bins, scale factor {cfg.scale_factor:g}")

    return SpectrumReport(
        config=cfg,
        bin_index=idx.astype(int),
        frequency_hz=freqs,
        magnitude=mag_out,
        phase=None if phase is None else phase[idx],
        warnings=tuple(warnings),
    )


def perform_fft_analysis(
    n: int,
    signal_type: SignalTypeLike,
    scale_factor: float,
    min_frequency: float,
    max_frequency: float,
    display_phase: bool = False,
    *,
    transform: Optional[TransformProvider] = None,
    sample_rate_hz: float = SAMPLE_RATE_HZ,
    log: Optional[RunLog] = None,
) -> SpectrumReport:
    """Generate a test signal, transform it, and report the scaled spectrum in a band.

    Invalid parameters (``n <= 0``, ``min_frequency > max_frequency``, unknown
    waveform, non-finite values) raise :class:`InvalidArgument` before the
    transform is called. Transform problems raise :class:`TransformFailure`.
    """
    try:
        config = AnalysisConfig.create(
            n,
            signal_type,
            scale_factor,
            min_frequency,
            max_frequency,
            display_phase,
            sample_rate_hz=sample_rate_hz,
        )
    except InvalidArgument as e:
        if log is not None:
            log.error(f"invalid configuration: {e}")
        raise
    return run_analysis(config, transform=transform, log=log)
