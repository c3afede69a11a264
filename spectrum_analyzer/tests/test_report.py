"""Tests for SpectrumReport accessors."""

from __future__ import annotations

import numpy as np
import pandas as pd

from spectrum_analyzer.models.config import AnalysisConfig
from spectrum_analyzer.models.report import BinRecord, SpectrumReport
from spectrum_analyzer.models.waveforms import SignalType


def _report(phase: bool) -> SpectrumReport:
    cfg = AnalysisConfig(
        n=8, signal_type=SignalType.SINE, scale_factor=1.0,
        min_frequency=0.0, max_frequency=500.0, display_phase=phase,
    )
    return SpectrumReport(
        config=cfg,
        bin_index=np.array([0, 1, 2]),
        frequency_hz=np.array([0.0, 125.0, 250.0]),
        magnitude=np.array([0.5, 4.0, 4.0], dtype=np.float32),
        phase=np.array([0.0, -1.5, 1.0], dtype=np.float32) if phase else None,
    )


def test_records_in_bin_order() -> None:
    recs = list(_report(phase=False).records())
    assert [r.bin_index for r in recs] == [0, 1, 2]
    assert recs[1] == BinRecord(1, 125.0, 4.0, None)
    assert isinstance(recs[0].bin_index, int)


def test_records_carry_phase() -> None:
    recs = list(_report(phase=True).records())
    assert recs[1].phase == -1.5


def test_peak_first_on_ties() -> None:
    peak = _report(phase=True).peak()
    assert peak.bin_index == 1
    assert peak.phase == -1.5


def test_peak_ignores_nan() -> None:
    rep = _report(phase=False)
    rep.magnitude[1] = np.nan
    assert rep.peak().bin_index == 2


def test_to_frame_columns() -> None:
    df = _report(phase=False).to_frame()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["bin_index", "frequency_hz", "magnitude"]
    assert len(df) == 3

    df_p = _report(phase=True).to_frame()
    assert list(df_p.columns) == ["bin_index", "frequency_hz", "magnitude", "phase"]
    assert df_p["phase"].iloc[2] == 1.0


def test_to_rows() -> None:
    rows = _report(phase=False).to_rows()
    assert rows[2] == {"bin_index": 2, "frequency_hz": 250.0, "magnitude": 4.0, "phase": None}
