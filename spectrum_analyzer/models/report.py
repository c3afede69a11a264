from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from .config import AnalysisConfig


class BinRecord(NamedTuple):
    """One reported frequency bin."""

    bin_index: int
    frequency_hz: float
    magnitude: float
    phase: Optional[float] = None


@dataclass(frozen=True)
class SpectrumReport:
    """Band-filtered result of one analysis run.

    Attributes
    ----------
    config:
        The configuration the run was executed with.
    bin_index:
        Retained DFT bin indices in ascending order, shape ``(k,)``.
    frequency_hz:
        Signed bin frequency of each retained bin, shape ``(k,)``.
    magnitude:
        Magnitude multiplied by ``config.scale_factor`` (float64), shape ``(k,)``.
    phase:
        Phase in radians, shape ``(k,)``; ``None`` unless ``config.display_phase``.
    warnings:
        Diagnostic messages raised during the run (never errors).
    """

    config: AnalysisConfig
    bin_index: np.ndarray
    frequency_hz: np.ndarray
    magnitude: np.ndarray
    phase: Optional[np.ndarray] = None
    warnings: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return int(self.bin_index.size)

    @property
    def has_phase(self) -> bool:
        return self.phase is not None

    def records(self) -> Iterator[BinRecord]:
        """Yield one :class:`BinRecord` per retained bin, in ascending bin order."""
        for i in range(len(self)):
            yield BinRecord(
                bin_index=int(self.bin_index[i]),
                frequency_hz=float(self.frequency_hz[i]),
                magnitude=float(self.magnitude[i]),
                phase=None if self.phase is None else float(self.phase[i]),
            )

    def peak(self) -> Optional[BinRecord]:
        """Highest-magnitude retained bin (lowest index on ties), or None if nothing qualifies.

        NaN magnitudes are ignored.
        """
        if len(self) == 0:
            return None
        mag = np.asarray(self.magnitude, dtype=np.float64)
        if np.all(np.isnan(mag)):
            return None
        i = int(np.argmax(np.where(np.isnan(mag), -np.inf, mag)))
        return BinRecord(
            bin_index=int(self.bin_index[i]),
            frequency_hz=float(self.frequency_hz[i]),
            magnitude=float(self.magnitude[i]),
            phase=None if self.phase is None else float(self.phase[i]),
        )

    def to_frame(self) -> pd.DataFrame:
        """Return the retained bins as a DataFrame (one row per bin).

        Columns: ``bin_index``, ``frequency_hz``, ``magnitude`` and, when phase
        was requested, ``phase``.
        """
        cols: dict = {
            "bin_index": np.asarray(self.bin_index, dtype=int),
            "frequency_hz": np.asarray(self.frequency_hz, dtype=np.float64),
            "magnitude": np.asarray(self.magnitude, dtype=np.float64),
        }
        if self.phase is not None:
            cols["phase"] = np.asarray(self.phase, dtype=np.float64)
        return pd.DataFrame(cols)

    def to_rows(self) -> List[dict]:
        """List of dicts (one per bin), ready for ``pd.DataFrame()`` or JSON."""
        return [r._asdict() for r in self.records()]
