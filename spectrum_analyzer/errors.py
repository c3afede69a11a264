"""Exception types raised by the analysis core."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Bad sample count, frequency band, scale factor, waveform selector or sample input."""


class TransformFailure(RuntimeError):
    """The transform provider could not produce a valid spectrum.

    The provider's own exception, if any, is chained as ``__cause__``.
    """
