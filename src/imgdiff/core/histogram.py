# -*- coding: utf-8 -*-
"""Fixed-bin histogram of per-pixel difference values."""

from __future__ import annotations

from typing import Any

import numpy as np

from imgdiff.constants import HISTOGRAM_BINS, HISTOGRAM_RANGE


class Histogram:
    """Equal-width bins over [low, high] with unit weights.

    Bin k covers [edges[k], edges[k + 1]); the last bin also admits `high`.
    Values outside the range go to the underflow/overflow counters.
    """

    def __init__(
        self,
        nbins: int = HISTOGRAM_BINS,
        low: float = HISTOGRAM_RANGE[0],
        high: float = HISTOGRAM_RANGE[1],
    ) -> None:
        if nbins < 1:
            raise ValueError("nbins must be >= 1")
        if not low < high:
            raise ValueError("low must be smaller than high")
        self.nbins = int(nbins)
        self.low = float(low)
        self.high = float(high)
        # low + k * width / nbins keeps the [0, 1] edges at exactly k / nbins
        self.edges = self.low + np.arange(self.nbins + 1, dtype=np.float64) * (self.high - self.low) / self.nbins
        self.edges[-1] = self.high
        self.counts = np.zeros(self.nbins, dtype=np.int64)
        self.underflow = 0
        self.overflow = 0
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark the histogram read-only."""
        self._frozen = True
        self.counts.setflags(write=False)

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("histogram is read-only once the diff pass has completed")

    def observe(self, value: float) -> None:
        """Count one value."""
        self.observe_many(np.asarray([value], dtype=np.float64))

    def observe_many(self, values: np.ndarray) -> None:
        """Count every value of an array."""
        self._check_writable()
        flat = np.asarray(values, dtype=np.float64).ravel()
        if flat.size == 0:
            return
        below = flat < self.low
        above = flat > self.high
        self.underflow += int(np.count_nonzero(below))
        self.overflow += int(np.count_nonzero(above))
        inside = flat[~(below | above)]
        index = np.searchsorted(self.edges, inside, side="right") - 1
        np.minimum(index, self.nbins - 1, out=index)
        self.counts += np.bincount(index, minlength=self.nbins).astype(np.int64)

    @property
    def total(self) -> int:
        """Number of values counted in bins (under/overflow excluded)."""
        return int(self.counts.sum())

    def bin_index(self, value: float) -> int | None:
        """Return the bin that would count `value`, or None when out of range."""
        if value < self.low or value > self.high:
            return None
        index = int(np.searchsorted(self.edges, value, side="right")) - 1
        return min(index, self.nbins - 1)

    def bins(self) -> list[tuple[float, int]]:
        """Return (lower bound, count) for every bin."""
        return [(float(self.edges[k]), int(self.counts[k])) for k in range(self.nbins)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "low": self.low,
            "high": self.high,
            "counts": [int(count) for count in self.counts],
            "underflow": self.underflow,
            "overflow": self.overflow,
        }
