# -*- coding: utf-8 -*-
"""Tests for the difference histogram."""

from __future__ import annotations

import numpy as np
import pytest

from imgdiff.core.histogram import Histogram


def test_default_histogram_has_100_bins_over_unit_range() -> None:
    hist = Histogram()
    bins = hist.bins()
    assert len(bins) == 100
    assert bins[0] == (0.0, 0)
    assert bins[1][0] == 0.01
    assert bins[99][0] == 0.99
    assert hist.edges[-1] == 1.0


def test_bin_lower_bound_is_inclusive() -> None:
    hist = Histogram()
    for k in range(100):
        assert hist.bin_index(k / 100) == k


def test_values_just_below_edge_fall_in_previous_bin() -> None:
    hist = Histogram()
    assert hist.bin_index(np.nextafter(0.5, 0.0)) == 49
    assert hist.bin_index(0.5) == 50


def test_one_is_counted_in_last_bin() -> None:
    hist = Histogram()
    hist.observe(1.0)
    assert hist.counts[99] == 1
    assert hist.overflow == 0


def test_zero_is_counted_in_first_bin() -> None:
    hist = Histogram()
    hist.observe(0.0)
    assert hist.counts[0] == 1


def test_out_of_range_values_are_not_binned() -> None:
    hist = Histogram()
    hist.observe(-0.1)
    hist.observe(1.5)
    assert hist.total == 0
    assert hist.underflow == 1
    assert hist.overflow == 1


def test_observe_many_matches_single_observations() -> None:
    values = np.linspace(0.0, 1.0, 1001)
    batched = Histogram()
    batched.observe_many(values)
    single = Histogram()
    for value in values:
        single.observe(float(value))
    assert batched.counts.tolist() == single.counts.tolist()
    assert batched.total == 1001


def test_frozen_histogram_rejects_observations() -> None:
    hist = Histogram()
    hist.observe(0.3)
    hist.freeze()
    assert hist.frozen
    with pytest.raises(RuntimeError):
        hist.observe(0.4)
    assert hist.counts[30] == 1


def test_invalid_arguments_rejected() -> None:
    with pytest.raises(ValueError):
        Histogram(nbins=0)
    with pytest.raises(ValueError):
        Histogram(low=1.0, high=0.0)


def test_to_dict_lists_counts() -> None:
    hist = Histogram()
    hist.observe_many(np.array([0.0, 0.0, 0.55]))
    data = hist.to_dict()
    assert data["counts"][0] == 2
    assert data["counts"][55] == 1
    assert sum(data["counts"]) == 3
