# -*- coding: utf-8 -*-
"""Pass/fail verdict for batch comparisons."""

from __future__ import annotations

from enum import Enum


class Verdict(str, Enum):
    PASS = "pass"
    FAIL = "fail"

    @property
    def exit_code(self) -> int:
        return 0 if self is Verdict.PASS else 1


def decide(dmax: float, threshold: float) -> Verdict:
    """Fail when the largest difference exceeds `threshold`.

    A non-overlapping pair reports dmax = -inf and therefore passes; callers
    that care must check `DiffResult.has_overlap` themselves.
    """
    if dmax > threshold:
        return Verdict.FAIL
    return Verdict.PASS
