# tests/test_diagnostics.py

import pytest
from datetime import date

from ganita.diagnostics.eot_curve import sample_year


def test_sample_year_lengths():
    days, approx, reference = sample_year(2023)
    assert len(days) == len(approx) == len(reference) == 365
    assert days[0] == date(2023, 1, 1)
    assert days[-1] == date(2023, 12, 31)

    days, _, _ = sample_year(2024)
    assert len(days) == 366


def test_sample_year_curves_agree():
    days, approx, reference = sample_year(2023)
    assert approx[80] == 7.53
    assert max(abs(a - r) for a, r in zip(approx, reference)) < 1.5
