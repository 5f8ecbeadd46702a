# tests/test_ephemeris.py

import sys
import pytest
from unittest.mock import patch

from ganita.core.errors import EphemerisUnavailableError
from ganita.ephemeris import require_ephemeris


def test_require_ephemeris_reports_missing_extras():
    with patch.dict(sys.modules, {"skyfield": None}):
        with pytest.raises(EphemerisUnavailableError, match=r"ganita\[ephemeris\]"):
            require_ephemeris()


def test_skyfield_reference_load_requires_extras(tmp_path):
    from ganita.ephemeris.skyfield_ref import SkyfieldReference

    with patch.dict(sys.modules, {"jplephem": None}):
        with pytest.raises(EphemerisUnavailableError):
            SkyfieldReference.load(kernel_dir=tmp_path)
