from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from adm1state.constants import RECORD_WIDTH  # noqa: E402


@pytest.fixture
def ramp() -> list:
    """Distinct, exactly representable values for every canonical index."""

    return [float(i) + 0.5 for i in range(RECORD_WIDTH)]


@pytest.fixture
def legacy_feed() -> list:
    """Matlab-era influent row: 26 species/ion values followed by the flow rate."""

    return [0.1 * (i + 1) for i in range(26)] + [170.0]
