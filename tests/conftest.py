from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def fixed_today() -> date:
    # A Wednesday
    return date(2024, 3, 20)
