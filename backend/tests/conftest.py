from __future__ import annotations

import pytest
from tests.utils.calendar_builders import TRAINER_ID, FakeCalendarSource


@pytest.fixture
def trainer_id() -> str:
    return TRAINER_ID


@pytest.fixture
def fake_source() -> FakeCalendarSource:
    return FakeCalendarSource()
