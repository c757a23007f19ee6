from datetime import datetime, timezone

import pytest

from travelglass.services.model_data import ModelData

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def model_data(clock) -> ModelData:
    return ModelData(clock=clock)
