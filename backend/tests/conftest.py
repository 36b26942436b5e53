import pytest

from progress_tracker.db import JsonStorage
from progress_tracker.services.tracker import ProgressTracker


@pytest.fixture
def storage(tmp_path):
    return JsonStorage(tmp_path / "data")


@pytest.fixture
def tracker(storage):
    return ProgressTracker(storage=storage)
