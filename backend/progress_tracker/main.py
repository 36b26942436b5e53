from pathlib import Path
from typing import Optional

from progress_tracker.core.log_setup import configure_logging
from progress_tracker.db import JsonStorage
from progress_tracker.services.tracker import ProgressTracker


def create_tracker(data_dir: Optional[Path] = None, log_level: Optional[str] = None) -> ProgressTracker:
    """Build the tracker the presentation layer talks to.

    Ensures the data directory exists and loads all three collections.
    """
    configure_logging(log_level)
    return ProgressTracker(storage=JsonStorage(data_dir))
