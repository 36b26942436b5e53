import json
import logging
from pathlib import Path
from typing import Optional, Sequence, Type, TypeVar

from pydantic import TypeAdapter

from progress_tracker.core.config import settings
from progress_tracker.core.constants import COLLECTION_FILES
from progress_tracker.schemas.common import RecordModel
from progress_tracker.schemas.goal import DailyLog, Goal
from progress_tracker.schemas.habit import Habit

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=RecordModel)

COLLECTION_MODELS = {
    "goals": Goal,
    "habits": Habit,
    "daily_logs": DailyLog,
}


class JsonStorage:
    """Reads and writes one JSON array file per collection.

    Loading never fails: a missing file, unreadable bytes or records that do
    not match the schema all come back as an empty list and the file on disk
    is left as it was. Saving overwrites the whole file every time.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else settings.data_dir
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, collection: str) -> Path:
        return self.data_dir / COLLECTION_FILES[collection]

    def load(self, collection: str, model: Optional[Type[T]] = None) -> list[T]:
        model = model or COLLECTION_MODELS[collection]
        path = self.path_for(collection)
        if not path.exists():
            logger.debug("No %s file at %s, starting empty", collection, path)
            return []
        try:
            return TypeAdapter(list[model]).validate_json(path.read_bytes())
        except (OSError, ValueError) as exc:
            # Corrupt or unreadable data is treated as an empty collection
            logger.debug("Ignoring unreadable %s file %s: %s", collection, path, exc)
            return []

    def save(self, collection: str, items: Sequence[RecordModel]) -> None:
        path = self.path_for(collection)
        payload = [item.to_record() for item in items]
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Saved %d %s to %s", len(payload), collection, path)
