import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


class RecordModel(BaseModel):
    """Base for every persisted record.

    On disk keys are camelCase ("targetValue", "goalId"); in Python they are
    snake_case. Unknown keys from newer files are ignored, missing keys fall
    back to the field defaults. Records are frozen; changes go through
    `model_copy(update=...)` and the store.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_record(self) -> dict:
        """JSON-ready dict using the on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)
