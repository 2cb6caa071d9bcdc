"""Personal record schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import RecordType


class SetData(BaseModel):
    """A completed set as handed to the record check."""

    weight: float | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)
    session_id: UUID
    set_id: UUID
    achieved_at: datetime | None = None


class RecordCheckRequest(SetData):
    """Body of a record check: the set plus the exercise it belongs to."""

    exercise_id: UUID
    exercise_name: str


class PersonalRecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    user_id: UUID
    exercise_id: UUID
    exercise_name: str
    record_type: RecordType
    value: float
    weight: float | None = None
    reps: int | None = None
    achieved_at: datetime
    session_id: UUID
    set_id: UUID
    previous_record: float | None = None


class PersonalBests(BaseModel):
    """Best record of each category for one exercise (None when never set)."""

    model_config = ConfigDict(frozen=True)

    max_weight: PersonalRecordRead | None = None
    max_reps: PersonalRecordRead | None = None
    max_volume: PersonalRecordRead | None = None
    best_estimated_1rm: PersonalRecordRead | None = None
