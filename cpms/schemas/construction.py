"""Pydantic request/response contracts for construction projects."""

from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator
from typing import Optional


STAGE_MIN = -(2**31)
STAGE_MAX = 2**31 - 1


class ConstructionBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    location: str = Field(min_length=1, max_length=500)
    # Any stage is accepted as long as the integer column can hold it.
    stage: int = Field(ge=STAGE_MIN, le=STAGE_MAX)
    category: str = Field(min_length=1)
    details: str = Field(min_length=1, max_length=2000)

    model_config = {"str_strip_whitespace": True}


class ConstructionCreate(ConstructionBase):
    start_date: Optional[datetime] = Field(default=None, alias="startDate")

    model_config = {"populate_by_name": True}


class ConstructionUpdate(ConstructionCreate):
    pass


class ConstructionOut(BaseModel):
    id: int
    name: str
    location: str
    stage: int
    stage_label: Optional[str] = Field(default=None, serialization_alias="stageLabel")
    category: str
    details: str
    start_date: datetime = Field(serialization_alias="startDate")
    start_date_local: Optional[datetime] = Field(default=None, serialization_alias="startDateLocal")
    creator_id: int = Field(serialization_alias="creatorId")

    model_config = {"from_attributes": True}

    @field_validator("start_date")
    @classmethod
    def _stored_as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
