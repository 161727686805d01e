import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as SchemaField
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

USER_AGENT_MAX_LENGTH = 512


def get_datetime_utc() -> datetime:
    return datetime.now(timezone.utc)


# Shared properties
class SpellRecordBase(SQLModel):
    intent: str
    length: str = Field(max_length=16)
    spell_text: str
    user_agent: str | None = Field(default=None, max_length=USER_AGENT_MAX_LENGTH)
    ip_hash: str | None = Field(default=None, max_length=64)


# Properties to receive on creation
class SpellRecordCreate(SpellRecordBase):
    pass


# Database model, database table inferred from class name
class SpellRecord(SpellRecordBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


# Request bodies are parsed leniently; the pipeline reports bad values itself
class SpellRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    intent: Any = None
    length: Any = None
    ingredients: Any = None


class SpellResponse(BaseModel):
    spell: str


class SubscribeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Any = None


# Generic message
class Message(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    ok: bool = True
    has_api_key: bool = SchemaField(serialization_alias="hasApiKey")
    model: str
