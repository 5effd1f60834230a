"""User, conversation and message models."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class User(BaseModel):
    """A registered chat user. Replaced wholesale on profile updates."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str  # Unique, used as the store lookup key
    created_at: datetime = Field(default_factory=utcnow)
    bio: str = ""
    language: str = "English"


class Conversation(BaseModel):
    """A named chat room owned by the user who created it."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    title: str  # Unique, used as the store lookup key
    created_at: datetime = Field(default_factory=utcnow)


class Message(BaseModel):
    """A single chat message. Content is already sanitized and linked."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    conversation_id: UUID
    author_id: UUID
    content: str
    created_at: datetime = Field(default_factory=utcnow)
