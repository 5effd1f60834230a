"""Activity feed event model."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from chat_hub.models.chat import utcnow


class ActivityKind(str, Enum):
    """What kind of entity creation an activity event summarizes."""

    USER_JOINED = "user_joined"
    CONVERSATION_CREATED = "conversation_created"
    MESSAGE_SENT = "message_sent"


class ActivityEvent(BaseModel):
    """One append-only entry of the activity feed."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    kind: ActivityKind
    summary: str
    created_at: datetime = Field(default_factory=utcnow)
    subject_id: UUID  # Id of the user, conversation or message it describes
    conversation_id: UUID | None = None
