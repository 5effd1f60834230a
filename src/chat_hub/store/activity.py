"""Activity feed store.

The feed is append-only and chronological: one event is derived and
appended for every user, conversation and message that gets created.
"""

from chat_hub.models.activity import ActivityEvent, ActivityKind
from chat_hub.models.chat import Conversation, Message, User
from chat_hub.store.base import EntityStore


class ActivityFeedStore(EntityStore[ActivityEvent]):
    kind = "activity"

    def add_activity(self, event: ActivityEvent) -> None:
        self.add(event)

    def get_feed(self, limit: int | None = None) -> list[ActivityEvent]:
        """Feed entries oldest first. ``limit`` keeps only the newest N."""
        feed = self.get_all()
        if limit is not None:
            feed = feed[-limit:] if limit > 0 else []
        return feed

    def record_user(self, user: User) -> ActivityEvent:
        event = ActivityEvent(
            kind=ActivityKind.USER_JOINED,
            summary=f"{user.name} joined.",
            created_at=user.created_at,
            subject_id=user.id,
        )
        self.add(event)
        return event

    def record_conversation(self, conversation: Conversation, owner: User) -> ActivityEvent:
        event = ActivityEvent(
            kind=ActivityKind.CONVERSATION_CREATED,
            summary=f"{owner.name} created a new conversation: {conversation.title}.",
            created_at=conversation.created_at,
            subject_id=conversation.id,
            conversation_id=conversation.id,
        )
        self.add(event)
        return event

    def record_message(
        self, message: Message, author: User, conversation: Conversation
    ) -> ActivityEvent:
        event = ActivityEvent(
            kind=ActivityKind.MESSAGE_SENT,
            summary=f'{author.name} sent a message in {conversation.title}: "{message.content}"',
            created_at=message.created_at,
            subject_id=message.id,
            conversation_id=conversation.id,
        )
        self.add(event)
        return event
