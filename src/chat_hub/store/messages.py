"""Message store. Messages are immutable once added."""

from uuid import UUID

from chat_hub.models.chat import Message
from chat_hub.store.base import EntityStore


class MessageStore(EntityStore[Message]):
    kind = "message"

    def add_message(self, message: Message) -> None:
        self.add(message)

    def get_messages_in_conversation(self, conversation_id: UUID) -> list[Message]:
        """Messages of one conversation in the order they were posted."""
        return self.filter(lambda m: m.conversation_id == conversation_id)

    def get_messages_by_author(self, author_id: UUID) -> list[Message]:
        return self.filter(lambda m: m.author_id == author_id)
