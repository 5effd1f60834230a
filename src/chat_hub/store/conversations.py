"""Conversation store keyed by title."""

from chat_hub.models.chat import Conversation
from chat_hub.store.base import EntityStore


class ConversationStore(EntityStore[Conversation]):
    kind = "conversation"

    def _key(self, entity: Conversation) -> str:
        return entity.title

    def get_conversation_with_title(self, title: str) -> Conversation | None:
        return self.get_by_key(title)

    def is_title_taken(self, title: str) -> bool:
        return self.get_by_key(title) is not None

    def add_conversation(self, conversation: Conversation) -> None:
        self.add(conversation)

    def get_all_conversations(self) -> list[Conversation]:
        return self.get_all()
