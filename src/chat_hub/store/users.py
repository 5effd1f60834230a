"""User store keyed by user name."""

from chat_hub.models.chat import User
from chat_hub.store.base import EntityStore


class UserStore(EntityStore[User]):
    """Registered users. Profiles are updated by replacing the User."""

    kind = "user"

    def _key(self, entity: User) -> str:
        return entity.name

    def get_user(self, name: str) -> User | None:
        return self.get_by_key(name)

    def is_user_registered(self, name: str) -> bool:
        return self.get_by_key(name) is not None

    def add_user(self, user: User) -> None:
        self.add(user)

    def update_user(self, user: User) -> None:
        self._replace(user)

    def get_all_users(self) -> list[User]:
        return self.get_all()
