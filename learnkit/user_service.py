"""User records persisted in a key-value database."""

from __future__ import annotations

from dataclasses import dataclass

from learnkit.interfaces import Database, Logger

_SEPARATOR = "|"


@dataclass
class User:
    """A user with an identifier, a name and an e-mail address."""

    id: str
    name: str
    email: str

    def serialize(self) -> str:
        return _SEPARATOR.join((self.id, self.name, self.email))

    @classmethod
    def parse(cls, data: str) -> User:
        """Read ``id|name|email``; the e-mail runs to the end of the line."""
        user_id, sep, rest = data.partition(_SEPARATOR)
        if not data or not sep or not rest:
            raise ValueError("Invalid user data format")
        name, sep, rest = rest.partition(_SEPARATOR)
        if not sep or not rest:
            raise ValueError("Invalid user data format")
        email = rest.split("\n", 1)[0]
        return cls(user_id, name, email)


class UserService:
    """Creates, reads, updates and deletes users, logging every outcome."""

    def __init__(self, database: Database, logger: Logger) -> None:
        self._database = database
        self._logger = logger

    def _save(self, user: User, verb: str) -> bool:
        saved = self._database.save(user.id, user.serialize())
        if saved:
            self._logger.info(f"User {verb}d successfully: {user.id}")
        else:
            self._logger.error(f"Failed to {verb} user: {user.id}")
        return saved

    def create_user(self, user: User) -> bool:
        """Store a new user; return False if invalid, existing or not saved."""
        if not user.id or not user.name or not user.email:
            self._logger.error("Invalid user data: missing required fields")
            return False
        if self._database.exists(user.id):
            self._logger.warning(f"User already exists: {user.id}")
            return False
        return self._save(user, "create")

    def get_user(self, user_id: str) -> User | None:
        """Return the stored user, or None when it cannot be found or read."""
        if not user_id:
            self._logger.error("Invalid user ID: empty string")
            return None
        if not self._database.exists(user_id):
            self._logger.warning(f"User not found: {user_id}")
            return None

        data = self._database.load(user_id)
        if not data:
            self._logger.error(f"Failed to load user data: {user_id}")
            return None
        try:
            user = User.parse(data)
        except ValueError:
            self._logger.error(f"Failed to parse user data: {user_id}")
            return None
        self._logger.info(f"User retrieved successfully: {user_id}")
        return user

    def update_user(self, user: User) -> bool:
        """Overwrite an existing user; return True on success."""
        if not user.id:
            self._logger.error("Cannot update user: empty ID")
            return False
        if not self._database.exists(user.id):
            self._logger.warning(f"Cannot update non-existent user: {user.id}")
            return False
        return self._save(user, "update")

    def delete_user(self, user_id: str) -> bool:
        """Remove an existing user; return True on success."""
        if not user_id:
            self._logger.error("Cannot delete user: empty ID")
            return False
        if not self._database.exists(user_id):
            self._logger.warning(f"Cannot delete non-existent user: {user_id}")
            return False
        removed = self._database.remove(user_id)
        if removed:
            self._logger.info(f"User deleted successfully: {user_id}")
        else:
            self._logger.error(f"Failed to delete user: {user_id}")
        return removed

    def all_user_ids(self) -> list[str]:
        """Return the identifiers of every stored user."""
        self._logger.debug("Retrieving all user IDs")
        return self._database.all_keys()