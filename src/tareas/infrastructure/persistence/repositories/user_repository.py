"""User repository (the credential store)."""

from tareas.core.exceptions import StorageError
from tareas.domain.entities import User
from tareas.infrastructure.persistence.json_store import JsonFileStore


class UserRepository:
    """Repository for registered users.

    Every method loads the full snapshot; ``append`` also saves it back.
    New ids are ``len(users) + 1``. Users are never deleted, so ids are not
    reused, but two concurrent appends can both read the same snapshot and
    hand out the same id.
    """

    def __init__(self, store: JsonFileStore) -> None:
        """Initialize the repository.

        Args:
            store: Snapshot file holding the users array.
        """
        self.store = store

    async def list_all(self) -> list[User]:
        records = await self.store.load()
        try:
            return [User.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt user record in {self.store.path}: {e}") from e

    async def count(self) -> int:
        return len(await self.store.load())

    async def get_by_id(self, user_id: int) -> User | None:
        for user in await self.list_all():
            if user.id == user_id:
                return user
        return None

    async def find_by_email(self, email: str) -> User | None:
        """Get a user by email (case-sensitive).

        Args:
            email: User's email address.

        Returns:
            The user if found, None otherwise.
        """
        for user in await self.list_all():
            if user.email == email:
                return user
        return None

    async def email_exists(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def append(self, email: str, password_hash: str) -> User:
        """Add a user and persist the whole collection.

        Uniqueness of the email is the caller's responsibility.

        Args:
            email: User's email address.
            password_hash: Already-hashed password.

        Returns:
            The stored user with its assigned id.

        Raises:
            StorageError: If the snapshot cannot be read or written.
        """
        users = await self.list_all()
        user = User(id=len(users) + 1, email=email, password_hash=password_hash)
        users.append(user)
        await self.store.save([u.to_dict() for u in users])
        return user

    async def update_password_hash(self, user_id: int, password_hash: str) -> User | None:
        """Replace a user's stored digest.

        Returns:
            The updated user, or None if the id is unknown (nothing is written).
        """
        users = await self.list_all()
        for index, user in enumerate(users):
            if user.id == user_id:
                updated = User(id=user.id, email=user.email, password_hash=password_hash)
                users[index] = updated
                await self.store.save([u.to_dict() for u in users])
                return updated
        return None
