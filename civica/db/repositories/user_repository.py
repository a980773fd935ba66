"""
Repository for user accounts.

Passwords are stored as ``<salt>$<sha256(salt + password)>``.

Responsibility: User creation, lookup and profile updates
"""

from typing import Optional
import hashlib
import hmac
import logging
import secrets

from ..table import MemoryTable
from ...errors import NotFoundError
from ...models.user import User, UserCreate, UserPatch

logger = logging.getLogger(__name__)


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """
    Salted SHA-256 digest of a password.

    Args:
        password: Plain-text password
        salt: Hex salt; generated when omitted

    Returns:
        ``salt$hexdigest``
    """
    salt = salt or secrets.token_hex(16)
    digest = hashlib.sha256(f"{salt}{password}".encode("utf-8")).hexdigest()
    return f"{salt}${digest}"


def verify_password(password: str, password_hash: str) -> bool:
    salt, _, _ = password_hash.partition("$")
    return hmac.compare_digest(hash_password(password, salt), password_hash)


class UserRepository:
    def __init__(self, table: MemoryTable[User]):
        self.table = table

    def create(self, data: UserCreate) -> User:
        """
        Create an account.

        Raises:
            ConflictError: Username already taken (case-insensitive)
        """
        user = User(
            username=data.username,
            password_hash=hash_password(data.password),
            email=data.email,
            preferred_language=data.preferred_language,
            location=data.location,
        )
        self.table.insert_if_absent(
            ("username", data.username.lower()),
            user,
            message="Username already exists",
        )
        logger.info(f"Created user {user.id}")
        return user

    def get(self, user_id: str) -> Optional[User]:
        return self.table.get(user_id)

    def require(self, user_id: str) -> User:
        user = self.table.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        for user in self.table.values():
            if user.username.lower() == wanted:
                return user
        return None

    def update(self, user_id: str, patch: UserPatch) -> Optional[User]:
        return self.table.patch(user_id, patch)

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
