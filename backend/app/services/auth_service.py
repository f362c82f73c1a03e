"""Credential workflows — registration and login."""
import logging

from app.errors import ConflictError, InvalidCredentials, ValidationError
from app.repositories.user_repository import UserRepository
from app.security import hash_password, verify_password
from app.services.token_service import TokenService

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "Username and password are required"


class AuthService:
    def __init__(self, users: UserRepository, tokens: TokenService, bcrypt_rounds: int = 12):
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, username: str | None, password: str | None) -> str:
        """Create a user and return a token for it.

        Raises ``ValidationError`` for missing fields and ``ConflictError`` when
        the username is taken.
        """
        if not username or not password:
            raise ValidationError(CREDENTIALS_REQUIRED)

        if self.users.find_by_username(username) is not None:
            raise ConflictError("Username already exists")

        user = self.users.create(username, hash_password(password, rounds=self.bcrypt_rounds))
        logger.info("Registered user %s (%s)", user.user_id, username)
        return self.tokens.issue(user.user_id)

    def login(self, username: str | None, password: str | None) -> str:
        """Return a token for valid credentials.

        Unknown usernames and wrong passwords raise the same ``InvalidCredentials``.
        """
        if not username or not password:
            raise ValidationError(CREDENTIALS_REQUIRED)

        user = self.users.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for username %r", username)
            raise InvalidCredentials()

        logger.info("User %s logged in", user.user_id)
        return self.tokens.issue(user.user_id)
