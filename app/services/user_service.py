"""
User service - registration and login.

Routes never touch the database directly - they call methods here.
"""
from app.core.logging import get_logger
from app.core.exceptions import WrongPasswordError
from app.core.security import Claims, build_claims
from app.models.user import User
from app.schemas.user import NewUser
from app.services.base import BaseService

logger = get_logger(__name__)


class UserService(BaseService):
    """Handles user registration and login."""

    async def create_user(self, new_user: NewUser) -> User:
        """
        Register a new user.

        The password is hashed before anything reaches the repository.

        Raises:
            HashingError: If the password could not be hashed.
            RepositoryError: If the repository rejects the user (e.g. duplicate email).
        """
        password_hash = self.hasher.hash(new_user.password)

        user = User(
            name=new_user.name,
            email=new_user.email,
            password_hash=password_hash,
        )
        user = await self.repo.create_user(user)
        logger.info("user_created", user_id=user.id)
        return user

    async def login(self, email: str, password: str) -> Claims:
        """
        Authenticate a user and build their session claims.

        Lookup failures are re-raised as-is, so an unknown email and a
        database error look the same to the caller.

        Raises:
            RepositoryError: If the lookup fails.
            WrongPasswordError: If the password does not match.
        """
        user = await self.repo.user_login(email)

        if not self.hasher.verify(password, user.password_hash):
            logger.info("login_password_mismatch", user_id=user.id)
            raise WrongPasswordError()

        return build_claims(user.id)
