# jobly/services/auth.py
import logging

from jobly import databases
from jobly.database.schema import ROLES
from jobly.errors import AuthError, ConstraintViolationError, ValidationError
from jobly.services.passwords import hash_password, verify_password
from jobly.services.tokens import issue_token

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def register(handle, name, email, password, role):
        """
        Create a user with one of the fixed roles.
        Returns the new user id.
        """
        if role not in ROLES:
            raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")
        # bcrypt only reads the first 72 bytes
        if not isinstance(password, str) or len(password.encode("utf-8")) > 72:
            raise ValidationError("Password must be a string of at most 72 bytes")

        hashed_password = hash_password(password)
        try:
            user_id = databases.create_user(handle, name, email, hashed_password, role)
        except ConstraintViolationError as e:
            logger.info("Registration rejected: email already registered")
            raise ConstraintViolationError("Email already exists") from e

        logger.info("User %s registered with role %s", user_id, role)
        return user_id

    @staticmethod
    def authenticate_user(handle, email, password):
        """
        Check email & password using bcrypt.
        Return (token, public user fields) or raise AuthError.
        """
        user = databases.get_user_by_email(handle, email)

        if not user or not verify_password(password, user["password"]):
            logger.info("Login failed")
            raise AuthError("Invalid credentials")

        claims = {"id": user["id"], "role": user["role"], "name": user["name"]}
        token = issue_token(claims)
        logger.info("Login successful for user %s", user["id"])
        return token, claims
