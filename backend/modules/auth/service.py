"""
Authentication service implementation.

Registers and signs in users against the users table, hashes passwords
with bcrypt and issues HS256 access tokens with PyJWT.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi.concurrency import run_in_threadpool

from shared.config import Settings, get_settings
from shared.exceptions import DuplicateRecordError, EmptyContentError
from shared.models import AuthenticatedUser
from shared.sanitizer import Sanitizer
from modules.users.models import UserRecord
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import AuthResponse, JWTPayload, LoginRequest, RegisterRequest, UserInfo
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"

EMAIL_IN_USE = "An account with this email already exists"
INVALID_CREDENTIALS = "Invalid email or password"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are stateless: there is no revocation list, so a token stays
    valid until it expires even after logout.
    """

    def __init__(
        self,
        users: UserRepository,
        sanitizer: Sanitizer,
        settings: Optional[Settings] = None,
    ):
        self._users = users
        self._sanitizer = sanitizer
        self._settings = settings or get_settings()
        self._unknown_user_hash: Optional[str] = None

    async def register(self, request: RegisterRequest) -> AuthResponse:
        email = request.email.lower()

        if self._users.get_by_email(email) is not None:
            logger.debug("Registration rejected, email already in use")
            return AuthResponse(success=False, message=EMAIL_IN_USE)

        try:
            first_name = self._sanitizer.strip_all_html_required(request.first_name, "First name")
            last_name = self._sanitizer.strip_all_html_required(request.last_name, "Last name")
        except EmptyContentError as e:
            return AuthResponse(success=False, message=e.message)

        headline = self._sanitizer.strip_all_html(request.headline) or None
        password_hash = await run_in_threadpool(self._hash_password, request.password)
        try:
            user = self._users.create({
                "email": email,
                "password_hash": password_hash,
                "first_name": first_name,
                "last_name": last_name,
                "headline": headline,
            })
        except DuplicateRecordError:
            # Lost a race with a concurrent registration
            return AuthResponse(success=False, message=EMAIL_IN_USE)

        logger.info("User registered: %s", user.id)
        return self._success(user, "Registration successful")

    async def login(self, request: LoginRequest) -> AuthResponse:
        user = self._users.get_by_email(request.email)
        verified = await run_in_threadpool(self._check_credentials, request.password, user)
        if user is None or not verified:
            logger.debug("Login rejected")
            return AuthResponse(success=False, message=INVALID_CREDENTIALS)

        return self._success(user, "Login successful")

    def create_token(self, user: UserRecord) -> tuple[str, datetime]:
        """
        Issue a signed access token for a user.

        Returns:
            Tuple of (encoded token, expiry time)
        """
        secret = self._require_secret()
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(days=self._settings.jwt_expires_in_days)

        payload = JWTPayload(
            sub=user.id,
            email=user.email,
            given_name=user.first_name,
            family_name=user.last_name,
            jti=str(uuid.uuid4()),
            iat=int(issued_at.timestamp()),
            exp=int(expires_at.timestamp()),
            iss=self._settings.jwt_issuer,
            aud=self._settings.jwt_audience,
        )
        token = jwt.encode(payload.model_dump(), secret, algorithm=JWT_ALGORITHM)
        return token, expires_at

    async def validate_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[JWT_ALGORITHM],
                audience=self._settings.jwt_audience,
                issuer=self._settings.jwt_issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
            claims = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except ValueError:
            # Signature was fine but a claim has the wrong shape
            raise InvalidTokenError()

        return AuthenticatedUser(
            id=claims.sub,
            email=claims.email,
            first_name=claims.given_name,
            last_name=claims.family_name,
            token_id=claims.jti,
        )

    def _success(self, user: UserRecord, message: str) -> AuthResponse:
        token, expires_at = self.create_token(user)
        return AuthResponse(
            success=True,
            message=message,
            token=token,
            expires_at=expires_at,
            user=UserInfo(
                id=user.id,
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                headline=user.headline,
                avatar_url=user.avatar_url,
            ),
        )

    def _hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def _verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored hash is malformed or the password exceeds bcrypt's limit
            return False

    def _check_credentials(self, password: str, user: Optional[UserRecord]) -> bool:
        if user is None:
            # Unknown emails still run a full hash check
            self._verify_password(password, self._dummy_hash())
            return False
        return self._verify_password(password, user.password_hash)

    def _dummy_hash(self) -> str:
        if self._unknown_user_hash is None:
            self._unknown_user_hash = self._hash_password(uuid.uuid4().hex)
        return self._unknown_user_hash

    def _require_secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()
        return self._settings.jwt_secret
