"""Security — RS256 JWT issuance/validation and the in-memory credential store.

Invariants:
    - Signing key pair is generated per TokenService instance (process start);
      tokens do not survive a restart
    - Passwords are kept only as PBKDF2-SHA256 hashes with a per-user salt
    - decode() raises AuthenticationError for anything but a valid, unexpired
      token from this issuer
    - Unknown user and wrong password are indistinguishable to the caller

Design Decisions:
    - python-jose for JWT encode/decode, cryptography for RSA keys and PBKDF2
    - Scope claim is a space-delimited string (OAuth2 convention)
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from jose import jwt
from jose.exceptions import JWTError

from blueprints.core.auth_config import AuthConfig, GRANTED_SCOPES
from blueprints.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "RS256"
RSA_KEY_SIZE = 2048
PBKDF2_ITERATIONS = 120_000
SALT_BYTES = 16


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, as established by a verified token."""
    subject: str
    scopes: frozenset[str]


@dataclass(frozen=True)
class IssuedToken:
    access_token: str
    token_type: str
    expires_in: int


def _kdf(salt: bytes) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )


class CredentialStore:
    """username -> salted PBKDF2 hash. Plaintext is discarded after hashing."""

    def __init__(self, credentials: Mapping[str, str]):
        self._hashes: dict[str, tuple[bytes, bytes]] = {}
        for username, password in credentials.items():
            salt = os.urandom(SALT_BYTES)
            self._hashes[username] = (salt, _kdf(salt).derive(password.encode()))

    def __len__(self) -> int:
        return len(self._hashes)

    def is_valid(self, username: str, password: str) -> bool:
        entry = self._hashes.get(username)
        if entry is None:
            return False
        salt, expected = entry
        try:
            _kdf(salt).verify(password.encode(), expected)
        except InvalidKey:
            return False
        return True


class TokenService:
    """Issues and verifies access tokens for one AuthConfig."""

    def __init__(self, config: AuthConfig):
        self.config = config
        self.credentials = CredentialStore(config.credentials)
        private_key = rsa.generate_private_key(
            public_exponent=65537, key_size=RSA_KEY_SIZE,
        )
        self._private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode()
        self._public_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode()
        if not len(self.credentials):
            logger.warning("No credentials configured; every login will fail")

    def login(self, username: str, password: str) -> IssuedToken | None:
        """Token for valid credentials, None otherwise."""
        if not self.credentials.is_valid(username, password):
            logger.info("Login rejected", extra={"username": username})
            return None
        return self.issue(username)

    def issue(self, subject: str, scope: str = GRANTED_SCOPES) -> IssuedToken:
        now = int(datetime.now(timezone.utc).timestamp())
        ttl = self.config.token_ttl_seconds
        claims = {
            "iss": self.config.issuer,
            "iat": now,
            "exp": now + ttl,
            "sub": subject,
            "scope": scope,
        }
        token = jwt.encode(claims, self._private_pem, algorithm=JWT_ALGORITHM)
        return IssuedToken(access_token=token, token_type="Bearer", expires_in=ttl)

    def decode(self, token: str) -> Principal:
        try:
            claims = jwt.decode(
                token,
                self._public_pem,
                algorithms=[JWT_ALGORITHM],
                issuer=self.config.issuer,
            )
        except JWTError as e:
            logger.info(f"Token rejected: {e}")
            raise AuthenticationError("Invalid or expired token")
        subject = claims.get("sub")
        if not subject:
            raise AuthenticationError("Token has no subject")
        return Principal(
            subject=subject,
            scopes=frozenset(claims.get("scope", "").split()),
        )
