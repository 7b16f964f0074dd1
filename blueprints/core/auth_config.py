"""Auth Configuration — explicit, immutable settings for token issuance and login.

Invariants:
    - Built once at startup from Settings; core logic never reads os.environ
    - credentials maps username -> plaintext password as supplied by the
      credential source; hashing happens in infrastructure/security.py
    - Empty credentials is valid: every login then fails

Design Decisions:
    - Frozen dataclass: passed by value into the security layer, no global mutable state
"""

from dataclasses import dataclass, field
from typing import Mapping

from blueprints.core.domain_types import Scope

DEFAULT_TOKEN_TTL_SECONDS = 3600
GRANTED_SCOPES = " ".join(scope.value for scope in Scope)


@dataclass(frozen=True)
class AuthConfig:
    issuer: str
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    credentials: Mapping[str, str] = field(default_factory=dict)
