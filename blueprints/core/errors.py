"""Error Hierarchy — typed, categorized exceptions for all Blueprints failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (NotFound, AlreadyExists) are recoverable by the caller, never retried
    - Infrastructure errors (500-level) are surfaced as generic failures, never
      translated into domain errors
    - to_response() produces the REST envelope {code, message, data, error}

Design Decisions:
    - Single hierarchy with BlueprintsError base: FastAPI global handler catches all
    - AlreadyExists maps to 400 (not 409): matches the established client contract
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    author: str | None = None
    blueprint_name: str | None = None
    debug_info: dict[str, Any] | None = None


class BlueprintsError(Exception):
    """Base exception for all Blueprints errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "code": self.http_status,
            "message": self.message,
            "data": None,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BlueprintNotFoundError(BlueprintsError):
    """No blueprint for (author, name), or the author has no blueprints."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BLUEPRINT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )

    @classmethod
    def for_key(cls, author: str, name: str) -> "BlueprintNotFoundError":
        return cls(
            f"Blueprint not found: {author}/{name}",
            ErrorContext(author=author, blueprint_name=name),
        )

    @classmethod
    def for_author(cls, author: str) -> "BlueprintNotFoundError":
        return cls(
            f"No blueprints for author: {author}",
            ErrorContext(author=author),
        )


class BlueprintAlreadyExistsError(BlueprintsError):
    """Save or rename collides with an existing (author, name)."""
    def __init__(self, author: str, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(author=author, blueprint_name=name)
        super().__init__(
            f"Blueprint already exists: {author}/{name}",
            "BLUEPRINT_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.author = author
        self.name = name


class AuthenticationError(BlueprintsError):
    """Bearer token missing, malformed, expired or badly signed."""
    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, None, 401,
        )


class InsufficientScopeError(BlueprintsError):
    """Token is valid but lacks every scope the route accepts."""
    def __init__(self, required: list[str]):
        super().__init__(
            f"Token lacks required scope: {' or '.join(required)}",
            "INSUFFICIENT_SCOPE", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, None, 403,
        )
        self.required = required


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BlueprintsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
