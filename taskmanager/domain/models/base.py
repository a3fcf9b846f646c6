"""
Entity base class and the domain error hierarchy.
"""

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way it is stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(kw_only=True)
class BaseEntity:
    """
    Identity and timestamps shared by every entity.

    Two entities are the same when they have the same type and database id.
    Unsaved entities (``id is None``) are only equal to themselves.
    Entities never persist themselves; repositories do.
    """

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.created_at = self.created_at or utcnow()
        self.updated_at = self.updated_at or self.created_at

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(id(self)) if self.id is None else hash((type(self).__name__, self.id))

    @property
    def is_new(self) -> bool:
        """True until a repository assigns an id."""
        return self.id is None

    def mark_as_updated(self) -> None:
        self.updated_at = utcnow()

    def validate(self) -> None:
        """Raise ValidationError when the entity is in an invalid state."""

    def _apply_changes(self, changes: Dict[str, Any], updatable: Tuple[str, ...]) -> None:
        """Set each given field, ``None`` included, then validate and touch ``updated_at``."""
        unknown = sorted(set(changes) - set(updatable))
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(unknown)}", unknown[0])

        for name, value in changes.items():
            setattr(self, name, value)

        self.validate()
        self.mark_as_updated()

    def to_dict(self) -> Dict[str, Any]:
        """Field values with datetimes as ISO strings and enums as their values."""
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


class DomainException(Exception):
    """Root of every error raised by the domain and application layers."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__


class ValidationError(DomainException):
    """Input or entity state is invalid (HTTP 400)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainException):
    """The requested entity does not exist (HTTP 404)."""

    def __init__(self, entity_type: str, entity_id: Any = None):
        suffix = "" if entity_id is None else f" with id {entity_id}"
        super().__init__(f"{entity_type}{suffix} not found", "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """A unique value is already taken (HTTP 409)."""

    def __init__(self, entity_type: str, field: str, value: Any):
        super().__init__(f"{entity_type} with {field}='{value}' already exists", "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class AuthorizationError(DomainException):
    """The caller is authenticated but not allowed to act (HTTP 403)."""

    def __init__(self, message: str = "You are not authorized to perform this action"):
        super().__init__(message, "FORBIDDEN")


class AuthenticationError(DomainException):
    """Missing, invalid or expired credentials (HTTP 401)."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "UNAUTHORIZED")
