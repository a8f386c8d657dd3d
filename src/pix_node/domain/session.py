"""Explicit session context passed through page controllers."""

from dataclasses import dataclass

from pix_node.domain.models import User, UserRole


@dataclass(frozen=True)
class SessionContext:
    """Identity of the current visitor, if any."""

    user_id: str | None = None
    role: UserRole | None = None

    @classmethod
    def for_user(cls, user: User) -> "SessionContext":
        """Build a session for an existing user."""
        return cls(user_id=user.id, role=user.role)

    @property
    def is_authenticated(self) -> bool:
        """Return True when a user id is attached."""
        return self.user_id is not None

    def owns(self, user_id: str | None) -> bool:
        """Return True when the session belongs to the given user."""
        return user_id is not None and self.user_id == user_id
