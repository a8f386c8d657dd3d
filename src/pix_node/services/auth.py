"""Simulated authentication gateway."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from pix_node.domain.models import User, UserRole
from pix_node.services.forms import utcnow
from pix_node.services.simulation import Sleeper

logger = logging.getLogger(__name__)


class AuthGateway(Protocol):
    """Interface for account operations."""

    async def login(self, email: str, password: str) -> User:
        """Authenticate and return the signed-in user."""

    async def register(
        self, name: str, email: str, password: str, role: UserRole
    ) -> User:
        """Create an account and return it."""

    async def request_password_reset(self, email: str) -> None:
        """Send a password reset link."""



class AccountStore(Protocol):
    """Where newly registered accounts are kept."""

    def add_user(self, user: User) -> None:
        """Store a user so later lookups by id find it."""

@dataclass
class SimulatedAuthGateway(AuthGateway):
    """Gateway that waits a fixed delay and always succeeds.

    Login resolves to the demo photographer account regardless of the
    credentials entered.
    """

    sleeper: Sleeper
    delay_seconds: float
    demo_user: User
    clock: Callable[[], datetime] = utcnow
    accounts: AccountStore | None = None
    registered: list[User] = field(default_factory=list)

    async def login(self, email: str, password: str) -> User:
        """Wait for the simulated round trip and return the demo user."""
        logger.info("Login requested", extra={"email": email})
        await self.sleeper.sleep(self.delay_seconds)
        return self.demo_user

    async def register(
        self, name: str, email: str, password: str, role: UserRole
    ) -> User:
        """Wait for the simulated round trip and return a fresh user."""
        logger.info("Registration requested", extra={"email": email, "role": role})
        await self.sleeper.sleep(self.delay_seconds)
        now = self.clock()
        user = User(
            id=f"user-{uuid4()}",
            email=email,
            name=name,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self.registered.append(user)
        if self.accounts is not None:
            self.accounts.add_user(user)
        return user

    async def request_password_reset(self, email: str) -> None:
        """Wait for the simulated round trip."""
        logger.info("Password reset requested", extra={"email": email})
        await self.sleeper.sleep(self.delay_seconds)
