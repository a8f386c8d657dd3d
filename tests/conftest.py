"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from pix_node.adapters.memory_repositories import (
    InMemoryDirectoryRepository,
    InMemoryPortfolioRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
)
from pix_node.adapters.mock_data import (
    DEMO_PHOTOGRAPHER,
    seed_client_profiles,
    seed_listings,
    seed_photographer_profiles,
    seed_portfolio_items,
    seed_users,
)
from pix_node.config import Settings
from pix_node.containers import AppContainer
from pix_node.domain.models import ClientProfile, PhotographerProfile, User, UserRole
from pix_node.services.auth import AuthGateway, SimulatedAuthGateway
from pix_node.services.directory import PhotographerDirectory
from pix_node.services.profile_pages import ProfileRepository, UserRepository
from pix_node.services.simulation import Sleeper
from pix_node.services.uploads import SimulatedUploadClient

FIXED_NOW = datetime(2025, 4, 1, 12, 0, tzinfo=UTC)


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class InstantSleeper(Sleeper):
    """Sleeper that records requested delays and only yields to the loop."""

    calls: list[float] = field(default_factory=list)

    async def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


@dataclass
class GateSleeper(Sleeper):
    """Sleeper that blocks every wait until the gate is opened."""

    calls: list[float] = field(default_factory=list)
    gate: asyncio.Event = field(default_factory=asyncio.Event)

    async def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        await self.gate.wait()

    def open(self) -> None:
        self.gate.set()


class FailingAuthGateway(AuthGateway):
    """Gateway whose every operation fails."""

    async def login(self, email: str, password: str) -> User:
        raise RuntimeError("auth backend unavailable")

    async def register(
        self, name: str, email: str, password: str, role: UserRole
    ) -> User:
        raise RuntimeError("auth backend unavailable")

    async def request_password_reset(self, email: str) -> None:
        raise RuntimeError("auth backend unavailable")


class FailingUserRepository(UserRepository):
    def get_user(self, user_id: str) -> User | None:
        raise RuntimeError("database offline")


@dataclass
class FailingProfileRepository(ProfileRepository):
    """Profile repository that reads from a dict but refuses writes."""

    profiles: dict[str, object] = field(default_factory=dict)

    def get_profile(self, user_id: str):
        return self.profiles.get(user_id)

    def save_profile(self, profile):
        raise RuntimeError("write rejected")


@dataclass
class RecordingSubmit:
    """Submit callback that records payloads and can be told to fail."""

    payloads: list[dict[str, object]] = field(default_factory=list)
    fail: bool = False

    async def __call__(self, data: dict[str, object]) -> None:
        self.payloads.append(data)
        if self.fail:
            raise RuntimeError("rejected")


def seeded_users() -> InMemoryUserRepository:
    return InMemoryUserRepository(users={user.id: user for user in seed_users()})


def seeded_photographer_profiles() -> InMemoryProfileRepository[PhotographerProfile]:
    return InMemoryProfileRepository(
        profiles={item.user_id: item for item in seed_photographer_profiles()}
    )


def seeded_client_profiles() -> InMemoryProfileRepository[ClientProfile]:
    return InMemoryProfileRepository(
        profiles={item.user_id: item for item in seed_client_profiles()}
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        auth_delay_seconds=1.5,
        profile_delay_seconds=1.0,
        upload_tick_seconds=0.3,
        upload_base_url="https://cdn.test/uploads",
    )


@pytest.fixture
def sleeper() -> InstantSleeper:
    return InstantSleeper()


@pytest.fixture
def submit() -> RecordingSubmit:
    return RecordingSubmit()


@pytest.fixture
def container(settings: Settings, sleeper: InstantSleeper) -> AppContainer:
    users = seeded_users()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        sleeper=sleeper,
        clock=fixed_clock,
        auth_gateway=SimulatedAuthGateway(
            sleeper=sleeper,
            delay_seconds=settings.auth_delay_seconds,
            demo_user=DEMO_PHOTOGRAPHER,
            clock=fixed_clock,
            accounts=users,
        ),
        user_repository=users,
        photographer_profiles=seeded_photographer_profiles(),
        client_profiles=seeded_client_profiles(),
        portfolio_repository=InMemoryPortfolioRepository(items=seed_portfolio_items()),
        upload_client=SimulatedUploadClient(
            sleeper=sleeper,
            tick_seconds=settings.upload_tick_seconds,
            base_url=settings.upload_base_url,
        ),
        directory=PhotographerDirectory(InMemoryDirectoryRepository(seed_listings())),
        close_resources=close_resources,
    )
