"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

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
from pix_node.domain.models import ClientProfile, PhotographerProfile
from pix_node.domain.session import SessionContext
from pix_node.services.auth import AuthGateway, SimulatedAuthGateway
from pix_node.services.directory import PhotographerDirectory
from pix_node.services.forms import Clock, utcnow
from pix_node.services.portfolio import PortfolioRepository
from pix_node.services.profile_pages import ProfileRepository, UserRepository
from pix_node.services.simulation import AsyncioSleeper, Sleeper
from pix_node.services.uploads import SimulatedUploadClient, UploadClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    sleeper: Sleeper
    clock: Clock
    auth_gateway: AuthGateway
    user_repository: UserRepository
    photographer_profiles: ProfileRepository[PhotographerProfile]
    client_profiles: ProfileRepository[ClientProfile]
    portfolio_repository: PortfolioRepository
    upload_client: UploadClient
    directory: PhotographerDirectory
    close_resources: Callable[[], Awaitable[None]]

    def session_for(self, user_id: str | None) -> SessionContext:
        """Resolve a visitor id into a session, anonymous when unknown."""
        user = self.user_repository.get_user(user_id) if user_id else None
        if user is None:
            return SessionContext()
        return SessionContext.for_user(user)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    sleeper = AsyncioSleeper()
    user_repository = InMemoryUserRepository()
    for user in seed_users():
        user_repository.add_user(user)
    photographer_profiles: InMemoryProfileRepository[PhotographerProfile] = (
        InMemoryProfileRepository(
            profiles={item.user_id: item for item in seed_photographer_profiles()}
        )
    )
    client_profiles: InMemoryProfileRepository[ClientProfile] = (
        InMemoryProfileRepository(
            profiles={item.user_id: item for item in seed_client_profiles()}
        )
    )
    auth_gateway = SimulatedAuthGateway(
        sleeper=sleeper,
        delay_seconds=resolved_settings.auth_delay_seconds,
        demo_user=DEMO_PHOTOGRAPHER,
        accounts=user_repository,
    )
    upload_client = SimulatedUploadClient(
        sleeper=sleeper,
        tick_seconds=resolved_settings.upload_tick_seconds,
        base_url=resolved_settings.upload_base_url,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        sleeper=sleeper,
        clock=utcnow,
        auth_gateway=auth_gateway,
        user_repository=user_repository,
        photographer_profiles=photographer_profiles,
        client_profiles=client_profiles,
        portfolio_repository=InMemoryPortfolioRepository(
            items=seed_portfolio_items()
        ),
        upload_client=upload_client,
        directory=PhotographerDirectory(InMemoryDirectoryRepository(seed_listings())),
        close_resources=close_resources,
    )
