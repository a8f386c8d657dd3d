"""Tests for container wiring."""

import asyncio

from pix_node.containers import build_container
from pix_node.domain.models import UserRole


def test_build_container_seeds_repositories(settings) -> None:
    container = build_container(settings)

    assert container.user_repository.get_user("user-1") is not None
    assert container.client_profiles.get_profile("user-2") is not None
    assert len(container.portfolio_repository.list_items("user-1")) == 3
    assert len(container.directory.search()) == 6
    asyncio.run(container.close_resources())


def test_session_for_resolves_known_users_only(container) -> None:
    assert container.session_for("user-2").role is UserRole.CLIENT
    assert not container.session_for("nobody").is_authenticated
    assert not container.session_for(None).is_authenticated
