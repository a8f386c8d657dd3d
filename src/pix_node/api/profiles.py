"""Profile endpoints for the signed-in photographer or client."""

from fastapi import APIRouter, Depends, Header, HTTPException, status

from pix_node.api.dependencies import get_container, raise_for_errors
from pix_node.api.models import (
    ClientProfileModel,
    ClientProfileRequest,
    ClientProfileResponse,
    PhotographerProfileModel,
    PhotographerProfileRequest,
    PhotographerProfileResponse,
    ProfileViewModel,
    UserModel,
    form_values,
)
from pix_node.containers import AppContainer
from pix_node.domain.models import ClientProfile, PhotographerProfile
from pix_node.services.profile_pages import (
    ProfilePage,
    client_profile_page,
    photographer_profile_page,
)
from pix_node.services.profiles import MISSING_MESSAGE

router = APIRouter(tags=["profiles"])


async def load_photographer_page(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> ProfilePage[PhotographerProfile]:
    """Load the photographer profile page for the requesting user."""
    session = container.session_for(
        x_user_id or container.settings.demo_photographer_id
    )
    page = photographer_profile_page(
        session=session,
        users=container.user_repository,
        profiles=container.photographer_profiles,
        sleeper=container.sleeper,
        delay_seconds=container.settings.profile_delay_seconds,
    )
    await page.load()
    return page


async def load_client_page(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> ProfilePage[ClientProfile]:
    """Load the client profile page for the requesting user."""
    session = container.session_for(x_user_id or container.settings.demo_client_id)
    page = client_profile_page(
        session=session,
        users=container.user_repository,
        profiles=container.client_profiles,
        sleeper=container.sleeper,
        delay_seconds=container.settings.profile_delay_seconds,
    )
    await page.load()
    return page


def _ensure_loaded(page: ProfilePage) -> None:
    if page.error:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=page.error
        )
    if page.user is None or page.profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=MISSING_MESSAGE
        )


async def _apply_edit(page: ProfilePage, values: dict[str, object]) -> None:
    component = page.component
    component.toggle_edit()
    if component.form is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=MISSING_MESSAGE
        )
    component.form.edit_many(values)
    raise_for_errors(await component.submit_edit())
    if component.update_error:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=component.update_error
        )


def _photographer_response(
    page: ProfilePage[PhotographerProfile],
) -> PhotographerProfileResponse:
    return PhotographerProfileResponse(
        user=UserModel.from_domain(page.user),
        profile=PhotographerProfileModel.from_domain(page.profile),
        view=ProfileViewModel.from_view(page.render()),
    )


def _client_response(page: ProfilePage[ClientProfile]) -> ClientProfileResponse:
    return ClientProfileResponse(
        user=UserModel.from_domain(page.user),
        profile=ClientProfileModel.from_domain(page.profile),
        view=ProfileViewModel.from_view(page.render()),
    )


@router.get("/photographer/profile")
async def get_photographer_profile(
    page: ProfilePage[PhotographerProfile] = Depends(load_photographer_page),
) -> PhotographerProfileResponse:
    """Return the photographer's profile and its rendered view."""
    _ensure_loaded(page)
    return _photographer_response(page)


@router.put("/photographer/profile")
async def update_photographer_profile(
    payload: PhotographerProfileRequest,
    page: ProfilePage[PhotographerProfile] = Depends(load_photographer_page),
) -> PhotographerProfileResponse:
    """Apply a partial update to the photographer's profile."""
    _ensure_loaded(page)
    await _apply_edit(page, form_values(payload))
    return _photographer_response(page)


@router.get("/client/profile")
async def get_client_profile(
    page: ProfilePage[ClientProfile] = Depends(load_client_page),
) -> ClientProfileResponse:
    """Return the client's profile and its rendered view."""
    _ensure_loaded(page)
    return _client_response(page)


@router.put("/client/profile")
async def update_client_profile(
    payload: ClientProfileRequest,
    page: ProfilePage[ClientProfile] = Depends(load_client_page),
) -> ClientProfileResponse:
    """Apply a partial update to the client's profile."""
    _ensure_loaded(page)
    await _apply_edit(page, form_values(payload))
    return _client_response(page)
