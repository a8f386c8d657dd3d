"""Profile display/edit components."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pix_node.domain.forms import SubmitOutcome
from pix_node.domain.models import ClientProfile, PhotographerProfile, User
from pix_node.domain.navigation import Route
from pix_node.domain.views import ProfileView, ProfileViewMode
from pix_node.services.form_definitions import (
    CLIENT_PROFILE_FORM,
    PHOTOGRAPHER_PROFILE_FORM,
    PROFILE_UPDATE_ERROR,
    client_form_values,
    photographer_form_values,
)
from pix_node.services.forms import FormBusyError, FormDefinition, FormMachine

ProfileT = TypeVar("ProfileT", ClientProfile, PhotographerProfile)
UpdateCallback = Callable[[dict[str, object]], Awaitable[None]]

LOADING_MESSAGE = "Loading profile..."
MISSING_MESSAGE = "Profile not found. Please create a profile first."

_SOCIAL_URLS = (
    ("Instagram", "instagram", "https://instagram.com/{}"),
    ("Facebook", "facebook", "https://facebook.com/{}"),
    ("Twitter", "twitter", "https://twitter.com/{}"),
    ("LinkedIn", "linkedin", "https://linkedin.com/in/{}"),
)


def describe_client(user: User, profile: ClientProfile) -> list[tuple[str, str]]:
    """Return the label/value pairs shown on a client profile."""
    details: list[tuple[str, str]] = []
    if profile.company_name:
        details.append(("Company", profile.company_name))
    if profile.industry:
        details.append(("Industry", profile.industry))
    if profile.description:
        details.append(("About", profile.description))
    details.append(("Location", profile.location))
    details.append(("Email", user.email))
    if profile.website:
        details.append(("Website", profile.website))
    return details


def describe_photographer(
    user: User, profile: PhotographerProfile
) -> list[tuple[str, str]]:
    """Return the label/value pairs shown on a photographer profile."""
    details = [
        (
            "Availability",
            "Available for hire" if profile.available else "Not available for hire",
        ),
        ("About", profile.bio),
        ("Specialties", ", ".join(profile.specialties)),
        ("Experience", f"{profile.years_of_experience} years"),
    ]
    if profile.hourly_rate:
        details.append(("Hourly Rate", f"${profile.hourly_rate:g}/hr"))
    details.append(("Location", profile.location))
    if profile.website:
        details.append(("Website", profile.website))
    details.append(("Email", user.email))
    for label, network, template in _SOCIAL_URLS:
        handle = getattr(profile.social_links, network)
        if handle:
            details.append((label, template.format(handle)))
    return details


@dataclass
class ProfileComponent(Generic[ProfileT]):
    """Profile view that toggles between display and an edit form.

    The component never mutates the profile it is given. Updates are sent to
    ``on_update`` and only show up once the parent calls ``receive`` with the
    new data.
    """

    form_definition: FormDefinition
    to_form_values: Callable[[ProfileT], dict[str, object]]
    describe: Callable[[User, ProfileT], list[tuple[str, str]]]
    create_route: Route
    user: User | None = None
    profile: ProfileT | None = None
    is_loading: bool = False
    error: str | None = None
    is_owner: bool = False
    on_update: UpdateCallback | None = None
    is_editing: bool = False
    is_saving: bool = False
    update_error: str | None = None
    form: FormMachine | None = field(default=None)

    def receive(
        self,
        *,
        user: User | None,
        profile: ProfileT | None,
        is_loading: bool = False,
        error: str | None = None,
    ) -> None:
        """Accept fresh props from the parent page."""
        self.user = user
        self.profile = profile
        self.is_loading = is_loading
        self.error = error

    @property
    def mode(self) -> ProfileViewMode:
        if self.is_loading:
            return ProfileViewMode.LOADING
        if self.error:
            return ProfileViewMode.ERROR
        if self.user is None or self.profile is None:
            return ProfileViewMode.MISSING
        if self.is_editing and self.is_owner:
            return ProfileViewMode.EDIT
        return ProfileViewMode.DISPLAY

    def toggle_edit(self) -> None:
        """Enter or leave edit mode, clearing any previous update error."""
        if self.is_saving:
            raise FormBusyError("Profile update in progress")
        self.is_editing = not self.is_editing
        self.update_error = None
        self.form = self._build_form() if self.is_editing else None

    async def submit_edit(self) -> SubmitOutcome:
        """Submit the embedded edit form."""
        if self.form is None:
            raise RuntimeError("Profile is not in edit mode")
        return await self.form.submit()

    async def _handle_update(self, data: dict[str, object]) -> None:
        if self.on_update is None:
            return
        self.is_saving = True
        self.update_error = None
        try:
            await self.on_update(data)
        except Exception:
            self.update_error = PROFILE_UPDATE_ERROR
            raise
        finally:
            self.is_saving = False
        self.is_editing = False
        self.form = None

    def _build_form(self) -> FormMachine | None:
        if self.profile is None:
            return None
        return FormMachine(
            definition=self.form_definition,
            on_submit=self._handle_update,
            initial=self.to_form_values(self.profile),
        )

    def render(self) -> ProfileView:
        """Render exactly one of the loading/error/missing/edit/display views."""
        mode = self.mode
        if mode is ProfileViewMode.LOADING:
            return ProfileView(mode=mode, message=LOADING_MESSAGE)
        if mode is ProfileViewMode.ERROR:
            return ProfileView(mode=mode, message=self.error)
        if mode is ProfileViewMode.MISSING:
            return ProfileView(
                mode=mode,
                message=MISSING_MESSAGE,
                actions=["Create Profile"] if self.is_owner else [],
                link=self.create_route.path if self.is_owner else None,
            )
        if mode is ProfileViewMode.EDIT:
            if self.form is None:
                self.form = self._build_form()
            return ProfileView(
                mode=mode,
                heading="Edit Profile",
                form=self.form.render() if self.form else None,
                update_error=self.update_error,
                actions=["Cancel"],
            )
        return ProfileView(
            mode=mode,
            heading=self.user.name,
            details=self.describe(self.user, self.profile),
            actions=["Edit Profile"] if self.is_owner else [],
        )


def client_profile_component(**props: object) -> ProfileComponent[ClientProfile]:
    """Build a client profile component."""
    return ProfileComponent(
        form_definition=CLIENT_PROFILE_FORM,
        to_form_values=client_form_values,
        describe=describe_client,
        create_route=Route.CLIENT_CREATE_PROFILE,
        **props,
    )


def photographer_profile_component(
    **props: object,
) -> ProfileComponent[PhotographerProfile]:
    """Build a photographer profile component."""
    return ProfileComponent(
        form_definition=PHOTOGRAPHER_PROFILE_FORM,
        to_form_values=photographer_form_values,
        describe=describe_photographer,
        create_route=Route.PHOTOGRAPHER_CREATE_PROFILE,
        **props,
    )
