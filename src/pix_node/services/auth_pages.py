"""Login, registration and password recovery pages."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from pix_node.domain.forms import SubmissionState, SubmitOutcome
from pix_node.domain.models import User, UserRole
from pix_node.domain.navigation import Route, profile_route
from pix_node.domain.session import SessionContext
from pix_node.domain.views import FormView
from pix_node.services.auth import AuthGateway
from pix_node.services.form_definitions import (
    FORGOT_PASSWORD_FORM,
    LOGIN_FORM,
    REGISTER_FORM,
)
from pix_node.services.forms import FormMachine

logger = logging.getLogger(__name__)

LOGIN_ERROR = "Invalid email or password. Please try again."
REGISTER_ERROR = "An error occurred during registration. Please try again."
RESET_SENT_MESSAGE = (
    "Please check your email and follow the instructions to reset your password."
)


@dataclass
class LoginPage:
    """Signs an existing user in and decides where to go next."""

    gateway: AuthGateway
    session: SessionContext = field(default_factory=SessionContext)
    user: User | None = None
    is_loading: bool = False
    error: str | None = None
    redirect_to: str | None = None
    form: FormMachine = field(init=False)

    def __post_init__(self) -> None:
        self.form = FormMachine(definition=LOGIN_FORM, on_submit=self._handle_login)

    async def submit(self, values: Mapping[str, object]) -> SubmitOutcome:
        """Fill in the form and submit it."""
        self.form.edit_many(values)
        return await self.form.submit()

    async def _handle_login(self, data: dict[str, object]) -> None:
        self.is_loading = True
        self.error = None
        self.form.is_loading = True
        try:
            user = await self.gateway.login(str(data["email"]), str(data["password"]))
        except Exception:
            logger.exception("Login error")
            self.error = LOGIN_ERROR
        else:
            self.user = user
            self.session = SessionContext.for_user(user)
            self.redirect_to = profile_route(user.role).path
        finally:
            self.is_loading = False
            self.form.is_loading = False
            self.form.error = self.error

    def render(self) -> FormView:
        return self.form.render()


@dataclass
class RegisterPage:
    """Creates an account and sends the user to their profile screen."""

    gateway: AuthGateway
    session: SessionContext = field(default_factory=SessionContext)
    user: User | None = None
    is_loading: bool = False
    error: str | None = None
    redirect_to: str | None = None
    form: FormMachine = field(init=False)

    def __post_init__(self) -> None:
        self.form = FormMachine(
            definition=REGISTER_FORM, on_submit=self._handle_register
        )

    async def submit(self, values: Mapping[str, object]) -> SubmitOutcome:
        """Fill in the form and submit it."""
        self.form.edit_many(values)
        return await self.form.submit()

    async def _handle_register(self, data: dict[str, object]) -> None:
        self.is_loading = True
        self.error = None
        self.form.is_loading = True
        role = UserRole(str(data["role"]))
        try:
            user = await self.gateway.register(
                name=str(data["name"]),
                email=str(data["email"]),
                password=str(data["password"]),
                role=role,
            )
        except Exception:
            logger.exception("Registration error")
            self.error = REGISTER_ERROR
        else:
            self.user = user
            self.session = SessionContext.for_user(user)
            self.redirect_to = profile_route(role).path
        finally:
            self.is_loading = False
            self.form.is_loading = False
            self.form.error = self.error

    def render(self) -> FormView:
        return self.form.render()


@dataclass
class ForgotPasswordPage:
    """Requests a password reset link."""

    gateway: AuthGateway
    form: FormMachine = field(init=False)

    def __post_init__(self) -> None:
        self.form = FormMachine(
            definition=FORGOT_PASSWORD_FORM, on_submit=self._handle_request
        )

    async def submit(self, values: Mapping[str, object]) -> SubmitOutcome:
        """Fill in the form and submit it."""
        self.form.edit_many(values)
        return await self.form.submit()

    async def _handle_request(self, data: dict[str, object]) -> None:
        await self.gateway.request_password_reset(str(data["email"]))

    @property
    def message(self) -> str | None:
        """Return the confirmation shown once the link was sent."""
        if self.form.state is SubmissionState.SUCCESS:
            return RESET_SENT_MESSAGE
        return None

    @property
    def login_path(self) -> str:
        return Route.LOGIN.path

    def render(self) -> FormView:
        return self.form.render()
