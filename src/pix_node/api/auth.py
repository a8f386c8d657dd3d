"""Account endpoints backed by the login, register and reset pages."""

from fastapi import APIRouter, Depends, HTTPException, status

from pix_node.api.dependencies import get_container, raise_for_errors
from pix_node.api.models import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    RegisterRequest,
    UserModel,
    form_values,
)
from pix_node.containers import AppContainer
from pix_node.services.auth_pages import ForgotPasswordPage, LoginPage, RegisterPage

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    payload: LoginRequest, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Sign in and return where the user should land."""
    page = LoginPage(gateway=container.auth_gateway)
    raise_for_errors(await page.submit(form_values(payload)))
    if page.user is None or page.redirect_to is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=page.error
        )
    return AuthResponse(
        user=UserModel.from_domain(page.user), redirect_to=page.redirect_to
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Create an account and return the profile page for its role."""
    page = RegisterPage(gateway=container.auth_gateway)
    raise_for_errors(await page.submit(form_values(payload)))
    if page.user is None or page.redirect_to is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=page.error
        )
    return AuthResponse(
        user=UserModel.from_domain(page.user), redirect_to=page.redirect_to
    )


@router.post("/forgot")
async def forgot_password(
    payload: ForgotPasswordRequest, container: AppContainer = Depends(get_container)
) -> ForgotPasswordResponse:
    """Send a password reset link."""
    page = ForgotPasswordPage(gateway=container.auth_gateway)
    raise_for_errors(await page.submit(form_values(payload)))
    if page.message is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=page.render().error
        )
    return ForgotPasswordResponse(message=page.message, login_path=page.login_path)
