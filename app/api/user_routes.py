# app/api/user_routes.py
from fastapi import APIRouter, Depends, Request, Response, status

from app.dependencies.auth import (
    clear_session_cookie,
    get_auth_service,
    get_request_token,
    require_actor,
    set_session_cookie,
)
from app.models.auth import ActorRole, LoginRequest, MessageResponse
from app.models.user import User, UserAuthResponse, UserCreate, UserProfileResponse
from app.services.auth_service import AuthService
from app.services.exceptions import ActorNotFoundError

router = APIRouter(prefix="/users", tags=["USERS"])

user_auth = get_auth_service(ActorRole.USER)
require_user = require_actor(ActorRole.USER)


@router.post("/register", response_model=UserAuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(payload: UserCreate, auth: AuthService = Depends(user_auth)):
    """
    Register a new rider.

    Returns:
        The created rider and a session token
    """
    user, token = await auth.register(payload)
    return UserAuthResponse(user=user, token=token)


@router.post("/login", response_model=UserAuthResponse)
async def login_user(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(user_auth)
):
    """
    Authenticate a rider; the token is also set as an httpOnly cookie.
    """
    user, token = await auth.login(credentials.email, credentials.password)
    set_session_cookie(request, response, token)
    return UserAuthResponse(user=user, token=token)


@router.get("/profile", response_model=UserProfileResponse)
async def get_user_profile(request: Request, _: User = Depends(require_user)):
    """Return the rider attached to the request by the session verifier."""
    user = getattr(request.state, ActorRole.USER.value, None)
    if user is None:
        raise ActorNotFoundError("User not found")
    return UserProfileResponse(user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout_user(
    request: Request,
    response: Response,
    token: str = Depends(get_request_token),
    auth: AuthService = Depends(user_auth)
):
    """Blacklist the current rider token and clear the cookie."""
    await auth.logout(token)
    clear_session_cookie(request, response)
    return MessageResponse(message="Logged out")
