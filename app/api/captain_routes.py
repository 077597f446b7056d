# app/api/captain_routes.py
from fastapi import APIRouter, Depends, Request, Response, status

from app.dependencies.auth import (
    clear_session_cookie,
    get_auth_service,
    get_request_token,
    require_actor,
    set_session_cookie,
)
from app.models.auth import ActorRole, LoginRequest, MessageResponse
from app.models.captain import Captain, CaptainAuthResponse, CaptainCreate, CaptainProfileResponse
from app.services.auth_service import AuthService
from app.services.exceptions import ActorNotFoundError

router = APIRouter(prefix="/captains", tags=["CAPTAINS"])

captain_auth = get_auth_service(ActorRole.CAPTAIN)
require_captain = require_actor(ActorRole.CAPTAIN)


@router.post("/register", response_model=CaptainAuthResponse, status_code=status.HTTP_201_CREATED)
async def register_captain(payload: CaptainCreate, auth: AuthService = Depends(captain_auth)):
    """
    Register a new captain together with their vehicle.

    Returns:
        The created captain and a session token
    """
    captain, token = await auth.register(payload)
    return CaptainAuthResponse(captain=captain, token=token)


@router.post("/login", response_model=CaptainAuthResponse)
async def login_captain(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(captain_auth)
):
    captain, token = await auth.login(credentials.email, credentials.password)
    set_session_cookie(request, response, token)
    return CaptainAuthResponse(captain=captain, token=token)


@router.get("/profile", response_model=CaptainProfileResponse)
async def get_captain_profile(request: Request, _: Captain = Depends(require_captain)):
    captain = getattr(request.state, ActorRole.CAPTAIN.value, None)
    if captain is None:
        raise ActorNotFoundError("Captain not found")
    return CaptainProfileResponse(captain=captain)


@router.post("/logout", response_model=MessageResponse)
async def logout_captain(
    request: Request,
    response: Response,
    token: str = Depends(get_request_token),
    auth: AuthService = Depends(captain_auth)
):
    """Blacklist the current captain token and clear the cookie."""
    await auth.logout(token)
    clear_session_cookie(request, response)
    return MessageResponse(message="Logged out")
