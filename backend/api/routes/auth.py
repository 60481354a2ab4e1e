"""
Account endpoints.

Registration and login are public; profile and password endpoints require
a valid bearer token. The user ID always comes from the resolved identity,
never from the request body.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from modules.auth.interfaces import IAccountService
from modules.auth.models import (
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
)
from shared.models import AuthenticatedIdentity

from ..dependencies import get_account_service
from ..messages import success_response
from ..middleware.auth import get_current_identity
from ..models.responses import ApiResponse

router = APIRouter()


@router.post("/register", response_model=ApiResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> JSONResponse:
    """Create an account and return it with an access token."""
    result = await service.register(request)
    return success_response("REGISTERED", data=result.model_dump(mode="json"), status_code=201)


@router.post("/login", response_model=ApiResponse)
async def login(
    request: LoginRequest,
    service: IAccountService = Depends(get_account_service),
) -> JSONResponse:
    """Exchange email and password for an access token."""
    result = await service.login(request)
    return success_response("LOGGED_IN", data=result.model_dump(mode="json"))


@router.get("/profile", response_model=ApiResponse)
async def get_profile(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    service: IAccountService = Depends(get_account_service),
) -> JSONResponse:
    """Get the current user's profile."""
    profile = await service.get_profile(identity.id)
    return success_response("PROFILE_FETCHED", data={"user": profile.model_dump(mode="json")})


@router.put("/profile", response_model=ApiResponse)
async def update_profile(
    request: UpdateProfileRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    service: IAccountService = Depends(get_account_service),
) -> JSONResponse:
    """Update the current user's name, phone or language."""
    profile = await service.update_profile(identity.id, request)
    return success_response("PROFILE_UPDATED", data={"user": profile.model_dump(mode="json")})


@router.put("/change-password", response_model=ApiResponse)
async def change_password(
    request: ChangePasswordRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    service: IAccountService = Depends(get_account_service),
) -> JSONResponse:
    """
    Change the current user's password.

    Tokens issued earlier stay valid until they expire.
    """
    await service.change_password(identity.id, request)
    return success_response("PASSWORD_CHANGED")
