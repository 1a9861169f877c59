"""Auth routes for the single active user session."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import Optional
from common.deps import get_auth
from services.auth.client import AuthClient

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    email: Optional[str] = None


class SessionResponse(BaseModel):
    authenticated: bool
    is_loading: bool
    user_id: Optional[str] = None
    email: Optional[str] = None


def _session(auth: AuthClient) -> SessionResponse:
    state = auth.state
    return SessionResponse(
        authenticated=state.is_authenticated,
        is_loading=state.is_loading,
        user_id=state.user.id if state.user else None,
        email=state.user.email if state.user else None,
    )


@router.get("/me", response_model=SessionResponse)
def me(auth: AuthClient = Depends(get_auth)):
    return _session(auth)


@router.post("/login", response_model=SessionResponse)
def login(request: LoginRequest, auth: AuthClient = Depends(get_auth)):
    auth.login(request.user_id, request.email)
    return _session(auth)


@router.post("/logout", response_model=SessionResponse)
def logout(auth: AuthClient = Depends(get_auth)):
    auth.logout()
    return _session(auth)
