from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from selfcare.auth import bearer_token, get_current_user, get_session_context
from selfcare.errors import AuthError
from selfcare.models import User
from selfcare.session import SessionContext

router = APIRouter(prefix="/api/v1/auth", tags=["Auth"])


# ── Pydantic schemas ──────────────────────────────────────────────
class SignInRequest(BaseModel):
    email: str
    password: str


class SignUpRequest(SignInRequest):
    name: str


class SignOutRequest(BaseModel):
    refresh_token: Optional[str] = None


def _session_payload(session: SessionContext) -> dict:
    return {
        "user": session.user.model_dump(mode="json") if session.user else None,
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
    }


# ── Routes ────────────────────────────────────────────────────────
@router.post("/signup")
async def signup(body: SignUpRequest, session: SessionContext = Depends(get_session_context)):
    try:
        await session.sign_up(body.email, body.password, body.name)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "data": _session_payload(session)}


@router.post("/login")
async def login(body: SignInRequest, session: SessionContext = Depends(get_session_context)):
    try:
        await session.sign_in(body.email, body.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return {"status": "success", "data": _session_payload(session)}


@router.post("/logout")
async def logout(
    request: Request,
    body: Optional[SignOutRequest] = None,
    session: SessionContext = Depends(get_session_context),
):
    token = bearer_token(request)
    await session.init(token, body.refresh_token if body else None)
    if session.user is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    try:
        await session.sign_out()
    except AuthError as e:
        raise HTTPException(status_code=502, detail=f"Error signing out: {e}")
    return {"status": "success", "data": {"message": "Signed out"}}


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return {"status": "success", "data": user.model_dump(mode="json")}
