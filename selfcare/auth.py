from fastapi import Request, HTTPException, status
from jose import jwt, JWTError

from selfcare.config import SUPABASE_JWT_SECRET, JWT_ALGORITHM, JWT_AUDIENCE
from selfcare.models import User
from selfcare.session import SessionContext


def verify_token(token: str) -> dict | None:
    """Decode and verify a Supabase access token. Returns the payload or None on failure."""
    try:
        return jwt.decode(token, SUPABASE_JWT_SECRET, algorithms=[JWT_ALGORITHM], audience=JWT_AUDIENCE)
    except JWTError:
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise _unauthorized("Missing or invalid Authorization header")
    return auth_header.split(" ", 1)[1]


def get_session_context() -> SessionContext:
    """FastAPI dependency — a fresh session store for this request."""
    return SessionContext()


async def get_current_user(request: Request) -> User:
    """
    FastAPI dependency — resolves the Bearer token to the signed-in user.
    With SUPABASE_JWT_SECRET set the token is checked locally, otherwise
    Supabase Auth is asked. Raises HTTP 401 if the token is missing or invalid.
    """
    token = bearer_token(request)

    if SUPABASE_JWT_SECRET:
        payload = verify_token(token)
        if payload is None:
            raise _unauthorized("Invalid or expired token")
        if not payload.get("sub"):
            raise _unauthorized("Token payload missing required claims")
        return User.from_auth(payload)

    session = SessionContext()
    user = await session.init(token)
    if user is None:
        raise _unauthorized("Invalid or expired token")
    return user
