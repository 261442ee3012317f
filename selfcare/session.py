"""
session.py — Session store
One SessionContext per request/client. It owns its own Supabase auth client,
so a signed-in user never leaks into another session.
"""
import logging

from selfcare.errors import AuthError
from selfcare.models import User
from selfcare.supabase_client import new_auth_client

logger = logging.getLogger(__name__)


class SessionContext:
    def __init__(self, client_factory=new_auth_client):
        self._client_factory = client_factory
        self._client = None
        self.user: User | None = None
        self.access_token: str | None = None
        self.refresh_token: str | None = None
        self.loading = True

    @property
    def client(self):
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def _apply(self, response) -> User | None:
        session = getattr(response, "session", None)
        auth_user = getattr(response, "user", None) or getattr(session, "user", None)

        self.user = User.from_auth(auth_user) if auth_user else None
        if session is not None:
            self.access_token = session.access_token
            self.refresh_token = session.refresh_token
        return self.user

    def _clear(self) -> None:
        self.user = None
        self.access_token = None
        self.refresh_token = None

    async def init(self, access_token: str = None, refresh_token: str = None) -> User | None:
        """Resolve the current session from an access token, if there is one."""
        self.loading = True
        try:
            if not access_token:
                self._clear()
                return None
            response = self.client.auth.get_user(access_token)
            if response is None or response.user is None:
                self._clear()
                return None
            self.user = User.from_auth(response.user)
            self.access_token = access_token
            self.refresh_token = refresh_token
            return self.user
        except Exception as e:
            logger.warning("Session lookup failed: %s", e)
            self._clear()
            return None
        finally:
            self.loading = False

    async def sign_up(self, email: str, password: str, name: str) -> User | None:
        """Register with Supabase Auth; tokens stay empty until email confirmation if the project requires it."""
        self.loading = True
        try:
            response = self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"name": name}},
            })
        except Exception as e:
            raise AuthError(str(e)) from e
        finally:
            self.loading = False
        logger.info("Signed up %s", email)
        return self._apply(response)

    async def sign_in(self, email: str, password: str) -> User:
        self.loading = True
        try:
            response = self.client.auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except Exception as e:
            raise AuthError(str(e)) from e
        finally:
            self.loading = False

        user = self._apply(response)
        if user is None:
            raise AuthError("Invalid login credentials")
        return user

    async def sign_out(self) -> None:
        """Sign out remotely; the local copy is cleared even when that fails."""
        try:
            if self.access_token:
                self.client.auth.set_session(self.access_token, self.refresh_token or "")
            self.client.auth.sign_out()
        except Exception as e:
            raise AuthError(str(e)) from e
        finally:
            self._clear()

    def require_user(self) -> User:
        if self.user is None:
            raise AuthError("Not authenticated")
        return self.user
