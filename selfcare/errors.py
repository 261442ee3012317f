class BackendError(Exception):
    """Storage or network failure talking to the data backend."""


class AuthError(Exception):
    """Sign-in, sign-up or session lookup rejected by the auth backend."""
