# supabase_client.py — Supabase client initialization

from supabase import create_client, Client
from selfcare.config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_ANON_KEY


def is_supabase_configured() -> bool:
    """Check if Supabase is properly configured with required environment variables."""
    return bool(SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY and SUPABASE_ANON_KEY)


def new_auth_client() -> Client:
    """
    Create a Supabase client with the anonymous key.
    The auth half of a client keeps the signed-in session in memory, so every
    SessionContext gets its own instance instead of sharing a global one.
    """
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set in environment variables")

    return create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
