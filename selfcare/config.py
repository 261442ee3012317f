import os
from dotenv import load_dotenv

load_dotenv()

# --- App ---
APP_NAME = os.getenv("APP_NAME", "SelfCare")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# --- Supabase Configuration ---
SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
# Project JWT secret; when set, access tokens are verified locally instead of via auth.get_user
SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET", "")
JWT_ALGORITHM = "HS256"
JWT_AUDIENCE = "authenticated"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

# --- Storage ---
# "supabase" talks to PostgREST, "sql" keeps daily logs in DATABASE_URL
DATA_BACKEND = os.getenv("DATA_BACKEND", "supabase").lower()
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/selfcare.db")

# Fix for common SQLAlchemy issues with postgres:// vs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

DAILY_LOGS_TABLE = "daily_logs"
