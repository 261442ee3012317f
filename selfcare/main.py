import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from selfcare.config import APP_NAME, CORS_ORIGINS, DATA_BACKEND, LOG_LEVEL
from selfcare.database import init_db
from selfcare.routes.auth_routes import router as auth_router
from selfcare.routes.dashboard_routes import router as dashboard_router
from selfcare.routes.log_routes import router as log_router
from selfcare.supabase_client import is_supabase_configured

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

if DATA_BACKEND == "sql":
    try:
        init_db()
    except Exception as e:
        logger.error("Database init failed: %s", e)
        raise
elif not is_supabase_configured():
    logger.warning("Supabase is not configured; data and auth requests will fail")

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/v1/health-check")
async def health():
    return {"status": "ok", "message": "Backend is alive!", "backend": DATA_BACKEND}


app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(log_router)


def run():
    import uvicorn
    uvicorn.run("selfcare.main:app", host="0.0.0.0", port=8000, reload=False)


if __name__ == "__main__":
    run()
