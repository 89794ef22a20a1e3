# webaudit/main.py
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webaudit import __version__
from webaudit.api.router import router
from webaudit.config import get_settings
from webaudit.schemas import HealthOut

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


# ---------------------------
# FastAPI App
# ---------------------------
app = FastAPI(title=settings.APP_NAME, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/health", response_model=HealthOut)
async def health() -> HealthOut:
    return HealthOut(status="ok", app=settings.APP_NAME, version=__version__)


# ---------------------------
# Run Uvicorn (local dev)
# ---------------------------
if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("webaudit.main:app", host="0.0.0.0", port=port, reload=True)
