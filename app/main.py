from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.endpoints import toptrack
from app.core.config import get_settings
from app.core.http_client import HttpClientManager
from app.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    settings.warn_missing_keys()
    yield
    await HttpClientManager.close()


app = FastAPI(
    title="TopTrack",
    description="Top track of a region, with lyrics and artist image.",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.include_router(toptrack.router)

@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
