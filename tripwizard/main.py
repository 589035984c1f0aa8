import logging

from fastapi import FastAPI

from tripwizard.api import healthcheck
from tripwizard.api.v1.api import api_router
from tripwizard.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Trip Wizard API",
    description="Backend service for publishing and browsing group trips.",
    version="1.0.0"
)

# Include the v1 router
app.include_router(api_router, prefix="/api/v1")
app.include_router(healthcheck.router, tags=["Health"])


@app.get("/", tags=["Health"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the Trip Wizard API!"}

# To run the app:
# uvicorn tripwizard.main:app --reload
