from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import ai, estimate, export

logger = logging.getLogger("obragris")

app = FastAPI(
    title=settings.APP_NAME,
    description="Cómputo de materiales para obra gris — cinco sistemas constructivos",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimate.router, prefix="/api")
app.include_router(ai.router, prefix="/api")
app.include_router(export.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "obragris-estimator"}


@app.on_event("startup")
def log_ai_status():
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set — AI prices, suppliers and chat are disabled")
    else:
        logger.info("Gemini enabled with model %s", settings.GEMINI_MODEL)
