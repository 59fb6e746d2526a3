# Standard library
import time
from typing import Optional

# Third-party libraries
import psutil
from fastapi import FastAPI, HTTPException

# Local application imports
from backend.src.core.config import Settings, load_settings
from backend.src.core.logger import get_logger
from backend.src.core.seo.inference import OpenAICompletionEngine
from backend.src.core.seo.service import SEODescriptionService
from backend.src.api.seo_api import build_seo_router

logger = get_logger("seo_backend.api")


def create_app(settings: Optional[Settings] = None, engine=None) -> FastAPI:
    """
    Application factory.

    Run with: uvicorn backend.src.api.main:create_app --factory --port 8000

    Parameters
    ----------
    settings : Settings, optional
        Explicit settings. When omitted they are loaded from the environment
        and a missing API key raises ConfigurationError, so the server
        refuses to start.
    engine : optional
        Completion engine override (anything with ``complete(prompt)``)
    """
    settings = settings or load_settings()
    engine = engine or OpenAICompletionEngine(settings)
    service = SEODescriptionService(settings, engine, logger=get_logger("seo_backend.seo"))

    app = FastAPI(title="SEO Description Generator API")
    app.include_router(build_seo_router(service))

    @app.get("/")
    def home():
        return {"message": "Welcome to the SEO Description Generator API!"}

    @app.get("/health")
    def health_check():
        """Lightweight health endpoint used by frontend to verify API connectivity."""
        try:
            mem = psutil.virtual_memory()
            return {
                "status": "ok",
                "memory_percent": mem.percent,
                "uptime": time.time()
            }
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            raise HTTPException(500, "Health check failed")

    logger.info(f"SEO API ready (model={settings.model_name})")
    return app
