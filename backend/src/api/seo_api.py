# src/api/seo_api.py

"""
SEO API - FastAPI endpoint for generating SEO descriptions per email domain.

The router is built by a factory so the service (and through it the
completion engine and logger) is injected rather than created at import.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from backend.src.core.seo.errors import SEOGenerationError
from backend.src.core.seo.service import SEODescriptionService


class GenerateSEORequest(BaseModel):
    """Request model for SEO description generation."""
    rows: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Rows missing an SEO description; each needs an 'email' field"
    )


def _error_response(error: SEOGenerationError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"error": error.public_message})


def build_seo_router(service: SEODescriptionService) -> APIRouter:
    """Create the /api router bound to ``service``."""
    router = APIRouter(prefix="/api")

    @router.post("/generate-seo")
    def generate_seo(request: Optional[GenerateSEORequest] = None):
        """
        Generate one SEO description per email domain.

        Returns
        -------
        200: {"<domain>": "<description>", ...}
        400: {"error": "No rows provided."}
        500: {"error": "Failed to generate SEO descriptions."}
        """
        try:
            mapping = service.generate(request.rows if request is not None else None)
        except SEOGenerationError as e:
            return _error_response(e)
        return JSONResponse(content=mapping)

    return router
