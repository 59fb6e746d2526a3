"""
Error types for the SEO description pipeline.

Each error carries the fixed, user-facing message that the API layer
returns. Provider details stay in the logs.
"""


class SEOGenerationError(Exception):
    """Base class for SEO pipeline errors."""

    public_message = "Failed to generate SEO descriptions."
    status_code = 500


class ConfigurationError(SEOGenerationError):
    """Raised when required startup configuration is missing."""


class NoRowsProvided(SEOGenerationError):
    """Raised when a request carries no rows to describe."""

    public_message = "No rows provided."
    status_code = 400


class GenerationFailed(SEOGenerationError):
    """Raised when the provider call fails or its output is unusable."""


class InvalidProviderOutput(GenerationFailed):
    """Raised when provider text is not a flat JSON object of strings."""
