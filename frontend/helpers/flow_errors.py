"""Errors raised by the client-side SEO flow."""

import frontend_config as config


class SEOFlowError(Exception):
    """Base class; ``user_message`` is what the page shows."""

    user_message = config.MSG_ENRICHMENT_FAILED


class NoFileSelected(SEOFlowError):
    user_message = config.MSG_NO_FILE


class EmptyOrMalformedCSV(SEOFlowError):
    user_message = config.MSG_BAD_CSV


class EnrichmentFailed(SEOFlowError):
    """Backend unreachable, non-success status, or unusable body."""
