"""
SEO description service.

Orchestrates the request-level pipeline:
1. Extract one domain per row
2. Build the prompt
3. Call the completion engine
4. Validate the output as a Description Mapping

Logging goes through the injected logger; payload bodies are only written
when the settings allow it.
"""

import logging
from typing import Any, Dict, List, Optional

from backend.src.core.config import Settings

from .domains import domains_for_rows
from .errors import GenerationFailed, NoRowsProvided
from .output_validator import parse_description_mapping
from .prompt_builder import build_seo_prompt


def _dump_response(response: Any) -> str:
    """Best-effort text form of an SDK response for diagnostics."""
    model_dump_json = getattr(response, "model_dump_json", None)
    if callable(model_dump_json):
        try:
            return model_dump_json(indent=2)
        except (TypeError, ValueError):
            pass
    return repr(response)


class SEODescriptionService:
    """Generates a domain -> description mapping for a batch of rows."""

    def __init__(self, settings: Settings, engine, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self.engine = engine
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, rows: Optional[List[Dict[str, Any]]]) -> Dict[str, str]:
        """
        Generate SEO descriptions for the domains behind ``rows``.

        Parameters
        ----------
        rows : list of dict
            Rows needing a description; each should carry an ``email`` field

        Returns
        -------
        Dict[str, str]
            Mapping from domain to generated description. Empty when no row
            yields a usable domain (the provider is not called).

        Raises
        ------
        NoRowsProvided
            If ``rows`` is None or empty
        GenerationFailed
            If the provider call fails or returns unusable output
        """
        if not rows:
            raise NoRowsProvided("Request contained no rows")

        if self.settings.log_provider_payloads:
            self.logger.info(f"API called with rows: {rows}")
        else:
            self.logger.info(f"API called with {len(rows)} rows")

        domains = domains_for_rows(rows)
        skipped = len(rows) - len(domains)
        if skipped:
            self.logger.warning(f"Skipping {skipped} row(s) without a usable email domain")
        if not domains:
            return {}

        prompt = build_seo_prompt(domains)

        try:
            content, response = self.engine.complete(prompt)
        except Exception as e:
            self.logger.error(f"Error generating SEO descriptions: {e}")
            raise GenerationFailed(str(e)) from e

        if self.settings.log_provider_payloads:
            self.logger.info(
                f"OpenAI response for prompt:\n{prompt}\nResponse:\n{_dump_response(response)}"
            )

        try:
            mapping = parse_description_mapping(content)
        except GenerationFailed as e:
            self.logger.error(f"Error generating SEO descriptions: {e}")
            raise

        self.logger.info(f"Generated {len(mapping)} description(s) for {len(domains)} domain(s)")
        return mapping
