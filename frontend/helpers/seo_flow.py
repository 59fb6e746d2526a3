# frontend/helpers/seo_flow.py
"""
Client flow for SEO description generation.

SEOFlowState holds everything the page shows for one uploaded file and is
kept in st.session_state. SEOFlowController runs the upload -> parse ->
enrich -> merge -> download pipeline against that state. Nothing here
imports streamlit, so the flow can be exercised without a running app.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

import frontend_config as config
from helpers.csv_rows import (
    Row,
    decode_csv_bytes,
    merge_descriptions,
    parse_csv_text,
    preview_slice,
    rows_missing_seo,
    rows_to_csv,
)
from helpers.flow_errors import EnrichmentFailed, NoFileSelected, SEOFlowError
from helpers.logger import get_logger

logger = get_logger("seo_frontend.flow")


class EnrichmentClient:
    """HTTP client for the backend's generate-seo endpoint."""

    def __init__(self, api_base: str = config.API_BASE, timeout: int = config.REQUEST_TIMEOUT):
        self.api_base = api_base
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.api_base.rstrip('/')}{config.GENERATE_SEO_PATH}"

    def generate(self, rows: List[Row]) -> Dict[str, str]:
        """
        POST rows to the backend and return the domain -> description mapping.

        Raises:
            EnrichmentFailed: on transport errors, non-200 responses, or a body
                that is not a JSON object
        """
        logger.info(f"Calling {self.url} with {len(rows)} row(s)")
        try:
            response = requests.post(self.url, json={"rows": rows}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Enrichment request failed: {e}")
            raise EnrichmentFailed(str(e)) from e

        if response.status_code != 200:
            try:
                detail = response.json().get("error", response.text)
            except (ValueError, AttributeError):
                detail = response.text
            logger.error(f"Enrichment endpoint returned {response.status_code}: {detail}")
            raise EnrichmentFailed(f"HTTP {response.status_code}: {detail}")

        try:
            data = response.json()
        except ValueError as e:
            raise EnrichmentFailed("Response body is not JSON") from e
        if not isinstance(data, dict):
            raise EnrichmentFailed(f"Expected a JSON object, got {type(data).__name__}")

        return {k: v for k, v in data.items() if isinstance(v, str)}


@dataclass
class SEOFlowState:
    """Per-upload state; a fresh instance is the initial state."""
    file_name: Optional[str] = None
    file_bytes: Optional[bytes] = None
    rows_missing_seo: List[Row] = field(default_factory=list)
    processing: bool = False
    progress: int = 0  # 0 until a run succeeds, then 100
    error: Optional[str] = None
    download_bytes: Optional[bytes] = None
    preview_rows: List[Row] = field(default_factory=list)

    @property
    def has_file(self) -> bool:
        return self.file_bytes is not None


class SEOFlowController:
    """Runs the SEO enrichment flow against an SEOFlowState."""

    def __init__(self, state: SEOFlowState, client: EnrichmentClient):
        self.state = state
        self.client = client

    def select_file(self, name: str, data: bytes):
        """Store a newly selected file and clear everything derived from the last one."""
        self._set_file(name, data)
        logger.info(f"Selected file '{name}' ({len(data)} bytes)")

    def clear_file(self):
        """Forget the selected file and everything derived from it."""
        self._set_file(None, None)

    def reject_file(self, message: str):
        """Drop the previous file and its results, then record why the new one was refused."""
        self.clear_file()
        self.state.error = message
        logger.warning(f"Rejected upload: {message}")

    def _set_file(self, name: Optional[str], data: Optional[bytes]):
        self.state.file_name = name
        self.state.file_bytes = data
        self.state.rows_missing_seo = []
        self.state.download_bytes = None
        self.state.error = None
        self.state.progress = 0
        self.state.preview_rows = []

    def generate(self) -> bool:
        """
        Enrich the selected file. Returns True on success.

        Failures are stored on ``state.error``; a download built by an
        earlier successful run is kept until the next file selection.
        """
        state = self.state
        if not state.has_file:
            state.error = NoFileSelected.user_message
            return False

        state.processing = True
        state.error = None
        state.progress = 0
        try:
            self._run()
            return True
        except SEOFlowError as e:
            logger.warning(f"SEO generation failed: {e}")
            state.error = e.user_message
            return False
        finally:
            state.processing = False

    def _run(self):
        state = self.state
        text = decode_csv_bytes(state.file_bytes)
        columns, rows = parse_csv_text(text)

        missing = rows_missing_seo(rows)
        state.rows_missing_seo = missing
        logger.info(f"{len(missing)} of {len(rows)} row(s) missing SEO descriptions")

        descriptions = self.client.generate(missing) if missing else {}

        updated = merge_descriptions(rows, descriptions)
        state.preview_rows = preview_slice(updated)
        state.download_bytes = rows_to_csv(updated, columns).encode("utf-8")
        state.progress = 100
