"""
Completion engine for SEO descriptions.

This module is a thin execution layer around the OpenAI chat completions
API. It sends a prepared prompt and returns the raw text of the first
choice. Prompt building happens before it and output validation after it.
No retries, no streaming, no custom sampling parameters.
"""

from typing import Any, Optional

from openai import OpenAI

from backend.src.core.config import Settings

from .prompt_builder import build_messages


class OpenAICompletionEngine:
    """
    Sends one prompt to the OpenAI chat completions endpoint.

    The client is created lazily so that constructing the engine never
    performs network I/O.
    """

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        """
        Parameters
        ----------
        settings : Settings
            Backend settings carrying the API key and model name
        client : optional
            Pre-built OpenAI client (used by tests)
        """
        self.settings = settings
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = OpenAI(api_key=self.settings.api_key)
        return self._client

    def complete(self, prompt: str):
        """
        Run a chat completion for a single user prompt.

        Returns
        -------
        tuple
            (content, response) where content is the first choice's message
            text or None, and response is the raw SDK response object
        """
        response = self.client.chat.completions.create(
            model=self.settings.model_name,
            messages=build_messages(prompt),
        )
        content = None
        if response.choices:
            content = response.choices[0].message.content
        return content, response
