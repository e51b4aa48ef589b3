"""Concrete implementation of LLM summarization against an Ollama server."""

import httpx

from git_audit.summarization.domain.errors import (
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from git_audit.summarization.domain.value_objects import GenerateReply, GenerateRequest
from git_audit.summarization.repositories.interfaces import LLMAgentRepository

REQUEST_TIMEOUT_SECONDS = 60.0


class OllamaAgent(LLMAgentRepository):
    """Client for the Ollama /api/generate endpoint."""

    def __init__(
        self,
        endpoint: str,
        model: str,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the Ollama agent.

        Args:
            endpoint: Full URL of the generate endpoint
            model: Name of the model to run
            client: Optional preconfigured HTTP client
        """
        self.endpoint = endpoint
        self.model = model
        self.client = client or httpx.Client(timeout=REQUEST_TIMEOUT_SECONDS)

    def summarize(self, prompt: str) -> str:
        """
        Send a non-streaming generate request and return the generated text.

        Args:
            prompt: Prompt text sent verbatim to the model

        Returns:
            Generated text, stripped of surrounding whitespace
        """
        request = GenerateRequest(model=self.model, prompt=prompt)

        try:
            response = self.client.post(
                self.endpoint,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except httpx.RequestError as e:
            raise TransportError(
                f"Failed to send request to Ollama endpoint {self.endpoint}: {e}"
            ) from e

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Failed to decode Ollama response: {e}") from e

        reply = GenerateReply.from_payload(payload)
        if not reply.done:
            # Some server configurations answer done=false even without streaming
            print("Warning: Ollama response indicates 'done' is false for a non-streaming request.")

        return reply.response.strip()

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "OllamaAgent":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
