"""Errors raised while talking to the text-generation service."""


class SummarizationError(RuntimeError):
    """Base class for failures of a summarization request."""


class TransportError(SummarizationError):
    """The request could not be delivered or timed out."""


class HTTPStatusError(SummarizationError):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Ollama API request failed with status {status_code}: {body}")


class DecodeError(SummarizationError):
    """The service reply is not the expected JSON document."""
