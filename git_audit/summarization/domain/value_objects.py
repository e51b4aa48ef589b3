"""Value objects for Summarization domain."""

from dataclasses import dataclass
from typing import Any

from git_audit.summarization.domain.errors import DecodeError


@dataclass(frozen=True)
class GenerateRequest:
    """Body of a non-streaming /api/generate request."""

    model: str
    prompt: str
    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON payload for the request."""
        return {"model": self.model, "prompt": self.prompt, "stream": self.stream}


@dataclass(frozen=True)
class GenerateReply:
    """The part of an /api/generate reply that is consumed."""

    response: str
    done: bool

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerateReply":
        """
        Build a reply from a decoded JSON document.

        Args:
            payload: Decoded JSON body of the reply

        Returns:
            GenerateReply with the generated text and completion flag

        Raises:
            DecodeError: If the document lacks a string "response" field
        """
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Failed to decode Ollama response: expected a JSON object, "
                f"got {type(payload).__name__}"
            )

        response = payload.get("response")
        if not isinstance(response, str):
            raise DecodeError(
                "Failed to decode Ollama response: missing string field 'response'"
            )

        return cls(response=response, done=bool(payload.get("done", False)))
