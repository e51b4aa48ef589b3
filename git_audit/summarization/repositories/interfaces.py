"""Repository interfaces for LLM summarization operations."""

from abc import ABC, abstractmethod


class LLMAgentRepository(ABC):
    """Interface for LLM-based text generation."""

    @abstractmethod
    def summarize(self, prompt: str) -> str:
        """
        Generate text for a fully rendered prompt.

        Args:
            prompt: Prompt text sent verbatim to the model

        Returns:
            Generated text, stripped of surrounding whitespace

        Raises:
            TransportError: If the service cannot be reached or times out
            HTTPStatusError: If the service answers with a non-success status
            DecodeError: If the reply cannot be decoded
        """
        ...

    def close(self) -> None:
        """Release any resources held by the agent."""
