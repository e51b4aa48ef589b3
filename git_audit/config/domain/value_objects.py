"""Value objects for the configuration domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditConfig:
    """Settings read from the gitaudit configuration file.

    Attributes:
        ollama_endpoint: Full URL of the Ollama generate endpoint
        ollama_model: Name of the model used for summaries
    """

    ollama_endpoint: str
    ollama_model: str
