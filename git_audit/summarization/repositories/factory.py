"""Factory for creating LLM agent instances."""

from git_audit.config.domain.value_objects import AuditConfig
from git_audit.summarization.repositories.implementations import OllamaAgent
from git_audit.summarization.repositories.interfaces import LLMAgentRepository


def create_llm_agent(config: AuditConfig) -> LLMAgentRepository:
    """
    Create an LLM agent instance based on configuration.

    Args:
        config: Loaded audit configuration

    Returns:
        LLM agent talking to the configured Ollama endpoint
    """
    return OllamaAgent(endpoint=config.ollama_endpoint, model=config.ollama_model)
