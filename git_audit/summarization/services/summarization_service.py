"""Summarization service for turning commit patches into commit messages."""

from git_audit.git.domain.value_objects import RevisionChangeset
from git_audit.summarization.prompts import build_commit_message_prompt
from git_audit.summarization.repositories.interfaces import LLMAgentRepository


class SummarizationService:
    """Service for orchestrating commit summarization."""

    def __init__(self, llm_agent: LLMAgentRepository) -> None:
        """
        Initialize SummarizationService.

        Args:
            llm_agent: Repository for LLM-based text generation
        """
        self._llm_agent = llm_agent

    def summarize_changeset(self, changeset: RevisionChangeset) -> str:
        """
        Generate a detailed commit message for a revision's patch.

        Args:
            changeset: Patch of the revision to summarize

        Returns:
            Generated commit message

        Raises:
            SummarizationError: If the text-generation request fails
        """
        prompt = build_commit_message_prompt(changeset.content)
        return self._llm_agent.summarize(prompt)
