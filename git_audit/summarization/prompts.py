"""Prompt used to turn a commit patch into a detailed commit message."""

from langchain_core.prompts import PromptTemplate

COMMIT_MESSAGE_TEMPLATE = """Given the following Git patch, please generate a highly detailed and \
descriptive Git commit message. The message should cover:
1. A summary of the changes.
2. The reasoning behind the changes (why they were made).
3. Any problems that were encountered (if apparent from the patch or commit message).
4. The intended purpose or goal of the commit.

Do not include the "Patch:" prefix or any introductory phrases like \
"Here's a commit message:". Output only the commit message itself.

Patch:
{patch}"""

COMMIT_MESSAGE_PROMPT = PromptTemplate.from_template(COMMIT_MESSAGE_TEMPLATE)


def build_commit_message_prompt(patch: str) -> str:
    """Substitute the raw patch into the commit message template."""
    return COMMIT_MESSAGE_PROMPT.format(patch=patch)
