"""Instruction prompts sent with the system role.

Each prompt is a fixed string; the chat client passes it through untouched.
"""

from enum import Enum

COMMIT = """Generate a commit message from this diff.
Format: <type>(<scope>): <description>
Types: feat|fix|docs|refactor|test|chore
Rules: lowercase, imperative mood, max 50 chars, no period
Output ONLY the message."""

PR_TITLE = """Generate a PR title from this diff.
Format: <type>(<scope>): <description>
Types: feat|fix|docs|refactor|test|chore
Rules: lowercase, imperative mood, max 50 chars
Output ONLY the title."""

PR_BODY = """Generate a PR description from this diff.
Format:
## Summary
<1-2 sentences>

## Changes
<bullet points>

Types of change: feat|fix|docs|refactor|test|chore
Rules: imperative mood, one line per bullet
Be concise. Output ONLY the description."""


class PromptName(str, Enum):
    """Names of the available prompts."""

    COMMIT = "commit"
    PR_TITLE = "pr-title"
    PR_BODY = "pr-body"


PROMPTS = {
    PromptName.COMMIT: COMMIT,
    PromptName.PR_TITLE: PR_TITLE,
    PromptName.PR_BODY: PR_BODY,
}


def get_prompt(name: PromptName) -> str:
    """Look up a prompt by name.

    Raises:
        ValueError: If the name is not a known prompt.
    """
    return PROMPTS[PromptName(name)]
