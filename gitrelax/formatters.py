"""Normalisation of generated text before it is shown or used.

Titles follow strict casing rules, so commit messages and PR titles are
trimmed and lowercased. PR bodies are free-form markdown and only trimmed.
"""


def normalize_commit_message(text: str) -> str:
    """Trim and lowercase a generated commit message."""
    return text.strip().lower()


def normalize_pr_title(text: str) -> str:
    """Trim and lowercase a generated PR title."""
    return text.strip().lower()


def normalize_pr_body(text: str) -> str:
    """Trim a generated PR body, keeping its casing."""
    return text.strip()


def render_pr_preview(title: str, body: str) -> str:
    """Render a PR title and body for display.

    Args:
        title: The normalised PR title.
        body: The normalised PR body.

    Returns:
        The "Title: " line, a blank line, then the body.
    """
    return f"Title: {title}\n\n{body}"
