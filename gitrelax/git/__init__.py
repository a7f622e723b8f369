"""Git collaborator module for git-relax.

This package wraps the git executable:
- exceptions: GitError, NoChangesError
- runner: _run_git_command, get_repo_root
- diff: get_staged_diff, get_branch_diff
- branch: get_branch, has_upstream, push_current_branch, get_default_branch
- commit: commit
"""

# Exceptions
from gitrelax.git.exceptions import (
    GitError,
    NoChangesError,
)

# Runner utilities
from gitrelax.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Diff utilities
from gitrelax.git.diff import (
    get_staged_diff,
    get_branch_diff,
)

# Branch utilities
from gitrelax.git.branch import (
    get_branch,
    has_upstream,
    push_current_branch,
    get_default_branch,
)

# Commit
from gitrelax.git.commit import commit


__all__ = [
    # Exceptions
    "GitError",
    "NoChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Diff
    "get_staged_diff",
    "get_branch_diff",
    # Branch
    "get_branch",
    "has_upstream",
    "push_current_branch",
    "get_default_branch",
    # Commit
    "commit",
]
