"""Tests for gitrelax.github module."""

from unittest.mock import MagicMock

import pytest

from gitrelax.github import GitHubError, create_pull_request, ensure_gh_available


class TestCreatePullRequest:
    """Tests for create_pull_request."""

    def test_returns_url(self, mock_git_commands):
        mock_git_commands.return_value = MagicMock(
            returncode=0,
            stdout="https://github.com/o/r/pull/7\n",
            stderr="",
        )

        url = create_pull_request("feat: add x", "## Summary\nx", "main")

        assert url == "https://github.com/o/r/pull/7"
        assert mock_git_commands.call_args.args[0] == [
            "gh", "pr", "create",
            "--title", "feat: add x",
            "--body", "## Summary\nx",
            "--base", "main",
        ]

    def test_failure_includes_stderr(self, mock_git_commands):
        mock_git_commands.return_value = MagicMock(
            returncode=1,
            stdout="",
            stderr="a pull request already exists\n",
        )

        with pytest.raises(GitHubError) as exc_info:
            create_pull_request("t", "b", "main")

        assert "a pull request already exists" in str(exc_info.value)

    def test_gh_missing(self, mock_git_commands):
        mock_git_commands.side_effect = FileNotFoundError()

        with pytest.raises(GitHubError):
            create_pull_request("t", "b", "main")


class TestEnsureGhAvailable:
    """Tests for ensure_gh_available."""

    def test_passes_when_installed(self, mocker):
        mocker.patch("gitrelax.github.shutil.which", return_value="/usr/bin/gh")

        ensure_gh_available()

    def test_raises_when_missing(self, mocker):
        mocker.patch("gitrelax.github.shutil.which", return_value=None)

        with pytest.raises(GitHubError) as exc_info:
            ensure_gh_available()

        assert "gh" in str(exc_info.value)
