"""Tests for GitHub integration."""

import pytest
from unittest.mock import patch

from gh_polyrepos.integrations.github import (
    GitHubCLIMissingError,
    GitHubIntegrationError,
    UnsupportedCommandError,
    build_command,
    execute_command,
    get_pr_number,
    validate_github_cli,
)
from gh_polyrepos.models import GhCommand
from gh_polyrepos.utils.shell import ShellError, ShellResult


PR_LIST_ARGS = [
    "gh", "pr", "list",
    "--state", "all",
    "--head", "feature-x",
    "--json", "number",
    "--limit", "1",
]


class TestValidateGitHubCLI:
    """Test gh availability check."""

    @patch("gh_polyrepos.integrations.github.check_command_exists")
    def test_missing_gh(self, mock_check_command):
        """Test a missing gh executable raises."""
        mock_check_command.return_value = False

        with pytest.raises(GitHubCLIMissingError):
            validate_github_cli()
        mock_check_command.assert_called_once_with("gh")

    @patch("gh_polyrepos.integrations.github.check_command_exists")
    def test_gh_present(self, mock_check_command):
        mock_check_command.return_value = True

        validate_github_cli()


class TestGetPRNumber:
    """Test PR number lookup."""

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_found(self, mock_run_command, tmp_path):
        """Test the first PR number is returned as a string."""
        mock_run_command.return_value = ShellResult(0, '[{"number": 42}]', "", "gh pr list")

        assert get_pr_number(tmp_path, "feature-x") == "42"
        mock_run_command.assert_called_once_with(PR_LIST_ARGS, cwd=tmp_path, check=True)

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_empty_list(self, mock_run_command, tmp_path):
        """Test None when no PR exists for the branch."""
        mock_run_command.return_value = ShellResult(0, "[]\n", "", "gh pr list")

        assert get_pr_number(tmp_path, "feature-x") is None

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_missing_number_field(self, mock_run_command, tmp_path):
        """Test None when the first entry has no number."""
        mock_run_command.return_value = ShellResult(0, '[{"title": "x"}]', "", "gh pr list")

        assert get_pr_number(tmp_path, "feature-x") is None

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_malformed_output(self, mock_run_command, tmp_path):
        """Test unparsable output raises an integration error."""
        mock_run_command.return_value = ShellResult(0, "not json", "", "gh pr list")

        with pytest.raises(GitHubIntegrationError):
            get_pr_number(tmp_path, "feature-x")

    @pytest.mark.parametrize("stdout", ['{"number": 42}', "[42]", '["42"]', "null"])
    @patch("gh_polyrepos.integrations.github.run_command")
    def test_unexpected_json_shape(self, mock_run_command, stdout, tmp_path):
        """Test JSON that is not a list of objects raises an integration error."""
        mock_run_command.return_value = ShellResult(0, stdout, "", "gh pr list")

        with pytest.raises(GitHubIntegrationError):
            get_pr_number(tmp_path, "feature-x")

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_gh_failure_propagates(self, mock_run_command, tmp_path):
        """Test a failing gh invocation is not swallowed."""
        mock_run_command.side_effect = ShellError("Command failed", 1, "", "not a git repository")

        with pytest.raises(ShellError):
            get_pr_number(tmp_path, "feature-x")


class TestBuildCommand:
    """Test gh argument assembly."""

    def test_create_assigns_self(self):
        args = build_command(GhCommand.CREATE, None, ["--head=feature-x", "--base=main"])

        assert args == ["gh", "pr", "create", "--head=feature-x", "--base=main", "-a", "@me"]

    def test_create_ignores_pr_number(self):
        assert build_command("pr create", "7", []) == ["gh", "pr", "create", "-a", "@me"]

    @pytest.mark.parametrize("command", ["pr merge", "pr review", "pr comment", "pr edit"])
    def test_existing_pr_commands(self, command):
        """Test the PR number follows the subcommand."""
        args = build_command(command, "42", ["--body=lgtm"])

        assert args == ["gh", *command.split(), "42", "--body=lgtm"]

    def test_unsupported_command(self):
        with pytest.raises(UnsupportedCommandError, match="Unsupported gh command."):
            build_command("pr close", "42", [])


class TestExecuteCommand:
    """Test command execution."""

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_runs_in_repository(self, mock_run_command, tmp_path):
        """Test gh runs in the repository with output going to the terminal."""
        mock_run_command.return_value = ShellResult(0, "", "", "gh pr comment")

        execute_command(GhCommand.COMMENT, "42", ["--body=lgtm"], tmp_path)

        mock_run_command.assert_called_once_with(
            ["gh", "pr", "comment", "42", "--body=lgtm"],
            cwd=tmp_path,
            check=True,
            capture_output=False,
        )

    @patch("gh_polyrepos.integrations.github.run_command")
    def test_unsupported_command_runs_nothing(self, mock_run_command, tmp_path):
        with pytest.raises(UnsupportedCommandError):
            execute_command("issue list", None, [], tmp_path)
        mock_run_command.assert_not_called()
