"""GitHub integration via gh CLI."""

import json
from pathlib import Path
from typing import List, Optional, Union

from gh_polyrepos.models import GhCommand
from gh_polyrepos.utils.logger import get_logger
from gh_polyrepos.utils.shell import ShellResult, check_command_exists, format_command, run_command

logger = get_logger(__name__)


class GitHubIntegrationError(Exception):
    """GitHub integration error."""
    pass


class GitHubCLIMissingError(GitHubIntegrationError):
    """The gh executable is not installed."""
    pass


class UnsupportedCommandError(GitHubIntegrationError):
    """Requested gh command is not one of the supported PR actions."""
    pass


def validate_github_cli() -> None:
    """Ensure the gh CLI is available.

    Raises:
        GitHubCLIMissingError: If gh is not on PATH
    """
    if not check_command_exists("gh"):
        raise GitHubCLIMissingError(
            "GitHub CLI not found. Install it from https://cli.github.com and run 'gh auth login'."
        )


def get_pr_number(repo_path: Union[str, Path], source_branch: str) -> Optional[str]:
    """Find the most recent pull request opened from a branch.

    Args:
        repo_path: Repository checkout to query from
        source_branch: Head branch of the pull request

    Returns:
        PR number as a string, or None if no PR exists for the branch

    Raises:
        ShellError: If gh exits with an error
        GitHubIntegrationError: If gh output is not valid JSON
    """
    result = run_command(
        [
            "gh", "pr", "list",
            "--state", "all",
            "--head", source_branch,
            "--json", "number",
            "--limit", "1",
        ],
        cwd=repo_path,
        check=True,
    )

    try:
        pull_requests = json.loads(result.stdout or "[]")
    except json.JSONDecodeError as e:
        raise GitHubIntegrationError(f"Failed to parse pull request list in {repo_path}: {e}")

    if not isinstance(pull_requests, list):
        raise GitHubIntegrationError(f"Expected a list of pull requests from gh in {repo_path}")

    if not pull_requests:
        return None

    if not isinstance(pull_requests[0], dict):
        raise GitHubIntegrationError(f"Unexpected pull request entry from gh in {repo_path}")

    number = pull_requests[0].get("number")
    if not number:
        return None

    logger.debug(f"Found PR #{number} for {source_branch} in {repo_path}")
    return str(number)


def build_command(gh_command: Union[GhCommand, str], pr_number: Optional[str], flags: List[str]) -> List[str]:
    """Assemble the gh argument list for an action.

    Args:
        gh_command: Selected action (e.g. ``"pr merge"``)
        pr_number: Target PR number, ignored for ``pr create``
        flags: Rendered flags

    Returns:
        Full argument list starting with ``gh``

    Raises:
        UnsupportedCommandError: If the action is not in the command menu
    """
    try:
        command = GhCommand(gh_command)
    except ValueError:
        raise UnsupportedCommandError("Unsupported gh command.") from None

    if command is GhCommand.CREATE:
        return ["gh", *command.args, *flags, "-a", "@me"]

    args = ["gh", *command.args]
    if pr_number:
        args.append(str(pr_number))
    return [*args, *flags]


def execute_command(
    gh_command: Union[GhCommand, str],
    pr_number: Optional[str],
    flags: List[str],
    repo_path: Union[str, Path],
) -> ShellResult:
    """Run one gh action inside a repository.

    gh writes directly to the terminal; its output is not captured.

    Args:
        gh_command: Selected action
        pr_number: Target PR number (None for ``pr create``)
        flags: Rendered flags
        repo_path: Repository checkout to run in

    Returns:
        Command result

    Raises:
        UnsupportedCommandError: If the action is not in the command menu
        ShellError: If gh exits with an error
    """
    args = build_command(gh_command, pr_number, flags)
    logger.debug(f"Executing: {format_command(args, repo_path)}")
    return run_command(args, cwd=repo_path, check=True, capture_output=False)
