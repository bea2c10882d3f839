"""Applying the selected pull-request action to each repository."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from gh_polyrepos.integrations.github import build_command, execute_command, get_pr_number
from gh_polyrepos.models import Answers, RepoResult, RepoStatus
from gh_polyrepos.utils.logger import get_logger
from gh_polyrepos.workflows.flags import build_flags
from gh_polyrepos.workflows.traverse import traverse_directories

logger = get_logger(__name__)


def process_repository(repo_path: Path, answers: Answers) -> RepoResult:
    """Run the selected action in one repository.

    Actions other than ``pr create`` first look up the PR opened from the
    source branch; without one the repository is skipped.

    Raises:
        ShellError: If a gh invocation fails
        GitHubIntegrationError: If gh output cannot be parsed
    """
    flags = build_flags(answers)
    pr_number = None

    if answers.gh_command.requires_pr_number:
        pr_number = get_pr_number(repo_path, answers.source_branch or "")
        if not pr_number:
            message = f"No pull request found for {answers.source_branch} in {repo_path}"
            logger.warning(message)
            return RepoResult(path=repo_path, status=RepoStatus.SKIPPED, message=message)

    execute_command(answers.gh_command, pr_number, flags, repo_path)
    return RepoResult(
        path=repo_path,
        status=RepoStatus.EXECUTED,
        pr_number=pr_number,
        command=build_command(answers.gh_command, pr_number, flags),
    )


def run_workflow(
    root_dir: Union[str, Path],
    answers: Answers,
    entries: Optional[Sequence[str]] = None,
) -> List[RepoResult]:
    """Apply the action to every selected repository under the root.

    Args:
        root_dir: Directory holding the repository checkouts
        answers: Collected answers
        entries: Selected child names; all children when None

    Returns:
        One result per visited repository
    """
    results = traverse_directories(
        root_dir,
        lambda repo_path: process_repository(repo_path, answers),
        entries=entries,
    )

    executed = sum(1 for result in results if result.status == RepoStatus.EXECUTED)
    logger.debug(f"{executed} executed, {len(results) - executed} skipped")
    logger.info("Traversal completed.")
    return results
