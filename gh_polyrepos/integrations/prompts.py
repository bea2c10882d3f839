"""Interactive prompts for selecting the gh action, its arguments and repositories."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence

import click

from gh_polyrepos.models import Answers, GhCommand, MergeOption, ReviewOption

GH_PR_MANUAL_URL = "https://cli.github.com/manual/gh_pr"


@dataclass(frozen=True)
class Question:
    """One questionnaire entry, asked only when ``when`` holds for prior answers."""

    name: str
    message: str
    choices: Sequence[str] = ()
    when: Callable[[Dict[str, Any]], bool] = field(default=lambda answers: True)

    def applies(self, answers: Dict[str, Any]) -> bool:
        return self.when(answers)


def _command_is(*commands: GhCommand) -> Callable[[Dict[str, Any]], bool]:
    values = {command.value for command in commands}
    return lambda answers: answers.get("gh_command") in values


QUESTIONS: List[Question] = [
    Question(
        name="gh_command",
        message=f"Select a `gh` command to execute (more info: {GH_PR_MANUAL_URL})",
        choices=[command.value for command in GhCommand],
    ),
    Question(
        name="source_branch",
        message="Enter the source branch",
        when=_command_is(*GhCommand),
    ),
    Question(
        name="base",
        message="Enter the base branch for the new pull request",
        when=_command_is(GhCommand.CREATE),
    ),
    Question(
        name="title",
        message="Enter the title for the new pull request",
        when=_command_is(GhCommand.CREATE),
    ),
    Question(
        name="body",
        message="Enter the body for the new pull request",
        when=_command_is(GhCommand.CREATE),
    ),
    Question(
        name="option",
        message="Select a review option to execute",
        choices=[option.value for option in ReviewOption],
        when=_command_is(GhCommand.REVIEW),
    ),
    Question(
        name="body",
        message="Enter the review body",
        when=_command_is(GhCommand.REVIEW),
    ),
    Question(
        name="body",
        message="Enter the comment body",
        when=_command_is(GhCommand.COMMENT),
    ),
    Question(
        name="add_reviewer",
        message="Enter the reviewer's login",
        when=_command_is(GhCommand.EDIT),
    ),
    Question(
        name="option",
        message="Select a merge option to execute",
        choices=[option.value for option in MergeOption],
        when=_command_is(GhCommand.MERGE),
    ),
]


def ask(question: Question) -> str:
    """Ask a single question on the terminal.

    Choice questions default to their first choice, text questions accept
    empty input.
    """
    if question.choices:
        return click.prompt(
            question.message,
            type=click.Choice(list(question.choices)),
            default=question.choices[0],
        )
    return click.prompt(question.message, default="", show_default=False)


def collect_answers(
    questions: Sequence[Question] = QUESTIONS,
    asker: Callable[[Question], str] = ask,
) -> Answers:
    """Run the questionnaire and return the collected answers.

    Args:
        questions: Questions in asking order
        asker: Asks one question and returns the raw answer

    Returns:
        Validated answers
    """
    answers: Dict[str, Any] = {}
    for question in questions:
        if question.applies(answers):
            answers[question.name] = asker(question)
    return Answers.model_validate(answers)


def prompt_root_dir() -> str:
    """Ask for the root directory to traverse."""
    return click.prompt("Enter the root directory", type=str)


def select_repositories(entries: Sequence[str]) -> List[str]:
    """Let the operator pick which entries to run the command in.

    Every entry is offered with a yes default, so accepting all prompts
    selects everything.

    Args:
        entries: Entry names under the root directory

    Returns:
        Selected entries in offered order
    """
    click.echo("Select repos to execute command:")
    return [entry for entry in entries if click.confirm(f"  {entry}", default=True)]
