"""Data models for gh-polyrepos."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GhCommand(str, Enum):
    """Pull-request actions offered in the command menu, in menu order."""

    MERGE = "pr merge"
    CREATE = "pr create"
    REVIEW = "pr review"
    COMMENT = "pr comment"
    EDIT = "pr edit"

    @property
    def requires_pr_number(self) -> bool:
        """Whether the action targets an existing pull request."""
        return self is not GhCommand.CREATE

    @property
    def args(self) -> list[str]:
        """Command split into `gh` arguments (e.g. ``["pr", "merge"]``)."""
        return self.value.split()


class ReviewOption(str, Enum):
    """Review dispositions for `gh pr review`."""

    COMMENT = "comment"
    APPROVE = "approve"
    REQUEST_CHANGES = "request-changes"


class MergeOption(str, Enum):
    """Merge strategies for `gh pr merge`."""

    SQUASH = "squash"
    MERGE = "merge"
    REBASE = "rebase"


OPTION_CHOICES = {
    GhCommand.REVIEW: [option.value for option in ReviewOption],
    GhCommand.MERGE: [option.value for option in MergeOption],
}


class Answers(BaseModel):
    """Answers collected by the questionnaire for one run.

    Field order is the order flags are rendered in.
    """

    gh_command: GhCommand = Field(description="Selected gh subcommand")
    source_branch: str | None = Field(default=None, description="Head branch of the PR")
    base: str | None = Field(default=None, description="Base branch for a new PR")
    title: str | None = Field(default=None, description="Title for a new PR")
    option: str | None = Field(default=None, description="Review disposition or merge strategy")
    body: str | None = Field(default=None, description="PR, review or comment body")
    add_reviewer: str | None = Field(default=None, description="Reviewer login to add")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_option(self) -> "Answers":
        """Restrict the option to the menu of the selected command."""
        if not self.option:
            return self

        allowed = OPTION_CHOICES.get(self.gh_command)
        if allowed is None:
            raise ValueError(f"{self.gh_command.value} takes no option, got '{self.option}'")
        if self.option not in allowed:
            raise ValueError(
                f"Invalid option for {self.gh_command.value}: '{self.option}'. Must be one of {allowed}"
            )
        return self

    def items(self) -> list[tuple[str, Any]]:
        """Answer items in field order, command value as its plain string."""
        return list(self.model_dump(mode="json").items())


class Config(BaseModel):
    """Persisted configuration, stored as ``{"rootDir": "..."}``."""

    root_dir: str | None = Field(default=None, alias="rootDir", description="Root directory to traverse")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("root_dir")
    @classmethod
    def empty_root_dir_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty or blank root directory as not configured."""
        if v is None or not v.strip():
            return None
        return v


class RepoStatus(str, Enum):
    """Outcome of processing one repository."""

    EXECUTED = "executed"
    SKIPPED = "skipped"


class RepoResult(BaseModel):
    """Result of applying the selected action to one repository."""

    path: Path = Field(description="Repository directory")
    status: RepoStatus = Field(description="Processing outcome")
    pr_number: str | None = Field(default=None, description="Resolved PR number, if any")
    command: list[str] = Field(default_factory=list, description="Executed gh arguments")
    message: str | None = Field(default=None, description="Reason when skipped")
