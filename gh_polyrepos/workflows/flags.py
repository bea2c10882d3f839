"""Rendering collected answers into gh command-line flags."""

import re
import shlex
from typing import Any, Iterable, List, Tuple, Union

from gh_polyrepos.models import Answers, GhCommand

# Keys compared in flag form, so camelCase and snake_case spellings match
COMMAND_KEY = "gh-command"
SOURCE_BRANCH_KEY = "source-branch"
OPTION_KEY = "option"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_flag_name(key: str) -> str:
    """Convert an answer key to its long-option name.

    >>> to_flag_name("add_reviewer")
    'add-reviewer'
    >>> to_flag_name("addReviewer")
    'add-reviewer'
    """
    return _CAMEL_BOUNDARY.sub("-", key).replace("_", "-").lower()


def build_flags(answers: Union[Answers, Iterable[Tuple[str, Any]]]) -> List[str]:
    """Build gh flags from collected answers.

    Empty values are dropped and the command itself is never rendered. For
    ``pr create`` the source branch becomes ``--head``; for the other
    actions it is left out because it only serves the PR lookup. The
    review/merge option renders as a bare ``--<value>``.

    Args:
        answers: Collected answers, or ``(key, value)`` pairs in answer order

    Returns:
        Flags in answer order
    """
    items = answers.items() if isinstance(answers, Answers) else list(answers)
    command = next((value for key, value in items if to_flag_name(key) == COMMAND_KEY), None)
    is_create = command == GhCommand.CREATE.value

    flags = []
    for key, value in items:
        name = to_flag_name(key)
        if name == COMMAND_KEY or not value:
            continue
        if name == SOURCE_BRANCH_KEY:
            if is_create:
                flags.append(f"--head={value}")
            continue
        if name == OPTION_KEY:
            flags.append(f"--{value}")
            continue
        flags.append(f"--{name}={value}")
    return flags


def format_flags(flags: List[str]) -> str:
    """Join flags into one shell-quoted string for display."""
    return shlex.join(flags)
