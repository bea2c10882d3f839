"""Workflow modules for rendering flags and traversing repositories."""

from gh_polyrepos.workflows.flags import build_flags, format_flags, to_flag_name
from gh_polyrepos.workflows.run import process_repository, run_workflow
from gh_polyrepos.workflows.traverse import TraversalError, list_entries, traverse_directories

__all__ = [
    "TraversalError",
    "build_flags",
    "format_flags",
    "list_entries",
    "process_repository",
    "run_workflow",
    "to_flag_name",
    "traverse_directories",
]
