"""Sequential traversal of repository checkouts under a root directory."""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, TypeVar, Union

from gh_polyrepos.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TraversalError(Exception):
    """Root directory cannot be traversed."""
    pass


def list_entries(root_dir: Union[str, Path]) -> List[str]:
    """List the names of the immediate children of the root directory.

    Raises:
        TraversalError: If the root does not exist or is not a directory
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise TraversalError(f"Root directory not found: {root}")
    return sorted(entry.name for entry in root.iterdir())


def traverse_directories(
    root_dir: Union[str, Path],
    process_directory: Callable[[Path], T],
    entries: Optional[Sequence[str]] = None,
) -> List[T]:
    """Call ``process_directory`` for each child directory, one at a time.

    Plain files are skipped without a message.

    Args:
        root_dir: Directory whose children are repository checkouts
        process_directory: Called with each directory path
        entries: Child names to visit, in visiting order; all children when None

    Returns:
        Return values of ``process_directory`` in visiting order
    """
    root = Path(root_dir)
    if entries is None:
        entries = list_entries(root)

    results = []
    for entry in entries:
        entry_path = root / entry
        if not entry_path.is_dir():
            logger.debug(f"Skipping non-directory entry: {entry_path}")
            continue
        logger.info(f"Processing {entry_path}")
        results.append(process_directory(entry_path))
    return results
