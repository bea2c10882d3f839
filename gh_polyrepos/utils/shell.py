"""Shell command execution utilities."""

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from gh_polyrepos.utils.logger import get_logger

logger = get_logger(__name__)


class ShellError(Exception):
    """Shell command execution error."""

    def __init__(self, message: str, returncode: int, stdout: str = "", stderr: str = ""):
        """Initialize shell error.

        Args:
            message: Error message
            returncode: Process return code
            stdout: Standard output
            stderr: Standard error
        """
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ShellResult:
    """Shell command result."""

    def __init__(self, returncode: int, stdout: str, stderr: str, command: str):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.command = command

    @property
    def success(self) -> bool:
        """Check if command succeeded."""
        return self.returncode == 0

    def check(self) -> "ShellResult":
        """Check result and raise error if failed.

        Returns:
            Self for chaining

        Raises:
            ShellError: If command failed
        """
        if not self.success:
            raise ShellError(
                f"Command failed with exit code {self.returncode}: {self.command}",
                self.returncode,
                self.stdout,
                self.stderr,
            )
        return self


def format_command(command: List[str], cwd: Optional[Union[str, Path]] = None) -> str:
    """Render a command as the equivalent shell line.

    Args:
        command: Command arguments
        cwd: Working directory the command runs in

    Returns:
        Shell-quoted command line, prefixed with ``cd <cwd> &&`` when a
        working directory is given
    """
    line = shlex.join(command)
    if cwd:
        return f"cd {shlex.quote(str(cwd))} && {line}"
    return line


def run_command(
    command: List[str],
    cwd: Optional[Union[str, Path]] = None,
    check: bool = False,
    capture_output: bool = True,
) -> ShellResult:
    """Run command synchronously.

    Args:
        command: Command arguments
        cwd: Working directory
        check: Raise exception on failure
        capture_output: Capture stdout/stderr; when False the command writes
            straight to the terminal

    Returns:
        Command result

    Raises:
        ShellError: If the command is missing, or fails and check=True
    """
    command_str = format_command(command)
    cwd_path = Path(cwd) if cwd else None

    logger.debug(f"Running command: {format_command(command, cwd_path)}")

    try:
        result = subprocess.run(
            command,
            cwd=cwd_path,
            capture_output=capture_output,
            text=True,
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {command_str}")
        raise ShellError(f"Command not found: {command_str}", -1, "", str(e))

    shell_result = ShellResult(
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        command=command_str,
    )

    if result.returncode == 0:
        logger.debug(f"Command succeeded: {command_str}")
    else:
        logger.warning(f"Command failed with code {result.returncode}: {command_str}")
        if shell_result.stderr:
            logger.debug(f"stderr: {shell_result.stderr}")

    if check:
        shell_result.check()

    return shell_result


def check_command_exists(command: str) -> bool:
    """Check if a command exists in PATH.

    Args:
        command: Command name to check

    Returns:
        True if command exists, False otherwise
    """
    try:
        result = run_command(["which", command])
        return result.success
    except ShellError:
        return False
