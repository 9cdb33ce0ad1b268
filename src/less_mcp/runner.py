"""Process execution for Less CLI invocations."""

import asyncio
import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .exceptions import CommandLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of one CLI process."""

    args: list[str]
    stdout: str
    stderr: str
    exit_code: int

    @property
    def text(self) -> str:
        return select_output(self.stdout, self.stderr)


def select_output(stdout: str, stderr: str) -> str:
    """Return stdout if the process wrote any, otherwise stderr.

    The exit code plays no part: a failing CLI that only writes to stderr
    is reported the same way as a successful one.
    """
    return stdout or stderr


async def run_command(
    args: list[str],
    cwd: Optional[str] = None,
) -> CommandOutput:
    """Execute a command and wait for it to exit.

    Args:
        args: Command and arguments, passed to the OS without a shell
        cwd: Working directory for the process (inherits ours if None)

    Returns:
        CommandOutput with decoded stdout, stderr and exit code

    Raises:
        CommandLaunchError: If the process cannot be started
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
        )
    except OSError as e:
        raise CommandLaunchError(args, e) from e

    stdout, stderr = await process.communicate()
    exit_code = process.returncode or 0

    logger.debug(f"Process {args[0]} exited with code {exit_code}")

    return CommandOutput(
        args=list(args),
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
        exit_code=exit_code,
    )
