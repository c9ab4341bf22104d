"""Interactive shell sessions through `aws ecs execute-command`."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess

from ...core.context import DEFAULT_COMMAND
from ...core.errors import ShellLaunchError

AWS_CLI = "aws"

logger = logging.getLogger(__name__)


def build_execute_command(
    cluster_name: str,
    task_id: str,
    container: str,
    command: str = DEFAULT_COMMAND,
    profile: str | None = None,
    region: str | None = None,
) -> list[str]:
    # fmt: off
    args = [
        AWS_CLI, "ecs", "execute-command",
        "--cluster", cluster_name,
        "--task", task_id,
        "--container", container,
        "--command", command,
        "--interactive",
    ]
    # fmt: on
    if profile:
        args += ["--profile", profile]
    if region:
        args += ["--region", region]
    return args


def launch_shell(
    cluster_name: str,
    task_id: str,
    container: str,
    command: str = DEFAULT_COMMAND,
    profile: str | None = None,
    region: str | None = None,
) -> int:
    """Run an interactive ECS Exec session and block until it ends.

    The session inherits this process's stdin, stdout and stderr. Its exit
    status is returned as is; only a failure to start the AWS CLI raises.
    """
    args = build_execute_command(cluster_name, task_id, container, command, profile, region)

    if shutil.which(AWS_CLI) is None:
        raise ShellLaunchError(f"'{AWS_CLI}' executable not found on PATH. Install the AWS CLI to open a shell.")

    logger.debug("Running: %s", shlex.join(args))
    try:
        completed = subprocess.run(args, check=False)
    except OSError as e:
        raise ShellLaunchError(f"Failed to start '{AWS_CLI}': {e}") from e

    if completed.returncode != 0:
        logger.debug("Session ended with exit status %d", completed.returncode)
    return completed.returncode
