"""Context objects for passing rich data between components."""

from __future__ import annotations

from dataclasses import dataclass

from .types import ServiceInfo, TaskCandidate
from .utils import extract_name_from_arn

DEFAULT_COMMAND = "/bin/bash"


@dataclass(frozen=True)
class ExecOptions:
    """Options collected from the command line."""

    container: str
    profile: str | None = None
    cluster: str | None = None
    service: str | None = None
    command: str = DEFAULT_COMMAND
    region: str | None = None


@dataclass(frozen=True)
class ExecTarget:
    """Fully resolved target for an ECS Exec session."""

    cluster_arn: str
    service: ServiceInfo
    task: TaskCandidate
    container: str

    @property
    def cluster_name(self) -> str:
        return extract_name_from_arn(self.cluster_arn)

    @property
    def task_id(self) -> str:
        return self.task.task_id
