"""Type definitions for ecs-remote."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import extract_name_from_arn

UNKNOWN_FAMILY = "unknown"


@dataclass(frozen=True)
class ServiceInfo:
    arn: str
    name: str

    @classmethod
    def from_arn(cls, arn: str) -> ServiceInfo:
        return cls(arn=arn, name=extract_name_from_arn(arn))


@dataclass(frozen=True)
class TaskCandidate:
    """A running task with ECS Exec enabled."""

    arn: str
    task_id: str
    name: str  # task definition family

    @property
    def label(self) -> str:
        return f"{self.name} ({self.task_id})"
