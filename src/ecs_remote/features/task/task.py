"""Task operations for ECS."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.resolution import Selector, choose
from ...core.types import UNKNOWN_FAMILY, TaskCandidate
from ...core.utils import extract_name_from_arn, iter_aws_pages

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

RUNNING = "RUNNING"
TASK_PROMPT = "Select Task for ECS Exec"

logger = logging.getLogger(__name__)


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def list_valid_tasks(self, cluster: str, service_name: str) -> list[TaskCandidate]:
        """List running tasks of a service that accept ECS Exec sessions, sorted by family.

        Each listing page is described in one batch before the next page is
        requested. Tasks that are not running, do not have execute command
        enabled, or lack an ARN or task definition are left out.
        """
        candidates: list[TaskCandidate] = []
        pages = iter_aws_pages(
            self.ecs_client, "list_tasks", cluster=cluster, serviceName=service_name, desiredStatus=RUNNING
        )
        for page in pages:
            task_arns = page.get("taskArns") or []
            if not task_arns:
                continue

            response = self.ecs_client.describe_tasks(cluster=cluster, tasks=task_arns)
            for task in response.get("tasks") or []:
                candidate = self._build_candidate(task)
                if candidate:
                    candidates.append(candidate)

        return sorted(candidates, key=lambda candidate: candidate.name)

    def _build_candidate(self, task: TaskTypeDef) -> TaskCandidate | None:
        task_arn = task.get("taskArn")
        if not is_exec_ready(task):
            logger.debug("Skipping task %s: not running with execute command enabled", task_arn)
            return None

        task_def_arn = task.get("taskDefinitionArn")
        if not task_arn or not task_def_arn:
            logger.debug("Skipping task %s: missing task or task definition ARN", task_arn)
            return None

        response = self.ecs_client.describe_task_definition(taskDefinition=task_def_arn)
        task_definition = response.get("taskDefinition")
        if task_definition is None:
            logger.debug("Skipping task %s: task definition %s not returned", task_arn, task_def_arn)
            return None

        return TaskCandidate(
            arn=task_arn,
            task_id=extract_name_from_arn(task_arn),
            name=task_definition.get("family") or UNKNOWN_FAMILY,
        )


def is_exec_ready(task: TaskTypeDef) -> bool:
    return task.get("lastStatus") == RUNNING and task.get("enableExecuteCommand") is True


def select_task(tasks: list[TaskCandidate], selector: Selector) -> TaskCandidate:
    return choose(tasks, lambda task: task.label, TASK_PROMPT, selector)
