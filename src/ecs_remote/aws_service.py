"""AWS ECS service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import ServiceInfo, TaskCandidate
from .features.cluster.cluster import ClusterService
from .features.service.service import ServiceService
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ECSService:
    """Service for interacting with AWS ECS."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client
        # Initialize feature services
        self._cluster = ClusterService(ecs_client)
        self._service = ServiceService(ecs_client)
        self._task = TaskService(ecs_client)

    def list_clusters(self) -> list[str]:
        return self._cluster.list_clusters()

    def list_services(self, cluster: str) -> list[ServiceInfo]:
        return self._service.list_services(cluster)

    def list_valid_tasks(self, cluster: str, service_name: str) -> list[TaskCandidate]:
        """Running tasks with execute command enabled, sorted by task definition family."""
        return self._task.list_valid_tasks(cluster, service_name)
