"""UI layer - handles all user interaction and display logic."""

from __future__ import annotations

from .aws_service import ECSService
from .core.base import BaseUIComponent
from .core.types import ServiceInfo, TaskCandidate
from .features.cluster.ui import ClusterUI
from .features.service.ui import ServiceUI
from .features.task.ui import TaskUI


class ECSNavigator(BaseUIComponent):
    """Navigator walking cluster, service and task selection."""

    def __init__(self, ecs_service: ECSService) -> None:
        super().__init__()
        self.ecs_service = ecs_service
        # Reuse the feature services owned by ECSService
        self._cluster_ui = ClusterUI(ecs_service._cluster)
        self._service_ui = ServiceUI(ecs_service._service)
        self._task_ui = TaskUI(ecs_service._task)

    def select_cluster(self, hint: str | None = None) -> str:
        """Resolve a cluster hint, or ask for a cluster when none is given."""
        return self._cluster_ui.select_cluster(hint)

    def select_service(self, cluster: str, name: str | None = None) -> ServiceInfo:
        return self._service_ui.select_service(cluster, name)

    def select_task(self, cluster: str, service_name: str) -> TaskCandidate:
        return self._task_ui.select_task(cluster, service_name)
