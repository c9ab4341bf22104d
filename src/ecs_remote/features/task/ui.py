"""UI components for task operations."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.navigation import select_index
from ...core.types import TaskCandidate
from ...core.utils import show_spinner
from .task import TaskService, select_task


class TaskUI(BaseUIComponent):
    """UI component for picking a task to open a shell in."""

    def __init__(self, task_service: TaskService) -> None:
        super().__init__()
        self.task_service = task_service

    def select_task(self, cluster: str, service_name: str) -> TaskCandidate:
        with show_spinner():
            tasks = self.task_service.list_valid_tasks(cluster, service_name)

        if not tasks:
            raise NoResourcesFoundError(f"No tasks with execute command enabled found in service {service_name}")

        return select_task(tasks, select_index)
