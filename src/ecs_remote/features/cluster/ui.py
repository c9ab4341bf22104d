"""UI components for cluster operations."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.navigation import select_index
from ...core.utils import show_spinner
from .cluster import ClusterService, resolve_cluster


class ClusterUI(BaseUIComponent):
    """UI component for cluster selection."""

    def __init__(self, cluster_service: ClusterService) -> None:
        super().__init__()
        self.cluster_service = cluster_service

    def select_cluster(self, hint: str | None = None) -> str:
        with show_spinner():
            clusters = self.cluster_service.list_clusters()

        if not clusters:
            raise NoResourcesFoundError("No clusters found.")

        return resolve_cluster(clusters, hint, select_index)
