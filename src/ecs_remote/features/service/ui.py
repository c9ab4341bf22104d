"""UI components for service operations."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.navigation import select_index
from ...core.types import ServiceInfo
from ...core.utils import show_spinner
from .service import ServiceService, resolve_service


class ServiceUI(BaseUIComponent):
    """UI component for service selection."""

    def __init__(self, service_service: ServiceService) -> None:
        super().__init__()
        self.service_service = service_service

    def select_service(self, cluster: str, name: str | None = None) -> ServiceInfo:
        with show_spinner():
            services = self.service_service.list_services(cluster)

        if not services:
            raise NoResourcesFoundError(f"No services found in cluster {cluster}")

        return resolve_service(services, name, select_index)
