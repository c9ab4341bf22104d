"""Service operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.resolution import Selector, resolve_choice
from ...core.types import ServiceInfo
from ...core.utils import paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

SERVICE_PROMPT = "Select Service"


class ServiceService(BaseAWSService):
    """Service for ECS service operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def list_services(self, cluster: str) -> list[ServiceInfo]:
        service_arns = paginate_aws_list(self.ecs_client, "list_services", "serviceArns", cluster=cluster)
        services = [ServiceInfo.from_arn(arn) for arn in service_arns]
        return sorted(services, key=lambda service: service.name)


def resolve_service(services: list[ServiceInfo], name: str | None, selector: Selector) -> ServiceInfo:
    return resolve_choice(
        services,
        name,
        matches=lambda service, wanted: service.name == wanted,
        display=lambda service: service.name,
        prompt=SERVICE_PROMPT,
        selector=selector,
        kind="service",
    )
