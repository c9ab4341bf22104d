"""Cluster operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.resolution import Selector, resolve_choice
from ...core.utils import extract_name_from_arn, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

CLUSTER_PROMPT = "Select Cluster"


class ClusterService(BaseAWSService):
    """Service for ECS cluster operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def list_clusters(self) -> list[str]:
        return paginate_aws_list(self.ecs_client, "list_clusters", "clusterArns")


def resolve_cluster(clusters: list[str], hint: str | None, selector: Selector) -> str:
    """Resolve a cluster name or ARN fragment to a full cluster ARN.

    The first ARN containing ``hint`` wins, so ``dev`` picks ``dev-a`` over
    ``dev-b`` when both exist.
    """
    return resolve_choice(
        clusters,
        hint,
        matches=lambda arn, fragment: fragment in arn,
        display=extract_name_from_arn,
        prompt=CLUSTER_PROMPT,
        selector=selector,
        kind="cluster",
    )
