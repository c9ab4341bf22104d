"""Tests for the cluster -> service -> task -> shell flow."""

from unittest.mock import Mock, patch

import pytest

from ecs_remote.aws_service import ECSService
from ecs_remote.core.app import connect, resolve_target
from ecs_remote.core.context import ExecOptions
from ecs_remote.core.errors import NoResourcesFoundError, ResourceNotFoundError
from ecs_remote.ui import ECSNavigator

CLUSTER = "arn:aws:ecs:us-east-1:123456789012:cluster/production"
SERVICE = "arn:aws:ecs:us-east-1:123456789012:service/production/web"
TASK_PREFIX = "arn:aws:ecs:us-east-1:123456789012:task/production/"


def _ecs_client() -> Mock:
    """One cluster, one service, three tasks of which only one accepts ECS Exec."""
    client = Mock()
    client.list_clusters.return_value = {"clusterArns": [CLUSTER]}
    client.list_services.return_value = {"serviceArns": [SERVICE]}
    client.list_tasks.return_value = {
        "taskArns": [f"{TASK_PREFIX}ready", f"{TASK_PREFIX}no-exec", f"{TASK_PREFIX}stopped"]
    }
    client.describe_tasks.return_value = {
        "tasks": [
            {
                "taskArn": f"{TASK_PREFIX}ready",
                "lastStatus": "RUNNING",
                "enableExecuteCommand": True,
                "taskDefinitionArn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web:7",
            },
            {
                "taskArn": f"{TASK_PREFIX}no-exec",
                "lastStatus": "RUNNING",
                "enableExecuteCommand": False,
                "taskDefinitionArn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web:7",
            },
            {
                "taskArn": f"{TASK_PREFIX}stopped",
                "lastStatus": "STOPPED",
                "enableExecuteCommand": True,
                "taskDefinitionArn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web:6",
            },
        ]
    }
    client.describe_task_definition.return_value = {"taskDefinition": {"family": "web"}}
    return client


@pytest.fixture
def navigator():
    return ECSNavigator(ECSService(_ecs_client()))


@patch("ecs_remote.core.navigation.select_with_auto_pagination", return_value="0")
def test_connect_end_to_end_with_stub_launcher(mock_select, navigator):
    launcher = Mock(return_value=0)

    target = connect(navigator, ExecOptions(container="app"), launcher=launcher)

    assert target.cluster_arn == CLUSTER
    assert target.service.name == "web"
    assert target.task.task_id == "ready"
    assert target.task.name == "web"
    launcher.assert_called_once_with(
        "production", "ready", "app", command="/bin/bash", profile=None, region=None
    )
    prompts = [call_args[0][0] for call_args in mock_select.call_args_list]
    assert prompts == ["Select Cluster", "Select Service", "Select Task for ECS Exec"]


@patch("ecs_remote.core.navigation.select_with_auto_pagination", return_value="0")
def test_connect_with_hints_only_prompts_for_task(mock_select, navigator):
    launcher = Mock(return_value=1)
    options = ExecOptions(container="app", cluster="prod", service="web", profile="uat", command="/bin/sh")

    connect(navigator, options, launcher=launcher)

    mock_select.assert_called_once()
    launcher.assert_called_once_with("production", "ready", "app", command="/bin/sh", profile="uat", region=None)


def test_resolve_target_stops_at_unknown_service(navigator):
    with pytest.raises(ResourceNotFoundError, match="nonexistent"):
        resolve_target(navigator, ExecOptions(container="app", cluster="production", service="nonexistent"))


def test_connect_does_not_launch_without_valid_tasks():
    client = _ecs_client()
    client.describe_tasks.return_value = {"tasks": []}
    launcher = Mock()

    with pytest.raises(NoResourcesFoundError):
        connect(
            ECSNavigator(ECSService(client)),
            ExecOptions(container="app", cluster="production", service="web"),
            launcher=launcher,
        )

    launcher.assert_not_called()
