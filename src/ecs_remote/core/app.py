"""Main application logic for ecs-remote CLI."""

from __future__ import annotations

from collections.abc import Callable

from ..features.container.session import launch_shell
from ..ui import ECSNavigator
from .context import ExecOptions, ExecTarget
from .utils import print_info, print_success


def resolve_target(navigator: ECSNavigator, options: ExecOptions) -> ExecTarget:
    """Walk cluster, service and task selection; each stage needs the previous one."""
    cluster_arn = navigator.select_cluster(options.cluster)
    print_success(f"Selected cluster: {cluster_arn}")

    service = navigator.select_service(cluster_arn, options.service)
    print_success(f"Selected service: {service.name}")

    task = navigator.select_task(cluster_arn, service.name)
    print_success(f"Selected task: {task.label}")

    return ExecTarget(cluster_arn=cluster_arn, service=service, task=task, container=options.container)


def connect(
    navigator: ECSNavigator,
    options: ExecOptions,
    launcher: Callable[..., int] = launch_shell,
) -> ExecTarget:
    target = resolve_target(navigator, options)

    print_info(f"\nOpening {options.command} in container '{target.container}' of task {target.task_id}")
    launcher(
        target.cluster_name,
        target.task_id,
        target.container,
        command=options.command,
        profile=options.profile,
        region=options.region,
    )
    return target
